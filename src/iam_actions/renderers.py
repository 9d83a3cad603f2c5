import json
from collections.abc import Sequence
from typing import Any

import yaml

from .catalog.models import ResourceType


def qualify_action(service_name: str, action_name: str) -> str:
    return f"{service_name}:{action_name}"


def render_actions(action_names: Sequence[str], service_name: str, as_json: bool) -> str:
    if as_json:
        return _render_json_list([qualify_action(service_name, name) for name in action_names])
    return _render_lines(action_names)


def render_condition_keys(condition_keys: Sequence[str], as_json: bool) -> str:
    # Condition keys already carry their own prefix (e.g. "s3:prefix").
    if as_json:
        return _render_json_list(list(condition_keys))
    return _render_lines(condition_keys)


def render_resource_details(resources: Sequence[ResourceType], as_json: bool) -> str:
    payload = [dict(resource.attributes) or {"Name": resource.name} for resource in resources]
    if as_json:
        return json.dumps(payload, indent=2, ensure_ascii=True)
    if not payload:
        return ""
    return yaml.safe_dump(payload, sort_keys=False, default_flow_style=False, allow_unicode=True).rstrip("\n")


def _render_lines(values: Sequence[str]) -> str:
    return "\n".join(values)


def _render_json_list(values: list[Any]) -> str:
    return json.dumps(values, indent=2, ensure_ascii=True)
