import logging
from collections.abc import Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from .backends.client import ServiceReferenceClient
from .backends.selector_protocol import FuzzySelectorProtocol
from .capabilities.inference import infer_capabilities
from .capabilities.models import ALL, CapabilityFilter, NamedResource, ResourceFilter
from .catalog.models import ResourceType, ServiceDefinition
from .errors import MissingResourceTypes, NoSelectionMade, ServiceNotFound
from .renderers import render_actions, render_condition_keys, render_resource_details
from .selection.resolver import Selection, actions_for_resource, resource_types, select_for

logger = logging.getLogger(__name__)

Mode = Literal["actions", "condition_keys", "resource_details", "all_resource_details"]

SERVICE_PROMPT = "Select AWS service: "
RESOURCE_PROMPT = "Select resource type to filter actions: "
CAPABILITY_PROMPT = "Select capability to filter actions: "


class QueryOptions(BaseModel):
    """Options for one invocation, built once from the command line.

    ``None`` filters are chosen interactively.
    """

    model_config = ConfigDict(frozen=True)

    service_name: str | None = None
    show_json: bool = False
    mode: Mode = "actions"
    resource_filter: ResourceFilter | None = None
    capability_filter: CapabilityFilter | None = None

    def needs_selector(self) -> bool:
        """Whether any step of this invocation may have to prompt the operator."""
        if not self.service_name:
            return True
        if self.mode in ("condition_keys", "all_resource_details"):
            return False
        if self.resource_filter is None:
            return True
        return self.mode == "actions" and self.capability_filter is None


class SessionOutput(BaseModel):
    """Rendered result for stdout plus an optional informational notice."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    notice: str | None = None


class DiscoverySession:
    def __init__(
        self,
        client: ServiceReferenceClient,
        selector: FuzzySelectorProtocol,
        options: QueryOptions,
    ) -> None:
        self.client = client
        self.selector = selector
        self.options = options

    def run(self) -> SessionOutput:
        if self.options.needs_selector():
            self.selector.ensure_available()

        service_name, url = self._resolve_service()
        definition = self.client.fetch_service_definition(url)

        if self.options.mode == "condition_keys":
            return self._list_condition_keys(definition, service_name)
        if self.options.mode == "all_resource_details":
            return self._show_all_resource_details(definition, service_name)
        if self.options.mode == "resource_details":
            return self._show_resource_details(definition, service_name)
        return self._list_actions(definition, service_name)

    def _resolve_service(self) -> tuple[str, str]:
        catalog = self.client.fetch_catalog()

        service_name = (self.options.service_name or "").strip().lower()
        if not service_name:
            chosen = self.selector.choose(SERVICE_PROMPT, catalog.service_names())
            if not chosen:
                raise NoSelectionMade("service")
            service_name = chosen.lower()

        url = catalog.resolve(service_name)
        if url is None:
            raise ServiceNotFound(service_name)
        logger.info("Resolved service %s to %s", service_name, url)
        return service_name, url

    def _list_condition_keys(self, definition: ServiceDefinition, service_name: str) -> SessionOutput:
        keys = sorted({key.name for key in definition.condition_keys})
        if not keys and not self.options.show_json:
            return SessionOutput(notice=f"No condition keys found for service '{service_name}'.")
        return SessionOutput(text=render_condition_keys(keys, self.options.show_json))

    def _show_all_resource_details(self, definition: ServiceDefinition, service_name: str) -> SessionOutput:
        if not resource_types(definition):
            raise MissingResourceTypes(service_name)
        return self._render_resources(definition.resources, service_name)

    def _show_resource_details(self, definition: ServiceDefinition, service_name: str) -> SessionOutput:
        if not resource_types(definition):
            raise MissingResourceTypes(service_name)

        resource_filter = self._resolve_resource_filter(definition)
        if isinstance(resource_filter, NamedResource):
            resources = [resource for resource in definition.resources if resource.name == resource_filter.name]
        else:
            resources = list(definition.resources)
        return self._render_resources(resources, service_name)

    def _render_resources(self, resources: Sequence[ResourceType], service_name: str) -> SessionOutput:
        if not resources and not self.options.show_json:
            return SessionOutput(notice=f"No resource details found for service '{service_name}'.")
        return SessionOutput(text=render_resource_details(resources, self.options.show_json))

    def _list_actions(self, definition: ServiceDefinition, service_name: str) -> SessionOutput:
        selection = self.resolve_selection(definition)
        names = select_for(definition, selection)
        logger.info(
            "Selected %d actions (resource=%s, capability=%s)",
            len(names),
            selection.resource_filter.label,
            selection.capability_filter.label,
        )
        if not names and not self.options.show_json:
            return SessionOutput(
                notice=(
                    f"No actions found for service '{service_name}' with resource "
                    f"'{selection.resource_filter.label}' and capability '{selection.capability_filter.label}'."
                )
            )
        return SessionOutput(text=render_actions(names, service_name, self.options.show_json))

    def resolve_selection(self, definition: ServiceDefinition) -> Selection:
        resource_filter = self._resolve_resource_filter(definition)
        capability_filter = self._resolve_capability_filter(definition, resource_filter)
        return Selection(resource_filter=resource_filter, capability_filter=capability_filter)

    def _resolve_resource_filter(self, definition: ServiceDefinition) -> ResourceFilter:
        if self.options.resource_filter is not None:
            return self.options.resource_filter

        names = resource_types(definition)
        if not names:
            return ALL
        return self._prompt(RESOURCE_PROMPT, [NamedResource(name=name) for name in names], subject="resource type")

    def _resolve_capability_filter(
        self,
        definition: ServiceDefinition,
        resource_filter: ResourceFilter,
    ) -> CapabilityFilter:
        if self.options.capability_filter is not None:
            return self.options.capability_filter

        capabilities = infer_capabilities(actions_for_resource(definition, resource_filter))
        if not capabilities:
            return ALL
        if len(capabilities) == 1:
            logger.info("Only capability %s available, selecting it", capabilities[0].label)
            return capabilities[0]
        return self._prompt(CAPABILITY_PROMPT, capabilities, subject="capability")

    def _prompt(self, prompt: str, choices: Sequence[Any], subject: str) -> Any:
        # "[ All ]" is listed first; a later choice with a clashing label keeps the earlier one.
        by_label: dict[str, Any] = {ALL.label: ALL}
        for choice in choices:
            by_label.setdefault(choice.label, choice)

        chosen = self.selector.choose(prompt, list(by_label))
        if not chosen or chosen not in by_label:
            raise NoSelectionMade(subject)
        logger.debug("Operator selected %s for %s", chosen, subject)
        return by_label[chosen]
