from collections.abc import Callable, Sequence

from pydantic import BaseModel, ConfigDict

from ..capabilities.inference import has_read_only
from ..capabilities.models import (
    AllChoice,
    CapabilityFilter,
    NamedCapability,
    NamedResource,
    ReadOnlyCapability,
    ResourceFilter,
)
from ..catalog.models import Action, ServiceDefinition

ActionPredicate = Callable[[Action], bool]


class Selection(BaseModel):
    """A fully resolved pair of filters; neither side is left to prompt for."""

    model_config = ConfigDict(frozen=True)

    resource_filter: ResourceFilter
    capability_filter: CapabilityFilter


def resource_types(definition: ServiceDefinition) -> list[str]:
    return sorted({ref for action in definition.actions for ref in action.resource_refs})


def _targets_resource(resource_name: str) -> ActionPredicate:
    return lambda action: resource_name in action.resource_refs


def _has_capability(capability_name: str) -> ActionPredicate:
    return lambda action: action.capability_flags.get(capability_name) is True


def _resource_predicates(resource_filter: ResourceFilter) -> list[ActionPredicate]:
    if isinstance(resource_filter, AllChoice):
        return []
    if isinstance(resource_filter, NamedResource):
        return [_targets_resource(resource_filter.name)]
    raise TypeError(f"unsupported resource filter: {resource_filter!r}")


def _capability_predicates(capability_filter: CapabilityFilter) -> list[ActionPredicate]:
    if isinstance(capability_filter, AllChoice):
        return []
    if isinstance(capability_filter, ReadOnlyCapability):
        return [has_read_only]
    if isinstance(capability_filter, NamedCapability):
        return [_has_capability(capability_filter.name)]
    raise TypeError(f"unsupported capability filter: {capability_filter!r}")


def build_query(resource_filter: ResourceFilter, capability_filter: CapabilityFilter) -> list[ActionPredicate]:
    """Translate a filter pair into the predicates an action must all satisfy.

    An empty list selects every action.
    """
    return _resource_predicates(resource_filter) + _capability_predicates(capability_filter)


def _apply(actions: Sequence[Action], predicates: list[ActionPredicate]) -> list[Action]:
    return [action for action in actions if all(predicate(action) for predicate in predicates)]


def actions_for_resource(definition: ServiceDefinition, resource_filter: ResourceFilter) -> list[Action]:
    return _apply(definition.actions, _resource_predicates(resource_filter))


def select(
    definition: ServiceDefinition,
    resource_filter: ResourceFilter,
    capability_filter: CapabilityFilter,
) -> list[str]:
    matched = _apply(definition.actions, build_query(resource_filter, capability_filter))
    return [action.name for action in matched]


def select_for(definition: ServiceDefinition, selection: Selection) -> list[str]:
    return select(definition, selection.resource_filter, selection.capability_filter)
