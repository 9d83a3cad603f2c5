from collections.abc import Iterable, Sequence

from ..catalog.models import Action
from .models import READ_ONLY, Capability, NamedCapability


def has_read_only(action: Action) -> bool:
    return not any(action.capability_flags.values())


def explicit_capability_names(actions: Iterable[Action]) -> list[str]:
    names = {key for action in actions for key, value in action.capability_flags.items() if value}
    return sorted(names)


def infer_capabilities(actions: Sequence[Action]) -> list[Capability]:
    """Return the capabilities present across ``actions``.

    The synthetic read-only capability comes first when at least one action
    has no true flag, followed by every explicit capability name in sorted order.
    """
    capabilities: list[Capability] = []
    if any(has_read_only(action) for action in actions):
        capabilities.append(READ_ONLY)
    capabilities.extend(NamedCapability(name=name) for name in explicit_capability_names(actions))
    return capabilities
