"""Capability variants and inference over service actions."""

from .inference import explicit_capability_names, has_read_only, infer_capabilities
from .models import (
    ALL,
    ALL_LABEL,
    READ_ONLY,
    READ_ONLY_LABEL,
    AllChoice,
    Capability,
    CapabilityFilter,
    NamedCapability,
    NamedResource,
    ReadOnlyCapability,
    ResourceFilter,
    parse_capability_filter,
    parse_resource_filter,
)

__all__ = [
    "ALL",
    "ALL_LABEL",
    "READ_ONLY",
    "READ_ONLY_LABEL",
    "AllChoice",
    "Capability",
    "CapabilityFilter",
    "NamedCapability",
    "NamedResource",
    "ReadOnlyCapability",
    "ResourceFilter",
    "explicit_capability_names",
    "has_read_only",
    "infer_capabilities",
    "parse_capability_filter",
    "parse_resource_filter",
]
