"""Query construction over a service definition."""

from .resolver import Selection, actions_for_resource, build_query, resource_types, select, select_for

__all__ = ["Selection", "actions_for_resource", "build_query", "resource_types", "select", "select_for"]
