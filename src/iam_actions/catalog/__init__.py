"""Service catalog index and service definition models."""

from .index import CatalogIndex
from .models import Action, ActionAnnotations, CatalogEntry, ConditionKey, ResourceRef, ResourceType, ServiceDefinition

__all__ = [
    "Action",
    "ActionAnnotations",
    "CatalogEntry",
    "CatalogIndex",
    "ConditionKey",
    "ResourceRef",
    "ResourceType",
    "ServiceDefinition",
]
