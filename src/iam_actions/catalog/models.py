from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _none_as_empty(value: Any, empty: Any) -> Any:
    return empty if value is None else value


class CatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    service: str
    url: str


class ResourceRef(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name")


class ActionAnnotations(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    properties: dict[str, Any] = Field(default_factory=dict, alias="Properties")

    @field_validator("properties", mode="before")
    @classmethod
    def _properties_default(cls, value: Any) -> Any:
        return _none_as_empty(value, {})


class Action(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name")
    resources: list[ResourceRef] = Field(default_factory=list, alias="Resources")
    annotations: ActionAnnotations = Field(default_factory=ActionAnnotations, alias="Annotations")

    @field_validator("resources", mode="before")
    @classmethod
    def _resources_default(cls, value: Any) -> Any:
        return _none_as_empty(value, [])

    @field_validator("annotations", mode="before")
    @classmethod
    def _annotations_default(cls, value: Any) -> Any:
        return _none_as_empty(value, {})

    @property
    def resource_refs(self) -> frozenset[str]:
        return frozenset(resource.name for resource in self.resources)

    @property
    def capability_flags(self) -> dict[str, bool]:
        # Only a literal JSON ``true`` sets a flag.
        return {key: value is True for key, value in self.annotations.properties.items()}


class ResourceType(BaseModel):
    """A resource type; ``attributes`` keeps the provider mapping verbatim for display."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name")
    attributes: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _capture_attributes(cls, data: Any) -> Any:
        if isinstance(data, dict) and "Name" in data and "attributes" not in data:
            return {"Name": data.get("Name"), "attributes": dict(data)}
        return data


class ConditionKey(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name")


class ServiceDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str | None = Field(default=None, alias="Name")
    version: str | None = Field(default=None, alias="Version")
    actions: list[Action] = Field(default_factory=list, alias="Actions")
    resources: list[ResourceType] = Field(default_factory=list, alias="Resources")
    condition_keys: list[ConditionKey] = Field(default_factory=list, alias="ConditionKeys")

    @field_validator("actions", "resources", "condition_keys", mode="before")
    @classmethod
    def _collections_default(cls, value: Any) -> Any:
        return _none_as_empty(value, [])
