from typing import Literal

from pydantic import BaseModel, ConfigDict

READ_ONLY_LABEL = "IsReadOnly"
ALL_LABEL = "[ All ]"


class AllChoice(BaseModel):
    """The "no filter" choice for either the resource or the capability filter."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["all"] = "all"

    @property
    def label(self) -> str:
        return ALL_LABEL


class NamedResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["resource"] = "resource"
    name: str

    @property
    def label(self) -> str:
        return self.name


class ReadOnlyCapability(BaseModel):
    """Synthetic capability held by actions with no true capability flag.

    Never read from upstream data; always derived from the flags.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["read_only"] = "read_only"

    @property
    def label(self) -> str:
        return READ_ONLY_LABEL


class NamedCapability(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["capability"] = "capability"
    name: str

    @property
    def label(self) -> str:
        return self.name


ALL = AllChoice()
READ_ONLY = ReadOnlyCapability()

Capability = ReadOnlyCapability | NamedCapability
ResourceFilter = AllChoice | NamedResource
CapabilityFilter = AllChoice | ReadOnlyCapability | NamedCapability


def parse_resource_filter(value: str) -> ResourceFilter:
    if value.strip().lower() == "all":
        return ALL
    return NamedResource(name=value.strip())


def parse_capability_filter(value: str) -> CapabilityFilter:
    normalized = value.strip()
    if normalized.lower() == "all":
        return ALL
    if normalized == READ_ONLY_LABEL:
        return READ_ONLY
    return NamedCapability(name=normalized)
