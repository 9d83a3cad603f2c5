import logging
from typing import Any

from .models import CatalogEntry

logger = logging.getLogger(__name__)


class CatalogIndex:
    def __init__(self, entries: list[CatalogEntry]) -> None:
        self._entries: dict[str, CatalogEntry] = {}
        for entry in entries:
            key = entry.service.lower()
            if key in self._entries:
                logger.debug("Duplicate catalog entry for %s ignored", entry.service)
                continue
            self._entries[key] = entry

    @classmethod
    def from_document(cls, raw: Any) -> "CatalogIndex":
        if not isinstance(raw, list):
            raise ValueError("service catalog must be a JSON list")
        return cls([CatalogEntry.model_validate(item) for item in raw])

    def resolve(self, service_name: str) -> str | None:
        entry = self._entries.get(service_name.strip().lower())
        return entry.url if entry is not None else None

    def service_names(self) -> list[str]:
        return sorted(entry.service for entry in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
