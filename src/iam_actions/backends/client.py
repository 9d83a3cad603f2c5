import logging
from typing import Any

import requests
from pydantic import ValidationError

from ..catalog.index import CatalogIndex
from ..catalog.models import ServiceDefinition
from ..errors import FetchFailure

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "iam-actions/0.1"


class ServiceReferenceClient:
    def __init__(self, service_list_url: str, timeout: int = 30) -> None:
        self.service_list_url = service_list_url
        self.timeout = timeout

    def fetch_json(self, url: str) -> Any:
        logger.info("Fetching %s", url)
        try:
            response = requests.get(url, headers={"User-Agent": DEFAULT_USER_AGENT}, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchFailure(url, str(exc)) from exc

        if response.status_code != 200:
            raise FetchFailure(url, f"HTTP {response.status_code}: {response.text[:200]}")

        try:
            return response.json()
        except ValueError as exc:
            raise FetchFailure(url, "response is not valid JSON") from exc

    def fetch_catalog(self) -> CatalogIndex:
        raw = self.fetch_json(self.service_list_url)
        try:
            index = CatalogIndex.from_document(raw)
        except (ValueError, ValidationError) as exc:
            raise FetchFailure(self.service_list_url, f"malformed service catalog: {exc}") from exc
        logger.debug("Loaded %d catalog entries", len(index))
        return index

    def fetch_service_definition(self, url: str) -> ServiceDefinition:
        raw = self.fetch_json(url)
        if not isinstance(raw, dict):
            raise FetchFailure(url, "service definition must be a JSON object")
        try:
            definition = ServiceDefinition.model_validate(raw)
        except ValidationError as exc:
            raise FetchFailure(url, f"malformed service definition: {exc}") from exc
        logger.debug(
            "Loaded %d actions, %d resources, %d condition keys from %s",
            len(definition.actions),
            len(definition.resources),
            len(definition.condition_keys),
            url,
        )
        return definition
