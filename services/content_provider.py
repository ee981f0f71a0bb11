import logging
import os
from typing import List, Optional, Protocol

import httpx
from pydantic import ValidationError

from repositories.content import get_raw_records
from schemas.content import ContentItem
from schemas.imports import Section
from services.content_normalization import normalize_collection


logger = logging.getLogger(__name__)


class ContentProvider(Protocol):
    async def fetch(self, section: Section) -> List[ContentItem]:
        ...


class StaticContentProvider:
    """Serves the hardcoded records bundled with the site."""

    async def fetch(self, section: Section) -> List[ContentItem]:
        return normalize_collection(section, get_raw_records(section))


class HttpContentProvider:
    """
    Fetches a section's records with a plain GET against a data endpoint.
    Anything other than a 200 with a JSON array body is treated as no data.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def fetch(self, section: Section) -> List[ContentItem]:
        section = Section(section)
        url = f"{self.base_url}/{section.value}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.HTTPError:
            logger.exception("Content fetch error for %s", url)
            return []

        if response.status_code != 200:
            logger.warning("Content fetch failed for %s: %s", url, response.status_code)
            return []

        try:
            payload = response.json()
        except ValueError:
            logger.warning("Content fetch for %s returned invalid JSON", url)
            return []

        if not isinstance(payload, list):
            logger.warning("Content fetch for %s returned %s, expected an array", url, type(payload).__name__)
            return []

        try:
            return normalize_collection(section, payload)
        except (ValidationError, TypeError, ValueError):
            logger.warning("Content fetch for %s returned malformed records", url)
            return []


def get_content_provider() -> ContentProvider:
    base_url = os.getenv("CONTENT_API_URL")
    if base_url:
        return HttpContentProvider(base_url)
    return StaticContentProvider()
