"""Single content item lookup.

Glues the three pieces together: URL builder -> transport -> mapper. The
coordinator keeps no state between calls beyond its configuration, so one
instance can serve concurrent lookups.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from core.config import AppSettings
from core.domain.errors import ContentNotFoundError
from core.domain.models import ContentItem
from core.interfaces.transport import ContentTransport
from core.services.content_mapper import map_results
from core.services.query_builder import build_url, content_iri

logger = logging.getLogger(__name__)


class GetContentItem:
    """Fetches one content item by id and returns it fully inlined."""

    def __init__(self, settings: AppSettings, transport: ContentTransport) -> None:
        self._settings = settings
        self._transport = transport

    def get_url(self, predicate: Mapping[str, str]) -> str:
        return build_url(predicate, self._settings.account, self._settings.locale)

    def process_response(self, raw: Any) -> list[dict[str, Any]]:
        return map_results(raw)

    async def get_content_item(self, identifier: str) -> ContentItem:
        """Resolves `identifier` (uuid or content IRI) to a `ContentItem`.

        Raises:
            ContentNotFoundError: the query returned no results.
            MalformedResponseError: the response could not be mapped.
            httpx.HTTPError: transport failure, propagated unchanged.
        """

        url = self.get_url({"sys.iri": content_iri(identifier)})
        logger.debug("GET %s", url)

        raw = await self._transport.get_json(url)
        items = self.process_response(raw)
        if not items:
            logger.warning("No content item found for %s", identifier)
            raise ContentNotFoundError(identifier)

        logger.info("Resolved %s (%d result(s))", identifier, len(items))
        return ContentItem.from_mapped(items[0])
