"""Cliente de alto nivel para la API de delivery.

Por qué existe:
- Es el punto de entrada para quien solo quiere "dame el item X": crea y
  cierra el `httpx.AsyncClient` y arma el coordinador.
- Usable como `async with ContentDeliveryClient(settings) as client: ...`.
"""

from __future__ import annotations

from types import TracebackType

import httpx

from adapters.http_client import HttpxContentTransport, build_async_client
from core.config import AppSettings
from core.domain.models import ContentItem
from core.services.get_content_item import GetContentItem


class ContentDeliveryClient:
    """Dueño del cliente HTTP y del coordinador `GetContentItem`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._http = build_async_client(self._settings, transport=transport)
        self._coordinator = GetContentItem(self._settings, HttpxContentTransport(self._http))

    @property
    def settings(self) -> AppSettings:
        return self._settings

    async def get_content_item(self, identifier: str) -> ContentItem:
        return await self._coordinator.get_content_item(identifier)

    async def aclose(self) -> None:
        if not self._http.is_closed:
            await self._http.aclose()

    async def __aenter__(self) -> ContentDeliveryClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
