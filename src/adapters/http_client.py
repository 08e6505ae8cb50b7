"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, timeouts y headers de la API de delivery.
- Facilita testeo: se puede sustituir por un stub o un `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import AppSettings
from core.domain.errors import MalformedResponseError
from core.interfaces.transport import ContentTransport

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando a `settings.base_url`.

    `transport` existe para tests (`httpx.MockTransport`).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxContentTransport(ContentTransport):
    """`ContentTransport` sobre un `httpx.AsyncClient` ya construido.

    No reintenta ni traduce errores: `httpx.HTTPStatusError` y
    `httpx.TransportError` llegan tal cual al llamador.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get_json(self, url: str) -> Any:
        response = await self._client.get(url)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("Non-JSON body from %s (HTTP %s)", response.url, response.status_code)
            raise MalformedResponseError("response body is not valid JSON") from exc
