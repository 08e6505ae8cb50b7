"""Contrato del transporte HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El coordinador no conoce httpx: en tests se puede pasar cualquier objeto
  con `get_json`.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ContentTransport(Protocol):
    """Contrato mínimo para hablar con la API de delivery.

    Reglas de diseño:
    - `get_json` es asíncrono porque hace I/O (HTTP).
    - Acepta una URL relativa a la base configurada.
    - Los fallos de red/status se propagan sin traducir.
    """

    async def get_json(self, url: str) -> Any:
        """Hace GET de `url` y devuelve el cuerpo JSON decodificado."""

        ...
