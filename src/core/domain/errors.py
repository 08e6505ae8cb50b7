"""Errores del dominio.

Los fallos de transporte (DNS, conexión, status no 2xx) no se redefinen aquí:
son los `httpx.HTTPError` originales y llegan intactos al llamador.
"""

from __future__ import annotations


class ContentDeliveryError(Exception):
    """Base de todos los errores propios de la librería."""


class ContentNotFoundError(ContentDeliveryError):
    """La consulta no devolvió ningún content item para el identificador."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Content item not found: {identifier}")
        self.identifier = identifier


class MalformedResponseError(ContentDeliveryError):
    """La respuesta no encaja con ninguna forma conocida (legacy ni actual)."""

    def __init__(self, message: str, path: str = "$") -> None:
        super().__init__(f"{message} (at {path})")
        self.path = path
