"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los aliases (`deliveryId`, `defaultHost`, `_meta`) mantienen el JSON de la
  API tal cual mientras el código Python usa nombres snake_case.

Nota:
- Estos modelos describen *qué* es un content item, no *cómo* se obtiene.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from core.domain.errors import MalformedResponseError


IMAGE_LINK_SCHEMA = "http://bigcontent.io/cms/schema/v1/core#/definitions/image-link"
VIDEO_LINK_SCHEMA = "http://bigcontent.io/cms/schema/v1/core#/definitions/video-link"
CONTENT_LINK_SCHEMA = "http://bigcontent.io/cms/schema/v1/core#/definitions/content-link"
CONTENT_REFERENCE_SCHEMA = "http://bigcontent.io/cms/schema/v1/core#/definitions/content-reference"

MEDIA_LINK_SCHEMAS = frozenset({IMAGE_LINK_SCHEMA, VIDEO_LINK_SCHEMA})


class ContentMeta(BaseModel):
    """Identidad de un content item: schema canónico + delivery id.

    Por qué un value object y no un dict:
    - Da al llamador un tipo descubrible (`item.meta.delivery_id`) en lugar de
      un blob sin tipar.
    - Es inmutable: el item mapeado no cambia después de devolverse.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    schema_uri: str = Field(
        ...,
        alias="schema",
        min_length=1,
        description="URI del JSON schema del content type.",
    )
    delivery_id: str | None = Field(
        default=None,
        alias="deliveryId",
        description="Identificador de delivery (uuid) del item.",
    )
    name: str | None = Field(
        default=None,
        description="Nombre del item; solo presente si la fuente lo trae.",
    )

    def to_json(self) -> dict[str, Any]:
        """Forma JSON original (`_meta`), sin inventar campos ausentes."""

        return self.model_dump(by_alias=True, exclude_unset=True)


class MediaLinkMeta(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    schema_uri: str = Field(..., alias="schema", min_length=1)


class MediaLink(BaseModel):
    """Referencia a imagen/vídeo ya resuelta."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    meta: MediaLinkMeta = Field(..., alias="_meta")
    id: str = Field(..., min_length=1, description="Id del asset en el media server.")
    name: str = Field(..., description="Nombre del asset.")
    endpoint: str = Field(..., min_length=1, description="Endpoint (cuenta) de media.")
    default_host: str = Field(..., alias="defaultHost", min_length=1)
    media_type: str = Field(..., alias="mediaType", min_length=1)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class ContentItem:
    """Accessor fino sobre el body mapeado de un content item.

    `body["_meta"]` es un `ContentMeta`; el resto del body queda tal cual lo
    devolvió el mapper (items anidados incluidos, como dicts planos).
    """

    body: dict[str, Any]

    @classmethod
    def from_mapped(cls, mapped: Mapping[str, Any]) -> ContentItem:
        body = dict(mapped)
        try:
            body["_meta"] = ContentMeta.model_validate(mapped.get("_meta"))
        except ValidationError as exc:
            raise MalformedResponseError("invalid _meta on content item", "$._meta") from exc
        return cls(body=body)

    @property
    def meta(self) -> ContentMeta:
        return self.body["_meta"]

    def to_json(self) -> dict[str, Any]:
        """Equivalente JSON: idéntico a la salida directa del mapper."""

        out = dict(self.body)
        out["_meta"] = self.meta.to_json()
        return out
