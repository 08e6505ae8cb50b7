"""Shape classification for raw delivery payloads.

The query API mixes two envelope generations in the same response:

- current shape: entities carry a `_meta` block with the schema URI;
- legacy shape: JSON-LD style, schema in `@type`, delivery id encoded in the
  `@id` IRI and the name in `_title`.

Classification happens once per node so the mapper can dispatch on an enum
instead of repeating presence checks while it walks the tree.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from core.domain.models import CONTENT_LINK_SCHEMA, MEDIA_LINK_SCHEMAS


class EntityShape(str, Enum):
    """Envelope generation of a top-level or graph entity."""

    CURRENT = "current"
    LEGACY = "legacy"
    UNRECOGNIZED = "unrecognized"


class NodeKind(str, Enum):
    """What a single value inside a content body is."""

    SCALAR = "scalar"
    ARRAY = "array"
    OBJECT = "object"
    MIXIN = "mixin"
    MEDIA_LINK = "media_link"
    CONTENT_LINK = "content_link"
    REFERENCE = "reference"


def schema_of(obj: Mapping[str, Any]) -> str | None:
    """Schema URI from whichever position the envelope uses, if any."""

    meta = obj.get("_meta")
    if isinstance(meta, Mapping):
        schema = meta.get("schema")
        if isinstance(schema, str) and schema:
            return schema
        return None
    if "_meta" in obj:
        return None
    legacy_type = obj.get("@type")
    if isinstance(legacy_type, str) and legacy_type:
        return legacy_type
    return None


def classify_entity(obj: Any) -> EntityShape:
    if not isinstance(obj, Mapping) or schema_of(obj) is None:
        return EntityShape.UNRECOGNIZED
    if "_meta" in obj:
        return EntityShape.CURRENT
    return EntityShape.LEGACY


def classify_node(value: Any) -> NodeKind:
    """Classify a body value.

    Order matters: a legacy media link also carries `@id`, but it is inlined
    from its own fields rather than looked up in the graph.
    """

    if isinstance(value, list):
        return NodeKind.ARRAY
    if not isinstance(value, Mapping):
        return NodeKind.SCALAR

    schema = schema_of(value)
    if schema in MEDIA_LINK_SCHEMAS:
        return NodeKind.MEDIA_LINK
    if schema == CONTENT_LINK_SCHEMA:
        return NodeKind.CONTENT_LINK
    if isinstance(value.get("@id"), str):
        return NodeKind.REFERENCE
    if schema is not None:
        return NodeKind.MIXIN
    return NodeKind.OBJECT


def delivery_id_from_iri(iri: str) -> str | None:
    """`http://content.cms.amplience.com/<id>` -> `<id>`."""

    tail = iri.rstrip("/").rsplit("/", 1)[-1]
    if not tail or tail.endswith(":"):
        return None
    return tail
