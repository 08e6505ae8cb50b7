"""Response mapping: legacy upgrade + link inlining.

This module turns the raw JSON-LD document returned by the content query
endpoint into self-contained content items:

1. every result entry is resolved against `@graph` and classified
   (current / legacy / unrecognized);
2. legacy envelopes are upgraded to the current `_meta` shape;
3. the body is walked bottom-up, replacing media links with `MediaLink`
   objects and content links/references with their fully mapped items.

Everything here is pure: no I/O, no shared state between calls.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from core.domain.errors import MalformedResponseError
from core.domain.models import ContentMeta, MediaLink
from core.domain.shapes import (
    EntityShape,
    NodeKind,
    classify_entity,
    classify_node,
    delivery_id_from_iri,
    schema_of,
)

logger = logging.getLogger(__name__)


def _without_envelope(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Drops JSON-LD keywords (`@id`, `@type`, `@context`...)."""

    return {key: value for key, value in obj.items() if not key.startswith("@")}


def upgrade_legacy(entity: Mapping[str, Any]) -> dict[str, Any]:
    """Converts a legacy envelope to the current `_meta` shape.

    `_title` feeds `_meta.name` and is also kept as-is for consumers that
    still read it. Fields missing from the source stay missing.
    """

    meta: dict[str, Any] = {"schema": entity["@type"]}

    iri = entity.get("@id")
    if isinstance(iri, str):
        delivery_id = delivery_id_from_iri(iri)
        if delivery_id:
            meta["deliveryId"] = delivery_id

    title = entity.get("_title")
    if isinstance(title, str):
        meta["name"] = title

    body: dict[str, Any] = {"_meta": meta}
    body.update(_without_envelope(entity))
    return body


def normalize_current(entity: Mapping[str, Any]) -> dict[str, Any]:
    """Current-shape entity without its JSON-LD keywords.

    A `deliveryId` missing from `_meta` is taken from `@id` when present.
    """

    meta = dict(entity["_meta"])
    iri = entity.get("@id")
    if "deliveryId" not in meta and isinstance(iri, str):
        delivery_id = delivery_id_from_iri(iri)
        if delivery_id:
            meta["deliveryId"] = delivery_id

    body: dict[str, Any] = {"_meta": meta}
    body.update((key, value) for key, value in _without_envelope(entity).items() if key != "_meta")
    return body


class _GraphMapper:
    """Holds the graph index for one response while it is being walked."""

    def __init__(self, graph: list[Any]) -> None:
        self._by_iri: dict[str, Mapping[str, Any]] = {}
        self._by_delivery_id: dict[str, Mapping[str, Any]] = {}
        self._resolving: list[int] = []

        for index, entity in enumerate(graph):
            if not isinstance(entity, Mapping):
                raise MalformedResponseError("graph entry is not an object", f"$['@graph'][{index}]")
            iri = entity.get("@id")
            if isinstance(iri, str):
                self._by_iri[iri] = entity

            delivery_id = None
            meta = entity.get("_meta")
            if isinstance(meta, Mapping) and isinstance(meta.get("deliveryId"), str):
                delivery_id = meta["deliveryId"]
            elif isinstance(iri, str):
                delivery_id = delivery_id_from_iri(iri)
            if delivery_id:
                self._by_delivery_id[delivery_id] = entity

    def map_result(self, entry: Any, path: str) -> dict[str, Any]:
        if not isinstance(entry, Mapping):
            raise MalformedResponseError("result entry is not an object", path)
        if isinstance(entry.get("@id"), str):
            return self._resolve_reference(entry, path)
        return self._map_entity(entry, path)

    def _map_entity(self, entity: Mapping[str, Any], path: str) -> dict[str, Any]:
        shape = classify_entity(entity)
        if shape is EntityShape.UNRECOGNIZED:
            raise MalformedResponseError("entity matches neither legacy nor current shape", path)

        if classify_node(entity) is NodeKind.MEDIA_LINK:
            return self._map_media_link(entity, path)

        if shape is EntityShape.LEGACY:
            logger.debug("Upgrading legacy entity %s at %s", entity.get("@id"), path)
            body = upgrade_legacy(entity)
        else:
            body = normalize_current(entity)
        try:
            ContentMeta.model_validate(body["_meta"])
        except ValidationError as exc:
            raise MalformedResponseError(
                f"invalid _meta ({exc.error_count()} field error(s))", f"{path}._meta"
            ) from exc
        return self._map_fields(body, path)

    def _map_fields(self, body: Mapping[str, Any], path: str) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, value in body.items():
            if key == "_meta":
                out[key] = value
            else:
                out[key] = self.map_node(value, f"{path}.{key}")
        return out

    def _map_media_link(self, link: Mapping[str, Any], path: str) -> dict[str, Any]:
        payload = {key: value for key, value in _without_envelope(link).items() if key != "_meta"}
        payload["_meta"] = {"schema": schema_of(link)}
        try:
            return MediaLink.model_validate(payload).to_json()
        except ValidationError as exc:
            raise MalformedResponseError(
                f"invalid media link ({exc.error_count()} field error(s))", path
            ) from exc

    def _inline(self, target: Mapping[str, Any], path: str) -> dict[str, Any]:
        marker = id(target)
        if marker in self._resolving:
            raise MalformedResponseError("circular content reference", path)
        self._resolving.append(marker)
        try:
            return self._map_entity(target, path)
        finally:
            self._resolving.pop()

    def _resolve_reference(self, node: Mapping[str, Any], path: str) -> dict[str, Any]:
        iri = node["@id"]
        target = self._by_iri.get(iri)
        if target is None:
            # Entries that carry their own body are inlined from themselves.
            if len(node) > 1:
                return self._inline(node, path)
            raise MalformedResponseError(f"unresolved reference {iri!r}", path)
        return self._inline(target, path)

    def _resolve_content_link(self, node: Mapping[str, Any], path: str) -> dict[str, Any]:
        delivery_id = node.get("id")
        target = self._by_delivery_id.get(delivery_id) if isinstance(delivery_id, str) else None
        if target is None:
            raise MalformedResponseError(f"unresolved content link {delivery_id!r}", path)
        return self._inline(target, path)

    def map_node(self, value: Any, path: str) -> Any:
        kind = classify_node(value)

        if kind is NodeKind.SCALAR:
            return value
        if kind is NodeKind.ARRAY:
            return [self.map_node(item, f"{path}[{index}]") for index, item in enumerate(value)]
        if kind is NodeKind.MEDIA_LINK:
            return self._map_media_link(value, path)
        if kind is NodeKind.CONTENT_LINK:
            return self._resolve_content_link(value, path)
        if kind is NodeKind.REFERENCE:
            return self._resolve_reference(value, path)
        if kind is NodeKind.MIXIN and classify_entity(value) is EntityShape.LEGACY:
            return self._map_fields(upgrade_legacy(value), path)
        return self._map_fields(_without_envelope(value), path)


def map_results(raw: Any) -> list[dict[str, Any]]:
    """Maps a raw query response to a list of self-contained content items.

    Raises:
        MalformedResponseError: the document, a result entry or one of its
            links does not match any known shape.
    """

    if not isinstance(raw, Mapping):
        raise MalformedResponseError("response is not an object")

    results = raw.get("results")
    if not isinstance(results, list):
        raise MalformedResponseError("'results' is missing or not a list", "$.results")
    graph = raw.get("@graph", [])
    if not isinstance(graph, list):
        raise MalformedResponseError("'@graph' is not a list", "$['@graph']")
    if not results:
        return []

    mapper = _GraphMapper(graph)
    return [mapper.map_result(entry, f"$.results[{index}]") for index, entry in enumerate(results)]
