"""Exportación JSON de un content item.

Por qué JSON:
- Interoperabilidad con pipelines que consumen el item ya resuelto.
- Permite guardar snapshots del contenido sin volver a consultar la API.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ContentItem


def export_content_item_json(*, item: ContentItem, output_path: Path) -> Path:
    """Exporta `ContentItem` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = item.to_json()
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
