"""Tests for JSON export."""

import json

from adapters.json_exporter import export_content_item_json
from core.domain.models import ContentItem
from tests.fixtures import NESTED_CONTENT_EXPECTED


def test_exports_mapped_item(tmp_path):
    item = ContentItem.from_mapped(NESTED_CONTENT_EXPECTED)
    path = export_content_item_json(item=item, output_path=tmp_path / "out" / "item.json")

    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert json.loads(text) == NESTED_CONTENT_EXPECTED
