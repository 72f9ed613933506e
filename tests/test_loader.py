"""Tests for YAML/JSON document and theme loading."""

import json

import pytest
import yaml

from deckforge.schema.loader import load_document, load_theme, save_document, save_theme
from deckforge.schema.models import PresentationDocument, TableSlide
from deckforge.schema.palette import Theme


@pytest.fixture
def document():
    return PresentationDocument.from_dict({
        "title": "Runbook Review",
        "subtitle": "Q3",
        "author": "Dana",
        "slides": [
            {"layout": "title", "title": "Runbook Review"},
            {"layout": "table", "title": "Matrix",
             "tableData": {"headers": ["Tool", "Supported"],
                           "rows": [["A", "✓ yes"], ["B", "✗ no"]]}},
            {"layout": "mystery", "title": "Later", "content": "Soon"},
        ],
    })


class TestDocumentRoundTrip:
    def test_yaml(self, document, tmp_path):
        path = tmp_path / "deck.yaml"
        save_document(document, path)
        assert load_document(path).to_dict() == document.to_dict()

    def test_json(self, document, tmp_path):
        path = tmp_path / "deck.json"
        save_document(document, path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["slides"][1]["tableData"]["rows"][0] == ["A", "✓ yes"]
        restored = load_document(path)
        assert isinstance(restored.slides[1], TableSlide)

    def test_unknown_layout_survives(self, document, tmp_path):
        path = tmp_path / "deck.yaml"
        save_document(document, path)
        assert load_document(path).slides[2].layout == "mystery"

    def test_creates_parent_dirs(self, document, tmp_path):
        path = tmp_path / "nested" / "dir" / "deck.yaml"
        save_document(document, path)
        assert path.exists()


class TestLoadErrors:
    def test_top_level_list(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.dump([1, 2]), encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_document(path)

    def test_slides_not_list(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("title: X\nslides: nope\n", encoding="utf-8")
        with pytest.raises(ValueError, match="slides"):
            load_document(path)


class TestTheme:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "theme.yaml"
        save_theme(Theme(font="Calibri", column_items_per_slide=3), path)
        theme = load_theme(path)
        assert theme.font == "Calibri"
        assert theme.column_items_per_slide == 3

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "theme.yaml"
        path.write_text("", encoding="utf-8")
        assert load_theme(path) == Theme()

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "theme.yaml"
        path.write_text("- a\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_theme(path)

    def test_empty_sections_give_defaults(self, tmp_path):
        path = tmp_path / "theme.yaml"
        path.write_text("page:\ntypography:\npagination:\ndefault_author:\n", encoding="utf-8")
        assert load_theme(path) == Theme()
