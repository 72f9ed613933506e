"""Tests for pagination-expansion and deck compilation."""

import math

import pytest

from deckforge.layout.compiler import compile_document
from deckforge.layout.pagination import expand, expand_columns, expand_table
from deckforge.layout.renderers import CONTINUED
from deckforge.schema.models import (
    Column,
    ComparisonSlide,
    ContentSlide,
    KeyInsight,
    PresentationDocument,
    SlideItem,
    TableData,
    TableSlide,
    TitleSlide,
    TwoColumnSlide,
)
from deckforge.schema.palette import Theme


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def theme():
    return Theme(table_rows_per_slide=8, column_items_per_slide=4)


def _table(rows: int, headers=("Name", "Status")) -> TableSlide:
    return TableSlide(
        title="Inventory",
        table_data=TableData(list(headers), [[f"row{i}", "ok"] for i in range(rows)]),
        key_insight=KeyInsight("Note", "Only on page one"),
        speaker_notes="Walk through the table",
    )


# ---------------------------------------------------------------------------
# Table expansion
# ---------------------------------------------------------------------------

class TestExpandTable:
    @pytest.mark.parametrize("rows", [0, 1, 8])
    def test_within_capacity(self, rows, theme):
        assert len(expand(_table(rows), theme)) == 1

    @pytest.mark.parametrize("rows", [9, 16, 17, 40])
    def test_page_count(self, rows, theme):
        pages = expand(_table(rows), theme)
        assert len(pages) == math.ceil(rows / theme.table_rows_per_slide)

    def test_headers_repeated(self, theme):
        for page in expand(_table(20), theme):
            assert page.slide.table_data.headers == ["Name", "Status"]

    def test_rows_preserved_in_order(self, theme):
        pages = expand(_table(20), theme)
        rows = [r for p in pages for r in p.slide.table_data.rows]
        assert rows == _table(20).table_data.rows
        assert [len(p.slide.table_data.rows) for p in pages] == [8, 8, 4]

    def test_continuation_titles(self, theme):
        titles = [p.slide.title for p in expand(_table(20), theme)]
        assert titles == ["Inventory", "Inventory" + CONTINUED, "Inventory" + CONTINUED]

    def test_key_insight_first_page_only(self, theme):
        pages = expand(_table(20), theme)
        assert pages[0].slide.key_insight is not None
        assert all(p.slide.key_insight is None for p in pages[1:])

    def test_notes_on_every_page(self, theme):
        assert all(p.slide.speaker_notes == "Walk through the table"
                   for p in expand(_table(20), theme))

    def test_page_numbers(self, theme):
        pages = expand(_table(20), theme)
        assert [(p.page, p.page_count) for p in pages] == [(0, 3), (1, 3), (2, 3)]

    def test_source_not_mutated(self, theme):
        slide = _table(20)
        expand(slide, theme)
        assert len(slide.table_data.rows) == 20
        assert slide.title == "Inventory"

    def test_direct_capacity(self):
        assert len(expand_table(_table(5), 2)) == 3

    def test_missing_table_data(self, theme):
        assert len(expand(TableSlide(title="Empty"), theme)) == 1


# ---------------------------------------------------------------------------
# Column expansion
# ---------------------------------------------------------------------------

class TestExpandColumns:
    def test_within_capacity(self, theme):
        slide = TwoColumnSlide(left_column=Column("L", ["a"] * 4),
                               right_column=Column("R", ["b"] * 2))
        assert len(expand(slide, theme)) == 1

    def test_page_count_is_max_over_columns(self, theme):
        slide = TwoColumnSlide(left_column=Column("L", ["a"] * 5),
                               right_column=Column("R", ["b"] * 9))
        assert len(expand(slide, theme)) == 3

    def test_continuation_column_titles(self, theme):
        slide = ComparisonSlide(title="Before/After",
                                left_column=Column("Before", ["a"] * 6),
                                right_column=Column("After", ["b"] * 6))
        pages = expand(slide, theme)
        assert pages[0].slide.left_column.title == "Before"
        assert pages[1].slide.left_column.title == "Before" + CONTINUED
        assert pages[1].slide.right_column.title == "After" + CONTINUED
        assert pages[1].slide.title == "Before/After" + CONTINUED

    def test_shorter_column_drops_out(self, theme):
        slide = TwoColumnSlide(left_column=Column("L", ["a"] * 2),
                               right_column=Column("R", ["b"] * 6))
        pages = expand(slide, theme)
        assert pages[1].slide.left_column is None
        assert pages[1].slide.right_column.items == ["b", "b"]

    def test_items_split_in_order(self, theme):
        items = [SlideItem(f"i{n}") for n in range(10)]
        slide = TwoColumnSlide(left_column=Column("L", items))
        pages = expand_columns(slide, 4)
        assert [len(p.left_column.items) for p in pages] == [4, 4, 2]
        assert [i for p in pages for i in p.left_column.items] == items

    def test_missing_columns(self, theme):
        assert len(expand(ComparisonSlide(title="x"), theme)) == 1

    def test_key_insight_first_page_only(self, theme):
        slide = TwoColumnSlide(left_column=Column("L", ["a"] * 6),
                               key_insight=KeyInsight("K", "v"))
        pages = expand(slide, theme)
        assert pages[0].slide.key_insight is not None
        assert pages[1].slide.key_insight is None


class TestOtherLayouts:
    def test_non_paginating_layouts_pass_through(self, theme):
        slide = ContentSlide(items=[SlideItem("x")] * 50)
        pages = expand(slide, theme)
        assert len(pages) == 1
        assert pages[0].slide is slide


# ---------------------------------------------------------------------------
# Compiler
# ---------------------------------------------------------------------------

class TestCompileDocument:
    def test_count_without_expansion(self):
        doc = PresentationDocument("D", slides=[TitleSlide(), ContentSlide(), TitleSlide()])
        assert len(compile_document(doc)) == 3

    def test_count_with_expansion(self, theme):
        doc = PresentationDocument("D", slides=[TitleSlide(), _table(17), ContentSlide()])
        deck = compile_document(doc, theme)
        assert len(deck) == 1 + 3 + 1
        assert deck.source_count == 3

    def test_source_indices(self, theme):
        doc = PresentationDocument("D", slides=[TitleSlide(), _table(17), ContentSlide()])
        deck = compile_document(doc, theme)
        assert [s.source_index for s in deck.slides] == [0, 1, 1, 1, 2]
        assert [s.page for s in deck.pages_for(1)] == [0, 1, 2]
        assert deck.slides[2].is_continuation

    def test_theme_capacity_respected(self):
        doc = PresentationDocument("D", slides=[_table(10)])
        assert len(compile_document(doc, Theme(table_rows_per_slide=3))) == 4

    def test_empty_document(self):
        deck = compile_document(PresentationDocument("Empty"))
        assert len(deck) == 0
        assert deck.title == "Empty"
