"""Tests for the palette, severity colors and theme."""

import dataclasses

import pytest

from deckforge.schema.models import Severity
from deckforge.schema.palette import DEFAULT_PALETTE, Palette, SeverityColors, Theme


class TestSeverityColors:
    @pytest.mark.parametrize("severity", list(Severity))
    def test_every_severity_has_a_pair(self, severity):
        colors = DEFAULT_PALETTE.severity(severity)
        assert isinstance(colors, SeverityColors)
        assert colors.foreground.startswith("#")
        assert colors.background.startswith("#")
        assert colors.foreground != colors.background

    def test_severities_are_distinct(self):
        backgrounds = {DEFAULT_PALETTE.severity(s).background for s in Severity}
        assert len(backgrounds) == len(Severity)

    def test_warning_colors(self):
        colors = DEFAULT_PALETTE.severity("warning")
        assert colors == SeverityColors("#92400E", "#FEF3C7", "#F59E0B")

    def test_unknown_falls_back_to_info(self):
        assert DEFAULT_PALETTE.severity("bogus") == DEFAULT_PALETTE.severity(Severity.INFO)

    def test_none_falls_back_to_info(self):
        assert DEFAULT_PALETTE.severity(None) == DEFAULT_PALETTE.severity(Severity.INFO)

    def test_palette_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_PALETTE.navy = "#000000"


class TestResolve:
    def test_hex_passthrough_uppercased(self):
        assert Palette().resolve("#abcdef", "#000000") == "#ABCDEF"

    def test_tone_name(self):
        assert Palette().resolve("teal", "#000000") == Palette().teal

    def test_severity_name_gives_accent(self):
        p = Palette()
        assert p.resolve("danger", "#000000") == p.severity(Severity.DANGER).accent

    def test_unknown_gives_default(self):
        assert Palette().resolve("chartreuse", "#123456") == "#123456"

    def test_empty_gives_default(self):
        assert Palette().resolve(None, "#123456") == "#123456"

    def test_method_names_are_not_tones(self):
        assert Palette().resolve("severity", "#123456") == "#123456"

    @pytest.mark.parametrize("token", ["#ZZZZZZ", "#12345G", "#1234567", "#abc"])
    def test_malformed_hex_gives_default(self, token):
        assert Palette().resolve(token, "#123456") == "#123456"

    @pytest.mark.parametrize("token", ["__module__", "__doc__", "__class__"])
    def test_dunder_attributes_are_not_tones(self, token):
        assert Palette().resolve(token, "#123456") == "#123456"

    def test_hyphenated_tone_name(self):
        assert Palette().resolve("light-muted", "#000000") == Palette().light_muted


    def test_column_tones(self):
        p = Palette()
        assert p.column_tones() == (p.navy, p.teal, p.purple)


class TestTheme:
    def test_defaults_are_16_9(self):
        theme = Theme()
        assert theme.width_inches / theme.height_inches == pytest.approx(16 / 9, rel=1e-3)

    def test_round_trip(self):
        theme = Theme(font="Calibri", table_rows_per_slide=5, default_author="Ops")
        restored = Theme.from_dict(theme.to_dict())
        assert restored.font == "Calibri"
        assert restored.table_rows_per_slide == 5
        assert restored.default_author == "Ops"

    def test_from_empty_dict(self):
        assert Theme.from_dict({}) == Theme()

    def test_capacities_at_least_one(self):
        theme = Theme.from_dict({"pagination": {"table_rows_per_slide": 0,
                                                "column_items_per_slide": -3}})
        assert theme.table_rows_per_slide == 1
        assert theme.column_items_per_slide == 1

    def test_null_sections(self):
        theme = Theme.from_dict({"page": None, "typography": None,
                                 "pagination": {"table_rows_per_slide": 5}})
        assert theme.width_inches == Theme().width_inches
        assert theme.font == "Arial"
        assert theme.table_rows_per_slide == 5
