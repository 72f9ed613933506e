"""Design system - the single color palette and theme shared by every renderer.

Both the PPTX producer and the HTML viewer read slide colors exclusively
from ``Palette``; no renderer spells out a hex value for slide content.
The viewer page chrome around the slide keeps its own fixed dark stylesheet.
Severity tokens map to exactly one foreground, one background and one accent color:

- success: green text on mint
- warning: amber text on cream
- danger:  red text on rose
- info:    blue text on ice (also used for items without a severity)
"""

import re
from dataclasses import dataclass, field, fields

from .models import Severity


@dataclass(frozen=True)
class SeverityColors:
    """Color triple for one severity token."""
    foreground: str   # Text on the background
    background: str   # Card fill
    accent: str       # Bars, markers, icons


_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")

_SEVERITY_COLORS = {
    Severity.SUCCESS: SeverityColors("#065F46", "#D1FAE5", "#10B981"),
    Severity.WARNING: SeverityColors("#92400E", "#FEF3C7", "#F59E0B"),
    Severity.DANGER: SeverityColors("#991B1B", "#FEE2E2", "#EF4444"),
    Severity.INFO: SeverityColors("#1E40AF", "#DBEAFE", "#3B82F6"),
}


@dataclass(frozen=True)
class Palette:
    """Structural tones plus the severity table."""
    # Structural tones
    navy: str = "#1E3A5F"
    teal: str = "#0D9488"
    slate: str = "#1E293B"
    muted: str = "#64748B"
    light_muted: str = "#94A3B8"
    light: str = "#F8FAFC"
    white: str = "#FFFFFF"
    border: str = "#E2E8F0"
    purple: str = "#8B5CF6"

    # Secondary surfaces
    code_bg: str = "#F1F5F9"
    code_text: str = "#475569"
    card_dark: str = "#1A3552"
    card_dark_border: str = "#334155"

    def severity(self, value: "Severity | str | None") -> SeverityColors:
        """Resolve a severity to its colors; unknown or missing means info."""
        return _SEVERITY_COLORS[Severity.parse(value) or Severity.INFO]

    def resolve(self, token: str | None, default: str) -> str:
        """Resolve a color token (tone name, severity or '#RRGGBB') to hex.

        Unrecognised tokens fall back to ``default``.
        """
        if not token:
            return default
        token = token.strip()
        if _HEX_COLOR.match(token):
            return token.upper()
        name = token.lower().replace("-", "_")
        if name in _TONES:
            return getattr(self, name)
        severity = Severity.parse(name)
        if severity is not None:
            return self.severity(severity).accent
        return default

    def column_tones(self) -> tuple[str, str, str]:
        """Default header colors for three-column layouts."""
        return (self.navy, self.teal, self.purple)


_TONES = frozenset(f.name for f in fields(Palette))

DEFAULT_PALETTE = Palette()


# ---------------------------------------------------------------------------
# Theme - typography, page geometry and pagination capacities
# ---------------------------------------------------------------------------

@dataclass
class Theme:
    """Tunable presentation settings, loadable from YAML."""
    # Page (16:9)
    width_inches: float = 13.333
    height_inches: float = 7.5

    # Typography
    font: str = "Arial"
    mono_font: str = "Courier New"

    # Pagination capacities
    table_rows_per_slide: int = 8
    column_items_per_slide: int = 4

    # Metadata
    default_author: str = "RunbookForge"

    palette: Palette = field(default_factory=Palette)

    def to_dict(self) -> dict:
        return {
            "page": {
                "width_inches": self.width_inches,
                "height_inches": self.height_inches,
            },
            "typography": {
                "font": self.font,
                "mono_font": self.mono_font,
            },
            "pagination": {
                "table_rows_per_slide": self.table_rows_per_slide,
                "column_items_per_slide": self.column_items_per_slide,
            },
            "default_author": self.default_author,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Theme":
        page = d.get("page") or {}
        typo = d.get("typography") or {}
        pagination = d.get("pagination") or {}
        return cls(
            width_inches=page.get("width_inches", 13.333),
            height_inches=page.get("height_inches", 7.5),
            font=typo.get("font", "Arial"),
            mono_font=typo.get("mono_font", "Courier New"),
            table_rows_per_slide=max(1, int(pagination.get("table_rows_per_slide", 8))),
            column_items_per_slide=max(1, int(pagination.get("column_items_per_slide", 4))),
            default_author=d.get("default_author") or "RunbookForge",
        )
