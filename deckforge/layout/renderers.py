"""Layout renderers - one routine per layout kind.

Each renderer is a pure function ``(slide, context) -> RenderedSlide`` that
positions shapes, text and tables on the 10 x 5.625 canvas.  Colors come
exclusively from the context's Palette.  Speaker notes are attached to the
rendered slide's notes channel and never drawn.

Layouts that do not paginate clamp their lists to a fixed per-slide capacity;
the overflow is dropped identically for the PPTX producer and the viewer.
"""

import logging
import re
from dataclasses import dataclass, field

from deckforge.layout.elements import (
    Box,
    RenderedSlide,
    ShapeElement,
    ShapeKind,
    TableCell,
    TableElement,
    TextElement,
)
from deckforge.schema.models import (
    AgendaSlide,
    ArchitectureSlide,
    Column,
    ComparisonSlide,
    ContentSlide,
    KeyInsight,
    MonitoringSlide,
    OperationsSlide,
    PainPointsSlide,
    PresentationDocument,
    ProblemsSlide,
    QuestionsSlide,
    Severity,
    SlideDescription,
    SlideItem,
    TableData,
    TableSlide,
    TakeawaysSlide,
    ThreeColumnSlide,
    TitleSlide,
    TwoColumnSlide,
    item_description,
    item_title,
)
from deckforge.schema.palette import Palette, Theme

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Capacities (items per physical slide for non-paginating layouts)
# ---------------------------------------------------------------------------

AGENDA_ITEMS_PER_COLUMN = 6
CARD_ITEMS = 5                # pain-points, content
CARD_ITEMS_WITH_INSIGHT = 4
PROBLEMS_PER_SLIDE = 5
OPERATIONS_PER_SLIDE = 5
TAKEAWAYS_PER_SLIDE = 6
QUESTIONS_RESOURCES = 3
THREE_COLUMN_ITEMS = 6
ARCHITECTURE_TIERS = 4
ARCHITECTURE_COMPONENTS = 5
MONITORING_CARDS = 6

THANK_YOU = "Thank you for your attention"
CONTINUED = " (continued)"


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderContext:
    """Document-level metadata and styling shared by every renderer."""
    title: str = ""
    subtitle: str | None = None
    author: str | None = None
    organization: str | None = None
    theme: Theme = field(default_factory=Theme)

    @property
    def palette(self) -> Palette:
        return self.theme.palette

    @classmethod
    def from_document(cls, document: PresentationDocument,
                      theme: Theme | None = None) -> "RenderContext":
        return cls(
            title=document.title,
            subtitle=document.subtitle,
            author=document.author,
            organization=document.organization,
            theme=theme or Theme(),
        )


# ---------------------------------------------------------------------------
# Canvas builder
# ---------------------------------------------------------------------------

class _Canvas:
    """Accumulates elements for one slide, in canvas units."""

    def __init__(self, slide: SlideDescription, ctx: RenderContext,
                 background: str) -> None:
        self.slide = slide
        self.ctx = ctx
        self.palette = ctx.palette
        self.rendered = RenderedSlide(
            layout=slide.layout,
            title=slide.title,
            background=background,
            notes=slide.speaker_notes or None,
        )

    def rect(self, x, y, w, h, fill, line=None, name="") -> None:
        self.rendered.elements.append(ShapeElement(
            ShapeKind.RECT, Box.from_canvas(x, y, w, h), fill, line, name))

    def ellipse(self, x, y, w, h, fill, name="") -> None:
        self.rendered.elements.append(ShapeElement(
            ShapeKind.ELLIPSE, Box.from_canvas(x, y, w, h), fill, None, name))

    def text(self, x, y, w, h, text, size, color, bold=False, italic=False,
             align="left", valign="top", mono=False, name="") -> None:
        if not text:
            return
        self.rendered.elements.append(TextElement(
            Box.from_canvas(x, y, w, h), text, size, color, bold=bold,
            italic=italic, align=align, valign=valign, mono=mono, name=name))

    def table(self, x, y, w, h, header, rows, size, name="") -> None:
        self.rendered.elements.append(TableElement(
            Box.from_canvas(x, y, w, h), header, rows, size,
            self.palette.border, name))

    def finish(self) -> RenderedSlide:
        return self.rendered


def _clamp(items: list, capacity: int, slide: SlideDescription, what: str) -> list:
    if len(items) > capacity:
        logger.debug("%s slide %r: showing %d of %d %s",
                     slide.layout, slide.title, capacity, len(items), what)
    return items[:capacity]


# ---------------------------------------------------------------------------
# Shared fragments
# ---------------------------------------------------------------------------

def _header_bar(c: _Canvas, title: str, subtitle: str | None = None) -> None:
    """Navy header band with the slide title (and optional subtitle)."""
    p = c.palette
    c.rect(0, 0, 10, 0.85, p.navy, name="Header Bar")
    if subtitle:
        c.text(0.4, 0.08, 9.2, 0.45, title, 24, p.white, bold=True, valign="middle")
        c.text(0.4, 0.52, 9.2, 0.28, subtitle, 12, p.teal, valign="middle")
    else:
        c.text(0.4, 0.18, 9.2, 0.5, title, 26, p.white, bold=True, valign="middle")


def _key_insight(c: _Canvas, insight: KeyInsight | None) -> None:
    """Navy callout band, identical on every layout that defines it."""
    if insight is None:
        return
    p = c.palette
    c.rect(0.4, 4.75, 9.2, 0.6, p.navy, name="Key Insight")
    c.text(0.55, 4.78, 9.0, 0.22, (insight.title or "Key Insight").upper(),
           10, p.teal, bold=True)
    c.text(0.55, 5.0, 9.0, 0.3, insight.content, 10, p.light)


def _footer(c: _Canvas) -> None:
    """Author/organization restatement on title and closing slides."""
    p = c.palette
    ctx = c.ctx
    author = ctx.author or ctx.theme.default_author
    if author:
        c.text(0.4, 5.0, 4.5, 0.22, author, 11, p.light_muted, bold=True,
               name="Footer Author")
    if ctx.organization:
        c.text(0.4, 5.22, 4.5, 0.2, ctx.organization, 9, p.muted,
               name="Footer Organization")
    if ctx.subtitle:
        c.text(5.6, 5.1, 4.0, 0.25, ctx.subtitle, 11, p.muted, align="right")


def _numbered(c: _Canvas, x: float, y: float, number: int, fill: str) -> None:
    c.ellipse(x, y, 0.4, 0.4, fill)
    c.text(x, y, 0.4, 0.4, str(number), 14, c.palette.white, bold=True,
           align="center", valign="middle")


def _severity_card(c: _Canvas, item: SlideItem, x: float, y: float, w: float,
                   h: float, severity: Severity | None) -> None:
    """Tinted card with an accent bar, title and description."""
    colors = c.palette.severity(severity)
    c.rect(x, y, w, h, colors.background, colors.background)
    c.rect(x, y, 0.05, h, colors.accent)
    c.text(x + 0.2, y + 0.05, w - 0.4, 0.3, item.title, 13, colors.foreground, bold=True)
    if item.description:
        c.text(x + 0.2, y + 0.33, w - 0.4, 0.3, item.description, 11, colors.foreground)


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------

def render_title(slide: TitleSlide, ctx: RenderContext) -> RenderedSlide:
    """Centered title, subtitle, author and organization on navy."""
    p = ctx.palette
    c = _Canvas(slide, ctx, p.navy)
    c.rect(4.375, 1.95, 1.25, 0.05, p.teal, name="Accent")
    c.text(0.5, 2.1, 9, 0.8, slide.title or ctx.title, 40, p.white, bold=True,
           align="center", valign="middle")
    c.text(0.5, 2.95, 9, 0.5, slide.subtitle or ctx.subtitle, 22, p.teal,
           align="center", valign="middle")
    byline = " · ".join(v for v in (ctx.author, ctx.organization) if v)
    c.text(0.5, 3.65, 9, 0.35, byline, 14, p.light_muted, align="center",
           valign="middle", name="Byline")
    return c.finish()


# ---------------------------------------------------------------------------
# Agenda
# ---------------------------------------------------------------------------

def render_agenda(slide: AgendaSlide, ctx: RenderContext) -> RenderedSlide:
    """Two numbered lists; numbering continues from left to right."""
    p = ctx.palette
    c = _Canvas(slide, ctx, p.light)
    _header_bar(c, slide.title)
    left = _clamp(slide.left_column.items if slide.left_column else [],
                  AGENDA_ITEMS_PER_COLUMN, slide, "left agenda items")
    right = _clamp(slide.right_column.items if slide.right_column else [],
                   AGENDA_ITEMS_PER_COLUMN, slide, "right agenda items")
    warning = p.severity(Severity.WARNING).accent

    for i, item in enumerate(left):
        y = 1.2 + i * 0.62
        _numbered(c, 0.5, y, i + 1, p.teal)
        c.text(1.1, y + 0.03, 3.9, 0.35, item_title(item), 14, p.slate)
    for i, item in enumerate(right):
        y = 1.2 + i * 0.62
        _numbered(c, 5.2, y, len(left) + i + 1, warning)
        c.text(5.8, y + 0.03, 3.9, 0.35, item_title(item), 14, p.slate)
    return c.finish()


# ---------------------------------------------------------------------------
# Pain points
# ---------------------------------------------------------------------------

def render_pain_points(slide: PainPointsSlide, ctx: RenderContext) -> RenderedSlide:
    """Stack of danger cards."""
    c = _Canvas(slide, ctx, ctx.palette.light)
    _header_bar(c, slide.title)
    for i, item in enumerate(_clamp(slide.items, CARD_ITEMS, slide, "items")):
        _severity_card(c, item, 0.5, 1.1 + i * 0.8, 9.0, 0.7, Severity.DANGER)
    return c.finish()


# ---------------------------------------------------------------------------
# Two-column
# ---------------------------------------------------------------------------

def _two_column_side(c: _Canvas, column: Column | None, x: float,
                     severity: Severity, marker: str) -> None:
    if column is None:
        return
    colors = c.palette.severity(severity)
    c.text(x, 1.0, 4.3, 0.3, column.title.upper(), 13, colors.accent, bold=True)
    for i, item in enumerate(column.items):
        y = 1.35 + i * 0.8
        c.rect(x, y, 4.3, 0.72, colors.background, colors.background)
        c.text(x + 0.1, y + 0.05, 0.3, 0.3, marker, 14, colors.accent, bold=True)
        c.text(x + 0.45, y + 0.05, 3.7, 0.27, item_title(item), 11,
               colors.foreground, bold=True)
        c.text(x + 0.45, y + 0.34, 3.7, 0.3, item_description(item), 10,
               colors.foreground)


def render_two_column(slide: TwoColumnSlide, ctx: RenderContext) -> RenderedSlide:
    """Benefits (success) on the left, considerations (warning) on the right.

    Columns arrive already split to capacity by the pagination pass.
    """
    c = _Canvas(slide, ctx, ctx.palette.light)
    _header_bar(c, slide.title)
    _two_column_side(c, slide.left_column, 0.5, Severity.SUCCESS, "✓")
    _two_column_side(c, slide.right_column, 5.2, Severity.WARNING, "!")
    _key_insight(c, slide.key_insight)
    return c.finish()


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def _comparison_side(c: _Canvas, column: Column | None, x: float,
                     severity: Severity, marker: str) -> None:
    if column is None:
        return
    p = c.palette
    colors = p.severity(severity)
    c.rect(x, 1.05, 4.5, 0.45, colors.accent)
    c.text(x, 1.05, 4.5, 0.45, column.title.upper(), 12, p.white, bold=True,
           align="center", valign="middle")
    for i, item in enumerate(column.items):
        y = 1.58 + i * 0.78
        c.rect(x, y, 4.5, 0.7, p.white, p.border)
        c.text(x + 0.1, y + 0.05, 4.3, 0.6, f"{marker} {item_title(item)}", 11,
               colors.accent, valign="middle")


def render_comparison(slide: ComparisonSlide, ctx: RenderContext) -> RenderedSlide:
    """Before/after columns with danger and success headers."""
    c = _Canvas(slide, ctx, ctx.palette.light)
    _header_bar(c, slide.title)
    _comparison_side(c, slide.left_column, 0.4, Severity.DANGER, "✗")
    _comparison_side(c, slide.right_column, 5.1, Severity.SUCCESS, "✓")
    _key_insight(c, slide.key_insight)
    return c.finish()


# ---------------------------------------------------------------------------
# Three-column
# ---------------------------------------------------------------------------

def render_three_column(slide: ThreeColumnSlide, ctx: RenderContext) -> RenderedSlide:
    """Three equal category columns; missing columns stay as empty regions."""
    p = ctx.palette
    c = _Canvas(slide, ctx, p.light)
    _header_bar(c, slide.title)
    tones = p.column_tones()
    success = p.severity(Severity.SUCCESS).accent
    box_height = 3.05 if slide.key_insight else 3.75

    columns: list[Column | None] = list(slide.columns[:3])
    columns += [None] * (3 - len(columns))
    for i, col in enumerate(columns):
        x = 0.4 + i * 3.1
        if col is None:
            c.rect(x, 1.05, 3.0, 0.45, p.border, name=f"Column Header {i + 1}")
            c.rect(x, 1.5, 3.0, box_height, p.white, p.border,
                   name=f"Column Region {i + 1}")
            continue
        c.rect(x, 1.05, 3.0, 0.45, p.resolve(col.color, tones[i]),
               name=f"Column Header {i + 1}")
        c.text(x, 1.05, 3.0, 0.45, col.title.upper(), 10, p.white, bold=True,
               align="center", valign="middle")
        c.rect(x, 1.5, 3.0, box_height, p.white, p.border,
               name=f"Column Region {i + 1}")
        items = _clamp(col.items, THREE_COLUMN_ITEMS, slide, "column items")
        for j, item in enumerate(items):
            c.text(x + 0.1, 1.6 + j * 0.5, 2.8, 0.45, f"✓ {item_title(item)}",
                   10, success)
    _key_insight(c, slide.key_insight)
    return c.finish()


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------

_GOOD = re.compile(r"✓|\byes\b", re.IGNORECASE)
_BAD = re.compile(r"✗|\bno\b", re.IGNORECASE)

ROW_HEIGHT = 0.36


def cell_severity(text: str) -> Severity | None:
    """Classify a table cell as recommended (success) or not (danger)."""
    if _GOOD.search(text):
        return Severity.SUCCESS
    if _BAD.search(text):
        return Severity.DANGER
    return None


def _fit_row(row: list[str], width: int) -> list[str]:
    """Pad short rows with empty cells and truncate long ones."""
    return (list(row) + [""] * width)[:width]


def render_table(slide: TableSlide, ctx: RenderContext) -> RenderedSlide:
    """Header row plus color-coded body rows.

    The pagination pass has already cut ``rows`` down to one page.
    """
    p = ctx.palette
    c = _Canvas(slide, ctx, p.light)
    _header_bar(c, slide.title)
    data = slide.table_data or TableData()
    width = data.column_count
    if width:
        header = [
            TableCell(h, p.slate if i == 0 else p.white, bold=True,
                      fill=p.light if i == 0 else p.navy)
            for i, h in enumerate(_fit_row(data.headers, width))
        ] if data.headers else []
        rows = []
        for raw in data.rows:
            cells = []
            for text in _fit_row(raw, width):
                severity = cell_severity(text)
                color = p.severity(severity).accent if severity else p.slate
                cells.append(TableCell(text, color,
                                       bold=severity is Severity.SUCCESS,
                                       fill=p.white))
            rows.append(cells)
        if header or rows:
            height = ROW_HEIGHT * (len(rows) + (1 if header else 0))
            c.table(0.3, 1.0, 9.4, height, header, rows, 10, name="Table")
    _key_insight(c, slide.key_insight)
    return c.finish()


# ---------------------------------------------------------------------------
# Problems
# ---------------------------------------------------------------------------

def render_problems(slide: ProblemsSlide, ctx: RenderContext) -> RenderedSlide:
    """Problem card → solution card rows."""
    p = ctx.palette
    c = _Canvas(slide, ctx, p.light)
    _header_bar(c, slide.title)
    danger = p.severity(Severity.DANGER)
    success = p.severity(Severity.SUCCESS)
    for i, pair in enumerate(_clamp(slide.problems, PROBLEMS_PER_SLIDE, slide, "problems")):
        y = 1.05 + i * 0.8
        c.rect(0.4, y, 3.8, 0.72, danger.background)
        c.text(0.5, y + 0.03, 1.2, 0.2, "PROBLEM", 8, danger.accent, bold=True)
        c.text(0.5, y + 0.25, 3.6, 0.42, pair.problem, 10, danger.foreground, bold=True)
        c.text(4.3, y + 0.15, 0.4, 0.4, "→", 18, p.muted, align="center")
        c.rect(4.8, y, 4.8, 0.72, success.background)
        c.text(4.9, y + 0.03, 1.2, 0.2, "SOLUTION", 8, success.accent, bold=True)
        c.text(4.9, y + 0.25, 4.6, 0.42, pair.solution, 10, success.foreground)
    return c.finish()


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def render_operations(slide: OperationsSlide, ctx: RenderContext) -> RenderedSlide:
    """Operational task cards with a monospace command box."""
    p = ctx.palette
    c = _Canvas(slide, ctx, p.light)
    _header_bar(c, slide.title)
    ops = _clamp(slide.operations, OPERATIONS_PER_SLIDE, slide, "operations")
    for i, op in enumerate(ops):
        y = 1.05 + i * 0.8
        c.rect(0.4, y, 9.2, 0.72, p.white, p.border)
        c.text(0.55, y + 0.05, 3.5, 0.27, op.title, 11, p.navy, bold=True)
        c.text(0.55, y + 0.33, 3.5, 0.35, op.description, 9, p.muted)
        if op.command:
            c.rect(4.2, y + 0.08, 5.25, 0.56, p.code_bg)
            c.text(4.3, y + 0.08, 5.05, 0.56, op.command, 8, p.code_text,
                   valign="middle", mono=True)
    return c.finish()


# ---------------------------------------------------------------------------
# Takeaways
# ---------------------------------------------------------------------------

def render_takeaways(slide: TakeawaysSlide, ctx: RenderContext) -> RenderedSlide:
    """Numbered list on navy."""
    p = ctx.palette
    c = _Canvas(slide, ctx, p.navy)
    c.text(0.4, 0.35, 9.2, 0.6, slide.title, 32, p.white, bold=True)
    c.rect(0.4, 0.97, 0.8, 0.05, p.teal, name="Accent")
    items = _clamp(slide.items, TAKEAWAYS_PER_SLIDE, slide, "takeaways")
    for i, item in enumerate(items):
        y = 1.3 + i * 0.65
        _numbered(c, 0.5, y, i + 1, p.teal)
        c.text(1.1, y, 8.4, 0.4, item.title, 14, p.white, valign="middle")
    return c.finish()


# ---------------------------------------------------------------------------
# Questions (closing)
# ---------------------------------------------------------------------------

def render_questions(slide: QuestionsSlide, ctx: RenderContext) -> RenderedSlide:
    """Closing slide; always restates author and organization."""
    p = ctx.palette
    c = _Canvas(slide, ctx, p.navy)
    c.rect(4.375, 1.75, 1.25, 0.05, p.teal, name="Accent")
    c.text(0.5, 1.9, 9, 0.9, "Questions?", 48, p.white, bold=True,
           align="center", valign="middle")
    c.text(0.5, 2.85, 9, 0.4, slide.subtitle or THANK_YOU, 18, p.light_muted,
           align="center", valign="middle")
    items = _clamp(slide.items, QUESTIONS_RESOURCES, slide, "resources")
    if items:
        start = 5.0 - (len(items) * 2.5 - 0.2) / 2
        for i, item in enumerate(items):
            x = start + i * 2.5
            c.rect(x, 3.6, 2.3, 0.85, p.card_dark, p.card_dark_border)
            c.text(x, 3.65, 2.3, 0.3, item.title.upper(), 10, p.teal, bold=True,
                   align="center")
            c.text(x + 0.05, 3.95, 2.2, 0.45, item.description, 9,
                   p.light_muted, align="center")
    _footer(c)
    return c.finish()


# ---------------------------------------------------------------------------
# Architecture
# ---------------------------------------------------------------------------

def render_architecture(slide: ArchitectureSlide, ctx: RenderContext) -> RenderedSlide:
    """Tiers stacked top to bottom, joined by arrows.

    Each tier is a colored label block followed by one box per component.
    """
    p = ctx.palette
    c = _Canvas(slide, ctx, p.light)
    _header_bar(c, slide.title, slide.subtitle)
    tiers = _clamp(slide.columns, ARCHITECTURE_TIERS, slide, "tiers")

    top = 1.05
    bottom = 4.6 if slide.key_insight else 5.35
    if slide.content:
        bottom -= 0.4
        c.text(0.4, bottom + 0.08, 9.2, 0.3, slide.content, 10, p.muted,
               italic=True, name="Caption")
    gap = 0.3
    if tiers:
        tier_h = min(0.85, (bottom - top - gap * (len(tiers) - 1)) / len(tiers))
        tones = p.column_tones()
        for i, tier in enumerate(tiers):
            y = top + i * (tier_h + gap)
            fill = p.resolve(tier.color, tones[i % len(tones)])
            c.rect(0.4, y, 2.0, tier_h, fill, name=f"Tier {i + 1}")
            c.text(0.4, y, 2.0, tier_h, tier.title.upper(), 10, p.white,
                   bold=True, align="center", valign="middle")
            components = _clamp(tier.items, ARCHITECTURE_COMPONENTS, slide, "components")
            if components:
                w = (7.0 - 0.15 * (len(components) - 1)) / len(components)
                for j, comp in enumerate(components):
                    x = 2.6 + j * (w + 0.15)
                    c.rect(x, y, w, tier_h, p.white, p.border)
                    c.text(x + 0.05, y, w - 0.1, tier_h, item_title(comp), 10,
                           p.slate, align="center", valign="middle")
            if i < len(tiers) - 1:
                c.text(0.4, y + tier_h, 2.0, gap, "↓", 14, p.muted,
                       align="center", valign="middle")
    _key_insight(c, slide.key_insight)
    return c.finish()


# ---------------------------------------------------------------------------
# Monitoring
# ---------------------------------------------------------------------------

def render_monitoring(slide: MonitoringSlide, ctx: RenderContext) -> RenderedSlide:
    """Status cards in a three-wide grid, colored by severity."""
    p = ctx.palette
    c = _Canvas(slide, ctx, p.light)
    _header_bar(c, slide.title, slide.subtitle)
    cards = _clamp(slide.items, MONITORING_CARDS, slide, "status cards")
    for i, item in enumerate(cards):
        row, col = divmod(i, 3)
        x = 0.4 + col * 3.1
        y = 1.1 + row * 1.65
        severity = item.type or Severity.INFO
        colors = p.severity(severity)
        c.rect(x, y, 2.95, 1.5, colors.background, name=f"Status {i + 1}")
        c.rect(x, y, 2.95, 0.06, colors.accent)
        c.text(x + 0.15, y + 0.12, 2.65, 0.2, severity.value.upper(), 8,
               colors.accent, bold=True)
        c.text(x + 0.15, y + 0.35, 2.65, 0.35, item.title, 12,
               colors.foreground, bold=True)
        c.text(x + 0.15, y + 0.72, 2.65, 0.7, item.description, 10,
               colors.foreground)
    _key_insight(c, slide.key_insight)
    return c.finish()


# ---------------------------------------------------------------------------
# Content (generic fallback)
# ---------------------------------------------------------------------------

def render_content(slide: SlideDescription, ctx: RenderContext) -> RenderedSlide:
    """Title with severity cards, or freeform content when there are no items."""
    p = ctx.palette
    c = _Canvas(slide, ctx, p.light)
    items: list[SlideItem] = getattr(slide, "items", [])
    insight: KeyInsight | None = getattr(slide, "key_insight", None)
    content: str | None = getattr(slide, "content", None)
    _header_bar(c, slide.title, getattr(slide, "subtitle", None))

    if items:
        capacity = CARD_ITEMS_WITH_INSIGHT if insight else CARD_ITEMS
        for i, item in enumerate(_clamp(items, capacity, slide, "items")):
            _severity_card(c, item, 0.5, 1.1 + i * 0.8, 9.0, 0.7, item.type)
    elif content:
        height = 3.5 if insight else 4.2
        c.text(0.5, 1.1, 9.0, height, content, 14, p.slate, name="Content")
    _key_insight(c, insight)
    return c.finish()


# Exposed for the resolver
__all__ = [
    "CONTINUED",
    "RenderContext",
    "cell_severity",
    "render_agenda",
    "render_architecture",
    "render_comparison",
    "render_content",
    "render_monitoring",
    "render_operations",
    "render_pain_points",
    "render_problems",
    "render_questions",
    "render_table",
    "render_takeaways",
    "render_three_column",
    "render_title",
    "render_two_column",
]
