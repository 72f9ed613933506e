"""Rendered-slide element model - positioned output of the layout renderers.

Layouts are designed on a 10 x 5.625 unit canvas (16:9).  Every element box
is stored normalized to [0, 1] against that canvas so the PPTX producer can
scale to inches and the viewer can scale to CSS percentages without sharing
any pixel unit.  Font sizes are points relative to the 10-unit canvas width.
"""

from dataclasses import dataclass, field
from enum import Enum


CANVAS_WIDTH = 10.0
CANVAS_HEIGHT = 5.625


class ShapeKind(Enum):
    RECT = "rect"
    ELLIPSE = "ellipse"


@dataclass(frozen=True)
class Box:
    """Normalized position and size (fractions of the canvas)."""
    x: float
    y: float
    w: float
    h: float

    @classmethod
    def from_canvas(cls, x: float, y: float, w: float, h: float) -> "Box":
        """Build a box from canvas units."""
        return cls(x / CANVAS_WIDTH, y / CANVAS_HEIGHT,
                   w / CANVAS_WIDTH, h / CANVAS_HEIGHT)

    def scaled(self, width: float, height: float) -> tuple[float, float, float, float]:
        """Return (left, top, width, height) on a page of the given size."""
        return (self.x * width, self.y * height,
                self.w * width, self.h * height)


@dataclass
class ShapeElement:
    """Filled rectangle or ellipse."""
    kind: ShapeKind
    box: Box
    fill: str | None
    line: str | None = None
    name: str = ""


@dataclass
class TextElement:
    """A single-style text frame; newlines start new paragraphs."""
    box: Box
    text: str
    size_pt: float
    color: str
    bold: bool = False
    italic: bool = False
    align: str = "left"      # left, center, right
    valign: str = "top"      # top, middle, bottom
    mono: bool = False
    name: str = ""


@dataclass
class TableCell:
    text: str
    color: str
    bold: bool = False
    fill: str | None = None


@dataclass
class TableElement:
    """Header row plus body rows, all rows padded to the same width."""
    box: Box
    header: list[TableCell]
    rows: list[list[TableCell]]
    size_pt: float
    border: str
    name: str = ""

    @property
    def column_count(self) -> int:
        if self.header:
            return len(self.header)
        return len(self.rows[0]) if self.rows else 0


Element = ShapeElement | TextElement | TableElement


@dataclass
class RenderedSlide:
    """One physical slide: background, positioned elements and notes.

    ``notes`` is the out-of-band speaker-notes channel; it is never part of
    ``elements``.
    """
    layout: str
    title: str
    background: str
    elements: list[Element] = field(default_factory=list)
    notes: str | None = None
    source_index: int = 0    # Index of the SlideDescription in the document
    page: int = 0            # 0-based page within a paginated description
    page_count: int = 1

    @property
    def is_continuation(self) -> bool:
        return self.page > 0

    def texts(self) -> list[str]:
        """All visible body text, in element order."""
        out: list[str] = []
        for el in self.elements:
            if isinstance(el, TextElement):
                out.append(el.text)
            elif isinstance(el, TableElement):
                out.extend(c.text for c in el.header)
                for row in el.rows:
                    out.extend(c.text for c in row)
        return out

    def tables(self) -> list[TableElement]:
        return [el for el in self.elements if isinstance(el, TableElement)]

    def shapes(self, name_prefix: str = "") -> list[ShapeElement]:
        return [el for el in self.elements
                if isinstance(el, ShapeElement) and el.name.startswith(name_prefix)]
