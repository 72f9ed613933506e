"""PPTX builder engine - produces PowerPoint files from presentation documents.

Compiles a PresentationDocument through the shared layout pipeline (pagination,
resolver, renderers) and draws every rendered slide with python-pptx on a
blank 16:9 layout.  Speaker notes go to each slide's notes page.  The result
is returned as bytes; writing it anywhere is the caller's job.

Usage::

    from deckforge.generator.pptx_builder import PPTXBuilder
    from deckforge.schema import load_document

    document = load_document("deck.yaml")
    pptx_bytes = PPTXBuilder().build(document)

    with open("deck.pptx", "wb") as f:
        f.write(pptx_bytes)
"""

import io
import logging
from pathlib import Path

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.shapes import MSO_SHAPE
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.oxml.ns import qn
from pptx.util import Inches, Pt

from deckforge.layout.compiler import CompiledDeck, compile_document
from deckforge.layout.elements import (
    CANVAS_WIDTH,
    Box,
    RenderedSlide,
    ShapeElement,
    ShapeKind,
    TableCell,
    TableElement,
    TextElement,
)
from deckforge.schema.models import PresentationDocument
from deckforge.schema.palette import Theme

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PPTX_CONTENT_TYPE = (
    "application/vnd.openxmlformats-officedocument.presentationml.presentation"
)

_BLANK_LAYOUT = 6

_SHAPE_MAP = {
    ShapeKind.RECT: MSO_SHAPE.RECTANGLE,
    ShapeKind.ELLIPSE: MSO_SHAPE.OVAL,
}

_ALIGN_MAP = {
    "left": PP_ALIGN.LEFT,
    "center": PP_ALIGN.CENTER,
    "right": PP_ALIGN.RIGHT,
}

_ANCHOR_MAP = {
    "top": MSO_ANCHOR.TOP,
    "middle": MSO_ANCHOR.MIDDLE,
    "bottom": MSO_ANCHOR.BOTTOM,
}

_BORDER_EMU = "6350"  # 0.5pt


class ProducerError(Exception):
    """Assembling or serializing the PPTX failed."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _hex_to_rgb(hex_color: str) -> RGBColor:
    """Convert '#RRGGBB' hex string to an RGBColor."""
    h = hex_color.lstrip("#")
    return RGBColor(*bytes.fromhex(h))


def _set_cell_border(cell, color: str) -> None:
    """Add a thin solid border on all four edges of a table cell."""
    tcPr = cell._tc.get_or_add_tcPr()
    for tag in ("a:lnL", "a:lnR", "a:lnT", "a:lnB"):
        ln = tcPr.makeelement(qn(tag), {"w": _BORDER_EMU})
        solidFill = ln.makeelement(qn("a:solidFill"), {})
        srgbClr = solidFill.makeelement(qn("a:srgbClr"), {"val": color.lstrip("#")})
        solidFill.append(srgbClr)
        ln.append(solidFill)
        tcPr.append(ln)


# ---------------------------------------------------------------------------
# PPTXBuilder
# ---------------------------------------------------------------------------

class PPTXBuilder:
    """Builds a PowerPoint presentation from a PresentationDocument.

    Parameters
    ----------
    theme : Theme, optional
        Page size, fonts, pagination capacities and palette.  Defaults to
        the standard 13.333" x 7.5" theme.

    A builder holds no per-document state, so one instance can serve
    concurrent ``build`` calls.
    """

    def __init__(self, theme: Theme | None = None) -> None:
        self.theme = theme or Theme()
        self._font_scale = self.theme.width_inches / CANVAS_WIDTH

    def build(self, document: PresentationDocument) -> bytes:
        """Build the PPTX and return it as bytes.

        Raises
        ------
        ProducerError
            If python-pptx fails while assembling or saving the file.
        """
        deck = compile_document(document, self.theme)
        return self.build_compiled(deck, document)

    def build_compiled(self, deck: CompiledDeck,
                       document: PresentationDocument) -> bytes:
        """Serialize an already compiled deck (document supplies metadata)."""
        try:
            prs = Presentation()
            prs.slide_width = Inches(self.theme.width_inches)
            prs.slide_height = Inches(self.theme.height_inches)
            self._set_metadata(prs, document)

            for rendered in deck.slides:
                self._build_slide(prs, rendered)

            buf = io.BytesIO()
            prs.save(buf)
        except Exception as exc:
            raise ProducerError(
                f"Failed to build presentation {document.title!r}: {exc}"
            ) from exc
        logger.debug("Built %r: %d slides from %d descriptions",
                     document.title, len(deck), deck.source_count)
        return buf.getvalue()

    def build_to_file(self, document: PresentationDocument, path: str | Path) -> None:
        """Build the PPTX and write it to a file path."""
        data = self.build(document)
        Path(path).write_bytes(data)

    # ------------------------------------------------------------------
    # Presentation-level
    # ------------------------------------------------------------------

    def _set_metadata(self, prs: Presentation, document: PresentationDocument) -> None:
        props = prs.core_properties
        props.title = document.title
        props.author = document.author or self.theme.default_author
        props.subject = document.subtitle or ""
        props.last_modified_by = props.author

    def _build_slide(self, prs: Presentation, rendered: RenderedSlide) -> None:
        """Create a blank slide and draw every element onto it."""
        slide = prs.slides.add_slide(prs.slide_layouts[_BLANK_LAYOUT])

        fill = slide.background.fill
        fill.solid()
        fill.fore_color.rgb = _hex_to_rgb(rendered.background)

        for element in rendered.elements:
            if isinstance(element, ShapeElement):
                self._draw_shape(slide, element)
            elif isinstance(element, TextElement):
                self._draw_text(slide, element)
            elif isinstance(element, TableElement):
                self._draw_table(slide, element)

        if rendered.notes:
            slide.notes_slide.notes_text_frame.text = rendered.notes

    def _position(self, box: Box) -> tuple:
        left, top, width, height = box.scaled(self.theme.width_inches,
                                              self.theme.height_inches)
        return Inches(left), Inches(top), Inches(width), Inches(height)

    def _pt(self, size: float) -> Pt:
        return Pt(round(size * self._font_scale, 1))

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------

    def _draw_shape(self, slide, el: ShapeElement) -> None:
        shape = slide.shapes.add_shape(_SHAPE_MAP[el.kind], *self._position(el.box))
        if el.name:
            shape.name = el.name
        shape.shadow.inherit = False
        if el.fill:
            shape.fill.solid()
            shape.fill.fore_color.rgb = _hex_to_rgb(el.fill)
        else:
            shape.fill.background()
        if el.line:
            shape.line.color.rgb = _hex_to_rgb(el.line)
            shape.line.width = Pt(0.75)
        else:
            shape.line.fill.background()

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def _draw_text(self, slide, el: TextElement) -> None:
        txbox = slide.shapes.add_textbox(*self._position(el.box))
        if el.name:
            txbox.name = el.name
        tf = txbox.text_frame
        tf.word_wrap = True
        tf.vertical_anchor = _ANCHOR_MAP.get(el.valign, MSO_ANCHOR.TOP)
        tf.margin_left = tf.margin_right = Inches(0.04)
        tf.margin_top = tf.margin_bottom = Inches(0.02)

        for i, line in enumerate(el.text.split("\n")):
            p = tf.paragraphs[0] if i == 0 else tf.add_paragraph()
            p.alignment = _ALIGN_MAP.get(el.align, PP_ALIGN.LEFT)
            run = p.add_run()
            run.text = line
            font = run.font
            font.name = self.theme.mono_font if el.mono else self.theme.font
            font.size = self._pt(el.size_pt)
            font.bold = el.bold
            font.italic = el.italic
            font.color.rgb = _hex_to_rgb(el.color)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _draw_table(self, slide, el: TableElement) -> None:
        num_cols = el.column_count
        num_rows = len(el.rows) + (1 if el.header else 0)
        if not num_cols or not num_rows:
            return

        graphic = slide.shapes.add_table(num_rows, num_cols, *self._position(el.box))
        if el.name:
            graphic.name = el.name
        table = graphic.table
        table.first_row = bool(el.header)
        table.horz_banding = False

        row_height = int(graphic.height / num_rows)
        for row in table.rows:
            row.height = row_height

        all_rows = ([el.header] if el.header else []) + el.rows
        for row_idx, cells in enumerate(all_rows):
            for col_idx, cell_style in enumerate(cells):
                self._style_cell(table.cell(row_idx, col_idx), cell_style, el)

    def _style_cell(self, cell, style: TableCell, el: TableElement) -> None:
        """Write text and apply font, fill and border to one cell."""
        cell.text = style.text
        cell.vertical_anchor = MSO_ANCHOR.MIDDLE
        _set_cell_border(cell, el.border)
        if style.fill:
            cell.fill.solid()
            cell.fill.fore_color.rgb = _hex_to_rgb(style.fill)

        for paragraph in cell.text_frame.paragraphs:
            paragraph.alignment = PP_ALIGN.CENTER
            for run in paragraph.runs:
                run.font.name = self.theme.font
                run.font.size = self._pt(el.size_pt)
                run.font.bold = style.bold
                run.font.color.rgb = _hex_to_rgb(style.color)


# ---------------------------------------------------------------------------
# Convenience function
# ---------------------------------------------------------------------------

def produce(document: PresentationDocument, theme: Theme | None = None) -> bytes:
    """One-shot convenience: build a PPTX buffer from a document."""
    return PPTXBuilder(theme).build(document)
