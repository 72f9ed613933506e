"""HTML rendering for the interactive viewer.

Draws the same RenderedSlide elements the PPTX builder draws, positioned in
percentages of a 16:9 container.  Font sizes use container-query width units
so a point on the 10-unit canvas scales with the slide.  Speaker notes are
only emitted by the page renderer's notes panel, never inside a slide.
"""

import html

from deckforge.layout.compiler import CompiledDeck
from deckforge.layout.elements import (
    CANVAS_WIDTH,
    Box,
    RenderedSlide,
    ShapeElement,
    ShapeKind,
    TableElement,
    TextElement,
)
from deckforge.schema.palette import Theme

EMPTY_MESSAGE = "No slides in this presentation"

# 10 canvas units = 720pt = 100cqw
_PT_PER_CQW = CANVAS_WIDTH * 72 / 100

_JUSTIFY = {"top": "flex-start", "middle": "center", "bottom": "flex-end"}

_PAGE_CSS = """
body { margin: 0; background: #0F172A; color: #F8FAFC; font-family: Arial, sans-serif; }
.viewer { max-width: 1100px; margin: 0 auto; padding: 16px; }
.viewer.fullscreen { max-width: none; padding: 0; }
.viewer-header { display: flex; justify-content: space-between; align-items: center; padding: 8px 0; }
.viewer-header h1 { font-size: 18px; margin: 0; font-weight: 500; }
.badges { display: flex; gap: 8px; margin: 8px 0; }
.badge { padding: 2px 12px; border-radius: 999px; background: #1E293B; font-size: 13px; font-weight: bold; }
.badge.layout { background: #334155; color: #CBD5E1; font-size: 11px; font-weight: normal; text-transform: uppercase; }
.slide { position: relative; width: 100%; aspect-ratio: 16 / 9; overflow: hidden; container-type: inline-size; border-radius: 8px; }
.slide .el { position: absolute; box-sizing: border-box; overflow: hidden; }
.slide .txt { display: flex; flex-direction: column; line-height: 1.2; padding: 0 0.4cqw; }
.slide table { border-collapse: collapse; table-layout: fixed; }
.slide td, .slide th { text-align: center; overflow: hidden; }
.slide-empty { min-height: 400px; display: flex; align-items: center; justify-content: center; }
.progress { height: 4px; background: #334155; margin-top: 8px; }
.progress-fill { height: 100%; }
.notes { margin-top: 16px; padding: 16px; border: 1px solid #334155; border-radius: 12px; background: #1E293B; }
.notes h4 { margin: 0 0 8px; font-size: 12px; color: #94A3B8; text-transform: uppercase; }
.grid { display: grid; grid-template-columns: repeat(4, 1fr); gap: 16px; margin-top: 24px; }
.thumb { border: 2px solid #475569; border-radius: 8px; padding: 8px; text-align: center; background: #1E293B; }
.thumb.current { border-color: #2DD4BF; }
.thumb .num { font-size: 12px; font-weight: bold; }
.thumb .layout { font-size: 10px; color: #64748B; text-transform: uppercase; }
.deck .slide { margin-bottom: 24px; }
"""


def _esc(value) -> str:
    return html.escape(str(value or ""))


def _pct(value: float) -> str:
    return f"{value * 100:.3f}%"


def _size(size_pt: float) -> str:
    return f"{size_pt / _PT_PER_CQW:.3f}cqw"


def _position(box: Box) -> str:
    return (f"left:{_pct(box.x)};top:{_pct(box.y)};"
            f"width:{_pct(box.w)};height:{_pct(box.h)};")


def layout_label(layout: str) -> str:
    """Human label for a layout discriminant: 'two-column' -> 'Two Column'."""
    return layout.replace("-", " ").replace("_", " ").title() or "Content"


# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------

def _shape_html(el: ShapeElement) -> str:
    style = _position(el.box)
    style += f"background:{el.fill};" if el.fill else "background:transparent;"
    if el.line:
        style += f"border:1px solid {el.line};"
    if el.kind is ShapeKind.ELLIPSE:
        style += "border-radius:50%;"
    name = f' data-name="{_esc(el.name)}"' if el.name else ""
    return f'<div class="el shape"{name} style="{style}"></div>'


def _text_html(el: TextElement, theme: Theme) -> str:
    font = theme.mono_font if el.mono else theme.font
    style = (
        _position(el.box)
        + f"color:{el.color};font-size:{_size(el.size_pt)};font-family:'{font}';"
        + f"text-align:{el.align};justify-content:{_JUSTIFY.get(el.valign, 'flex-start')};"
    )
    if el.bold:
        style += "font-weight:bold;"
    if el.italic:
        style += "font-style:italic;"
    body = "<br>".join(_esc(line) for line in el.text.split("\n"))
    name = f' data-name="{_esc(el.name)}"' if el.name else ""
    return f'<div class="el txt"{name} style="{style}"><span>{body}</span></div>'


def _cell_html(tag: str, cell, border: str) -> str:
    style = f"color:{cell.color};border:1px solid {border};"
    if cell.fill:
        style += f"background:{cell.fill};"
    if cell.bold:
        style += "font-weight:bold;"
    return f'<{tag} style="{style}">{_esc(cell.text)}</{tag}>'


def _table_html(el: TableElement, theme: Theme) -> str:
    style = (_position(el.box)
             + f"font-size:{_size(el.size_pt)};font-family:'{theme.font}';")
    parts = [f'<table class="el" style="{style}">']
    if el.header:
        parts.append("<thead><tr>")
        parts.extend(_cell_html("th", cell, el.border) for cell in el.header)
        parts.append("</tr></thead>")
    parts.append("<tbody>")
    for row in el.rows:
        parts.append("<tr>")
        parts.extend(_cell_html("td", cell, el.border) for cell in row)
        parts.append("</tr>")
    parts.append("</tbody></table>")
    return "".join(parts)


# ---------------------------------------------------------------------------
# Slides
# ---------------------------------------------------------------------------

def render_slide_html(slide: RenderedSlide, theme: Theme | None = None) -> str:
    """One slide as a self-contained positioned ``<div>``."""
    theme = theme or Theme()
    parts = []
    for el in slide.elements:
        if isinstance(el, ShapeElement):
            parts.append(_shape_html(el))
        elif isinstance(el, TextElement):
            parts.append(_text_html(el, theme))
        elif isinstance(el, TableElement):
            parts.append(_table_html(el, theme))
    return (
        f'<div class="slide" data-layout="{_esc(slide.layout)}" '
        f'data-page="{slide.page + 1}/{slide.page_count}" '
        f'style="background:{slide.background};">'
        + "".join(parts)
        + "</div>"
    )


def render_empty() -> str:
    return f'<div class="slide-empty"><p>{EMPTY_MESSAGE}</p></div>'


def _document(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{_esc(title)}</title>"
        f"<style>{_PAGE_CSS}</style></head>"
        f"<body>{body}</body></html>\n"
    )


def _render_grid(viewer) -> str:
    thumbs = []
    for i, slide in enumerate(viewer.deck.slides):
        current = " current" if i == viewer.current_slide_index else ""
        thumbs.append(
            f'<div class="thumb{current}" data-index="{i}">'
            f'<div class="num">Slide {i + 1}</div>'
            f"<div>{_esc(slide.title)}</div>"
            f'<div class="layout">{_esc(slide.layout)}</div>'
            "</div>"
        )
    return ('<section class="grid-overview"><h2>All Slides</h2>'
            f'<div class="grid">{"".join(thumbs)}</div></section>')


def render_viewer_page(viewer) -> str:
    """Full HTML snapshot of a PresentationViewer's current state."""
    palette = viewer.theme.palette
    title = viewer.document.title
    classes = "viewer fullscreen" if viewer.is_fullscreen else "viewer"
    slide = viewer.current_slide

    parts = [f'<div class="{classes}">']
    if not viewer.is_fullscreen:
        parts.append(f'<header class="viewer-header"><h1>{_esc(title)}</h1></header>')
    if slide is None:
        parts.append(render_empty())
    else:
        parts.append(
            '<div class="badges">'
            f'<span class="badge">{viewer.current_slide_index + 1} / {viewer.total_slides}</span>'
            f'<span class="badge layout">{_esc(layout_label(slide.layout))}</span>'
            "</div>"
        )
        parts.append(render_slide_html(slide, viewer.theme))
        parts.append(
            '<div class="progress"><div class="progress-fill" '
            f'style="width:{_pct(viewer.progress)};background:{palette.teal};"></div></div>'
        )
        if viewer.show_notes and viewer.current_notes:
            parts.append('<aside class="notes"><h4>Speaker Notes</h4>'
                         f"<p>{_esc(viewer.current_notes)}</p></aside>")
        if viewer.show_grid:
            parts.append(_render_grid(viewer))
    parts.append("</div>")
    return _document(title, "".join(parts))


def render_deck_html(deck: CompiledDeck, theme: Theme | None = None) -> str:
    """Every slide of a compiled deck stacked in one page."""
    theme = theme or Theme()
    if not deck.slides:
        body = render_empty()
    else:
        body = "".join(render_slide_html(s, theme) for s in deck.slides)
    return _document(deck.title, f'<div class="viewer deck">{body}</div>')
