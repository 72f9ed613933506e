"""Layout package - resolver, renderers and pagination shared by all consumers.

Modules:
    elements: Normalized rendered-slide element model
    renderers: One render routine per layout kind
    resolver: Layout kind -> renderer dispatch with content fallback
    pagination: Table/column overflow expansion
    compiler: Document -> CompiledDeck
"""

from .compiler import CompiledDeck, compile_document
from .elements import (
    Box,
    RenderedSlide,
    ShapeElement,
    ShapeKind,
    TableCell,
    TableElement,
    TextElement,
)
from .pagination import Page, expand
from .renderers import RenderContext
from .resolver import LayoutError, known_layouts, render, resolve

__all__ = [
    "Box",
    "CompiledDeck",
    "LayoutError",
    "Page",
    "RenderContext",
    "RenderedSlide",
    "ShapeElement",
    "ShapeKind",
    "TableCell",
    "TableElement",
    "TextElement",
    "compile_document",
    "expand",
    "known_layouts",
    "render",
    "resolve",
]
