"""Deck compiler - document in, ordered physical slides out.

The one entry point both consumers share: pagination-expansion followed by
resolve-and-render for every page, computed once per document.
"""

from dataclasses import dataclass

from deckforge.layout.elements import RenderedSlide
from deckforge.layout.pagination import expand
from deckforge.layout.renderers import RenderContext
from deckforge.layout.resolver import render
from deckforge.schema.models import PresentationDocument
from deckforge.schema.palette import Theme


@dataclass(frozen=True)
class CompiledDeck:
    """Immutable result of compiling a document."""
    title: str
    slides: tuple[RenderedSlide, ...]
    source_count: int

    def __len__(self) -> int:
        return len(self.slides)

    def pages_for(self, source_index: int) -> list[RenderedSlide]:
        """Physical slides produced by one logical slide."""
        return [s for s in self.slides if s.source_index == source_index]


def compile_document(document: PresentationDocument,
                     theme: Theme | None = None) -> CompiledDeck:
    """Expand and render every slide of ``document`` in order."""
    theme = theme or Theme()
    ctx = RenderContext.from_document(document, theme)
    rendered: list[RenderedSlide] = []
    for index, slide in enumerate(document.slides):
        for page in expand(slide, theme):
            out = render(page.slide, ctx)
            out.source_index = index
            out.page = page.page
            out.page_count = page.page_count
            rendered.append(out)
    return CompiledDeck(title=document.title, slides=tuple(rendered),
                        source_count=len(document.slides))
