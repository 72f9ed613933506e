"""Interactive viewer - navigation state machine over a compiled deck.

The deck is compiled once at construction (pagination included), so
``total_slides`` always equals the slide count of the PPTX produced from the
same document.  Every transition swaps in a new immutable ``ViewerState``;
a transition is never left half applied.

Usage::

    viewer = PresentationViewer(document, on_close=lambda: print("closed"))
    viewer.handle_key("ArrowRight")
    html = viewer.render_current()
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable

from deckforge.layout.compiler import CompiledDeck, compile_document
from deckforge.layout.elements import RenderedSlide
from deckforge.schema.models import PresentationDocument
from deckforge.schema.palette import Theme
from deckforge.viewer.html import render_empty, render_slide_html, render_viewer_page

logger = logging.getLogger(__name__)

AUTOPLAY_SECONDS = 8.0


@dataclass(frozen=True)
class ViewerState:
    current_slide_index: int = 0
    is_fullscreen: bool = False
    show_grid: bool = False
    show_notes: bool = False
    is_playing: bool = False


class PresentationViewer:
    """Navigable view of one document.

    Parameters
    ----------
    document : PresentationDocument
        Deck to browse.  Read only; never modified.
    theme : Theme, optional
        Pagination capacities and palette; must match the producer's theme
        for slide counts to agree.
    on_close : callable, optional
        Invoked by ``close()`` and by Escape when nothing else is open.
    initial_fullscreen : bool
        Start in fullscreen mode.
    """

    def __init__(self, document: PresentationDocument, theme: Theme | None = None,
                 on_close: Callable[[], None] | None = None,
                 initial_fullscreen: bool = False) -> None:
        self.document = document
        self.theme = theme or Theme()
        self.deck: CompiledDeck = compile_document(document, self.theme)
        self.on_close = on_close
        self.autoplay_seconds = AUTOPLAY_SECONDS
        self._state = ViewerState(is_fullscreen=initial_fullscreen)

        self._keymap: dict[str, Callable[[], None]] = {
            "ArrowRight": self.next,
            "ArrowDown": self.next,
            " ": self.next,
            "Space": self.next,
            "PageDown": self.next,
            "ArrowLeft": self.prev,
            "ArrowUp": self.prev,
            "PageUp": self.prev,
            "Home": self.first,
            "End": self.last,
            "Escape": self._escape,
            "f": self.toggle_fullscreen,
            "g": self.toggle_grid,
            "n": self.toggle_notes,
        }

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def state(self) -> ViewerState:
        return self._state

    @property
    def current_slide_index(self) -> int:
        return self._state.current_slide_index

    @property
    def total_slides(self) -> int:
        return len(self.deck)

    @property
    def is_fullscreen(self) -> bool:
        return self._state.is_fullscreen

    @property
    def show_grid(self) -> bool:
        return self._state.show_grid

    @property
    def show_notes(self) -> bool:
        return self._state.show_notes

    @property
    def is_playing(self) -> bool:
        return self._state.is_playing

    @property
    def current_slide(self) -> RenderedSlide | None:
        if not self.deck.slides:
            return None
        return self.deck.slides[self._state.current_slide_index]

    @property
    def current_notes(self) -> str | None:
        """Speaker notes of the current slide (the notes channel)."""
        slide = self.current_slide
        return slide.notes if slide else None

    @property
    def progress(self) -> float:
        """Fraction of the deck reached, 1-based: 1/N on the first slide."""
        if not self.total_slides:
            return 0.0
        return (self._state.current_slide_index + 1) / self.total_slides

    @property
    def is_first(self) -> bool:
        return self._state.current_slide_index == 0

    @property
    def is_last(self) -> bool:
        return self._state.current_slide_index >= self.total_slides - 1

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _clamp(self, index: int) -> int:
        return max(0, min(index, self.total_slides - 1)) if self.total_slides else 0

    def _apply(self, **changes) -> None:
        self._state = replace(self._state, **changes)

    def next(self) -> None:
        self._apply(current_slide_index=self._clamp(self.current_slide_index + 1))

    def prev(self) -> None:
        self._apply(current_slide_index=self._clamp(self.current_slide_index - 1))

    def jump_to(self, index: int) -> None:
        """Go to ``index`` (clamped) and close the grid overview."""
        self._apply(current_slide_index=self._clamp(index), show_grid=False)

    def first(self) -> None:
        self._apply(current_slide_index=0)

    def last(self) -> None:
        self._apply(current_slide_index=self._clamp(self.total_slides - 1))

    def toggle_fullscreen(self) -> None:
        self._apply(is_fullscreen=not self._state.is_fullscreen)

    def toggle_grid(self) -> None:
        self._apply(show_grid=not self._state.show_grid)

    def toggle_notes(self) -> None:
        self._apply(show_notes=not self._state.show_notes)

    def play(self) -> None:
        if self.total_slides > 1 and not self.is_last:
            self._apply(is_playing=True)

    def pause(self) -> None:
        self._apply(is_playing=False)

    def tick(self) -> bool:
        """Advance one slide while playing; stop on reaching the end.

        Hosts call this every ``autoplay_seconds``.  Returns whether the
        slide changed.
        """
        if not self._state.is_playing:
            return False
        if self.is_last:
            self._apply(is_playing=False)
            return False
        index = self.current_slide_index + 1
        self._apply(current_slide_index=index,
                    is_playing=index < self.total_slides - 1)
        return True

    def close(self) -> None:
        """Stop playback and notify the host, if it supplied a handler."""
        self._apply(is_playing=False)
        logger.debug("Viewer closed on slide %d of %d",
                     self.current_slide_index + 1, self.total_slides)
        if self.on_close is not None:
            self.on_close()

    def _escape(self) -> None:
        if self._state.is_fullscreen:
            self._apply(is_fullscreen=False)
        elif self._state.show_grid:
            self._apply(show_grid=False)
        else:
            self.close()

    def handle_key(self, key: str) -> bool:
        """Dispatch a keyboard event; returns False for unbound keys."""
        action = self._keymap.get(key) or self._keymap.get(key.lower())
        if action is None:
            return False
        action()
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_current(self) -> str:
        """HTML fragment for the current slide only (no notes)."""
        slide = self.current_slide
        if slide is None:
            return render_empty()
        return render_slide_html(slide, self.theme)

    def render_page(self) -> str:
        """Standalone HTML snapshot of the whole viewer."""
        return render_viewer_page(self)
