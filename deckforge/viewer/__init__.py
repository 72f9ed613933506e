"""Interactive viewer package.

Modules:
    state: Navigation/fullscreen/grid/notes state machine
    html: HTML rendering of compiled slides and viewer snapshots
"""

from .html import layout_label, render_deck_html, render_slide_html, render_viewer_page
from .state import AUTOPLAY_SECONDS, PresentationViewer, ViewerState

__all__ = [
    "AUTOPLAY_SECONDS",
    "PresentationViewer",
    "ViewerState",
    "layout_label",
    "render_deck_html",
    "render_slide_html",
    "render_viewer_page",
]
