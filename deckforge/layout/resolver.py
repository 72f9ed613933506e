"""Layout resolver - map a slide description to its render routine.

Total over every possible discriminant: a missing or unknown layout resolves
to the generic content renderer, so slide data produced by a newer
collaborator still renders something.
"""

import logging
from typing import Callable

from deckforge.layout.elements import RenderedSlide
from deckforge.layout.renderers import (
    RenderContext,
    render_agenda,
    render_architecture,
    render_comparison,
    render_content,
    render_monitoring,
    render_operations,
    render_pain_points,
    render_problems,
    render_questions,
    render_table,
    render_takeaways,
    render_three_column,
    render_title,
    render_two_column,
)
from deckforge.schema.models import SLIDE_VARIANTS, LayoutKind, SlideDescription

logger = logging.getLogger(__name__)

LayoutRenderer = Callable[[SlideDescription, RenderContext], RenderedSlide]


class LayoutError(Exception):
    """A slide reached a renderer built for a different variant."""


_RENDERERS: dict[LayoutKind, LayoutRenderer] = {
    LayoutKind.TITLE: render_title,
    LayoutKind.AGENDA: render_agenda,
    LayoutKind.PAIN_POINTS: render_pain_points,
    LayoutKind.TWO_COLUMN: render_two_column,
    LayoutKind.COMPARISON: render_comparison,
    LayoutKind.THREE_COLUMN: render_three_column,
    LayoutKind.TABLE: render_table,
    LayoutKind.PROBLEMS: render_problems,
    LayoutKind.OPERATIONS: render_operations,
    LayoutKind.TAKEAWAYS: render_takeaways,
    LayoutKind.QUESTIONS: render_questions,
    LayoutKind.ARCHITECTURE: render_architecture,
    LayoutKind.MONITORING: render_monitoring,
}


def known_layouts() -> list[str]:
    """The thirteen layout discriminants with a dedicated renderer."""
    return [kind.value for kind in LayoutKind]


def resolve(slide: SlideDescription) -> LayoutRenderer:
    """Select the renderer for ``slide`` by its variant's discriminant."""
    try:
        kind = LayoutKind(slide.LAYOUT)
    except ValueError:
        if slide.layout != slide.LAYOUT:
            logger.debug("Unknown layout %r on slide %r, using content layout",
                         slide.layout, slide.title)
        return render_content
    return _RENDERERS[kind]


def render(slide: SlideDescription, ctx: RenderContext) -> RenderedSlide:
    """Resolve and render one physical slide.

    Raises LayoutError if the variant registered for the resolved kind does
    not match the slide's type; ``resolve`` keys on the variant itself, so
    this indicates a programming error rather than bad input.
    """
    renderer = resolve(slide)
    if renderer is not render_content:
        expected = SLIDE_VARIANTS[slide.LAYOUT]
        if not isinstance(slide, expected):
            raise LayoutError(
                f"Slide {slide.title!r} declares layout {slide.LAYOUT!r} "
                f"but is a {type(slide).__name__}"
            )
    return renderer(slide, ctx)
