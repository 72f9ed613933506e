"""Pagination-expansion - split one logical slide into physical slides.

Runs before rendering.  Only three layouts expand:

- table: body rows beyond ``Theme.table_rows_per_slide`` move to
  continuation slides that repeat the headers.
- two-column / comparison: each column independently overflows past
  ``Theme.column_items_per_slide``; continuation columns repeat the column
  title with a "(continued)" suffix.

Every other slide passes through as a single page.  The source description
is never modified; pages are fresh copies.
"""

import logging
import math
from dataclasses import dataclass, replace

from deckforge.layout.renderers import CONTINUED
from deckforge.schema.models import (
    Column,
    ComparisonSlide,
    SlideDescription,
    TableData,
    TableSlide,
    TwoColumnSlide,
)
from deckforge.schema.palette import Theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    """One physical slide derived from a logical description."""
    slide: SlideDescription
    page: int
    page_count: int


def _continued(title: str) -> str:
    return title if title.endswith(CONTINUED) else title + CONTINUED


def _chunks(items: list, size: int) -> list[list]:
    return [items[i:i + size] for i in range(0, len(items), size)]


def expand_table(slide: TableSlide, capacity: int) -> list[SlideDescription]:
    """Split body rows into pages of ``capacity``; headers repeat on each."""
    data = slide.table_data
    if data is None or len(data.rows) <= capacity:
        return [slide]
    pages: list[SlideDescription] = []
    for i, rows in enumerate(_chunks(data.rows, capacity)):
        pages.append(replace(
            slide,
            title=slide.title if i == 0 else _continued(slide.title),
            table_data=TableData(headers=list(data.headers), rows=rows),
            key_insight=slide.key_insight if i == 0 else None,
        ))
    return pages


def _column_page(column: Column | None, page: int, capacity: int) -> Column | None:
    if column is None:
        return None
    items = column.items[page * capacity:(page + 1) * capacity]
    if page == 0:
        return replace(column, items=items)
    if not items:
        return None
    return replace(column, title=_continued(column.title), items=items)


def expand_columns(slide: TwoColumnSlide | ComparisonSlide,
                   capacity: int) -> list[SlideDescription]:
    """Split left/right columns independently; page count is the larger."""
    counts = [len(col.items) for col in (slide.left_column, slide.right_column)
              if col is not None]
    page_count = max((math.ceil(n / capacity) for n in counts), default=1)
    if page_count <= 1:
        return [slide]
    pages: list[SlideDescription] = []
    for i in range(page_count):
        pages.append(replace(
            slide,
            title=slide.title if i == 0 else _continued(slide.title),
            left_column=_column_page(slide.left_column, i, capacity),
            right_column=_column_page(slide.right_column, i, capacity),
            key_insight=slide.key_insight if i == 0 else None,
        ))
    return pages


def expand(slide: SlideDescription, theme: Theme | None = None) -> list[Page]:
    """Expand a logical slide into its ordered physical pages."""
    theme = theme or Theme()
    if isinstance(slide, TableSlide):
        slides = expand_table(slide, theme.table_rows_per_slide)
    elif isinstance(slide, (TwoColumnSlide, ComparisonSlide)):
        slides = expand_columns(slide, theme.column_items_per_slide)
    else:
        slides = [slide]
    if len(slides) > 1:
        logger.debug("%s slide %r expanded into %d pages",
                     slide.layout, slide.title, len(slides))
    return [Page(s, i, len(slides)) for i, s in enumerate(slides)]
