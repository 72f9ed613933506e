"""QA validation package for deckforge.

Validates generated PPTX output against its source document - checks slide
count after pagination, dimensions, metadata, notes placement and repeated
table headers.
"""

from .validator import (
    Issue,
    QAResult,
    QAValidator,
    validate_presentation,
)

__all__ = [
    "Issue",
    "QAResult",
    "QAValidator",
    "validate_presentation",
]
