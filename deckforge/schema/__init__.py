"""Deck schema package - typed models for presentation documents.

Provides the contract between the collaborators that assemble decks and the
two consumers (PPTX producer, interactive viewer):

- models.py: PresentationDocument and the slide variants keyed by layout
- palette.py: Color palette, severity colors and the Theme
- loader.py: YAML/JSON serialization/deserialization
"""

from .loader import load_document, load_theme, save_document, save_theme
from .models import (
    CONTENT_LAYOUT,
    SLIDE_VARIANTS,
    AgendaSlide,
    ArchitectureSlide,
    Column,
    ComparisonSlide,
    ContentSlide,
    KeyInsight,
    LayoutKind,
    MonitoringSlide,
    Operation,
    OperationsSlide,
    PainPointsSlide,
    PresentationDocument,
    ProblemSolution,
    ProblemsSlide,
    QuestionsSlide,
    Severity,
    SlideDescription,
    SlideItem,
    TableData,
    TableSlide,
    TakeawaysSlide,
    ThreeColumnSlide,
    TitleSlide,
    TwoColumnSlide,
)
from .palette import DEFAULT_PALETTE, Palette, SeverityColors, Theme

__all__ = [
    # Models
    "CONTENT_LAYOUT",
    "SLIDE_VARIANTS",
    "AgendaSlide",
    "ArchitectureSlide",
    "Column",
    "ComparisonSlide",
    "ContentSlide",
    "KeyInsight",
    "LayoutKind",
    "MonitoringSlide",
    "Operation",
    "OperationsSlide",
    "PainPointsSlide",
    "PresentationDocument",
    "ProblemSolution",
    "ProblemsSlide",
    "QuestionsSlide",
    "Severity",
    "SlideDescription",
    "SlideItem",
    "TableData",
    "TableSlide",
    "TakeawaysSlide",
    "ThreeColumnSlide",
    "TitleSlide",
    "TwoColumnSlide",
    # Palette
    "DEFAULT_PALETTE",
    "Palette",
    "SeverityColors",
    "Theme",
    # Loader
    "load_document",
    "load_theme",
    "save_document",
    "save_theme",
]
