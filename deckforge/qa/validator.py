"""QA validator - inspects generated PPTX output against its source document.

Validates that a built presentation matches what the layout pipeline
compiled from the document: effective (post-pagination) slide count, 16:9
dimensions, core metadata, one drawn shape per rendered element, speaker
notes present on the notes page and absent from the visible body, and
table headers repeated on every continuation slide.  Uses python-pptx to
read back the generated file.

Usage::

    from deckforge.qa.validator import QAValidator

    validator = QAValidator(document)
    result = validator.validate(pptx_bytes)
    assert result.passed, result.summary()
"""

import io
from dataclasses import dataclass, field

from pptx import Presentation
from pptx.util import Inches

from deckforge.layout.compiler import CompiledDeck, compile_document
from deckforge.layout.elements import RenderedSlide
from deckforge.schema.models import PresentationDocument
from deckforge.schema.palette import Theme


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class Issue:
    """A single QA issue found during validation."""
    severity: str       # "error" or "warning"
    slide_index: int    # -1 for presentation-level issues
    slide_title: str
    category: str       # e.g. "slide_count", "notes_leak", "table_headers"
    message: str

    def __str__(self) -> str:
        loc = f"slide {self.slide_index}"
        if self.slide_title:
            loc += f" ({self.slide_title})"
        return f"[{self.severity.upper()}] {loc}: {self.message}"


@dataclass
class QAResult:
    """Aggregated result of QA validation."""
    issues: list[Issue] = field(default_factory=list)

    @property
    def errors(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def categories(self) -> set[str]:
        return {i.category for i in self.issues}

    def summary(self) -> str:
        """One-line summary string."""
        status = "PASS" if self.passed else "FAIL"
        return (
            f"QA {status}: {self.error_count} error(s), "
            f"{self.warning_count} warning(s)"
        )

    def report(self) -> str:
        """Multi-line report of all issues."""
        lines = [self.summary()]
        for issue in self.issues:
            lines.append(f"  {issue}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _all_text_on_slide(slide) -> str:
    """Concatenate all visible text on a slide, tables included."""
    parts: list[str] = []
    for shape in slide.shapes:
        if shape.has_text_frame:
            parts.append(shape.text_frame.text)
        elif shape.has_table:
            for row in shape.table.rows:
                parts.extend(cell.text for cell in row.cells)
    return " ".join(parts)


def _table_shapes(slide) -> list:
    """Return all table shapes on a slide."""
    return [s for s in slide.shapes if s.has_table]


def _notes_text(slide) -> str:
    if not slide.has_notes_slide:
        return ""
    return slide.notes_slide.notes_text_frame.text


# ---------------------------------------------------------------------------
# QAValidator
# ---------------------------------------------------------------------------

class QAValidator:
    """Validates generated PPTX output against a PresentationDocument.

    Parameters
    ----------
    document : PresentationDocument
        The document that was used to generate the presentation.
    theme : Theme, optional
        The theme the builder used; pagination and page size come from it.
    """

    def __init__(self, document: PresentationDocument,
                 theme: Theme | None = None) -> None:
        self.document = document
        self.theme = theme or Theme()
        self.deck: CompiledDeck = compile_document(document, self.theme)

    def validate(self, pptx_bytes: bytes) -> QAResult:
        """Run all validation checks on a built PPTX.

        Parameters
        ----------
        pptx_bytes : bytes
            The raw PPTX file content (from PPTXBuilder.build()).

        Returns
        -------
        QAResult
            Aggregated validation result.
        """
        prs = Presentation(io.BytesIO(pptx_bytes))
        result = QAResult()

        self._check_slide_count(prs, result)
        self._check_dimensions(prs, result)
        self._check_metadata(prs, result)

        # Per-slide checks (only if count matches)
        if len(prs.slides) == len(self.deck):
            for index, rendered in enumerate(self.deck.slides):
                self._check_slide(prs.slides[index], index, rendered, result)

        return result

    # ------------------------------------------------------------------
    # Presentation-level checks
    # ------------------------------------------------------------------

    def _issue(self, result: QAResult, severity: str, index: int, title: str,
               category: str, message: str) -> None:
        result.issues.append(Issue(severity, index, title, category, message))

    def _check_slide_count(self, prs: Presentation, result: QAResult) -> None:
        """Verify slide count matches the post-pagination deck."""
        expected = len(self.deck)
        actual = len(prs.slides)
        if actual != expected:
            self._issue(result, "error", -1, "", "slide_count",
                        f"Expected {expected} slides, got {actual}")

    def _check_dimensions(self, prs: Presentation, result: QAResult) -> None:
        """Verify presentation dimensions match the theme."""
        expected_w = Inches(self.theme.width_inches)
        expected_h = Inches(self.theme.height_inches)
        if prs.slide_width != expected_w:
            self._issue(result, "error", -1, "", "dimensions",
                        f"Slide width {prs.slide_width} != expected {expected_w}")
        if prs.slide_height != expected_h:
            self._issue(result, "error", -1, "", "dimensions",
                        f"Slide height {prs.slide_height} != expected {expected_h}")

    def _check_metadata(self, prs: Presentation, result: QAResult) -> None:
        """Verify title/author/subject core properties."""
        props = prs.core_properties
        if props.title != self.document.title:
            self._issue(result, "error", -1, "", "metadata",
                        f"Title property {props.title!r} != {self.document.title!r}")
        if not props.author:
            self._issue(result, "warning", -1, "", "metadata",
                        "Author property is empty")
        if (props.subject or "") != (self.document.subtitle or ""):
            self._issue(result, "warning", -1, "", "metadata",
                        f"Subject property {props.subject!r} != "
                        f"{self.document.subtitle!r}")

    # ------------------------------------------------------------------
    # Per-slide checks
    # ------------------------------------------------------------------

    def _check_slide(self, slide, index: int, rendered: RenderedSlide,
                     result: QAResult) -> None:
        """Run all checks for a single slide."""
        title = rendered.title
        drawn = len(slide.shapes)
        expected = len(rendered.elements)
        if drawn != expected:
            self._issue(result, "error", index, title, "element_count",
                        f"Expected {expected} shapes, got {drawn}")

        body = _all_text_on_slide(slide)
        if not body.strip():
            self._issue(result, "warning", index, title, "empty_slide",
                        "Slide has no visible text")

        self._check_background(slide, index, rendered, result)
        self._check_notes(slide, index, rendered, body, result)
        if rendered.tables():
            self._check_table_headers(slide, index, rendered, result)

    def _check_background(self, slide, index: int, rendered: RenderedSlide,
                          result: QAResult) -> None:
        """Verify the slide background is the layout's background color."""
        expected_hex = rendered.background.lstrip("#").upper()
        try:
            actual_hex = str(slide.background.fill.fore_color.rgb).upper()
        except (AttributeError, TypeError):
            self._issue(result, "error", index, rendered.title, "background",
                        "Slide missing background fill")
            return
        if actual_hex != expected_hex:
            self._issue(result, "error", index, rendered.title, "background",
                        f"Background color {actual_hex} != expected {expected_hex}")

    def _check_notes(self, slide, index: int, rendered: RenderedSlide,
                     body: str, result: QAResult) -> None:
        """Notes must be on the notes page and never in the visible body."""
        notes = _notes_text(slide)
        if rendered.notes:
            if notes != rendered.notes:
                self._issue(result, "error", index, rendered.title, "notes_missing",
                            "Speaker notes missing from the notes page")
            if rendered.notes in body:
                self._issue(result, "error", index, rendered.title, "notes_leak",
                            "Speaker notes appear in the visible slide body")
        elif notes.strip():
            self._issue(result, "warning", index, rendered.title, "notes_unexpected",
                        "Notes page has text but the slide defines no notes")

    def _check_table_headers(self, slide, index: int, rendered: RenderedSlide,
                             result: QAResult) -> None:
        """Each table (continuations included) starts with the header row."""
        tables = _table_shapes(slide)
        expected_tables = rendered.tables()
        if len(tables) != len(expected_tables):
            self._issue(result, "error", index, rendered.title, "table_count",
                        f"Expected {len(expected_tables)} table(s), got {len(tables)}")
            return
        for shape, expected in zip(tables, expected_tables):
            if not expected.header:
                continue
            actual = [cell.text for cell in shape.table.rows[0].cells]
            wanted = [cell.text for cell in expected.header]
            if actual != wanted:
                self._issue(result, "error", index, rendered.title, "table_headers",
                            f"Header row {actual} != expected {wanted}")
            body_rows = len(shape.table.rows) - 1
            if body_rows != len(expected.rows):
                self._issue(result, "error", index, rendered.title, "table_rows",
                            f"Expected {len(expected.rows)} body rows, got {body_rows}")


# ---------------------------------------------------------------------------
# Convenience function
# ---------------------------------------------------------------------------

def validate_presentation(document: PresentationDocument, pptx_bytes: bytes,
                          theme: Theme | None = None) -> QAResult:
    """One-shot convenience: validate a PPTX against its document."""
    return QAValidator(document, theme).validate(pptx_bytes)
