"""Presentation document models - the contract between collaborators and renderers.

Defines the typed structure of a slide deck: document metadata plus an ordered
list of slide descriptions.  Each slide description is one variant of a closed
tagged union keyed by its ``layout`` discriminant and carries only the fields
that layout uses.  Keys a variant does not use are kept verbatim in ``extra``
so a document survives a load/save round trip unchanged.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Severity(Enum):
    """Semantic color-coding token for items and callouts."""
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"

    @classmethod
    def parse(cls, value: Any) -> "Severity | None":
        """Return the matching Severity, or None for anything unrecognised."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class LayoutKind(Enum):
    """The thirteen known layout discriminants."""
    TITLE = "title"
    AGENDA = "agenda"
    PAIN_POINTS = "pain-points"
    TWO_COLUMN = "two-column"
    COMPARISON = "comparison"
    THREE_COLUMN = "three-column"
    TABLE = "table"
    PROBLEMS = "problems"
    OPERATIONS = "operations"
    TAKEAWAYS = "takeaways"
    QUESTIONS = "questions"
    ARCHITECTURE = "architecture"
    MONITORING = "monitoring"


CONTENT_LAYOUT = "content"  # Generic fallback layout


# ---------------------------------------------------------------------------
# Lenient field parsers (malformed values degrade to omission)
# ---------------------------------------------------------------------------

def _text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _list(value: Any) -> list:
    return value if isinstance(value, list) else []


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass
class SlideItem:
    """A titled entry with optional description and severity."""
    title: str
    description: str | None = None
    type: Severity | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"title": self.title}
        if self.description is not None:
            d["description"] = self.description
        if self.type is not None:
            d["type"] = self.type.value
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "SlideItem":
        return cls(
            title=_text(d.get("title")) or "",
            description=_text(d.get("description")),
            type=Severity.parse(d.get("type")),
        )

    @classmethod
    def coerce(cls, value: Any) -> "SlideItem | None":
        """Build an item from a mapping or a bare string; None otherwise."""
        if isinstance(value, dict):
            return cls.from_dict(value)
        text = _text(value)
        if text is not None:
            return cls(title=text)
        return None


def item_title(item: "SlideItem | str") -> str:
    """Display title of a column entry, which may be a plain string."""
    return item if isinstance(item, str) else item.title


def item_description(item: "SlideItem | str") -> str | None:
    return None if isinstance(item, str) else item.description


@dataclass
class Column:
    """A titled list of entries (two-column, comparison, agenda, tiers)."""
    title: str
    items: list["SlideItem | str"] = field(default_factory=list)
    color: str | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "title": self.title,
            "items": [i if isinstance(i, str) else i.to_dict() for i in self.items],
        }
        if self.color:
            d["color"] = self.color
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "Column":
        items: list[SlideItem | str] = []
        for raw in _list(d.get("items")):
            if isinstance(raw, str):
                items.append(raw)
            elif isinstance(raw, dict):
                items.append(SlideItem.from_dict(raw))
        return cls(
            title=_text(d.get("title")) or "",
            items=items,
            color=_text(d.get("color")),
        )


@dataclass
class ProblemSolution:
    """A problem statement paired with its solution."""
    problem: str
    solution: str

    def to_dict(self) -> dict:
        return {"problem": self.problem, "solution": self.solution}

    @classmethod
    def from_dict(cls, d: dict) -> "ProblemSolution":
        return cls(problem=_text(d.get("problem")) or "",
                   solution=_text(d.get("solution")) or "")


@dataclass
class Operation:
    """An operational task with an optional shell command."""
    title: str
    description: str = ""
    command: str | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"title": self.title, "description": self.description}
        if self.command is not None:
            d["command"] = self.command
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "Operation":
        return cls(
            title=_text(d.get("title")) or "",
            description=_text(d.get("description")) or "",
            command=_text(d.get("command")),
        )


@dataclass
class TableData:
    """Header row plus body rows; rows may be shorter or longer than headers."""
    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        if self.headers:
            return len(self.headers)
        return max((len(r) for r in self.rows), default=0)

    def to_dict(self) -> dict:
        return {"headers": list(self.headers),
                "rows": [list(r) for r in self.rows]}

    @classmethod
    def from_dict(cls, d: dict) -> "TableData":
        headers = [_text(h) or "" for h in _list(d.get("headers"))]
        rows = []
        for raw in _list(d.get("rows")):
            if isinstance(raw, list):
                rows.append([_text(c) or "" for c in raw])
        return cls(headers=headers, rows=rows)


@dataclass
class KeyInsight:
    """Callout rendered as the same band on every layout that defines it."""
    title: str
    content: str

    def to_dict(self) -> dict:
        return {"title": self.title, "content": self.content}

    @classmethod
    def from_dict(cls, d: dict) -> "KeyInsight":
        return cls(title=_text(d.get("title")) or "",
                   content=_text(d.get("content")) or "")


# ---------------------------------------------------------------------------
# Field codecs shared by the slide variants
# ---------------------------------------------------------------------------

def _parse_items(value: Any) -> list[SlideItem]:
    items = (SlideItem.coerce(v) for v in _list(value))
    return [i for i in items if i is not None]


def _parse_mapping(model):
    def parse(value: Any):
        return model.from_dict(value) if isinstance(value, dict) else None
    return parse


def _parse_list_of(model):
    def parse(value: Any):
        return [model.from_dict(v) for v in _list(value) if isinstance(v, dict)]
    return parse


def _dump(value: Any) -> Any:
    if isinstance(value, list):
        return [v.to_dict() for v in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


# key in the serialized form -> (attribute name, parser)
_FIELD_CODECS: dict[str, tuple[str, Any]] = {
    "subtitle": ("subtitle", _text),
    "content": ("content", _text),
    "leftColumn": ("left_column", _parse_mapping(Column)),
    "rightColumn": ("right_column", _parse_mapping(Column)),
    "columns": ("columns", _parse_list_of(Column)),
    "items": ("items", _parse_items),
    "problems": ("problems", _parse_list_of(ProblemSolution)),
    "operations": ("operations", _parse_list_of(Operation)),
    "tableData": ("table_data", _parse_mapping(TableData)),
    "keyInsight": ("key_insight", _parse_mapping(KeyInsight)),
}

_COMMON_KEYS = ("layout", "title", "speakerNotes")


# ---------------------------------------------------------------------------
# SlideDescription - tagged union over layout kinds
# ---------------------------------------------------------------------------

@dataclass
class SlideDescription:
    """Base of all slide variants.

    Subclasses set ``LAYOUT`` and ``KEYS`` (the serialized field names the
    variant consumes).  Everything else found in the source mapping lands in
    ``extra`` untouched.
    """
    LAYOUT: ClassVar[str] = CONTENT_LAYOUT
    KEYS: ClassVar[tuple[str, ...]] = ()

    title: str = ""
    speaker_notes: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    # Serialized keys present in the source, kept on save even when empty
    source_keys: frozenset[str] = field(default=frozenset(), repr=False, compare=False)

    @property
    def layout(self) -> str:
        return self.LAYOUT

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"layout": self.layout, "title": self.title}
        for key in self.KEYS:
            attr, _ = _FIELD_CODECS[key]
            value = getattr(self, attr)
            if value is None or (value == [] and key not in self.source_keys):
                continue
            d[key] = _dump(value)
        if self.speaker_notes is not None:
            d["speakerNotes"] = self.speaker_notes
        for key, value in self.extra.items():
            d.setdefault(key, value)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "SlideDescription":
        """Build the variant selected by ``d['layout']``.

        Unknown or missing layouts become a ContentSlide that renders only
        ``title`` and ``content`` and remembers the original discriminant.
        """
        raw_layout = d.get("layout")
        variant = SLIDE_VARIANTS.get(raw_layout) if isinstance(raw_layout, str) else None
        if variant is None:
            return ContentSlide._build(d, keys=("content",), raw_layout=raw_layout)
        return variant._build(d, keys=variant.KEYS)

    @classmethod
    def _build(cls, d: dict, keys: tuple[str, ...], **kwargs) -> "SlideDescription":
        values: dict[str, Any] = {}
        for key in keys:
            attr, parse = _FIELD_CODECS[key]
            parsed = parse(d.get(key))
            if parsed is not None:
                values[attr] = parsed
        extra = {k: v for k, v in d.items()
                 if k not in _COMMON_KEYS and k not in keys}
        return cls(
            title=_text(d.get("title")) or "",
            speaker_notes=_text(d.get("speakerNotes")),
            extra=extra,
            source_keys=frozenset(k for k in keys if k in d),
            **values,
            **kwargs,
        )


@dataclass
class TitleSlide(SlideDescription):
    LAYOUT: ClassVar[str] = LayoutKind.TITLE.value
    KEYS: ClassVar[tuple[str, ...]] = ("subtitle",)
    subtitle: str | None = None


@dataclass
class AgendaSlide(SlideDescription):
    LAYOUT: ClassVar[str] = LayoutKind.AGENDA.value
    KEYS: ClassVar[tuple[str, ...]] = ("leftColumn", "rightColumn")
    left_column: Column | None = None
    right_column: Column | None = None


@dataclass
class PainPointsSlide(SlideDescription):
    LAYOUT: ClassVar[str] = LayoutKind.PAIN_POINTS.value
    KEYS: ClassVar[tuple[str, ...]] = ("items",)
    items: list[SlideItem] = field(default_factory=list)


@dataclass
class TwoColumnSlide(SlideDescription):
    """Benefits vs considerations; items keep their descriptions."""
    LAYOUT: ClassVar[str] = LayoutKind.TWO_COLUMN.value
    KEYS: ClassVar[tuple[str, ...]] = ("leftColumn", "rightColumn", "keyInsight")
    left_column: Column | None = None
    right_column: Column | None = None
    key_insight: KeyInsight | None = None


@dataclass
class ComparisonSlide(SlideDescription):
    """Before/after; items render as single-line titles."""
    LAYOUT: ClassVar[str] = LayoutKind.COMPARISON.value
    KEYS: ClassVar[tuple[str, ...]] = ("leftColumn", "rightColumn", "keyInsight")
    left_column: Column | None = None
    right_column: Column | None = None
    key_insight: KeyInsight | None = None


@dataclass
class ThreeColumnSlide(SlideDescription):
    LAYOUT: ClassVar[str] = LayoutKind.THREE_COLUMN.value
    KEYS: ClassVar[tuple[str, ...]] = ("columns", "keyInsight")
    columns: list[Column] = field(default_factory=list)
    key_insight: KeyInsight | None = None


@dataclass
class TableSlide(SlideDescription):
    LAYOUT: ClassVar[str] = LayoutKind.TABLE.value
    KEYS: ClassVar[tuple[str, ...]] = ("tableData", "keyInsight")
    table_data: TableData | None = None
    key_insight: KeyInsight | None = None


@dataclass
class ProblemsSlide(SlideDescription):
    LAYOUT: ClassVar[str] = LayoutKind.PROBLEMS.value
    KEYS: ClassVar[tuple[str, ...]] = ("problems",)
    problems: list[ProblemSolution] = field(default_factory=list)


@dataclass
class OperationsSlide(SlideDescription):
    LAYOUT: ClassVar[str] = LayoutKind.OPERATIONS.value
    KEYS: ClassVar[tuple[str, ...]] = ("operations",)
    operations: list[Operation] = field(default_factory=list)


@dataclass
class TakeawaysSlide(SlideDescription):
    LAYOUT: ClassVar[str] = LayoutKind.TAKEAWAYS.value
    KEYS: ClassVar[tuple[str, ...]] = ("items",)
    items: list[SlideItem] = field(default_factory=list)


@dataclass
class QuestionsSlide(SlideDescription):
    LAYOUT: ClassVar[str] = LayoutKind.QUESTIONS.value
    KEYS: ClassVar[tuple[str, ...]] = ("subtitle", "items")
    subtitle: str | None = None
    items: list[SlideItem] = field(default_factory=list)


@dataclass
class ArchitectureSlide(SlideDescription):
    """System tiers (``columns``) stacked top to bottom."""
    LAYOUT: ClassVar[str] = LayoutKind.ARCHITECTURE.value
    KEYS: ClassVar[tuple[str, ...]] = ("subtitle", "columns", "content", "keyInsight")
    subtitle: str | None = None
    columns: list[Column] = field(default_factory=list)
    content: str | None = None
    key_insight: KeyInsight | None = None


@dataclass
class MonitoringSlide(SlideDescription):
    """Status cards color-coded by severity."""
    LAYOUT: ClassVar[str] = LayoutKind.MONITORING.value
    KEYS: ClassVar[tuple[str, ...]] = ("subtitle", "items", "keyInsight")
    subtitle: str | None = None
    items: list[SlideItem] = field(default_factory=list)
    key_insight: KeyInsight | None = None


@dataclass
class ContentSlide(SlideDescription):
    """Generic layout; also the fallback for unknown discriminants."""
    LAYOUT: ClassVar[str] = CONTENT_LAYOUT
    KEYS: ClassVar[tuple[str, ...]] = ("subtitle", "content", "items", "keyInsight")
    subtitle: str | None = None
    content: str | None = None
    items: list[SlideItem] = field(default_factory=list)
    key_insight: KeyInsight | None = None
    raw_layout: Any = None  # Original discriminant when it was not recognised

    @property
    def layout(self) -> str:
        if isinstance(self.raw_layout, str):
            return self.raw_layout
        return self.LAYOUT

    def to_dict(self) -> dict:
        d = super().to_dict()
        if self.raw_layout is not None:
            d["layout"] = self.raw_layout
        return d


SLIDE_VARIANTS: dict[str, type[SlideDescription]] = {
    cls.LAYOUT: cls
    for cls in (
        TitleSlide, AgendaSlide, PainPointsSlide, TwoColumnSlide,
        ComparisonSlide, ThreeColumnSlide, TableSlide, ProblemsSlide,
        OperationsSlide, TakeawaysSlide, QuestionsSlide, ArchitectureSlide,
        MonitoringSlide, ContentSlide,
    )
}


# ---------------------------------------------------------------------------
# PresentationDocument - top-level container
# ---------------------------------------------------------------------------

@dataclass
class PresentationDocument:
    """A complete deck as handed over by a collaborator.

    Renderers and the viewer borrow it read-only; nothing in this package
    mutates a document after construction.
    """
    title: str
    slides: list[SlideDescription] = field(default_factory=list)
    subtitle: str | None = None
    author: str | None = None
    organization: str | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"title": self.title}
        if self.subtitle is not None:
            d["subtitle"] = self.subtitle
        if self.author is not None:
            d["author"] = self.author
        if self.organization is not None:
            d["organization"] = self.organization
        d["slides"] = [s.to_dict() for s in self.slides]
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "PresentationDocument":
        if not isinstance(d, dict):
            raise ValueError(
                f"Presentation document must be a mapping, got {type(d).__name__}"
            )
        slides = d.get("slides", [])
        if not isinstance(slides, list):
            raise ValueError(
                f"'slides' must be a list, got {type(slides).__name__}"
            )
        return cls(
            title=_text(d.get("title")) or "",
            subtitle=_text(d.get("subtitle")),
            author=_text(d.get("author")),
            organization=_text(d.get("organization")),
            slides=[SlideDescription.from_dict(s) for s in slides
                    if isinstance(s, dict)],
        )
