"""Document loader - YAML/JSON serialization for decks and themes.

Provides round-trip save/load so decks assembled by collaborators can be
stored, reviewed, and edited as human-readable files.  JSON input is read
through the YAML parser (JSON is a YAML subset); files ending in ``.json``
are written back as JSON.
"""

import json
from pathlib import Path

import yaml

from .models import PresentationDocument
from .palette import Theme


def _read(path: Path) -> object:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def _write(data: dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        else:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False,
                      allow_unicode=True, width=120)


def save_document(document: PresentationDocument, path: str | Path) -> None:
    """Serialize a PresentationDocument to a YAML or JSON file."""
    _write(document.to_dict(), Path(path))


def load_document(path: str | Path) -> PresentationDocument:
    """Deserialize a PresentationDocument from a YAML or JSON file.

    Raises ValueError when the file does not hold a document mapping.
    """
    path = Path(path)
    data = _read(path)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a presentation mapping at top level")
    return PresentationDocument.from_dict(data)


def save_theme(theme: Theme, path: str | Path) -> None:
    """Serialize a Theme to a YAML file."""
    _write(theme.to_dict(), Path(path))


def load_theme(path: str | Path) -> Theme:
    """Deserialize a Theme from a YAML file; an empty file gives defaults."""
    path = Path(path)
    data = _read(path) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a theme mapping at top level")
    return Theme.from_dict(data)
