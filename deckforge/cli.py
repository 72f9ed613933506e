"""CLI entry point for deckforge.

Orchestrates the full pipeline: document loading, pagination and layout,
PPTX generation, QA validation, and HTML viewer snapshots.

Usage::

    # Generate a PPTX from a YAML or JSON document
    python -m deckforge.cli generate deck.yaml --output output/deck.pptx

    # Validate an existing PPTX against its document
    python -m deckforge.cli validate deck.yaml --pptx output/deck.pptx

    # Inspect a document (slide counts before/after pagination)
    python -m deckforge.cli inspect deck.yaml -v

    # Render the viewer on slide 3 with speaker notes
    python -m deckforge.cli view deck.yaml --slide 3 --notes -o slide3.html

    # Write the default theme for editing, then use it
    python -m deckforge.cli theme -o theme.yaml
    python -m deckforge.cli generate deck.yaml --theme theme.yaml
"""

import argparse
import logging
import re
import sys
from pathlib import Path

from deckforge.generator.pptx_builder import PPTXBuilder, ProducerError
from deckforge.layout.compiler import compile_document
from deckforge.qa.validator import QAValidator
from deckforge.schema.loader import load_document, load_theme, save_theme
from deckforge.schema.palette import Theme
from deckforge.viewer.html import render_deck_html
from deckforge.viewer.state import PresentationViewer


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def safe_filename(title: str) -> str:
    """Replace every non-alphanumeric character with an underscore."""
    return re.sub(r"[^A-Za-z0-9]", "_", title) or "presentation"


def _load_document(args):
    """Load the PresentationDocument named on the command line."""
    path = Path(args.document)
    if not path.exists():
        _error(f"Document file not found: {path}")
    try:
        return load_document(path)
    except ValueError as exc:
        _error(str(exc))


def _load_theme(args):
    """Load a Theme from --theme, or the default theme."""
    if getattr(args, "theme", None):
        path = Path(args.theme)
        if not path.exists():
            _error(f"Theme file not found: {path}")
        try:
            return load_theme(path)
        except ValueError as exc:
            _error(str(exc))
    return Theme()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_generate(args):
    """Generate a PPTX presentation."""
    document = _load_document(args)
    theme = _load_theme(args)
    _info(f"Document: {document.title} ({len(document.slides)} slides)")

    # Generate PPTX
    _info("Building PPTX...")
    builder = PPTXBuilder(theme)
    try:
        pptx_bytes = builder.build(document)
    except ProducerError as exc:
        _error(str(exc))

    # QA validation
    if not args.skip_qa:
        _info("Running QA validation...")
        validator = QAValidator(document, theme)
        qa_result = validator.validate(pptx_bytes)

        if qa_result.passed:
            _info(qa_result.summary())
        else:
            _warn(qa_result.summary())
            if args.verbose:
                print(qa_result.report(), file=sys.stderr)

            if not args.force:
                _error("QA validation failed. Use --force to write anyway, "
                       "or --skip-qa to skip validation.")
    else:
        _info("QA validation skipped (--skip-qa)")

    # Write output
    output = Path(args.output or f"{safe_filename(document.title)}.pptx")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(pptx_bytes)
    _info(f"Written: {output} ({len(pptx_bytes):,} bytes)")


def cmd_validate(args):
    """Validate an existing PPTX against its document."""
    document = _load_document(args)
    theme = _load_theme(args)
    pptx_path = Path(args.pptx)
    if not pptx_path.exists():
        _error(f"PPTX file not found: {pptx_path}")

    pptx_bytes = pptx_path.read_bytes()
    _info(f"Validating {pptx_path} against {document.title}")

    validator = QAValidator(document, theme)
    qa_result = validator.validate(pptx_bytes)

    print(qa_result.report())
    sys.exit(0 if qa_result.passed else 1)


def cmd_inspect(args):
    """Show document information."""
    document = _load_document(args)
    theme = _load_theme(args)
    deck = compile_document(document, theme)

    print(f"Title:       {document.title}")
    if document.subtitle:
        print(f"Subtitle:    {document.subtitle}")
    print(f"Author:      {document.author or theme.default_author}")
    if document.organization:
        print(f"Org:         {document.organization}")
    print(f"Dimensions:  {theme.width_inches}\" x {theme.height_inches}\"")
    print(f"Slides:      {len(document.slides)} described, "
          f"{len(deck)} after pagination")

    if args.verbose:
        print()
        for index, slide in enumerate(document.slides):
            pages = len(deck.pages_for(index))
            expanded = f" - {pages} pages" if pages > 1 else ""
            notes = " (notes)" if slide.speaker_notes else ""
            print(f"  [{index:2d}] {slide.title}"
                  f" - {slide.layout}{expanded}{notes}")


def cmd_view(args):
    """Render the viewer (or the whole deck) to an HTML file."""
    document = _load_document(args)
    theme = _load_theme(args)

    if args.all:
        html = render_deck_html(compile_document(document, theme), theme)
    else:
        viewer = PresentationViewer(document, theme)
        viewer.jump_to(args.slide - 1)
        if args.notes:
            viewer.toggle_notes()
        if args.grid:
            viewer.toggle_grid()
        if args.fullscreen:
            viewer.toggle_fullscreen()
        _info(f"Slide {viewer.current_slide_index + 1} / {viewer.total_slides}")
        html = viewer.render_page()

    output = Path(args.output or f"{safe_filename(document.title)}.html")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    _info(f"Written: {output}")


def cmd_theme(args):
    """Write the default (or --theme) theme as YAML for editing."""
    theme = _load_theme(args)
    save_theme(theme, args.output)
    _info(f"Written: {args.output}")


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _info(msg):
    print(f"  {msg}", file=sys.stderr)


def _warn(msg):
    print(f"  WARNING: {msg}", file=sys.stderr)


def _error(msg):
    print(f"  ERROR: {msg}", file=sys.stderr)
    sys.exit(1)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="deckforge",
        description="Compile presentation documents to PPTX files and HTML views.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---- generate ----
    gen = subparsers.add_parser(
        "generate",
        help="Generate a PPTX presentation from a document.",
    )
    _add_document_args(gen)
    gen.add_argument(
        "-o", "--output",
        help="Output PPTX file path (default: <title>.pptx).",
    )
    gen.add_argument(
        "--skip-qa",
        action="store_true",
        default=False,
        help="Skip QA validation after generation.",
    )
    gen.add_argument(
        "--force",
        action="store_true",
        default=False,
        help="Write output even if QA validation fails.",
    )
    gen.set_defaults(func=cmd_generate)

    # ---- validate ----
    val = subparsers.add_parser(
        "validate",
        help="Validate an existing PPTX against its document.",
    )
    _add_document_args(val)
    val.add_argument(
        "--pptx",
        required=True,
        help="Path to the PPTX file to validate.",
    )
    val.set_defaults(func=cmd_validate)

    # ---- inspect ----
    insp = subparsers.add_parser(
        "inspect",
        help="Show document structure and pagination.",
    )
    _add_document_args(insp)
    insp.set_defaults(func=cmd_inspect)

    # ---- view ----
    view = subparsers.add_parser(
        "view",
        help="Render the interactive viewer to an HTML snapshot.",
    )
    _add_document_args(view)
    view.add_argument(
        "-o", "--output",
        help="Output HTML file path (default: <title>.html).",
    )
    view.add_argument(
        "--slide",
        type=int,
        default=1,
        help="1-based slide to show (clamped to the deck).",
    )
    view.add_argument(
        "--notes",
        action="store_true",
        default=False,
        help="Show the speaker notes panel.",
    )
    view.add_argument(
        "--grid",
        action="store_true",
        default=False,
        help="Show the slide grid overview.",
    )
    view.add_argument(
        "--fullscreen",
        action="store_true",
        default=False,
        help="Render in fullscreen mode.",
    )
    view.add_argument(
        "--all",
        action="store_true",
        default=False,
        help="Render every slide on one page instead of the viewer.",
    )
    view.set_defaults(func=cmd_view)

    # ---- theme ----
    thm = subparsers.add_parser(
        "theme",
        help="Write a theme YAML file for editing.",
    )
    thm.add_argument(
        "-o", "--output",
        required=True,
        help="Output YAML file path.",
    )
    thm.add_argument(
        "--theme",
        help="Start from this theme instead of the default.",
    )
    _add_verbose_arg(thm)
    thm.set_defaults(func=cmd_theme)

    return parser


def _add_document_args(parser):
    """Add the document path, --theme and -v args to a subparser."""
    parser.add_argument(
        "document",
        help="Path to a YAML or JSON presentation document.",
    )
    parser.add_argument(
        "--theme",
        help="Path to a YAML theme file.",
    )
    _add_verbose_arg(parser)


def _add_verbose_arg(parser):
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Show detailed output and debug logging.",
    )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="  %(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
