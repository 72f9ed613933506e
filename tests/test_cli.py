"""Tests for the CLI entry point (deckforge.cli).

Covers argument parsing, document and theme loading, the generate pipeline
with its QA gate, the validate, inspect and view commands, and error
handling.  QA failures are simulated with a patched validator.
"""

import argparse
import io
from unittest.mock import MagicMock, patch

import pytest
import yaml
from pptx import Presentation

from deckforge.cli import (
    _load_document,
    _load_theme,
    build_parser,
    main,
    safe_filename,
)
from deckforge.schema.loader import load_theme
from deckforge.schema.palette import Theme


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

DOCUMENT = {
    "title": "Ops Review: Q3",
    "author": "Dana",
    "slides": [
        {"layout": "title", "title": "Ops Review", "speakerNotes": "Say hello"},
        {"layout": "table", "title": "Hosts", "tableData": {
            "headers": ["Host", "Up"],
            "rows": [[f"web{i}", "yes"] for i in range(12)],
        }},
        {"layout": "content", "title": "Done", "content": "Thanks"},
    ],
}


@pytest.fixture
def parser():
    return build_parser()


@pytest.fixture
def doc_path(tmp_path):
    path = tmp_path / "deck.yaml"
    path.write_text(yaml.safe_dump(DOCUMENT, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def qa_fail():
    """A failing QAResult mock."""
    qa = MagicMock()
    qa.passed = False
    qa.summary.return_value = "QA FAIL: 1 error(s), 0 warning(s)"
    qa.report.return_value = "QA FAIL: 1 error(s), 0 warning(s)\n  [ERROR] slide -1: bad"
    return qa


# ===================================================================
# Parser tests
# ===================================================================

class TestParser:
    def test_generate_minimal(self, parser):
        args = parser.parse_args(["generate", "deck.yaml"])
        assert args.command == "generate"
        assert args.document == "deck.yaml"
        assert args.output is None
        assert args.skip_qa is False
        assert args.force is False
        assert args.verbose is False

    def test_generate_flags(self, parser):
        args = parser.parse_args(["generate", "deck.yaml", "-o", "out.pptx",
                                  "--theme", "t.yaml", "--skip-qa", "--force", "-v"])
        assert args.output == "out.pptx"
        assert args.theme == "t.yaml"
        assert args.skip_qa and args.force and args.verbose

    def test_view_defaults(self, parser):
        args = parser.parse_args(["view", "deck.yaml"])
        assert args.slide == 1
        assert not (args.notes or args.grid or args.fullscreen or args.all)

    def test_no_command_fails(self, parser):
        with pytest.raises(SystemExit):
            parser.parse_args([])

    def test_validate_requires_pptx(self, parser):
        with pytest.raises(SystemExit):
            parser.parse_args(["validate", "deck.yaml"])

    def test_theme_requires_output(self, parser):
        with pytest.raises(SystemExit):
            parser.parse_args(["theme"])


# ===================================================================
# Loading
# ===================================================================

class TestLoading:
    def test_load_document(self, doc_path):
        document = _load_document(argparse.Namespace(document=str(doc_path)))
        assert document.title == "Ops Review: Q3"
        assert len(document.slides) == 3

    def test_missing_document_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            _load_document(argparse.Namespace(document=str(tmp_path / "nope.yaml")))
        assert exc.value.code == 1
        assert "Document file not found" in capsys.readouterr().err

    def test_non_mapping_document_exits(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(SystemExit):
            _load_document(argparse.Namespace(document=str(path)))

    def test_default_theme(self):
        assert _load_theme(argparse.Namespace(theme=None)) == Theme()

    def test_missing_theme_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            _load_theme(argparse.Namespace(theme=str(tmp_path / "t.yaml")))


class TestSafeFilename:
    @pytest.mark.parametrize("title,expected", [
        ("Ops Review: Q3", "Ops_Review__Q3"),
        ("plain", "plain"),
        ("a/b\\c", "a_b_c"),
        ("", "presentation"),
    ])
    def test_safe_filename(self, title, expected):
        assert safe_filename(title) == expected


# ===================================================================
# Commands
# ===================================================================

class TestGenerate:
    def test_writes_pptx(self, doc_path, tmp_path):
        out = tmp_path / "out" / "deck.pptx"
        main(["generate", str(doc_path), "-o", str(out)])
        prs = Presentation(io.BytesIO(out.read_bytes()))
        # 12 rows at the default 8 per slide -> 2 table slides
        assert len(prs.slides) == 4
        assert prs.core_properties.title == "Ops Review: Q3"

    def test_default_output_name(self, doc_path, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        main(["generate", str(doc_path)])
        assert (tmp_path / "Ops_Review__Q3.pptx").exists()

    def test_theme_changes_pagination(self, doc_path, tmp_path):
        theme_path = tmp_path / "theme.yaml"
        theme_path.write_text("pagination:\n  table_rows_per_slide: 3\n", encoding="utf-8")
        out = tmp_path / "deck.pptx"
        main(["generate", str(doc_path), "--theme", str(theme_path), "-o", str(out)])
        assert len(Presentation(str(out)).slides) == 1 + 4 + 1

    def test_qa_failure_aborts(self, doc_path, tmp_path, qa_fail, capsys):
        out = tmp_path / "deck.pptx"
        with patch("deckforge.cli.QAValidator") as validator:
            validator.return_value.validate.return_value = qa_fail
            with pytest.raises(SystemExit) as exc:
                main(["generate", str(doc_path), "-o", str(out), "-v"])
        assert exc.value.code == 1
        assert not out.exists()
        err = capsys.readouterr().err
        assert "QA validation failed" in err
        assert "[ERROR] slide -1: bad" in err

    def test_qa_failure_forced(self, doc_path, tmp_path, qa_fail):
        out = tmp_path / "deck.pptx"
        with patch("deckforge.cli.QAValidator") as validator:
            validator.return_value.validate.return_value = qa_fail
            main(["generate", str(doc_path), "-o", str(out), "--force"])
        assert out.exists()

    def test_skip_qa(self, doc_path, tmp_path, capsys):
        out = tmp_path / "deck.pptx"
        with patch("deckforge.cli.QAValidator") as validator:
            main(["generate", str(doc_path), "-o", str(out), "--skip-qa"])
        validator.assert_not_called()
        assert out.exists()
        assert "skipped" in capsys.readouterr().err

    def test_missing_document(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["generate", str(tmp_path / "missing.yaml")])
        assert exc.value.code == 1


class TestValidate:
    def test_valid_file_exits_zero(self, doc_path, tmp_path, capsys):
        out = tmp_path / "deck.pptx"
        main(["generate", str(doc_path), "-o", str(out)])
        with pytest.raises(SystemExit) as exc:
            main(["validate", str(doc_path), "--pptx", str(out)])
        assert exc.value.code == 0
        assert "QA PASS" in capsys.readouterr().out

    def test_mismatched_file_exits_one(self, doc_path, tmp_path, capsys):
        out = tmp_path / "deck.pptx"
        main(["generate", str(doc_path), "-o", str(out)])
        theme_path = tmp_path / "theme.yaml"
        theme_path.write_text("pagination:\n  table_rows_per_slide: 2\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main(["validate", str(doc_path), "--pptx", str(out), "--theme", str(theme_path)])
        assert exc.value.code == 1
        assert capsys.readouterr().out.startswith("QA FAIL")

    def test_missing_pptx(self, doc_path, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["validate", str(doc_path), "--pptx", str(tmp_path / "x.pptx")])
        assert exc.value.code == 1


class TestInspect:
    def test_summary(self, doc_path, capsys):
        main(["inspect", str(doc_path)])
        out = capsys.readouterr().out
        assert "Title:       Ops Review: Q3" in out
        assert "Author:      Dana" in out
        assert "Slides:      3 described, 4 after pagination" in out

    def test_verbose_lists_slides(self, doc_path, capsys):
        main(["inspect", str(doc_path), "-v"])
        out = capsys.readouterr().out
        assert "[ 0] Ops Review" in out
        assert "(notes)" in out
        assert "2 pages" in out


class TestView:
    def test_viewer_page(self, doc_path, tmp_path):
        out = tmp_path / "view.html"
        main(["view", str(doc_path), "-o", str(out), "--slide", "2", "--notes"])
        html = out.read_text(encoding="utf-8")
        assert ">2 / 4<" in html
        assert "Speaker Notes" not in html  # slide 2 has no notes

    def test_notes_panel(self, doc_path, tmp_path):
        out = tmp_path / "view.html"
        main(["view", str(doc_path), "-o", str(out), "--notes"])
        assert "Say hello" in out.read_text(encoding="utf-8")

    def test_slide_clamped(self, doc_path, tmp_path):
        out = tmp_path / "view.html"
        main(["view", str(doc_path), "-o", str(out), "--slide", "99", "--grid"])
        html = out.read_text(encoding="utf-8")
        assert ">4 / 4<" in html
        assert "All Slides" in html

    def test_all_slides(self, doc_path, tmp_path):
        out = tmp_path / "deck.html"
        main(["view", str(doc_path), "-o", str(out), "--all"])
        html = out.read_text(encoding="utf-8")
        assert html.count('<div class="slide"') == 4
        assert "Say hello" not in html

    def test_default_output_name(self, doc_path, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        main(["view", str(doc_path)])
        assert (tmp_path / "Ops_Review__Q3.html").exists()


class TestTheme:
    def test_writes_default_theme(self, tmp_path):
        out = tmp_path / "theme.yaml"
        main(["theme", "-o", str(out)])
        assert load_theme(out) == Theme()

    def test_round_trips_custom_theme(self, tmp_path):
        src = tmp_path / "src.yaml"
        src.write_text("pagination:\n  column_items_per_slide: 6\n", encoding="utf-8")
        out = tmp_path / "out.yaml"
        main(["theme", "--theme", str(src), "-o", str(out)])
        assert load_theme(out).column_items_per_slide == 6
