"""Tests for the ``wfu-pages`` command functions.

Usage
-----
Run ``pytest tests/test_cli.py -v``.

Examples
--------
- ``test_render_prints_page`` renders a discussion file to stdout.
- ``test_render_writes_output`` writes the page to ``--output`` and reports
  the path.
"""

from __future__ import annotations

import typing as typ

from wfu_pages import cli
from wfu_pages.config import FormattingOptions

if typ.TYPE_CHECKING:
    from pathlib import Path

    import pytest
    from pytest_mock import MockerFixture


def _source(tmp_path: Path, text: str, name: str = "source.txt") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_render_prints_page(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Rendering without ``--output`` prints the page."""
    source = _source(tmp_path, "Prompt: Share one risk.")
    context = _source(tmp_path, "courseName: CYB 710\n", "context.yaml")
    cli.render("wfuDiscussion", source, context=context)
    out = capsys.readouterr().out
    assert "<h3>Prompt:</h3>" in out, f"expected the page, got {out!r}"
    assert "CYB 710" in out, "expected the context course name"


def test_render_writes_output(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """``--output`` writes the file and prints where it went."""
    monkeypatch.chdir(tmp_path)
    source = _source(tmp_path, "Purpose: Practice.")
    output = tmp_path / "out" / "page.html"
    cli.render("wfuAssignment", source, output=output)
    assert output.read_text(encoding="utf-8").endswith("</div>\n"), (
        "expected the page shell in the output file"
    )
    out = capsys.readouterr().out
    assert out.strip() == "wrote out/page.html", f"unexpected output {out!r}"


def test_render_html_source(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """``--html`` serializes the source before classification."""
    source = _source(tmp_path, "<p><strong>Task:</strong> Draft</p>", "paste.html")
    cli.render("wfuAssignment", source, html=True)
    out = capsys.readouterr().out
    assert "<h3>Task</h3>" in out, f"got {out!r}"


def test_serialize_prints_text(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``serialize`` prints the annotated text for an HTML fragment."""
    source = _source(tmp_path, "<ul><li>One<ul><li>Two</li></ul></li></ul>")
    cli.serialize(source)
    out = capsys.readouterr().out
    assert out == "- One\n  - Two\n", f"got {out!r}"


def test_serialize_markup(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """``--markup`` keeps emphasis as tags."""
    source = _source(tmp_path, "<p><b>Due</b> Friday</p>")
    cli.serialize(source, markup=True)
    out = capsys.readouterr().out
    assert out == "<strong>Due</strong> Friday\n", f"got {out!r}"


def test_preview_prints_text(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``preview`` prints the truncated page text."""
    source = _source(tmp_path, "Prompt: Share one risk.")
    cli.preview("wfuDiscussion", source, max_length=11)
    out = capsys.readouterr().out
    assert out == "Course Name...\n", f"got {out!r}"


def test_templates_lists_kinds(capsys: pytest.CaptureFixture[str]) -> None:
    """``templates`` prints one line per document kind."""
    cli.templates()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 9, f"expected 9 kinds, got {lines!r}"
    assert lines[0].startswith("wfuCourseWelcome: WFU Course Welcome - "), lines[0]


def test_render_passes_switches(tmp_path: Path, mocker: MockerFixture) -> None:
    """Command switches are forwarded as formatting options."""
    source = _source(tmp_path, "text")
    format_content = mocker.patch("wfu_pages.cli.format_content", return_value="")
    cli.render("wfuModule", source, sanitize=False, embeds=False)
    _, kind, _, options = format_content.call_args.args
    assert kind == "wfuModule", f"got {kind!r}"
    assert options == FormattingOptions(
        sanitize=False, source_is_html=False, allow_embeds=False
    ), f"got {options!r}"
