"""Tests for the format dispatcher, preview, and template catalogue.

Usage
-----
Run ``pytest tests/test_formatter.py -v``.

Examples
--------
- ``test_unknown_kind_falls_back_to_markdown`` logs a warning and returns
  bare markdown HTML without a page shell.
- ``test_preview_truncates`` checks the ``...`` suffix on long previews.
"""

from __future__ import annotations

import logging
import typing as typ

import pytest

from wfu_pages import available_templates, format_content, preview_content
from wfu_pages.config import ContextConfigError, FormattingOptions
from wfu_pages.formatter import prepare_text
from wfu_pages.kinds import DocumentKind
from wfu_pages.rendering.shells import ShellRenderer

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture


def test_unknown_kind_falls_back_to_markdown(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown kinds render light markdown and log a warning."""
    with caplog.at_level(logging.WARNING, logger="wfu_pages.formatter"):
        html = format_content("Line one\nLine two", "wfuMystery")
    assert "WFU-footer" not in html, "fallback output should have no shell"
    assert html.startswith("<p>Line one<br"), f"unexpected fallback {html!r}"
    assert "wfuMystery" in caplog.text, "expected a warning naming the kind"


def test_html_source_is_serialized_first() -> None:
    """Clipboard HTML is serialized before classification."""
    options = FormattingOptions(source_is_html=True)
    html = format_content(
        "<p><b>Prompt:</b> Share one risk.</p>", "wfuDiscussion", options=options
    )
    assert "<h3>Prompt:</h3>" in html, f"expected the prompt heading, got {html!r}"
    assert "Share one risk." in html, "expected the prompt text"
    assert "<b>" not in html, "source markup should not leak through"


def test_assignment_html_keeps_markup_emphasis() -> None:
    """Assignments receive emphasis as tags rather than markdown markers."""
    text = prepare_text(
        "<p>Use <em>two</em> sources.</p>",
        DocumentKind.ASSIGNMENT,
        source_is_html=True,
    )
    assert text == "Use <em>two</em> sources.", f"got {text!r}"


def test_welcome_html_is_reduced_to_text() -> None:
    """The welcome page keeps only the text of pasted HTML."""
    text = prepare_text(
        "<p>Hello <strong>class</strong></p>",
        DocumentKind.COURSE_WELCOME,
        source_is_html=True,
    )
    assert text == "Hello class", f"got {text!r}"


def test_mapping_context_is_accepted() -> None:
    """A plain mapping with camelCase keys is read like a context file."""
    html = format_content(
        "", "wfuDiscussion", {"courseName": "CYB 710", "discussionTitle": "D 3.1"}
    )
    assert '<p class="WFU-SubpageHeader">CYB 710</p>' in html, html
    assert '<h2 class="WFU-SubpageSubheader">D 3.1</h2>' in html, html


def test_mapping_context_rejects_unknown_keys() -> None:
    """Unknown context fields raise instead of being ignored."""
    with pytest.raises(ContextConfigError, match="courseColour"):
        format_content("", "wfuDiscussion", {"courseColour": "gold"})


def test_sanitizing_strips_scripts() -> None:
    """Sanitized output drops script elements from pasted text."""
    html = format_content("Hi <script>alert(1)</script>", "wfuAssignment")
    assert "<script>" not in html, f"expected script removed, got {html!r}"


def test_embeds_can_be_disallowed() -> None:
    """Turning embeds off removes the video iframe."""
    text = "Lecture https://youtu.be/abc12345678"
    with_embeds = format_content(text, "wfuInstructorPresentation")
    without = format_content(
        text, "wfuInstructorPresentation", options=FormattingOptions(allow_embeds=False)
    )
    assert "<iframe" in with_embeds, "expected the embed by default"
    assert "<iframe" not in without, "expected the embed to be stripped"


def test_preview_collapses_whitespace() -> None:
    """Preview text joins the page text with single spaces."""
    text = preview_content("Prompt: Share one risk.", "wfuDiscussion")
    assert text.startswith("Course Name Discussion Prompt: Share one risk."), text
    assert "  " not in text, "expected collapsed whitespace"


def test_preview_truncates() -> None:
    """Long previews are cut and suffixed with an ellipsis."""
    text = preview_content("Prompt: Share one risk.", "wfuDiscussion", max_length=20)
    assert text == "Course Name Discussi...", f"got {text!r}"


def test_available_templates_lists_every_kind() -> None:
    """The catalogue covers each document kind exactly once."""
    ids = [info.id for info in available_templates()]
    assert sorted(ids) == sorted(DocumentKind), f"unexpected catalogue {ids!r}"
    assert ids[0] is DocumentKind.COURSE_WELCOME, "welcome page should lead"


def test_custom_shell_renderer_is_used(mocker: MockerFixture) -> None:
    """An injected renderer receives the kind's template and body."""
    shells = mocker.Mock(spec=ShellRenderer)
    shells.render.return_value = "<div>page</div>"
    html = format_content("Purpose: Practice.", "wfuAssignment", shells=shells)
    assert html == "<div>page</div>", f"got {html!r}"
    args, kwargs = shells.render.call_args
    assert args == ("assignment.jinja",), f"unexpected template {args!r}"
    assert kwargs["body"] == "<h3>Purpose</h3>\n<p>Practice.</p>\n", kwargs
