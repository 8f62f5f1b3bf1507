"""Unit tests for the clipboard HTML serializer.

These tests walk small element trees through ``serialize_html`` and check the
annotated text it emits: emphasis markers, anchors, nested list indentation,
and word-processor clean-up.

Usage
-----
Run ``pytest tests/test_serializer.py -v``. No fixtures are required.

Examples
--------
- ``test_bold_span_round_trips_to_one_strong_pair`` serializes a bold span and
  re-renders it, expecting exactly one ``<strong>`` pair.
- ``test_nested_list_items_are_indented`` checks two-space nesting for
  sub-lists pasted inside a list item.
"""

from __future__ import annotations

import pytest

from wfu_pages.links import inline_markup
from wfu_pages.serializer import MARKUP, html_to_plain_text, serialize_html


def test_bold_span_round_trips_to_one_strong_pair() -> None:
    """A non-empty bold span should re-render as a single strong element."""
    text = serialize_html("<p><b>Key idea</b> matters</p>")
    assert text == "**Key idea** matters", f"unexpected serialization {text!r}"
    html = inline_markup(text)
    assert html.count("<strong>") == 1, f"expected one <strong>, got {html!r}"
    assert "<strong>Key idea</strong>" in html, (
        f"expected the bold text to survive inside <strong>, got {html!r}"
    )


@pytest.mark.parametrize(
    "fragment",
    ["<p>A<strong></strong>B</p>", "<p>A<b><span></span></b>B</p>"],
)
def test_empty_bold_span_emits_no_markers(fragment: str) -> None:
    """Empty bold elements should leave no ``**`` artifacts behind."""
    text = serialize_html(fragment)
    assert text == "AB", f"expected 'AB' without markers, got {text!r}"


def test_inline_font_weight_counts_as_bold() -> None:
    """Spans styled with a heavy font weight should be treated as bold."""
    bold = serialize_html('<p><span style="font-weight: 700">Due</span> now</p>')
    plain = serialize_html('<p><span style="font-weight:normal">Due</span></p>')
    assert bold == "**Due** now", f"expected bold markers, got {bold!r}"
    assert plain == "Due", f"expected no markers for normal weight, got {plain!r}"


def test_italic_uses_single_markers() -> None:
    """Italic elements should be wrapped in single asterisks."""
    text = serialize_html("<p>Read <em>carefully</em></p>")
    assert text == "Read *carefully*", f"unexpected italic output {text!r}"


def test_markup_markers_emit_tags() -> None:
    """The markup strategy should write strong and em tags."""
    text = serialize_html("<p><b>Task</b> and <i>notes</i></p>", markers=MARKUP)
    assert text == "<strong>Task</strong> and <em>notes</em>", (
        f"unexpected markup output {text!r}"
    )


def test_anchor_emits_label_then_href() -> None:
    """Anchors should serialize as their label followed by the URL."""
    text = serialize_html('<p>See <a href="https://x.io/guide">the guide</a></p>')
    assert text == "See the guide https://x.io/guide", f"unexpected {text!r}"


def test_anchor_labelled_with_its_url_is_not_duplicated() -> None:
    """An anchor whose label is its URL should emit the URL once."""
    text = serialize_html('<p><a href="https://x.io">https://x.io</a></p>')
    assert text == "https://x.io", f"expected a single URL, got {text!r}"


def test_nested_list_items_are_indented() -> None:
    """Sub-lists inside an item should be indented two spaces per level."""
    text = serialize_html(
        "<ul><li>One<ul><li>Two</li></ul></li><li>Three</li></ul>"
    )
    assert text == "- One\n  - Two\n- Three", f"unexpected list output {text!r}"


def test_dash_lines_inside_item_follow_main_bullet() -> None:
    """Dash lines within one item are kept as bullets after the main text."""
    text = serialize_html("<ul><li>Main<br>- sub one<br>- sub two</li></ul>")
    assert text == "- Main\n- sub one\n- sub two", f"unexpected item {text!r}"


def test_item_text_lines_join_main_bullet() -> None:
    """Non-dash lines of a multi-line item join the main bullet text."""
    text = serialize_html("<ul><li>First part<br>second part<br>- detail</li></ul>")
    assert text == "- First part second part\n- detail", f"got {text!r}"


def test_bold_italic_serializes_to_nested_markup() -> None:
    """Bold around italic reaches the page as nested strong and em tags."""
    text = serialize_html("<p><b><i>Key</i></b> term</p>")
    assert text == "***Key*** term", f"unexpected markers {text!r}"
    html = inline_markup(text)
    assert html == "<strong><em>Key</em></strong> term", f"got {html!r}"


def test_line_breaks_and_paragraphs_are_preserved() -> None:
    """Breaks become newlines and blocks end their own lines."""
    text = serialize_html("<p>First<br>Second</p><p>Third</p>")
    assert text == "First\nSecond\nThird", f"unexpected block output {text!r}"


def test_bold_label_heading_is_unbolded() -> None:
    """A whole-line bold label should lose its markers."""
    text = serialize_html("<p><strong>Prompt</strong>:</p><p>Body</p>")
    assert text.splitlines()[0] == "Prompt:", f"expected plain label, got {text!r}"


def test_office_noise_is_removed() -> None:
    """Conditional comments, styles, and namespaced tags should be dropped."""
    fragment = (
        "<!--[if gte mso 9]><xml>junk</xml><![endif]-->"
        "<style>p { color: red; }</style>"
        '<p class="MsoNormal">Hello<o:p></o:p> <font face="Arial">world</font></p>'
    )
    text = serialize_html(fragment)
    assert text == "Hello world", f"expected clean text, got {text!r}"


def test_nbsp_and_space_runs_are_collapsed() -> None:
    """Non-breaking spaces become spaces and long runs collapse."""
    text = serialize_html("<p>A&nbsp;B    C</p>")
    assert text == "A B C", f"unexpected whitespace handling {text!r}"


def test_html_to_plain_text_drops_markup() -> None:
    """Plain-text extraction should keep only the text nodes."""
    text = html_to_plain_text("<p>Hello <b>there</b></p>")
    assert text == "Hello there", f"unexpected plain text {text!r}"
