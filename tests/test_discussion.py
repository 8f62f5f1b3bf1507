"""Unit tests for the discussion classifier and renderer.

Usage
-----
Run ``pytest tests/test_discussion.py -v``.

Examples
--------
- ``test_missing_sections_use_standard_copy`` renders a prompt-only
  discussion and checks the default sections appear in canonical order.
- ``test_repeated_labels_merge`` continues an earlier section when its label
  appears again.
"""

from __future__ import annotations

from wfu_pages.classifiers.discussion import (
    DiscussionKind,
    classify_discussion,
    render_discussion,
)
from wfu_pages.normalizer import annotate_lines


def _render(text: str, objectives: tuple[str, ...] = ()) -> str:
    lines = annotate_lines(text, keep_blank=True)
    return render_discussion(lines, objectives=objectives)


def test_unlabelled_text_becomes_prompt() -> None:
    """Leading content without a label should land in the prompt section."""
    sections = classify_discussion(annotate_lines("Share one risk.\nExplain why."))
    assert [section.kind for section in sections] == [DiscussionKind.PROMPT], (
        f"unexpected sections {sections!r}"
    )


def test_label_remainder_starts_section() -> None:
    """Text after a label's colon becomes the first line of that section."""
    lines = annotate_lines("**Instructions:** Post by Wednesday.")
    sections = classify_discussion(lines)
    assert sections[0].kind is DiscussionKind.INSTRUCTIONS, f"got {sections!r}"
    assert sections[0].lines[0].text == "Post by Wednesday.", f"got {sections!r}"


def test_missing_sections_use_standard_copy() -> None:
    """Sections the author omits should be filled in canonical order."""
    html = _render(
        "Prompt: Describe a recent phishing campaign.\n"
        "Consider the attacker's goals.\n"
        "Response to Classmates:\n"
        "- Ask one question."
    )
    markers = [
        "<h3>Prompt:</h3>",
        "This discussion aligns with the following module objectives:",
        "<h3>Response to Classmates:</h3>",
        "<h3>Instructions:</h3>",
        "<h3>Criteria for Success (Grading Rubric):</h3>",
        "<hr />",
    ]
    positions = [html.find(marker) for marker in markers]
    assert -1 not in positions, f"missing a section in {html!r}"
    assert positions == sorted(positions), f"sections out of order: {positions}"
    assert "<li>Objective 1</li>" in html, "expected placeholder objectives"
    assert "<ul>\n<li>Ask one question.</li>\n</ul>" in html, (
        f"expected the authored response list, got {html!r}"
    )
    assert "<li>Offering a new point of view</li>" not in html, (
        "authored response should replace the default copy"
    )


def test_context_objectives_fill_missing_section() -> None:
    """Context objectives replace the placeholders when no section exists."""
    html = _render("Prompt: Hi", objectives=("Define risk",))
    assert "<li>Define risk</li>" in html, f"expected context objective in {html!r}"
    assert "Objective 1" not in html, "placeholders should not be used"


def test_alignment_sentence_is_consumed() -> None:
    """The alignment sentence opens the objectives section without repeating."""
    html = _render(
        "This discussion aligns with the following module objectives:\n"
        "- Explain phishing"
    )
    assert html.count("This discussion aligns") == 1, f"got {html!r}"
    assert "<li>Explain phishing</li>" in html, f"got {html!r}"


def test_repeated_labels_merge() -> None:
    """A label used twice should continue its first section."""
    html = _render(
        "Instructions: Post once.\nTIP: Save often.\nInstructions: Reply twice."
    )
    assert html.count("<h3>Instructions:</h3>") == 1, f"got {html!r}"
    assert "<p>Post once.</p>\n<p>Reply twice.</p>" in html, f"got {html!r}"


def test_tip_is_prefixed_and_separated() -> None:
    """The tip follows a rule and keeps the bold TIP prefix."""
    html = _render("TIP: Draft offline first.")
    assert "<hr />\n<p><strong>TIP:</strong> Draft offline first.</p>" in html, (
        f"got {html!r}"
    )


def test_empty_discussion_renders_nothing() -> None:
    """Blank input has no sections and therefore no body."""
    assert _render("   \n\n") == "", "expected an empty body"


def test_missing_prompt_keeps_heading() -> None:
    """A discussion without a prompt still opens with the prompt heading."""
    html = _render("Instructions: Post once.")
    assert html.startswith("<h3>Prompt:</h3>\n"), f"got {html!r}"
    assert html.index("<h3>Prompt:</h3>") < html.index("<h3>Instructions:</h3>"), (
        "prompt heading should lead"
    )
