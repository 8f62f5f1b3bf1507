"""Unit tests for module overview input splitting and checklist shaping.

Usage
-----
Run ``pytest tests/test_module_overview.py -v``.

Examples
--------
- ``test_split_module_input_recovers_parts`` splits a combined paste into its
  description, objectives, and checklist.
- ``test_due_dates_nest_under_previous_item`` checks due-date lines move under
  the preceding checklist item with the weekday and time bolded.
"""

from __future__ import annotations

from wfu_pages.classifiers.module_overview import (
    DEFAULT_CHECKLIST,
    ChecklistEntry,
    build_checklist,
    filter_entries,
    split_module_input,
)

SESSIONS_URL = "https://lms.example/courses/1/pages/live-instructor-led-sessions"


def test_split_module_input_recovers_parts() -> None:
    """Headed blocks should split into description, objectives, and checklist."""
    parts = split_module_input(
        "Module Description:\nIntro text\n"
        "Module Learning Objectives\n"
        "After completing this module, you should be able to:\n"
        "1. Explain risk\n2. Rank threats\n"
        "Module Checklist:\n- Read chapter 2\n- Post to the discussion"
    )
    assert parts.description == "Intro text", f"got {parts.description!r}"
    assert parts.objectives == ("Explain risk", "Rank threats"), (
        f"got {parts.objectives!r}"
    )
    assert parts.checklist == ("Read chapter 2", "Post to the discussion"), (
        f"got {parts.checklist!r}"
    )


def test_unheaded_text_is_all_description() -> None:
    """Text without headings should be kept whole as the description."""
    parts = split_module_input("Just a description.\nSecond line.")
    assert parts.description == "Just a description.\nSecond line.", f"got {parts!r}"
    assert parts.objectives == () and parts.checklist == (), f"got {parts!r}"


def test_filter_entries_drops_labels_and_blanks() -> None:
    """Blank entries and stray description labels are filtered out."""
    actual = filter_entries(["Module Description", "  ", " Explain risk "])
    assert actual == ("Explain risk",), f"got {actual!r}"


def test_due_dates_nest_under_previous_item() -> None:
    """Due-date lines should become children of the preceding item."""
    entries = build_checklist(
        [
            "Complete the discussion.",
            "Initial post due Wednesday, 11:59 p.m. ET",
            "See the Live Instructor-Led Sessions page.",
        ],
        sessions_url=SESSIONS_URL,
    )
    assert entries[0] == ChecklistEntry(
        "Complete the discussion.",
        ("Initial post due <strong>Wednesday, 11:59 p.m. ET</strong>",),
    ), f"unexpected first entry {entries[0]!r}"
    assert entries[1].html == (
        f'See the <a href="{SESSIONS_URL}">Live Instructor-Led Sessions</a> page.'
    ), f"unexpected link {entries[1].html!r}"


def test_empty_checklist_uses_default_items() -> None:
    """No checklist items should yield the standard checklist."""
    entries = build_checklist([], sessions_url=SESSIONS_URL)
    assert tuple(entry.html for entry in entries) == DEFAULT_CHECKLIST, (
        f"got {entries!r}"
    )
