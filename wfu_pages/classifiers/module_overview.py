"""Split and shape module overview content.

A module overview pairs a free-text description with two lists held in the
template context: learning objectives and a weekly checklist. Instructors
often paste all three at once, so :func:`split_module_input` recovers them
from a single block keyed by the ``Module Description:``, ``Module Learning
Objectives``/``MLOs`` and ``Module Checklist:`` headings.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DESCRIPTION_HEADING = re.compile(r"^\s*Module\s+Description\s*:", re.IGNORECASE)
OBJECTIVES_HEADINGS = (
    re.compile(r"^\s*Module\s+Learning\s+Objectives", re.IGNORECASE),
    re.compile(r"\bMLOs\b", re.IGNORECASE),
    re.compile(r"^\s*After\s+completing\s+this\s+module", re.IGNORECASE),
)
CHECKLIST_HEADING = re.compile(r"^\s*Module\s+Checklist\s*:", re.IGNORECASE)
AFTER_COMPLETING = re.compile(r"^\s*After\s+completing", re.IGNORECASE)
LIST_MARKER = re.compile(r"^(?:[-*•●]\s+|\d+[.)]\s+)")
DUE_DATE_ITEM = re.compile(
    r"^(Initial post|Two reply posts|Reply posts|Response posts|First post|"
    r"Responses|Due by)",
    re.IGNORECASE,
)
DAY_AND_TIME = re.compile(
    r"(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday),\s+"
    r"\d{1,2}:\d{2}\s+[ap]\.m\.\s+ET",
    re.IGNORECASE,
)
LIVE_SESSIONS = re.compile(r"\bLive Instructor-Led Sessions\b", re.IGNORECASE)
MODULE_DESCRIPTION_ENTRY = "module description"
DEFAULT_CHECKLIST = (
    "Review the course Syllabus.",
    "Complete assigned readings.",
    "Complete discussion activities.",
    "Complete assignments.",
)


@dc.dataclass(frozen=True, slots=True)
class ModuleOverviewParts:
    """Description text plus the objective and checklist entries."""

    description: str = ""
    objectives: tuple[str, ...] = ()
    checklist: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ChecklistEntry:
    """A checklist item with any due-date lines nested beneath it."""

    html: str
    children: tuple[str, ...] = ()


def _find(lines: cabc.Sequence[str], pattern: re.Pattern[str]) -> int | None:
    for index, line in enumerate(lines):
        if pattern.search(line):
            return index
    return None


def _strip_marker(text: str) -> str:
    return LIST_MARKER.sub("", text.strip(), count=1)


def split_module_input(text: str) -> ModuleOverviewParts:
    """Split a combined paste into description, objectives, and checklist.

    The description runs from after ``Module Description:`` (or from the top
    when that heading is absent) to the first objectives or checklist
    heading. Objectives run to the checklist heading and the checklist runs
    to the end. List markers are stripped from both lists.

    Examples
    --------
    >>> parts = split_module_input(
    ...     "Module Description:\\nIntro text\\nMLOs\\n1. Explain risk\\n"
    ...     "Module Checklist:\\n- Read chapter 2"
    ... )
    >>> parts.description, parts.objectives, parts.checklist
    ('Intro text', ('Explain risk',), ('Read chapter 2',))
    """
    lines = text.splitlines()
    description_at = _find(lines, DESCRIPTION_HEADING)
    objectives_at = next(
        (
            found
            for pattern in OBJECTIVES_HEADINGS
            if (found := _find(lines, pattern)) is not None
        ),
        None,
    )
    checklist_at = _find(lines, CHECKLIST_HEADING)

    boundaries = sorted(i for i in (objectives_at, checklist_at) if i is not None)
    start = description_at + 1 if description_at is not None else 0
    end = boundaries[0] if boundaries else len(lines)
    description = "\n".join(lines[start:end]).strip()

    objectives: list[str] = []
    if objectives_at is not None:
        stop = len(lines)
        if checklist_at is not None and checklist_at > objectives_at:
            stop = checklist_at
        for line in lines[objectives_at + 1 : stop]:
            if AFTER_COMPLETING.match(line):
                continue
            if entry := _strip_marker(line):
                objectives.append(entry)

    checklist: list[str] = []
    if checklist_at is not None:
        for line in lines[checklist_at + 1 :]:
            if entry := _strip_marker(line):
                checklist.append(entry)

    return ModuleOverviewParts(description, tuple(objectives), tuple(checklist))


def filter_entries(entries: cabc.Iterable[str]) -> tuple[str, ...]:
    """Drop blank entries and stray ``module description`` labels."""
    return tuple(
        entry.strip()
        for entry in entries
        if entry.strip() and entry.strip().lower() != MODULE_DESCRIPTION_ENTRY
    )


def build_checklist(
    items: cabc.Sequence[str], *, sessions_url: str
) -> list[ChecklistEntry]:
    """Shape checklist items into entries with nested due-date lines.

    Due-date lines (``Initial post ...``, ``Reply posts ...``) are nested
    beneath the preceding item with their weekday and time bolded. Mentions
    of the live sessions page are linked to ``sessions_url``. An empty list
    yields the standard four-item checklist.
    """
    if not items:
        return [ChecklistEntry(item) for item in DEFAULT_CHECKLIST]
    link = f'<a href="{sessions_url}">Live Instructor-Led Sessions</a>'
    entries: list[ChecklistEntry] = []
    for raw in items:
        item = LIVE_SESSIONS.sub(link, raw)
        if DUE_DATE_ITEM.match(raw):
            item = DAY_AND_TIME.sub(r"<strong>\g<0></strong>", item)
            if entries:
                parent = entries[-1]
                entries[-1] = dc.replace(parent, children=(*parent.children, item))
            else:
                entries.append(ChecklistEntry("", (item,)))
            continue
        entries.append(ChecklistEntry(item))
    return entries


__all__ = [
    "DEFAULT_CHECKLIST",
    "ChecklistEntry",
    "ModuleOverviewParts",
    "build_checklist",
    "filter_entries",
    "split_module_input",
]
