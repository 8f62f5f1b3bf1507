"""Classify and render the "Overview of Assessments" page body.

Instructors paste one block per assessment category. A category heading is a
line holding only the category word (singular or plural, optionally followed
by a colon or dash); every following line is typed against an ordered rule
table until the next heading. Lines that appear before the first heading have
no category to belong to and are dropped.

Examples
--------
>>> from wfu_pages.classifiers.assessment import classify_assessment
>>> sections = classify_assessment(["Quizzes", "Module 1: Terminology", "10 points"])
>>> [(line.kind.name, line.text) for line in sections[0].lines]
[('MODULE_LINE', 'Module 1: Terminology'), ('POINTS_LINE', '10 points')]
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import re
import typing as typ

from wfu_pages.links import inline_markup
from wfu_pages.rendering.fragments import heading, paragraph

from .models import Section, compile_rule, first_match, plain_label

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)


class AssessmentLineKind(enum.Enum):
    """Kinds assigned to lines of the assessment overview."""

    HEADING = "heading"
    MODULE_LINE = "module_line"
    POINTS_LINE = "points_line"
    RUBRIC_LINE = "rubric_line"
    DESCRIPTION = "description"


@dc.dataclass(frozen=True, slots=True)
class AssessmentLine:
    """One typed line inside an assessment category."""

    kind: AssessmentLineKind
    text: str


AssessmentSection = Section[AssessmentLineKind, AssessmentLine]

CATEGORY_HEADING = re.compile(
    r"^(Discussions?|Assignments?|Quiz(?:zes)?|Projects?|Reflections?)"
    r"\s*[:\-–—]?\s*$",
    re.IGNORECASE,
)
LINE_RULES = (
    compile_rule(r"^Module\s+\d+", AssessmentLineKind.MODULE_LINE),
    compile_rule(r"^(?=.*\d)(?=.*\bpoints?\b)", AssessmentLineKind.POINTS_LINE),
    compile_rule(r"^.*rubric", AssessmentLineKind.RUBRIC_LINE),
)
MODULE_TOKEN = re.compile(
    r"^(Module\s+\d+)\s*[:\-–—.,]?\s*(.*)$", re.IGNORECASE
)


@dc.dataclass(frozen=True, slots=True)
class AssessmentState:
    """Accumulator threaded through :func:`step`."""

    sections: tuple[AssessmentSection, ...] = ()
    current: AssessmentSection | None = None
    dropped: int = 0

    def finish(self) -> tuple[AssessmentSection, ...]:
        """Return every section, including the one still open."""
        if self.current is None:
            return self.sections
        return (*self.sections, self.current)


def classify_line(text: str) -> AssessmentLineKind:
    """Return the kind of a non-heading line inside a category."""
    matched = first_match(LINE_RULES, text)
    return matched.kind if matched else AssessmentLineKind.DESCRIPTION


def step(state: AssessmentState, text: str) -> AssessmentState:
    """Advance the classifier by one trimmed, non-blank line."""
    if heading_match := CATEGORY_HEADING.match(plain_label(text)):
        opened: AssessmentSection = Section(
            AssessmentLineKind.HEADING, heading_match.group(1)
        )
        return AssessmentState(state.finish(), opened, state.dropped)
    if state.current is None:
        return dc.replace(state, dropped=state.dropped + 1)
    line = AssessmentLine(classify_line(text), text)
    return dc.replace(state, current=state.current.with_line(line))


def classify_assessment(lines: cabc.Iterable[str]) -> list[AssessmentSection]:
    """Split assessment overview lines into category sections.

    Parameters
    ----------
    lines : Iterable[str]
        Normalized lines; blank entries are ignored.

    Returns
    -------
    list[AssessmentSection]
        One section per category heading, in input order.
    """
    state = AssessmentState()
    for raw in lines:
        text = raw.strip()
        if text:
            state = step(state, text)
    if state.dropped:
        logger.debug(
            "Dropped %d line(s) before the first assessment category", state.dropped
        )
    return list(state.finish())


def _module_item(text: str) -> str:
    match = MODULE_TOKEN.match(plain_label(text))
    if match is None:
        return inline_markup(text)
    token, rest = match.groups()
    if not rest:
        return f"<strong>{token}</strong>"
    return f"<strong>{token}</strong>: {inline_markup(rest)}"


def render_assessment_sections(sections: cabc.Sequence[AssessmentSection]) -> str:
    """Render classified sections into the assessment overview body."""
    html = ""
    for section in sections:
        html += heading(3, section.heading)
        in_list = False
        for line in section.lines:
            if line.kind is AssessmentLineKind.MODULE_LINE:
                if not in_list:
                    html += "<ul>\n"
                    in_list = True
                html += f"<li>{_module_item(line.text)}</li>\n"
                continue
            if in_list:
                html += "</ul>\n"
                in_list = False
            match line.kind:
                case AssessmentLineKind.POINTS_LINE:
                    html += paragraph(f"<strong>{plain_label(line.text)}</strong>")
                case AssessmentLineKind.RUBRIC_LINE:
                    html += paragraph(f"<em>{inline_markup(line.text)}</em>")
                case _:
                    html += paragraph(inline_markup(line.text))
        if in_list:
            html += "</ul>\n"
    return html


def render_assessment_overview(lines: cabc.Iterable[str]) -> str:
    """Classify and render assessment overview lines in one call."""
    return render_assessment_sections(classify_assessment(lines))


__all__ = [
    "AssessmentLine",
    "AssessmentLineKind",
    "AssessmentSection",
    "AssessmentState",
    "classify_assessment",
    "classify_line",
    "render_assessment_overview",
    "render_assessment_sections",
    "step",
]
