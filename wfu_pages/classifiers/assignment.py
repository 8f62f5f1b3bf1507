"""Classify and render assignment page bodies.

Assignment briefs follow the same labelled-section shape as discussions, but
instructors nest sub-steps under tasks and deliverables, so bullets go through
the indentation-aware list builder and keep their nesting.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from wfu_pages.normalizer import AnnotatedLine
from wfu_pages.rendering.fragments import heading, render_blocks

from .models import Section, compile_rule, first_match

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class AssignmentKind(enum.Enum):
    """Labelled sections of an assignment brief."""

    OVERVIEW = "overview"
    PURPOSE = "purpose"
    SKILLS = "skills"
    KNOWLEDGE = "knowledge"
    TASK = "task"
    INSTRUCTIONS = "instructions"
    DELIVERABLES = "deliverables"
    CRITERIA = "criteria"


AssignmentSection = Section[AssignmentKind, AnnotatedLine]

ASSIGNMENT_RULES = (
    compile_rule(r"^Purpose(?!\w)", AssignmentKind.PURPOSE),
    compile_rule(r"^Skills(?!\w)", AssignmentKind.SKILLS),
    compile_rule(r"^Knowledge(?!\w)", AssignmentKind.KNOWLEDGE),
    compile_rule(r"^Tasks?(?!\w)", AssignmentKind.TASK),
    compile_rule(r"^Instructions?(?!\w)", AssignmentKind.INSTRUCTIONS),
    compile_rule(r"^(?:Deliverables?|Submission)(?!\w)", AssignmentKind.DELIVERABLES),
    compile_rule(
        r"^(?:Criteria\s+for\s+Success(?:\s*\(Grading\s+Rubric\))?"
        r"|Grading\s+Rubric)(?!\w)",
        AssignmentKind.CRITERIA,
    ),
)
SECTION_HEADINGS = {
    AssignmentKind.OVERVIEW: "",
    AssignmentKind.PURPOSE: "Purpose",
    AssignmentKind.SKILLS: "Skills",
    AssignmentKind.KNOWLEDGE: "Knowledge",
    AssignmentKind.TASK: "Task",
    AssignmentKind.INSTRUCTIONS: "Instructions",
    AssignmentKind.DELIVERABLES: "Deliverables",
    AssignmentKind.CRITERIA: "Criteria for Success (Grading Rubric)",
}


@dc.dataclass(frozen=True, slots=True)
class AssignmentState:
    """Sections collected so far; the last one receives new lines."""

    sections: tuple[AssignmentSection, ...] = ()

    def open(self, kind: AssignmentKind) -> AssignmentState:
        """Start a new section of ``kind``."""
        opened: AssignmentSection = Section(kind, SECTION_HEADINGS[kind])
        return AssignmentState((*self.sections, opened))

    def add(self, line: AnnotatedLine) -> AssignmentState:
        """Append ``line`` to the open section, opening an overview if needed."""
        state = self if self.sections else self.open(AssignmentKind.OVERVIEW)
        *head, last = state.sections
        return AssignmentState((*head, last.with_line(line)))


def step(state: AssignmentState, line: AnnotatedLine) -> AssignmentState:
    """Advance the assignment classifier by one annotated line."""
    if line.is_blank:
        return state.add(line) if state.sections else state
    if (matched := first_match(ASSIGNMENT_RULES, line.text)) is not None:
        opened = state.open(matched.kind)
        if matched.remainder:
            return opened.add(AnnotatedLine(0, matched.remainder, is_bullet=False))
        return opened
    return state.add(line)


def classify_assignment(
    lines: cabc.Iterable[AnnotatedLine],
) -> list[AssignmentSection]:
    """Split annotated assignment lines into labelled sections in input order."""
    state = AssignmentState()
    for line in lines:
        state = step(state, line)
    return list(state.sections)


def render_section(section: AssignmentSection) -> str:
    """Render one section: heading, paragraphs, and nested bullet lists."""
    html = heading(3, section.heading) if section.heading else ""
    return html + render_blocks(section.lines)


def render_assignment(lines: cabc.Iterable[AnnotatedLine]) -> str:
    """Classify and render assignment lines in one call."""
    return "".join(render_section(section) for section in classify_assignment(lines))


__all__ = [
    "ASSIGNMENT_RULES",
    "AssignmentKind",
    "AssignmentSection",
    "AssignmentState",
    "classify_assignment",
    "render_assignment",
    "render_section",
    "step",
]
