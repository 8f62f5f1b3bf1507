"""Classify and render discussion page bodies."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from wfu_pages.links import inline_markup
from wfu_pages.normalizer import AnnotatedLine
from wfu_pages.rendering.fragments import heading, paragraph, render_blocks

from .models import Section, compile_rule, first_match

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class DiscussionKind(enum.Enum):
    """Labelled sections of a discussion prompt."""

    PROMPT = "prompt"
    OBJECTIVES = "objectives"
    RESPONSE = "response"
    INSTRUCTIONS = "instructions"
    CRITERIA = "criteria"
    TIP = "tip"


DiscussionSection = Section[DiscussionKind, AnnotatedLine]

DISCUSSION_RULES = (
    compile_rule(r"^(?:Discussion\s+)?Prompt(?!\w)", DiscussionKind.PROMPT),
    compile_rule(
        r"^This\s+discussion\s+aligns\b.*$", DiscussionKind.OBJECTIVES, consume=True
    ),
    compile_rule(r"^(?:Module\s+)?Objectives?(?!\w)", DiscussionKind.OBJECTIVES),
    compile_rule(r"^Response\s+to\s+Classmates?(?!\w)", DiscussionKind.RESPONSE),
    compile_rule(r"^Instructions?(?!\w)", DiscussionKind.INSTRUCTIONS),
    compile_rule(
        r"^(?:Criteria\s+for\s+Success(?:\s*\(Grading\s+Rubric\))?"
        r"|Grading\s+Rubric)(?!\w)",
        DiscussionKind.CRITERIA,
    ),
    compile_rule(r"^TIP(?!\w)", DiscussionKind.TIP),
)
CANONICAL_ORDER = (
    DiscussionKind.PROMPT,
    DiscussionKind.OBJECTIVES,
    DiscussionKind.RESPONSE,
    DiscussionKind.INSTRUCTIONS,
    DiscussionKind.CRITERIA,
    DiscussionKind.TIP,
)
SECTION_HEADINGS = {
    DiscussionKind.PROMPT: "Prompt:",
    DiscussionKind.RESPONSE: "Response to Classmates:",
    DiscussionKind.INSTRUCTIONS: "Instructions:",
    DiscussionKind.CRITERIA: "Criteria for Success (Grading Rubric):",
}
OBJECTIVES_INTRO = "This discussion aligns with the following module objectives:"
PLACEHOLDER_OBJECTIVES = ("Objective 1", "Objective 2")

DEFAULT_BODIES = {
    DiscussionKind.RESPONSE: (
        "<p>Review and respond to at least two of your classmates’ postings. "
        "Your responses need not be long, but they should add substantial "
        "thought to the topic. You may certainly respond to more than two "
        "classmate posts, but you will only be graded on two. Consider spreading "
        "the wealth if you see a post that hasn’t received a response. Respond "
        "by continuing the conversation through quality engagement in any of "
        "the following ways:</p>\n"
        "<ul>\n"
        "<li>Offering a new point of view</li>\n"
        "<li>Asking a question to further the discussion</li>\n"
        "<li>Sharing personal experiences or knowledge</li>\n"
        "<li>Tying the information to new knowledge gained</li>\n"
        "<li>Offering further research or information on the topic</li>\n"
        "</ul>\n"
    ),
    DiscussionKind.INSTRUCTIONS: (
        "<ul>\n"
        "<li>Your initial post and response posts to at least two peers should "
        "be substantive and add value to the conversation.</li>\n"
        "<li>Your initial post (approximately 250 words) is due by "
        "<strong>Wednesday at 11:59 p.m. ET.</strong></li>\n"
        "<li>Response posts are due by <strong>Saturday at 11:59 p.m. ET."
        "</strong></li>\n"
        "</ul>\n"
    ),
    DiscussionKind.CRITERIA: (
        "<ul>\n"
        "<li>Refer to the discussion rubric for additional details. Click the "
        "Options icon (three dots on the top-right of this page) and select the "
        "Show Rubric link.</li>\n"
        "</ul>\n"
    ),
    DiscussionKind.TIP: (
        "<p><strong>TIP:</strong> To avoid inadvertent data loss, first compose "
        "your discussion entries in a Word document (or other word processor). "
        "Then, cut and paste your text into the discussion window and submit "
        "it.</p>\n"
    ),
}


@dc.dataclass(frozen=True, slots=True)
class DiscussionState:
    """Sections collected so far and the kind receiving new lines."""

    sections: tuple[DiscussionSection, ...] = ()
    current: DiscussionKind | None = None

    def append(
        self, kind: DiscussionKind, line: AnnotatedLine | None
    ) -> DiscussionState:
        """Add ``line`` to the section of ``kind``, opening it when absent.

        A label that repeats continues the section it already opened.
        """
        sections = list(self.sections)
        for index, section in enumerate(sections):
            if section.kind is kind:
                if line is not None:
                    sections[index] = section.with_line(line)
                return DiscussionState(tuple(sections), kind)
        opened: DiscussionSection = Section(kind, SECTION_HEADINGS.get(kind, ""))
        if line is not None:
            opened = opened.with_line(line)
        return DiscussionState((*sections, opened), kind)


def step(state: DiscussionState, line: AnnotatedLine) -> DiscussionState:
    """Advance the discussion classifier by one annotated line."""
    if line.is_blank:
        if state.current is None:
            return state
        return state.append(state.current, line)
    if (matched := first_match(DISCUSSION_RULES, line.text)) is not None:
        if not matched.remainder:
            return state.append(matched.kind, None)
        remainder = AnnotatedLine(indent=0, text=matched.remainder, is_bullet=False)
        return state.append(matched.kind, remainder)
    return state.append(state.current or DiscussionKind.PROMPT, line)


def classify_discussion(
    lines: cabc.Iterable[AnnotatedLine],
) -> list[DiscussionSection]:
    """Split annotated discussion lines into labelled sections.

    Unlabelled leading content lands in a synthetic ``PROMPT`` section, and
    text following a label's colon becomes the first line of its section.
    """
    state = DiscussionState()
    for line in lines:
        state = step(state, line)
    return list(state.sections)


def _objectives_block(items: cabc.Iterable[str]) -> str:
    entries = "".join(f"<li>{inline_markup(item)}</li>\n" for item in items)
    return f"{paragraph(OBJECTIVES_INTRO)}<ul>\n{entries}</ul>\n"


def _tip_body(section: DiscussionSection) -> str:
    lines = [line for line in section.lines if not line.is_blank]
    if not lines:
        return DEFAULT_BODIES[DiscussionKind.TIP]
    first, *rest = lines
    html = paragraph(f"<strong>TIP:</strong> {inline_markup(first.text)}")
    return html + render_blocks(rest)


def render_section(section: DiscussionSection) -> str:
    """Render one classified section with its heading."""
    match section.kind:
        case DiscussionKind.OBJECTIVES:
            items = [line.content for line in section.lines if not line.is_blank]
            return _objectives_block(items or PLACEHOLDER_OBJECTIVES)
        case DiscussionKind.TIP:
            return "<hr />\n" + _tip_body(section)
        case kind:
            body = render_blocks(section.lines)
            if not body and kind in DEFAULT_BODIES:
                body = DEFAULT_BODIES[kind]
            return heading(3, SECTION_HEADINGS[kind]) + body


def _default_section(kind: DiscussionKind, objectives: cabc.Sequence[str]) -> str:
    match kind:
        case DiscussionKind.PROMPT:
            return heading(3, SECTION_HEADINGS[kind])
        case DiscussionKind.OBJECTIVES:
            return _objectives_block(objectives or PLACEHOLDER_OBJECTIVES)
        case DiscussionKind.TIP:
            return "<hr />\n" + DEFAULT_BODIES[kind]
        case _:
            return heading(3, SECTION_HEADINGS[kind]) + DEFAULT_BODIES[kind]


def render_discussion(
    lines: cabc.Iterable[AnnotatedLine], *, objectives: cabc.Sequence[str] = ()
) -> str:
    """Render a discussion body.

    Parameters
    ----------
    lines : Iterable[AnnotatedLine]
        Annotated lines, blank lines included as paragraph separators.
    objectives : Sequence[str], optional
        Module objectives used when the text carries no objectives section.

    Returns
    -------
    str
        Sections in input order, with the standard copy for any section the
        instructor left out slotted in before the first later section, or an
        empty string when the text holds no content at all.
    """
    sections = classify_discussion(lines)
    if not sections:
        return ""
    missing = [
        kind
        for kind in CANONICAL_ORDER
        if kind not in {section.kind for section in sections}
    ]
    html = ""
    for section in sections:
        rank = CANONICAL_ORDER.index(section.kind)
        while missing and CANONICAL_ORDER.index(missing[0]) < rank:
            html += _default_section(missing.pop(0), objectives)
        html += render_section(section)
    for kind in missing:
        html += _default_section(kind, objectives)
    return html


__all__ = [
    "DEFAULT_BODIES",
    "DISCUSSION_RULES",
    "DiscussionKind",
    "DiscussionSection",
    "DiscussionState",
    "classify_discussion",
    "render_discussion",
    "render_section",
    "step",
]
