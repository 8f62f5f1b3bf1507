"""Classify and render the module "Learning Materials" page body.

The page has two heading tiers. ``Required Resources`` and ``Optional
Resources`` become ``<h3>`` headings; resource-type labels such as
``Readings`` or ``Videos`` (or any plain line ending in a colon) become
``<h4>`` headings and choose how the lines beneath them are rendered:

* ``videos``: each entry becomes a title, an optional context paragraph, and
  a lecture-media block holding a YouTube or TED embed (or the ``HERE``
  placeholder when the link cannot be embedded);
* ``readings``, ``textbook`` and ``generic``: bullets become an
  indentation-aware nested list with citation links resolved, while other
  lines become paragraphs.

Classification and rendering are separate passes so each can be exercised
line by line.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import re
import typing as typ

from wfu_pages.links import (
    anchor,
    embed,
    inline_markup,
    is_bare_url,
    video_match,
)
from wfu_pages.lists import ListState
from wfu_pages.normalizer import AnnotatedLine
from wfu_pages.rendering.fragments import heading, lecture_media, paragraph

from .models import Rule, Section, compile_rule, first_match, plain_label

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class MaterialsKind(enum.Enum):
    """Section kinds on the learning materials page."""

    PREAMBLE = "preamble"
    REQUIRED_RESOURCES = "required_resources"
    OPTIONAL_RESOURCES = "optional_resources"
    READINGS = "readings"
    VIDEOS = "videos"
    TEXTBOOK = "textbook"
    GENERIC = "generic"


MaterialsSection = Section[MaterialsKind, AnnotatedLine]

RESOURCE_TIER = frozenset(
    {MaterialsKind.REQUIRED_RESOURCES, MaterialsKind.OPTIONAL_RESOURCES}
)


def _heading_rule(name: str, kind: MaterialsKind) -> Rule[MaterialsKind]:
    return compile_rule(rf"^[^\w]*{name}[^\w]*:?\s*$", kind)


H3_RULES = (
    _heading_rule(r"Required\s+Resources", MaterialsKind.REQUIRED_RESOURCES),
    _heading_rule(r"Optional\s+Resources", MaterialsKind.OPTIONAL_RESOURCES),
)
H4_RULES = (
    _heading_rule(r"Reading(?:s)?", MaterialsKind.READINGS),
    _heading_rule(r"Video(?:s)?", MaterialsKind.VIDEOS),
    _heading_rule(r"Articles", MaterialsKind.GENERIC),
    _heading_rule(r"Podcasts", MaterialsKind.GENERIC),
    _heading_rule(r"Tools", MaterialsKind.GENERIC),
    _heading_rule(r"Websites", MaterialsKind.GENERIC),
    _heading_rule(r"Case\s+Studies", MaterialsKind.GENERIC),
    _heading_rule(r"Textbook\s+Readings", MaterialsKind.TEXTBOOK),
    _heading_rule(r"Experimenting\s+with\s+an\s+LLM", MaterialsKind.GENERIC),
)
# Content mode follows the heading's leading word, so "Video Lectures:" is
# rendered as videos even though only "Videos" is a known heading.
MODE_RULES = (
    compile_rule(r"^Video", MaterialsKind.VIDEOS),
    compile_rule(r"^Textbook\s+Readings", MaterialsKind.TEXTBOOK),
    compile_rule(r"^Reading", MaterialsKind.READINGS),
)

EXERCISE_LINE = re.compile(
    r"^\s*(?:\*\*|__)*\s*Exercise\s*(?:\*\*|__)*:", re.IGNORECASE
)
RULE_LINE = re.compile(r"^[*_]+$")
GENERIC_HEADING = re.compile(r".+:\s*$")
HAS_URL = re.compile(r"https?://", re.IGNORECASE)
_HEADING_LEAD = re.compile(r"^[\s*_#\-•●]+")
_HEADING_TRAIL = re.compile(r"[\s*_:\-–—]+$")
_BULLET = re.compile(r"^(?:[-•●▪◦]\s*|\*\s+|\d+[.)]\s+)")

MARKDOWN_LINK = re.compile(r"\[([^\]]+)\]\((https?://[^)\s]+)\)")
PASTED_LINK = re.compile(r"\[([^\]]+)\]\([^()]*?\s(https?://[^)\s]+)\)")
TITLE_URL = re.compile(r"^(.*?)\s+(https?://\S+)\s*$")
TITLE_URL_DESCRIPTION = re.compile(r"^(.*?)\s+(https?://\S+?):(?:\s+(.*))?$")
_EXERCISE_LABEL = re.compile(
    r"^<strong>\s*Exercise\s*:?\s*</strong>:?", re.IGNORECASE
)


def clean_heading(text: str) -> str:
    """Strip decoration around a heading while keeping inner punctuation."""
    return _HEADING_TRAIL.sub("", _HEADING_LEAD.sub("", text))


def is_exercise(line: AnnotatedLine) -> bool:
    """Return whether ``line`` is an ``Exercise:`` marker."""
    return bool(EXERCISE_LINE.match(line.text))


def is_bullet_line(line: AnnotatedLine) -> bool:
    """Return whether ``line`` is a list entry in the list modes."""
    return line.is_bullet or is_exercise(line)


def heading_kind(line: AnnotatedLine) -> tuple[int, MaterialsKind] | None:
    """Return the heading level and section kind ``line`` opens, if any."""
    if matched := first_match(H3_RULES, line.text):
        return 3, matched.kind
    known = first_match(H4_RULES, line.text) is not None
    generic = (
        not is_bullet_line(line)
        and not HAS_URL.search(line.text)
        and bool(GENERIC_HEADING.match(plain_label(line.text)))
    )
    if not (known or generic):
        return None
    mode = first_match(MODE_RULES, line.text)
    return 4, mode.kind if mode else MaterialsKind.GENERIC


def classify_learning_materials(
    lines: cabc.Iterable[AnnotatedLine],
) -> list[MaterialsSection]:
    """Group annotated lines into headed sections.

    Parameters
    ----------
    lines : Iterable[AnnotatedLine]
        Non-blank annotated lines in input order.

    Returns
    -------
    list[MaterialsSection]
        Sections in input order. Content before the first heading is kept in
        a ``PREAMBLE`` section.
    """
    sections: list[MaterialsSection] = []
    current: MaterialsSection | None = None
    for line in lines:
        if line.is_blank or RULE_LINE.match(line.text):
            continue
        if (opened := heading_kind(line)) is not None:
            if current is not None:
                sections.append(current)
            current = Section(opened[1], clean_heading(plain_label(line.text)))
            continue
        if current is None:
            current = Section(MaterialsKind.PREAMBLE, "")
        current = current.with_line(line)
    if current is not None:
        sections.append(current)
    return sections


# -- list modes -------------------------------------------------------------


def _strip_bullet(text: str) -> str:
    return _BULLET.sub("", text, count=1)


def _trim_url(url: str) -> str:
    return url.rstrip(":")


def resolve_citation(text: str, *, exercise: bool = False) -> str:
    """Convert one reading entry into inline markup with its link resolved.

    Link shapes are tried in order: ``[Title](url)``, the pasted artifact
    ``[Title](label url)``, a trailing ``Title URL``, and ``Title URL:
    Description``. Anything else has its bare URLs linked in place.
    ``Exercise:`` entries skip the two title shapes.
    """
    if MARKDOWN_LINK.search(text) or PASTED_LINK.search(text):
        linked = MARKDOWN_LINK.sub(
            lambda match: anchor(match.group(2), inline_markup(match.group(1))), text
        )
        linked = PASTED_LINK.sub(
            lambda match: anchor(match.group(2), inline_markup(match.group(1))), linked
        )
        return inline_markup(linked)
    if not exercise:
        if match := TITLE_URL.match(text):
            title, url = match.groups()
            return anchor(_trim_url(url), inline_markup(title.strip()) or None)
        if match := TITLE_URL_DESCRIPTION.match(text):
            title, url, description = match.groups()
            linked = anchor(url, inline_markup(title.strip()) or None)
            return f"{linked}: {inline_markup(description)}" if description else linked
    content = inline_markup(text)
    if exercise:
        content = _EXERCISE_LABEL.sub("<strong>Exercise:</strong>", content)
    return content


def is_citation(text: str) -> bool:
    """Return whether an unbulleted line reads as a single titled link."""
    if MARKDOWN_LINK.fullmatch(text.strip()):
        return True
    for pattern in (TITLE_URL, TITLE_URL_DESCRIPTION):
        match = pattern.match(text)
        if match and match.group(1).strip() and not HAS_URL.search(match.group(1)):
            return True
    return False


@dc.dataclass(frozen=True, slots=True)
class ListModeState:
    """Accumulator for readings, textbook, and generic sections."""

    html: str = ""
    lists: ListState = ListState()

    def close(self) -> ListModeState:
        """Close every open list level."""
        lists, markup = self.lists.close()
        return ListModeState(self.html + markup, lists)


def list_mode_step(state: ListModeState, line: AnnotatedLine) -> ListModeState:
    """Render one line of a readings, textbook, or generic section."""
    exercise = is_exercise(line)
    if not (line.is_bullet or exercise or is_citation(line.text)):
        closed = state.close()
        html = closed.html + paragraph(inline_markup(line.text))
        return ListModeState(html, closed.lists)
    lists, markup = state.lists.advance(line.indent, pinned=exercise)
    text = _strip_bullet(line.text) if line.is_bullet else line.text
    item = f"<li>{resolve_citation(text, exercise=exercise)}</li>\n"
    return ListModeState(state.html + markup + item, lists)


def render_list_mode(lines: cabc.Iterable[AnnotatedLine]) -> str:
    """Render a list-mode section body."""
    state = ListModeState()
    for line in lines:
        state = list_mode_step(state, line)
    return state.close().html


# -- videos mode ------------------------------------------------------------


@dc.dataclass(frozen=True, slots=True)
class VideoState:
    """Accumulator for a videos section.

    A title line without a URL waits in ``pending_title``; the next plain line
    becomes its context. Both are flushed with a placeholder media block when
    another title, a URL line, or the end of the section arrives.
    """

    html: str = ""
    pending_title: str | None = None
    pending_context: str | None = None
    skip_next: bool = False

    def flush(self) -> VideoState:
        """Emit any pending title and context with a placeholder block."""
        if self.pending_title is None:
            return VideoState(self.html)
        html = self.html + paragraph(self.pending_title)
        if self.pending_context:
            html += paragraph(self.pending_context)
        return VideoState(html + lecture_media())


def _is_context_line(line: AnnotatedLine | None) -> bool:
    return (
        line is not None
        and line.indent > 0
        and line.text.startswith("-")
        and video_match(line.text) is None
    )


def _video_title(text: str) -> str:
    return _HEADING_TRAIL.sub("", _strip_bullet(text)).strip()


def video_step(
    state: VideoState, line: AnnotatedLine, following: AnnotatedLine | None
) -> VideoState:
    """Render one line of a videos section.

    ``following`` is the next line of the section; an indented sub-bullet
    there is consumed as the context paragraph of an embeddable video.
    """
    if state.skip_next:
        return dc.replace(state, skip_next=False)

    if (video := video_match(line.text)) is not None:
        flushed = state.flush()
        html = flushed.html
        title = _video_title(line.text[: video.start])
        if title:
            html += paragraph(inline_markup(title))
        consumed = _is_context_line(following)
        if consumed and following is not None:
            html += paragraph(inline_markup(_strip_bullet(following.text)))
        return VideoState(html + lecture_media(embed(video)), skip_next=consumed)

    text = _strip_bullet(line.text)
    simple = TITLE_URL.match(text)
    if is_bare_url(text) or simple:
        flushed = state.flush()
        if simple:
            label, url = simple.group(1).strip(), simple.group(2)
        else:
            label, url = text, text
        link = anchor(url, inline_markup(label) or None)
        return VideoState(flushed.html + paragraph(link) + lecture_media())

    if state.pending_title is not None and state.pending_context is None:
        return dc.replace(state, pending_context=inline_markup(text))
    flushed = state.flush()
    return VideoState(flushed.html, pending_title=inline_markup(text))


def render_videos(lines: cabc.Sequence[AnnotatedLine]) -> str:
    """Render a videos section body."""
    state = VideoState()
    for index, line in enumerate(lines):
        following = lines[index + 1] if index + 1 < len(lines) else None
        state = video_step(state, line, following)
    return state.flush().html


# -- page body --------------------------------------------------------------


def render_section(section: MaterialsSection) -> str:
    """Render one classified section with its heading."""
    html = ""
    if section.kind in RESOURCE_TIER:
        html += heading(3, section.heading)
    elif section.kind is not MaterialsKind.PREAMBLE:
        html += heading(4, section.heading)

    if section.kind is MaterialsKind.VIDEOS:
        return html + render_videos(section.lines)
    return html + render_list_mode(section.lines)


def render_learning_materials(lines: cabc.Iterable[AnnotatedLine]) -> str:
    """Classify and render learning materials lines in one call."""
    return "".join(
        render_section(section) for section in classify_learning_materials(lines)
    )


__all__ = [
    "MaterialsKind",
    "MaterialsSection",
    "classify_learning_materials",
    "clean_heading",
    "heading_kind",
    "is_citation",
    "list_mode_step",
    "render_learning_materials",
    "render_list_mode",
    "render_section",
    "render_videos",
    "resolve_citation",
    "video_step",
]
