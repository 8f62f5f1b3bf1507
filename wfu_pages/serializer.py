"""Serialize pasted clipboard HTML into annotated plain text.

Word processors and browsers place rich text on the clipboard as an HTML
fragment. The course forms never keep that markup: they walk the element tree
once and emit a canonical plain-text form in which emphasis survives as inline
markers, anchors survive as ``label url`` pairs, and list nesting survives as
two-space indentation in front of ``- `` bullets. Every downstream classifier
reads that text, so the walk lives here once and the marker syntax is a
strategy parameter rather than a per-form copy.

Examples
--------
>>> from wfu_pages.serializer import MARKUP, serialize_html
>>> serialize_html("<p><b>Due</b> Friday</p>")
'**Due** Friday'
>>> serialize_html("<p><b>Due</b> Friday</p>", markers=MARKUP)
'<strong>Due</strong> Friday'
"""

from __future__ import annotations

import dataclasses as dc
import functools
import re
import typing as typ

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from bs4.element import Declaration, Doctype, ProcessingInstruction

if typ.TYPE_CHECKING:
    from bs4 import PageElement

BLOCK_TAGS = frozenset(
    {"p", "div", "li", "ul", "ol", "tr", "blockquote"}
    | {f"h{level}" for level in range(1, 7)}
)
BOLD_TAGS = frozenset({"strong", "b"})
ITALIC_TAGS = frozenset({"em", "i"})
LIST_TAGS = frozenset({"ul", "ol"})
OFFICE_DROP_TAGS = ("style", "script", "meta", "link", "title", "xml")
NON_BOLD_WEIGHTS = frozenset({"normal", "400"})
SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)

_MANY_NEWLINES = re.compile(r"\n{3,}")
_MANY_SPACES = re.compile(r" {3,}")
_LEADING_SPACE = re.compile(r"^(\s*)(.*)$")


@dc.dataclass(frozen=True, slots=True)
class StyleMarkers:
    """Inline marker syntax used to carry emphasis through plain text."""

    name: str
    bold_open: str
    bold_close: str
    italic_open: str
    italic_close: str

    def unbold_heading(self, line: str) -> str:
        """Strip bold markers from a whole-line ``Label:`` heading.

        Only lines consisting entirely of a bold label followed by a colon, or
        the doubled-marker artifact some editors paste (``****Label**:rest``),
        are rewritten. Inline emphasis elsewhere is left alone.
        """
        stripped = line.strip()
        heading, doubled = _unbold_patterns(self)
        if match := heading.match(stripped):
            return f"{match.group(1)}:"
        if match := doubled.match(stripped):
            return f"{match.group(1)}:{match.group(2)}"
        return line


MARKDOWN = StyleMarkers("markdown", "**", "**", "*", "*")
MARKUP = StyleMarkers("markup", "<strong>", "</strong>", "<em>", "</em>")


@functools.cache
def _unbold_patterns(
    markers: StyleMarkers,
) -> tuple[re.Pattern[str], re.Pattern[str]]:
    bold_open = re.escape(markers.bold_open)
    bold_close = re.escape(markers.bold_close)
    forbidden = re.escape(markers.bold_close[0])
    heading = re.compile(rf"^{bold_open}([^{forbidden}]+){bold_close}:\s*$")
    doubled = re.compile(
        rf"^{bold_open}{bold_open}([^{forbidden}]+){bold_close}:(.*)$"
    )
    return heading, doubled


def _inline_style(tag: Tag) -> dict[str, str]:
    """Parse a ``style`` attribute into lower-cased property/value pairs."""
    declarations: dict[str, str] = {}
    raw = tag.get("style")
    if not isinstance(raw, str):
        return declarations
    for declaration in raw.split(";"):
        prop, sep, value = declaration.partition(":")
        if sep:
            declarations[prop.strip().lower()] = value.strip().lower()
    return declarations


def _is_bold(tag: Tag) -> bool:
    if tag.name in BOLD_TAGS:
        return True
    weight = _inline_style(tag).get("font-weight", "")
    return bool(weight) and weight not in NON_BOLD_WEIGHTS


def _is_italic(tag: Tag) -> bool:
    if tag.name in ITALIC_TAGS:
        return True
    return _inline_style(tag).get("font-style") == "italic"


def _wrap_lines(inner: str, opener: str, closer: str) -> str:
    """Wrap each non-blank line of ``inner`` in a marker pair.

    Edge whitespace and list bullets stay outside the markers so a wrapped
    line still reads as the same indented bullet and markers never span a
    line break.
    """
    if not inner.strip():
        return inner
    wrapped: list[str] = []
    for line in inner.split("\n"):
        core = line.strip()
        if not core:
            wrapped.append(line)
            continue
        lead = line[: len(line) - len(line.lstrip())]
        trail = line[len(line.rstrip()) :]
        bullet = "- " if core.startswith("- ") else ""
        body = core[len(bullet) :].strip()
        if not body:
            wrapped.append(line)
            continue
        wrapped.append(f"{lead}{bullet}{opener}{body}{closer}{trail}")
    return "\n".join(wrapped)


class ElementTreeSerializer:
    """Walk a parsed element tree and emit annotated plain text."""

    def __init__(self, markers: StyleMarkers = MARKDOWN) -> None:
        self.markers = markers

    def serialize(self, root: Tag) -> str:
        """Serialize ``root`` and apply the whitespace post-processing pass."""
        return self._post_process(self._children(root, 0))

    def _node(self, node: PageElement, depth: int) -> str:
        if isinstance(node, SKIPPED_STRINGS):
            return ""
        if isinstance(node, NavigableString):
            return str(node)
        if not isinstance(node, Tag):
            return ""
        return self._element(node, depth)

    def _children(self, tag: Tag, depth: int) -> str:
        return "".join(self._node(child, depth) for child in tag.children)

    def _element(self, tag: Tag, depth: int) -> str:  # noqa: PLR0911
        name = tag.name
        if name == "br":
            return "\n"
        if _is_bold(tag):
            inner = self._children(tag, depth)
            return _wrap_lines(inner, self.markers.bold_open, self.markers.bold_close)
        if _is_italic(tag):
            inner = self._children(tag, depth)
            return _wrap_lines(
                inner, self.markers.italic_open, self.markers.italic_close
            )
        if name == "a":
            return self._anchor(tag)
        if name in LIST_TAGS:
            items = self._children(tag, depth + 1)
            return f"\n{items}" if items.strip() else ""
        if name == "li":
            return self._list_item(tag, depth)
        if name in BLOCK_TAGS:
            content = self._children(tag, depth).strip()
            return f"{content}\n" if content else ""
        return self._children(tag, depth)

    @staticmethod
    def _anchor(tag: Tag) -> str:
        label = tag.get_text().strip()
        href = tag.get("href")
        href = href.strip() if isinstance(href, str) else ""
        if not href:
            return label
        if not label or label == href:
            return href
        return f"{label} {href}"

    def _list_item(self, tag: Tag, depth: int) -> str:
        indent = "  " * max(0, depth - 1)
        text = self._children(tag, depth)
        main_text: list[str] = []
        nested: list[str] = []
        for line in text.split("\n"):
            trimmed = line.strip()
            if not trimmed:
                continue
            if trimmed.startswith("-"):
                nested.append(line.rstrip())
            else:
                main_text.append(trimmed)
        if not main_text and not nested:
            return ""
        result = f"{indent}- {' '.join(main_text)}\n"
        if nested:
            result += "\n".join(nested) + "\n"
        return result

    def _post_process(self, text: str) -> str:
        text = text.replace("\r", "").replace("\u00a0", " ")
        text = _MANY_NEWLINES.sub("\n\n", text)
        lines: list[str] = []
        for line in text.split("\n"):
            match = _LEADING_SPACE.match(line)
            lead, rest = (match.group(1), match.group(2)) if match else ("", line)
            line = lead + _MANY_SPACES.sub(" ", rest)
            lines.append(self.markers.unbold_heading(line))
        return "\n".join(lines).strip()


def clean_office_html(soup: BeautifulSoup) -> BeautifulSoup:
    """Remove word-processor clipboard noise from ``soup`` in place.

    Conditional comments, embedded stylesheets, and metadata elements are
    dropped; namespaced wrappers such as ``<o:p>`` and legacy ``<font>`` tags
    are unwrapped so their text survives; spans left without content are
    removed.
    """
    for comment in soup.find_all(string=lambda value: isinstance(value, Comment)):
        comment.extract()
    for tag in soup.find_all(OFFICE_DROP_TAGS):
        tag.decompose()
    for tag in soup.find_all(lambda candidate: ":" in (candidate.name or "")):
        tag.unwrap()
    for tag in soup.find_all("font"):
        tag.unwrap()
    for tag in soup.find_all("span"):
        if not tag.get_text() and not tag.find(True):
            tag.decompose()
    return soup


def parse_fragment(html: str) -> BeautifulSoup:
    """Parse a clipboard fragment and strip office noise from it."""
    return clean_office_html(BeautifulSoup(html, "html.parser"))


def serialize_html(html: str, *, markers: StyleMarkers = MARKDOWN) -> str:
    """Serialize a clipboard HTML fragment into annotated plain text.

    Parameters
    ----------
    html : str
        Raw ``text/html`` clipboard payload.
    markers : StyleMarkers, optional
        Emphasis syntax to emit; :data:`MARKDOWN` (default) writes ``**bold**``
        and ``*italic*``, :data:`MARKUP` writes ``<strong>``/``<em>`` tags.

    Returns
    -------
    str
        Annotated text with nested list items indented two spaces per level.
    """
    return ElementTreeSerializer(markers).serialize(parse_fragment(html))


def html_to_plain_text(html: str) -> str:
    """Return the text content of ``html`` with any stray angle brackets removed."""
    text = BeautifulSoup(html, "html.parser").get_text()
    return text.replace("<", "").replace(">", "")


__all__ = [
    "MARKDOWN",
    "MARKUP",
    "ElementTreeSerializer",
    "StyleMarkers",
    "clean_office_html",
    "html_to_plain_text",
    "parse_fragment",
    "serialize_html",
]
