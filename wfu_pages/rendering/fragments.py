"""Small HTML fragments shared by the body renderers."""

from __future__ import annotations

import typing as typ

from markdown import Markdown

from wfu_pages._constants import VIDEO_PLACEHOLDER
from wfu_pages.links import inline_markup
from wfu_pages.lists import ListState

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from wfu_pages.normalizer import AnnotatedLine


def paragraph(content: str) -> str:
    """Wrap already-converted inline content in a paragraph."""
    return f"<p>{content}</p>\n"


def heading(level: int, content: str) -> str:
    """Render an ``h{level}`` heading line."""
    return f"<h{level}>{content}</h{level}>\n"


def lecture_media(inner: str = VIDEO_PLACEHOLDER) -> str:
    """Render the lecture-media block that hosts a video player.

    The ``HERE`` placeholder marks where course staff paste an embed that
    could not be generated automatically.
    """
    return (
        '<div class="WFU-Container-LectureMedia">\n'
        '<div class="VideoPlayer">\n'
        f"<p>{inner}</p>\n"
        "</div>\n"
        "</div>\n"
    )


def render_blocks(lines: cabc.Iterable[AnnotatedLine]) -> str:
    """Render annotated lines as paragraphs and indentation-aware lists.

    Bullets accumulate into nested lists; a plain line or a blank line closes
    every open list before it.
    """
    html = ""
    lists = ListState()
    for line in lines:
        if line.is_bullet:
            lists, markup = lists.advance(line.indent)
            html += f"{markup}<li>{inline_markup(line.content)}</li>\n"
            continue
        lists, markup = lists.close()
        html += markup
        if not line.is_blank:
            html += paragraph(inline_markup(line.text))
    _, markup = lists.close()
    return html + markup


def render_markdown(text: str) -> str:
    """Convert light markdown to HTML, keeping single line breaks.

    Returns an empty string for blank input so empty bodies stay empty.
    """
    if not text.strip():
        return ""
    md = Markdown(extensions=["nl2br", "sane_lists"])
    return md.convert(text)
