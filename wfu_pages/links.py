"""Recognize bare URLs and embeddable video links in annotated text.

All helpers are pure functions over strings. The learning-materials renderer
consults :func:`youtube_match` and :func:`ted_match` for its videos mode and
every renderer runs plain paragraphs through :func:`autolink`.
"""

from __future__ import annotations

import dataclasses as dc
import re
from html import escape
from urllib.parse import parse_qs, quote, urlsplit

URL_PATTERN = re.compile(r"https?://[^\s)<]+", re.IGNORECASE)
BARE_URL_PATTERN = re.compile(r"^https?://\S+$", re.IGNORECASE)
YOUTUBE_PATTERN = re.compile(
    r"https?://(?:www\.)?(?:youtube\.com/watch\?v=|youtu\.be/)([A-Za-z0-9_-]{11})\S*",
    re.IGNORECASE,
)
TED_PATTERN = re.compile(
    r"https?://(?:www\.)?ted\.com/talks/([^?\s#]+)\S*", re.IGNORECASE
)
_ANCHOR_SPAN = re.compile(r"<a\b[^>]*>.*?</a>", re.IGNORECASE | re.DOTALL)
_BOLD_ITALIC = re.compile(r"\*\*\*(.+?)\*\*\*|(?<!\w)___(.+?)___(?!\w)")
_BOLD = re.compile(r"\*\*(.+?)\*\*|(?<!\w)__(.+?)__(?!\w)")
_ITALIC = re.compile(r"(?<![\w*])\*(?!\s)(.+?)(?<!\s)\*(?![\w*])")

YOUTUBE_ALLOW = (
    "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; "
    "picture-in-picture; web-share"
)


@dc.dataclass(frozen=True, slots=True)
class VideoMatch:
    """Location and identity of an embeddable video URL within a line."""

    provider: str
    video_id: str
    url: str
    start: int
    si: str | None = None


def is_bare_url(text: str) -> bool:
    """Return whether ``text`` is nothing but a single ``http(s)`` URL."""
    return bool(BARE_URL_PATTERN.match(text.strip()))


def anchor(url: str, label: str | None = None) -> str:
    """Render an external link that opens in a new tab."""
    href = escape(url, quote=True)
    text = label or escape(url, quote=False)
    return f'<a href="{href}" target="_blank" rel="noopener">{text}</a>'


def autolink(text: str) -> str:
    """Wrap each bare URL in ``text`` in an anchor, leaving existing anchors intact.

    Examples
    --------
    >>> autolink("See https://a.io")
    'See <a href="https://a.io" target="_blank" rel="noopener">https://a.io</a>'
    """
    pieces: list[str] = []
    cursor = 0
    for existing in _ANCHOR_SPAN.finditer(text):
        pieces.append(_link_urls(text[cursor : existing.start()]))
        pieces.append(existing.group(0))
        cursor = existing.end()
    pieces.append(_link_urls(text[cursor:]))
    return "".join(pieces)


def _link_urls(segment: str) -> str:
    return URL_PATTERN.sub(lambda match: anchor(match.group(0)), segment)


def youtube_match(text: str) -> VideoMatch | None:
    """Return the first YouTube ``watch?v=`` or ``youtu.be`` link in ``text``.

    The eleven-character video id is captured along with the ``si`` share
    parameter when the URL carries one.
    """
    match = YOUTUBE_PATTERN.search(text)
    if match is None:
        return None
    url = match.group(0)
    si_values = parse_qs(urlsplit(url).query).get("si")
    return VideoMatch(
        provider="youtube",
        video_id=match.group(1),
        url=url,
        start=match.start(),
        si=si_values[0] if si_values else None,
    )


def ted_match(text: str) -> VideoMatch | None:
    """Return the first TED talk link in ``text`` with its slug."""
    match = TED_PATTERN.search(text)
    if match is None:
        return None
    return VideoMatch(
        provider="ted",
        video_id=match.group(1),
        url=match.group(0),
        start=match.start(),
    )


def video_match(text: str) -> VideoMatch | None:
    """Return the first embeddable video link in ``text``, YouTube first."""
    return youtube_match(text) or ted_match(text)


def youtube_embed(video: VideoMatch) -> str:
    """Render the standard YouTube player iframe for ``video``."""
    query = f"?si={quote(video.si, safe='')}" if video.si else ""
    return (
        '<iframe width="560" height="315" '
        f'src="https://www.youtube.com/embed/{video.video_id}{query}" '
        'title="YouTube video player" frameborder="0" '
        f'allow="{YOUTUBE_ALLOW}" '
        'referrerpolicy="strict-origin-when-cross-origin" allowfullscreen></iframe>'
    )


def ted_embed(video: VideoMatch) -> str:
    """Render the TED embed iframe for ``video``."""
    return (
        '<iframe width="560" height="315" '
        f'src="https://embed.ted.com/talks/{video.video_id}" '
        'title="TED Talk" frameborder="0" scrolling="no" allowfullscreen></iframe>'
    )


def embed(video: VideoMatch) -> str:
    """Render the provider-specific iframe for ``video``."""
    if video.provider == "youtube":
        return youtube_embed(video)
    return ted_embed(video)


def inline_markup(text: str) -> str:
    """Convert light markdown emphasis to markup and autolink bare URLs.

    Examples
    --------
    >>> inline_markup("**Due** by *Friday*")
    '<strong>Due</strong> by <em>Friday</em>'
    >>> inline_markup("***Key*** term")
    '<strong><em>Key</em></strong> term'
    """
    converted = _BOLD_ITALIC.sub(
        lambda match: (
            f"<strong><em>{match.group(1) or match.group(2)}</em></strong>"
        ),
        text,
    )
    converted = _BOLD.sub(
        lambda match: f"<strong>{match.group(1) or match.group(2)}</strong>",
        converted,
    )
    converted = _ITALIC.sub(r"<em>\1</em>", converted)
    return autolink(converted)


__all__ = [
    "VideoMatch",
    "anchor",
    "autolink",
    "embed",
    "inline_markup",
    "is_bare_url",
    "ted_embed",
    "ted_match",
    "video_match",
    "youtube_embed",
    "youtube_match",
]
