"""HTML fragments, page shells, and sanitizing for rendered pages."""

from __future__ import annotations

from .fragments import (
    heading,
    lecture_media,
    paragraph,
    render_blocks,
    render_markdown,
)
from .sanitizer import sanitize_html
from .shells import ShellRenderer, default_renderer

__all__ = [
    "ShellRenderer",
    "default_renderer",
    "heading",
    "lecture_media",
    "paragraph",
    "render_blocks",
    "render_markdown",
    "sanitize_html",
]
