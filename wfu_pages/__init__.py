"""Format pasted course content into Wake Forest SPS page markup.

This package turns instructor-authored text or clipboard HTML into the
institutional page fragments used by the LMS, one document kind at a time.

Exports
-------
- ``format_content``: Render content for a document kind.
- ``preview_content``: Plain-text preview of a rendered page.
- ``app``: Cyclopts application behind the ``wfu-pages`` command.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from wfu_pages import format_content
>>> "WFU-footer" in format_content("", "wfuAssignment")
True
"""

from __future__ import annotations

from .cli import app, main
from .formatter import available_templates, format_content, preview_content

__all__ = [
    "app",
    "available_templates",
    "format_content",
    "main",
    "preview_content",
]
