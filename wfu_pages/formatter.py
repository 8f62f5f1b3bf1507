"""Dispatch course content to the page renderer for its document kind.

:func:`format_content` is the single entry point used by the CLI and by
callers embedding the formatter. It accepts plain text or a clipboard HTML
fragment, normalizes it, renders it through the kind's page shell, and
sanitizes the result. Unknown kinds are not an error: they fall back to a
bare markdown conversion without any shell.

Examples
--------
>>> html = format_content("Prompt: Share one risk.", "wfuDiscussion")
>>> "<h3>Response to Classmates:</h3>" in html
True
"""

from __future__ import annotations

import logging
import re
import typing as typ

from wfu_pages.config import FormattingOptions, TemplateContext, build_template_context
from wfu_pages.kinds import TEMPLATE_CATALOGUE, DocumentKind, TemplateInfo
from wfu_pages.normalizer import normalize_text
from wfu_pages.pages import PAGE_RENDERERS
from wfu_pages.rendering.fragments import render_markdown
from wfu_pages.rendering.sanitizer import sanitize_html
from wfu_pages.rendering.shells import ShellRenderer, default_renderer
from wfu_pages.serializer import (
    MARKDOWN,
    MARKUP,
    html_to_plain_text,
    parse_fragment,
    serialize_html,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 500
_WHITESPACE = re.compile(r"\s+")


def _coerce_context(
    context: TemplateContext | cabc.Mapping[str, typ.Any] | None,
) -> TemplateContext:
    match context:
        case None:
            return TemplateContext()
        case TemplateContext():
            return context
        case _:
            return build_template_context(context)


def prepare_text(
    content: str, kind: DocumentKind | None, *, source_is_html: bool
) -> str:
    """Turn raw input into normalized annotated text for ``kind``.

    HTML input is serialized first: assignments keep emphasis as markup tags,
    the course welcome page keeps only its plain text, and every other kind
    receives markdown emphasis markers.
    """
    if source_is_html:
        if kind is DocumentKind.COURSE_WELCOME:
            content = html_to_plain_text(content)
        else:
            markers = MARKUP if kind is DocumentKind.ASSIGNMENT else MARKDOWN
            content = serialize_html(content, markers=markers)
    return normalize_text(content)


def format_content(
    content: str,
    kind: str,
    context: TemplateContext | cabc.Mapping[str, typ.Any] | None = None,
    options: FormattingOptions | None = None,
    *,
    shells: ShellRenderer | None = None,
) -> str:
    """Render ``content`` as a complete page of document ``kind``.

    Parameters
    ----------
    content : str
        Plain text, or an HTML fragment when ``options.source_is_html``.
    kind : str
        Document kind tag such as ``"wfuDiscussion"``.
    context : TemplateContext or Mapping, optional
        Per-document fields; a mapping is read like a context file.
    options : FormattingOptions, optional
        Sanitizing and input switches. Defaults sanitize with embeds allowed.
    shells : ShellRenderer, optional
        Renderer to use instead of the packaged templates.

    Returns
    -------
    str
        The rendered page. Unknown kinds yield bare markdown output.

    Raises
    ------
    ContextConfigError
        If ``context`` is a mapping naming an unknown field.
    """
    options = options or FormattingOptions()
    resolved = _coerce_context(context)
    document_kind = DocumentKind.parse(kind)
    text = prepare_text(content, document_kind, source_is_html=options.source_is_html)

    if document_kind is None:
        logger.warning("Unknown document kind %r; rendering plain markdown", kind)
        html = render_markdown(text)
    else:
        renderer = PAGE_RENDERERS[document_kind]
        html = renderer(text, resolved, shells or default_renderer())

    if options.sanitize:
        html = sanitize_html(html, allow_embeds=options.allow_embeds)
    return html


def preview_content(
    content: str,
    kind: str,
    context: TemplateContext | cabc.Mapping[str, typ.Any] | None = None,
    max_length: int = PREVIEW_LENGTH,
) -> str:
    """Return a plain-text preview of the rendered page.

    The page is rendered and sanitized, reduced to its text with whitespace
    collapsed, and cut to ``max_length`` characters with a trailing ``...``
    when longer.

    Examples
    --------
    >>> preview_content("Hello", "unknown", max_length=3)
    'Hel...'
    """
    options = FormattingOptions(sanitize=True)
    formatted = format_content(content, kind, context, options)
    text = _WHITESPACE.sub(" ", parse_fragment(formatted).get_text()).strip()
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}..."


def available_templates() -> list[TemplateInfo]:
    """List the supported document kinds with their descriptions."""
    return list(TEMPLATE_CATALOGUE)


__all__ = [
    "available_templates",
    "format_content",
    "prepare_text",
    "preview_content",
]
