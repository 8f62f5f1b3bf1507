"""Restrict rendered pages to the markup the LMS page editor accepts.

Sanitizing strips disallowed tags and attributes instead of rejecting the
page, so a pasted ``<script>`` or stray Office attribute never blocks a
render. Inline styles survive only for the listed CSS properties. Video
embeds are admitted as ``iframe`` elements when the caller allows them, and
only with an ``https`` source.

Examples
--------
>>> sanitize_html('<p onclick="x()">Hi<script>alert(1)</script></p>')
'<p>Hialert(1)</p>'
"""

from __future__ import annotations

import bleach
from bleach.css_sanitizer import CSSSanitizer

ALLOWED_TAGS = frozenset(
    {
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "p",
        "br",
        "div",
        "span",
        "strong",
        "b",
        "em",
        "i",
        "u",
        "s",
        "ul",
        "ol",
        "li",
        "a",
        "img",
        "table",
        "thead",
        "tbody",
        "tr",
        "th",
        "td",
        "blockquote",
        "code",
        "pre",
        "footer",
        "hr",
    }
)
EMBED_TAGS = frozenset({"iframe"})
ALLOWED_ATTRIBUTES = frozenset(
    {"href", "src", "alt", "title", "target", "rel", "class", "id", "style"}
)
EMBED_ATTRIBUTES = frozenset(
    {
        "width",
        "height",
        "frameborder",
        "allow",
        "allowfullscreen",
        "referrerpolicy",
        "scrolling",
    }
)
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})
ALLOWED_CSS_PROPERTIES = frozenset(
    {
        "color",
        "background-color",
        "font-weight",
        "font-style",
        "text-align",
        "text-decoration",
        "padding",
        "margin",
        "width",
        "height",
    }
)

CSS_SANITIZER = CSSSanitizer(allowed_css_properties=ALLOWED_CSS_PROPERTIES)


def _allowed_attribute(tag: str, name: str, value: str) -> bool:
    if tag in EMBED_TAGS:
        if name == "src":
            return value.strip().lower().startswith("https://")
        return name in EMBED_ATTRIBUTES or name in ALLOWED_ATTRIBUTES
    return name in ALLOWED_ATTRIBUTES


def sanitize_html(html: str, *, allow_embeds: bool = True) -> str:
    """Strip markup outside the page allow-list.

    Parameters
    ----------
    html : str
        Rendered page or fragment.
    allow_embeds : bool, optional
        Keep ``https`` video ``iframe`` elements. Defaults to ``True``.

    Returns
    -------
    str
        Sanitized HTML. Sanitizing the result again returns it unchanged.
    """
    tags = ALLOWED_TAGS | EMBED_TAGS if allow_embeds else ALLOWED_TAGS
    return bleach.clean(
        html,
        tags=tags,
        attributes=_allowed_attribute,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
        css_sanitizer=CSS_SANITIZER,
    )


__all__ = [
    "ALLOWED_ATTRIBUTES",
    "ALLOWED_TAGS",
    "EMBED_ATTRIBUTES",
    "sanitize_html",
]
