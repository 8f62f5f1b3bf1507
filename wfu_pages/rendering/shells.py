"""Wrap rendered bodies in the institutional page shells.

Every page shares one layout: a hero banner, a header naming the course and
page, the body, and the copyright footer. ``base.jinja`` carries that layout
and each document kind extends it with its own fixed copy. Bodies arrive
pre-rendered, so templates mark them ``safe`` while context strings such as
the course name stay autoescaped.

Examples
--------
>>> from wfu_pages.config import TemplateContext
>>> renderer = ShellRenderer()
>>> html = renderer.render(
...     "assignment.jinja",
...     context=TemplateContext(course_name="CYB 710"),
...     hero=module_hero("3"),
...     subheader="Assignment 3.1",
...     body="<p>Write a policy brief.</p>",
... )
>>> "WFU-SubpageHeroModule3" in html
True
"""

from __future__ import annotations

import functools
import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from wfu_pages._constants import (
    COURSE_HERO_SUFFIX,
    COURSE_NAME_PLACEHOLDER,
    DEFAULT_MODULE_NUMBER,
    FOOTER_TEXT,
)

if typ.TYPE_CHECKING:
    from wfu_pages.config import TemplateContext

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
OVERVIEW_NUMBER = re.compile(r"^(\d+)\.0")
SUBPAGE_NUMBER = re.compile(r"^(\d+)\.\d+")


def module_number_from_title(title: str | None, pattern: re.Pattern[str]) -> str:
    """Return the module number leading ``title`` or the default module.

    Parameters
    ----------
    title : str, optional
        Page title such as ``"3.0 Overview"`` or ``"3.2 Learning Materials"``.
    pattern : re.Pattern[str]
        Pattern whose first group captures the module number.

    Returns
    -------
    str
        The captured number, or ``"1"`` when the title is missing or does not
        start with a recognizable number.
    """
    if title and (match := pattern.match(title.strip())):
        return match.group(1)
    return DEFAULT_MODULE_NUMBER


def module_hero(number: str) -> str:
    """Return the hero class suffix for module ``number``."""
    return f"Module{number}"


def context_hero(context: TemplateContext) -> str:
    """Select the banner for pages that belong to a module when one is known.

    The explicit ``module_number`` wins, then a ``3.2``-style title prefix;
    pages with neither use the course-level banner.
    """
    if context.module_number:
        return module_hero(context.module_number)
    if context.title and (match := SUBPAGE_NUMBER.match(context.title.strip())):
        return module_hero(match.group(1))
    return COURSE_HERO_SUFFIX


class ShellRenderer:
    """Render page bodies into the per-kind Jinja shells."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing the shell templates. Defaults to the
            ``wfu_pages/templates`` directory shipped with the package.
        """
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(
        self,
        template_name: str,
        *,
        context: TemplateContext,
        hero: str,
        subheader: str,
        body: str = "",
        **fields: object,
    ) -> str:
        """Render one page shell.

        Parameters
        ----------
        template_name : str
            File name of the per-kind template, e.g. ``"discussion.jinja"``.
        context : TemplateContext
            Supplies the course name shown in the header, falling back to the
            course code.
        hero : str
            Suffix appended to ``WFU-SubpageHero`` in the banner.
        subheader : str
            Page heading rendered beneath the course name.
        body : str, optional
            Pre-rendered HTML placed in the body region.
        **fields : object
            Extra values consumed by the per-kind template.

        Returns
        -------
        str
            The complete page fragment, footer included.
        """
        template = self.env.get_template(template_name)
        html = template.render(
            course_name=(
                context.course_name or context.course_code or COURSE_NAME_PLACEHOLDER
            ),
            hero=hero,
            subheader=subheader,
            body=body,
            footer=FOOTER_TEXT,
            **fields,
        )
        if not html.endswith("\n"):
            html += "\n"
        return html


@functools.cache
def default_renderer() -> ShellRenderer:
    """Return the shared renderer bound to the packaged templates."""
    return ShellRenderer()


__all__ = [
    "OVERVIEW_NUMBER",
    "SUBPAGE_NUMBER",
    "TEMPLATES_DIR",
    "ShellRenderer",
    "context_hero",
    "default_renderer",
    "module_hero",
    "module_number_from_title",
]
