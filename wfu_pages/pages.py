"""Assemble complete pages for each document kind.

Each renderer takes normalized text and the template context, builds the
body with the matching classifier, and wraps it in that kind's shell. The
renderers never raise for odd input: missing context values fall back to
placeholder copy and empty text yields an empty body region.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from wfu_pages._constants import (
    ADJUNCT_TITLE,
    COURSE_HERO_SUFFIX,
    FACULTY_NAME_PLACEHOLDER,
    INSTRUCTOR_NAME_PLACEHOLDER,
    MODULE_TITLE_PLACEHOLDER,
    SYLLABUS_FILE_PLACEHOLDER,
    VIDEO_TITLE_PLACEHOLDER,
    WELCOME_MODULE_COUNT,
)
from wfu_pages.classifiers.assessment import render_assessment_overview
from wfu_pages.classifiers.assignment import render_assignment
from wfu_pages.classifiers.discussion import render_discussion
from wfu_pages.classifiers.learning_materials import render_learning_materials
from wfu_pages.classifiers.module_overview import (
    build_checklist,
    filter_entries,
    split_module_input,
)
from wfu_pages.kinds import DocumentKind
from wfu_pages.links import embed, inline_markup, video_match
from wfu_pages.normalizer import annotate_lines
from wfu_pages.rendering.fragments import lecture_media, render_blocks, render_markdown
from wfu_pages.rendering.shells import (
    OVERVIEW_NUMBER,
    SUBPAGE_NUMBER,
    context_hero,
    module_hero,
    module_number_from_title,
)

if typ.TYPE_CHECKING:
    from wfu_pages.config import TemplateContext
    from wfu_pages.rendering.shells import ShellRenderer

    PageRenderer = typ.Callable[[str, TemplateContext, ShellRenderer], str]

_ADJUNCT = re.compile(
    r"[,;\s]*\b" + re.escape(ADJUNCT_TITLE) + r"\b[,;\s]*", re.IGNORECASE
)


@dc.dataclass(frozen=True, slots=True)
class ModuleLink:
    """One ``Module N: Title`` entry on the course welcome page."""

    number: int
    title: str
    url: str


def render_module_page(
    text: str, context: TemplateContext, shells: ShellRenderer
) -> str:
    """Render a module overview with its objectives and checklist.

    Objectives and checklist entries come from the context when it supplies
    them; otherwise they are recovered from headed sections of the text.
    """
    number = module_number_from_title(context.title, OVERVIEW_NUMBER)
    parts = split_module_input(text)
    objectives = filter_entries(context.objectives or parts.objectives)
    checklist = build_checklist(
        filter_entries(context.checklist or parts.checklist),
        sessions_url=context.course_url("pages", "live-instructor-led-sessions"),
    )
    return shells.render(
        "module_overview.jinja",
        context=context,
        hero=module_hero(number),
        subheader=f"Module {number} Overview",
        body=render_markdown(parts.description),
        objectives=[inline_markup(objective) for objective in objectives],
        checklist=checklist,
    )


def render_learning_materials_page(
    text: str, context: TemplateContext, shells: ShellRenderer
) -> str:
    """Render the learning materials page for the module named in the title."""
    number = module_number_from_title(context.title, SUBPAGE_NUMBER)
    return shells.render(
        "learning_materials.jinja",
        context=context,
        hero=module_hero(number),
        subheader=f"Module {number} Learning Materials",
        body=render_learning_materials(annotate_lines(text)),
    )


def render_presentation_page(
    text: str, context: TemplateContext, shells: ShellRenderer
) -> str:
    """Render an instructor presentation page around its lecture video.

    The first YouTube or TED link in the text becomes the player embed. Only
    the URL leaves the body; any text around it on the same line is kept.
    Without a link the player keeps its paste marker.
    """
    lines = text.splitlines()
    media = lecture_media()
    for index, line in enumerate(lines):
        if (video := video_match(line)) is not None:
            media = lecture_media(embed(video))
            end = video.start + len(video.url)
            parts = (line[: video.start].strip(), line[end:].strip())
            if remainder := " ".join(part for part in parts if part):
                lines[index] = remainder
            else:
                del lines[index]
            break
    title = context.video_title or VIDEO_TITLE_PLACEHOLDER
    return shells.render(
        "instructor_presentation.jinja",
        context=context,
        hero=context_hero(context),
        subheader=f"Instructor Presentation: {title}",
        body=render_markdown("\n".join(lines)),
        media=media,
    )


def render_discussion_page(
    text: str, context: TemplateContext, shells: ShellRenderer
) -> str:
    """Render a discussion prompt with the standard sections filled in."""
    body = render_discussion(
        annotate_lines(text, keep_blank=True),
        objectives=filter_entries(context.objectives),
    )
    return shells.render(
        "discussion.jinja",
        context=context,
        hero=context_hero(context),
        subheader=context.discussion_title or context.title or "Discussion",
        body=body,
    )


def render_assignment_page(
    text: str, context: TemplateContext, shells: ShellRenderer
) -> str:
    """Render an assignment brief."""
    return shells.render(
        "assignment.jinja",
        context=context,
        hero=context_hero(context),
        subheader=context.assignment_title or context.title or "Assignment",
        body=render_assignment(annotate_lines(text, keep_blank=True)),
    )


def render_faculty_page(
    text: str, context: TemplateContext, shells: ShellRenderer
) -> str:
    """Render the "Meet the Lead Faculty" page with the faculty photo."""
    image_url = None
    if context.faculty_image_number:
        image_url = context.course_url(
            "files", context.faculty_image_number, "download"
        )
    return shells.render(
        "faculty_bio.jinja",
        context=context,
        hero=COURSE_HERO_SUFFIX,
        subheader="Meet the Lead Faculty",
        body=render_blocks(annotate_lines(text, keep_blank=True)),
        faculty_name=context.faculty_name or FACULTY_NAME_PLACEHOLDER,
        image_url=image_url,
    )


def render_assessment_page(
    text: str, context: TemplateContext, shells: ShellRenderer
) -> str:
    """Render the course "Overview of Assessments" page."""
    body = render_assessment_overview(line.text for line in annotate_lines(text))
    return shells.render(
        "assessment_overview.jinja",
        context=context,
        hero=COURSE_HERO_SUFFIX,
        subheader="Overview of Assessments",
        body=body,
    )


def module_links(context: TemplateContext) -> list[ModuleLink]:
    """Return the fixed set of module overview links for the welcome page."""
    titles = list(context.module_titles)
    links: list[ModuleLink] = []
    for number in range(1, WELCOME_MODULE_COUNT + 1):
        title = titles[number - 1].strip() if number <= len(titles) else ""
        links.append(
            ModuleLink(
                number=number,
                title=title or MODULE_TITLE_PLACEHOLDER,
                url=context.course_url("pages", f"{number}-dot-0-overview"),
            )
        )
    return links


def render_welcome_page(
    text: str, context: TemplateContext, shells: ShellRenderer
) -> str:
    """Render the course welcome page with links to every module overview."""
    return shells.render(
        "course_welcome.jinja",
        context=context,
        hero=COURSE_HERO_SUFFIX,
        subheader=context.title or "Welcome",
        body=render_blocks(annotate_lines(text, keep_blank=True)),
        module_links=module_links(context),
    )


def clean_credentials(credentials: str | None) -> str:
    """Drop the adjunct title from ``credentials``; the shell appends it.

    Examples
    --------
    >>> clean_credentials("Ph.D., Adjunct Professor of Practice")
    'Ph.D.'
    """
    if not credentials:
        return ""
    return _ADJUNCT.sub(", ", credentials).strip(" ,;")


def render_syllabus_page(
    text: str, context: TemplateContext, shells: ShellRenderer
) -> str:
    """Render the syllabus page with the instructor block and download link."""
    return shells.render(
        "syllabus.jinja",
        context=context,
        hero=COURSE_HERO_SUFFIX,
        subheader=context.title or "Course Syllabus",
        body=render_blocks(annotate_lines(text, keep_blank=True)),
        instructor_name=context.instructor_name or INSTRUCTOR_NAME_PLACEHOLDER,
        credentials=clean_credentials(context.instructor_credentials),
        instructor_title=ADJUNCT_TITLE,
        instructor_email=context.instructor_email,
        syllabus_url=context.syllabus_file_url or context.course_url("files"),
        syllabus_label=context.syllabus_file_name or SYLLABUS_FILE_PLACEHOLDER,
    )


PAGE_RENDERERS: dict[DocumentKind, PageRenderer] = {
    DocumentKind.MODULE: render_module_page,
    DocumentKind.LEARNING_MATERIALS: render_learning_materials_page,
    DocumentKind.INSTRUCTOR_PRESENTATION: render_presentation_page,
    DocumentKind.DISCUSSION: render_discussion_page,
    DocumentKind.ASSIGNMENT: render_assignment_page,
    DocumentKind.MEET_FACULTY: render_faculty_page,
    DocumentKind.ASSESSMENT_OVERVIEW: render_assessment_page,
    DocumentKind.COURSE_WELCOME: render_welcome_page,
    DocumentKind.COURSE_SYLLABUS: render_syllabus_page,
}


__all__ = [
    "PAGE_RENDERERS",
    "ModuleLink",
    "clean_credentials",
    "module_links",
    "render_assessment_page",
    "render_assignment_page",
    "render_discussion_page",
    "render_faculty_page",
    "render_learning_materials_page",
    "render_module_page",
    "render_presentation_page",
    "render_syllabus_page",
    "render_welcome_page",
]
