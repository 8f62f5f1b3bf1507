"""Typed dataclasses describing per-document rendering configuration."""

from __future__ import annotations

import dataclasses as dc

from wfu_pages._constants import DEFAULT_BASE_URL, DEFAULT_COURSE_ID


class ContextConfigError(ValueError):
    """Raised when a template context file is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class TemplateContext:
    """Per-document fields interpolated into the institutional page shells.

    Every field is optional; renderers substitute placeholder copy for
    missing values instead of failing. Instances are never mutated by the
    formatting pipeline.
    """

    title: str | None = None
    course_name: str | None = None
    course_code: str | None = None
    module_number: str | None = None
    objectives: tuple[str, ...] = ()
    checklist: tuple[str, ...] = ()
    video_title: str | None = None
    faculty_name: str | None = None
    faculty_image_number: str | None = None
    course_id: str | None = None
    base_url: str | None = None
    instructor_name: str | None = None
    instructor_email: str | None = None
    instructor_credentials: str | None = None
    syllabus_file_name: str | None = None
    syllabus_file_url: str | None = None
    discussion_title: str | None = None
    assignment_title: str | None = None
    module_titles: tuple[str, ...] = ()

    @property
    def resolved_base_url(self) -> str:
        """Return the LMS origin without trailing slashes."""
        return (self.base_url or DEFAULT_BASE_URL).rstrip("/")

    @property
    def resolved_course_id(self) -> str:
        """Return the course identifier, falling back to the default course."""
        return self.course_id or DEFAULT_COURSE_ID

    def course_url(self, *segments: str) -> str:
        """Build an absolute URL below ``/courses/{course_id}``."""
        path = "/".join(segment.strip("/") for segment in segments)
        return f"{self.resolved_base_url}/courses/{self.resolved_course_id}/{path}"


@dc.dataclass(frozen=True, slots=True)
class FormattingOptions:
    """Switches applied by the format dispatcher around each render."""

    sanitize: bool = True
    source_is_html: bool = False
    allow_embeds: bool = True
