"""Document kinds understood by the formatter and their catalogue entries."""

from __future__ import annotations

import dataclasses as dc
import enum


class DocumentKind(enum.StrEnum):
    """Tags selecting a classifier and page shell for one document."""

    MODULE = "wfuModule"
    LEARNING_MATERIALS = "wfuLearningMaterials"
    INSTRUCTOR_PRESENTATION = "wfuInstructorPresentation"
    DISCUSSION = "wfuDiscussion"
    ASSIGNMENT = "wfuAssignment"
    MEET_FACULTY = "wfuMeetFaculty"
    ASSESSMENT_OVERVIEW = "wfuAssessmentOverview"
    COURSE_WELCOME = "wfuCourseWelcome"
    COURSE_SYLLABUS = "wfuCourseSyllabus"

    @classmethod
    def parse(cls, tag: str) -> DocumentKind | None:
        """Return the kind named by ``tag`` or ``None`` when it is unknown."""
        try:
            return cls(tag)
        except ValueError:
            return None


@dc.dataclass(frozen=True, slots=True)
class TemplateInfo:
    """Catalogue entry describing one page template for selection menus."""

    id: DocumentKind
    name: str
    description: str
    use_case: str


TEMPLATE_CATALOGUE = (
    TemplateInfo(
        DocumentKind.COURSE_WELCOME,
        "WFU Course Welcome",
        "Wake Forest SPS course welcome page",
        "Course landing/welcome page linking to modules",
    ),
    TemplateInfo(
        DocumentKind.COURSE_SYLLABUS,
        "WFU Course Syllabus",
        "Standard syllabus page with instructor and download link",
        "Overwrite existing syllabus page with standardized format",
    ),
    TemplateInfo(
        DocumentKind.MEET_FACULTY,
        "WFU Meet the Lead Faculty",
        "Wake Forest SPS faculty introduction page",
        "WFU faculty bio page with photo and contact information",
    ),
    TemplateInfo(
        DocumentKind.ASSESSMENT_OVERVIEW,
        "WFU Overview of Assessments",
        "Wake Forest SPS assessment overview page",
        "WFUP page describing all course assessments and point values",
    ),
    TemplateInfo(
        DocumentKind.MODULE,
        "WFU Module Overview",
        "Wake Forest SPS module format with objectives and checklist",
        "WFU module overview pages with branded styling",
    ),
    TemplateInfo(
        DocumentKind.INSTRUCTOR_PRESENTATION,
        "WFU Instructor Presentation",
        "Wake Forest SPS instructor presentation video page",
        "WFU instructor presentation pages with video content",
    ),
    TemplateInfo(
        DocumentKind.LEARNING_MATERIALS,
        "WFU Learning Materials",
        "Wake Forest SPS learning materials page format",
        "WFU module learning materials pages with required/optional resources",
    ),
    TemplateInfo(
        DocumentKind.DISCUSSION,
        "WFU Discussion",
        "Wake Forest SPS discussion page format",
        "WFU discussion pages with consistent formatting",
    ),
    TemplateInfo(
        DocumentKind.ASSIGNMENT,
        "WFU Assignment",
        "Wake Forest SPS assignment page format",
        "WFU assignment pages with purpose, task, and instructions",
    ),
)


__all__ = ["TEMPLATE_CATALOGUE", "DocumentKind", "TemplateInfo"]
