"""Common literal values used across wfu_pages.

These constants keep institutional copy, placeholders, and LMS defaults
centralized so templates, classifiers, and tests can import the same values
without drifting.

Examples
--------
>>> from wfu_pages import _constants
>>> _constants.FOOTER_TEXT.startswith("This material is owned")
True
>>> _constants.DEFAULT_BASE_URL
'https://wakeforest.instructure.com'
"""

FOOTER_TEXT = (
    "This material is owned by Wake Forest University and is protected by "
    "U.S. copyright laws. All Rights Reserved."
)

DEFAULT_BASE_URL = "https://wakeforest.instructure.com"
DEFAULT_COURSE_ID = "77445"
DEFAULT_MODULE_NUMBER = "1"
COURSE_HERO_SUFFIX = "GettingStarted"
WELCOME_MODULE_COUNT = 8

COURSE_NAME_PLACEHOLDER = "Course Name"
VIDEO_TITLE_PLACEHOLDER = "Video Title"
FACULTY_NAME_PLACEHOLDER = "Faculty Name"
INSTRUCTOR_NAME_PLACEHOLDER = "Instructor Name"
MODULE_TITLE_PLACEHOLDER = "Module Title"
SYLLABUS_FILE_PLACEHOLDER = "Course Syllabus"
VIDEO_PLACEHOLDER = "HERE"

ADJUNCT_TITLE = "Adjunct Professor of Practice"
