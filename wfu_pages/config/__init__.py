"""Typed configuration for rendering institutional course pages.

This subpackage defines the immutable :class:`TemplateContext` carried into
every renderer, the :class:`FormattingOptions` switches read by the dispatcher,
and :func:`load_template_context`, which reads a YAML context file (with
``ruamel.yaml``) so pages can be rendered from the command line.

Examples
--------
>>> from wfu_pages.config import build_template_context
>>> context = build_template_context({"courseName": "Data Ethics"})
>>> context.course_name
'Data Ethics'
"""

from .helpers import build_template_context
from .loader import load_template_context
from .models import ContextConfigError, FormattingOptions, TemplateContext

__all__ = [
    "ContextConfigError",
    "FormattingOptions",
    "TemplateContext",
    "build_template_context",
    "load_template_context",
]
