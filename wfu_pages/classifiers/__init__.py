"""Per-document section classifiers and their body renderers."""

from __future__ import annotations

from .assessment import classify_assessment, render_assessment_overview
from .assignment import classify_assignment, render_assignment
from .discussion import classify_discussion, render_discussion
from .learning_materials import classify_learning_materials, render_learning_materials
from .models import Rule, RuleMatch, Section
from .module_overview import build_checklist, filter_entries, split_module_input

__all__ = [
    "Rule",
    "RuleMatch",
    "Section",
    "build_checklist",
    "classify_assessment",
    "classify_assignment",
    "classify_discussion",
    "classify_learning_materials",
    "filter_entries",
    "render_assessment_overview",
    "render_assignment",
    "render_discussion",
    "render_learning_materials",
    "split_module_input",
]
