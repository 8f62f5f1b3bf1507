"""Behaviour tests for formatting discussion pages using pytest-bdd.

These scenarios paste a prompt-only discussion through
:func:`wfu_pages.format_content` and confirm the page gains the banner for its
module, the standard sections in canonical order, and the copyright footer.

Usage
-----
Run ``pytest tests/bdd/test_discussion_page.py -v``. The scenarios render
entirely in memory, so no fixtures beyond ``scenario_state`` are required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from wfu_pages import format_content
from wfu_pages._constants import FOOTER_TEXT
from wfu_pages.config import TemplateContext

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "discussion_page.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a discussion prompt without response or grading sections")
def given_prompt(scenario_state: ScenarioState) -> None:
    """Store a prompt that only carries the prompt text."""
    scenario_state["content"] = (
        "Prompt: Describe a phishing campaign you have seen.\n"
        "Explain what made it convincing."
    )


@given("a template context for module 3")
def given_context(scenario_state: ScenarioState) -> None:
    """Store a context naming the course and module."""
    scenario_state["context"] = TemplateContext(
        course_name="CYB 710 Security Operations",
        module_number="3",
        discussion_title="Discussion 3.1",
    )


@when(parsers.parse('I format the content as a "{kind}" page'))
def when_format(scenario_state: ScenarioState, kind: str) -> None:
    """Render the stored content as ``kind``."""
    content = typ.cast("str", scenario_state["content"])
    context = typ.cast("TemplateContext | None", scenario_state.get("context"))
    scenario_state["html"] = format_content(content, kind, context)


@then(parsers.parse('the page uses the "{hero}" banner'))
def then_banner(scenario_state: ScenarioState, hero: str) -> None:
    """Check the hero class on the banner."""
    html = typ.cast("str", scenario_state["html"])
    assert f"WFU-SubpageHeader {hero}" in html, f"expected banner {hero}"


@then("the page shows the sections in order")
def then_sections(scenario_state: ScenarioState, datatable: list[list[str]]) -> None:
    """Check each marker appears after the previous one."""
    html = typ.cast("str", scenario_state["html"])
    markers = [row[0] for row in datatable[1:]]
    positions = [html.find(marker) for marker in markers]
    assert -1 not in positions, f"missing markers in {html!r}"
    assert positions == sorted(positions), f"sections out of order: {positions}"


@then("the page ends with the copyright footer")
def then_footer(scenario_state: ScenarioState) -> None:
    """Check the footer closes the page."""
    html = typ.cast("str", scenario_state["html"])
    footer_at = html.find(f'<footer class="WFU-footer">{FOOTER_TEXT}</footer>')
    assert footer_at != -1, "expected the copyright footer"
    assert footer_at > html.find("<h3>Criteria for Success"), (
        "footer should follow the body"
    )
