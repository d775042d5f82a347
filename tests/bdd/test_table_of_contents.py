"""Behaviour tests for heading ids and table-of-contents output.

The scenarios in ``table_of_contents.feature`` render documents through the
enhanced and plain pipelines and inspect the generated navigation with
BeautifulSoup.

Usage
-----
Run ``pytest tests/bdd/test_table_of_contents.py -v``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from folio.pipeline import DocumentPipeline, ParsedDocument
from folio.render import RenderingOptions, TableOfContents

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "table_of_contents.feature"
)
scenarios(FEATURE_FILE)


def _unescape(text: str) -> str:
    return text.replace("\\n", "\n").replace('\\"', '"')


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(parsers.parse("the enhanced pipeline with a table of contents up to depth {depth:d}"))
def given_enhanced_pipeline(depth: int, scenario_state: dict[str, object]) -> None:
    options = RenderingOptions.enhanced().with_table_of_contents(
        TableOfContents.enabled(max_depth=depth)
    )
    scenario_state["pipeline"] = DocumentPipeline(options)


@given("the plain pipeline")
def given_plain_pipeline(scenario_state: dict[str, object]) -> None:
    scenario_state["pipeline"] = DocumentPipeline()


@when(parsers.parse('I parse "{markdown}" with a table of contents'))
def when_parse(markdown: str, scenario_state: dict[str, object]) -> None:
    pipeline = typ.cast("DocumentPipeline", scenario_state["pipeline"])
    scenario_state["document"] = pipeline.parse_with_table_of_contents(
        _unescape(markdown)
    )


@then(parsers.parse('the table of contents links to "{anchors}"'))
def then_toc_links(anchors: str, scenario_state: dict[str, object]) -> None:
    """Verify the navigation lists exactly the expected anchors in order."""
    document = typ.cast("ParsedDocument", scenario_state["document"])
    soup = BeautifulSoup(document.table_of_contents or "", "html.parser")
    hrefs = [link["href"] for link in soup.select("#table-of-contents a")]
    expected = [f"#{anchor.strip()}" for anchor in anchors.split(",")]
    assert hrefs == expected, f"unexpected table of contents links: {hrefs}"


@then(parsers.parse('the body markup contains "{fragment}"'))
def then_body_contains(fragment: str, scenario_state: dict[str, object]) -> None:
    document = typ.cast("ParsedDocument", scenario_state["document"])
    assert _unescape(fragment) in document.body_markup


@then("the table of contents is empty")
def then_toc_empty(scenario_state: dict[str, object]) -> None:
    document = typ.cast("ParsedDocument", scenario_state["document"])
    assert document.table_of_contents == ""
