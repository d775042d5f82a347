"""Tests for standalone page output built with Jinja templates."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

from bs4 import BeautifulSoup

from folio.page import DEFAULT_TITLE, DocumentPageBuilder
from folio.pipeline import ParsedDocument


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_page_uses_front_matter_metadata() -> None:
    document = ParsedDocument(
        front_matter={
            "title": "Tips & Tricks",
            "description": "Short <notes>",
            "date": dt.date(2024, 1, 5),
        },
        body_markup="<p>Body</p>",
        table_of_contents='<aside id="table-of-contents"></aside>',
        stylesheet=".markdown-content { color: red; }",
    )
    html = DocumentPageBuilder(document).render()
    assert html.endswith("\n")
    assert "Tips &amp; Tricks" in html, "titles must be escaped"
    soup = _soup(html)
    assert soup.find("meta", attrs={"name": "description"})["content"] == "Short <notes>"
    assert soup.select_one(".document-date").get_text() == "January 5, 2024"
    assert soup.find("style").get_text().strip() == ".markdown-content { color: red; }"
    assert soup.select_one("main p").get_text() == "Body"
    assert soup.find(id="table-of-contents") is not None


def test_page_defaults_without_metadata() -> None:
    document = ParsedDocument(front_matter={}, body_markup="<p>x</p>")
    soup = _soup(DocumentPageBuilder(document).render())
    assert soup.title.get_text() == DEFAULT_TITLE
    assert soup.find("style") is None
    assert soup.select_one(".document-date") is None


def test_explicit_title_wins_and_string_dates_pass_through() -> None:
    document = ParsedDocument(
        front_matter={"title": "Ignored", "published": "Spring 2024"},
        body_markup="",
    )
    soup = _soup(DocumentPageBuilder(document, title="Chosen").render())
    assert soup.title.get_text() == "Chosen"
    assert soup.select_one(".document-date").get_text() == "Spring 2024"


def test_run_writes_page(tmp_path: Path) -> None:
    document = ParsedDocument(front_matter={}, body_markup="<p>x</p>")
    output = tmp_path / "out" / "page.html"
    assert DocumentPageBuilder(document).run(output) == output
    assert "<p>x</p>" in output.read_text(encoding="utf-8")
