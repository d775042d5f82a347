"""Unit tests for front matter extraction.

``folio.front_matter`` splits a leading ``---`` block of ``key: value`` lines
from the Markdown body. These tests cover key normalization, date coercion
and its silent fallback, blank-line handling, the unterminated and malformed
error cases, and documents without front matter.

Usage
-----
Run ``pytest tests/test_front_matter.py -v``. No fixtures are required.
"""

from __future__ import annotations

import datetime as dt

import pytest

from folio.errors import (
    FrontMatterError,
    MalformedFrontMatterError,
    UnterminatedFrontMatterError,
)
from folio.front_matter import extract_front_matter, parse_front_matter_lines


def test_extracts_metadata_and_body() -> None:
    """The metadata block is parsed and the body returned verbatim."""
    meta, body = extract_front_matter("---\ntitle: Sample\n---\n# Hi\n")
    assert meta == {"title": "Sample"}
    assert body == "# Hi\n", f"unexpected body: {body!r}"


def test_keys_are_lowercased_and_values_trimmed() -> None:
    """Keys are normalized and only the first colon splits."""
    meta = parse_front_matter_lines(["  Title :  A: B  ", "", "Author: Ada"])
    assert meta == {"title": "A: B", "author": "Ada"}


def test_date_like_keys_are_parsed() -> None:
    """Keys containing 'date' or equal to 'published' become dates."""
    meta = parse_front_matter_lines(
        ["date: January 5, 2024", "published: March 12, 2023", "updated_date: May 1, 2022"]
    )
    assert meta == {
        "date": dt.date(2024, 1, 5),
        "published": dt.date(2023, 3, 12),
        "updated_date": dt.date(2022, 5, 1),
    }


def test_unparseable_dates_fall_back_to_strings() -> None:
    """Dates that do not match the long format are kept as text."""
    meta = parse_front_matter_lines(["date: 2024-01-05", "title: January 5, 2024"])
    assert meta == {"date": "2024-01-05", "title": "January 5, 2024"}


@pytest.mark.parametrize("line", ["no colon here", ": value", "key:"])
def test_malformed_lines_raise(line: str) -> None:
    """Lines without a key, a value or a colon are fatal."""
    with pytest.raises(MalformedFrontMatterError) as excinfo:
        parse_front_matter_lines([line])
    assert excinfo.value.line == line.strip()
    assert line.strip() in str(excinfo.value)


def test_unterminated_block_raises() -> None:
    """An opening delimiter without a closing one is an error."""
    with pytest.raises(UnterminatedFrontMatterError, match="not properly closed"):
        extract_front_matter("---\ntitle: Sample\n# Hi\n")


def test_errors_share_a_base_class() -> None:
    """Both front matter errors are FrontMatterError and ValueError."""
    assert issubclass(UnterminatedFrontMatterError, FrontMatterError)
    assert issubclass(MalformedFrontMatterError, ValueError)


def test_documents_without_front_matter_are_returned_unchanged() -> None:
    """A document not starting with --- has no metadata."""
    text = "# Title\n\n---\n\nAfter a rule\n"
    assert extract_front_matter(text) == ({}, text)


def test_delimiters_are_compared_after_trimming() -> None:
    """Whitespace around the delimiters is ignored."""
    meta, body = extract_front_matter("  ---  \ntitle: X\n ---\nBody")
    assert meta == {"title": "X"}
    assert body == "Body"


def test_empty_front_matter_block() -> None:
    """A block with no lines yields empty metadata."""
    assert extract_front_matter("---\n---\ntext") == ({}, "text")


def test_round_trip_preserves_key_set() -> None:
    """Serializing extracted pairs back yields the same keys."""
    source = "---\ntitle: Notes\nauthor: Lin\ntags: a, b\n---\nBody"
    meta, _body = extract_front_matter(source)
    rebuilt = "---\n" + "\n".join(f"{k}: {v}" for k, v in meta.items()) + "\n---\n"
    again, _ = extract_front_matter(rebuilt)
    assert set(again) == set(meta) == {"title", "author", "tags"}
