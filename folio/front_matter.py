r"""Split a Markdown document into its front matter and body.

A document may open with a metadata block delimited by ``---`` lines holding
``key: value`` pairs. Keys are normalized to lowercase, and values of date-like
keys are coerced into :class:`datetime.date` when they match the long
``January 5, 2024`` form.

Example
-------
>>> from folio.front_matter import extract_front_matter
>>> meta, body = extract_front_matter("---\ntitle: Sample\n---\n# Hi\n")
>>> meta
{'title': 'Sample'}
>>> body
'# Hi\n'
"""

from __future__ import annotations

import datetime as dt
import enum
import typing as typ

from ._constants import (
    FRONT_MATTER_DATE_FORMAT,
    FRONT_MATTER_DATE_KEY,
    FRONT_MATTER_DELIMITER,
    FRONT_MATTER_PUBLISHED_KEY,
)
from .errors import MalformedFrontMatterError, UnterminatedFrontMatterError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

FrontMatterValue = str | dt.date
FrontMatter = dict[str, FrontMatterValue]


class _ScanState(enum.Enum):
    START = enum.auto()
    IN_FRONT_MATTER = enum.auto()
    BODY = enum.auto()


def _is_date_key(key: str) -> bool:
    return FRONT_MATTER_DATE_KEY in key or key == FRONT_MATTER_PUBLISHED_KEY


def _coerce_value(key: str, value: str) -> FrontMatterValue:
    """Return ``value`` as a date for date-like keys, else unchanged."""
    if not _is_date_key(key):
        return value
    try:
        return dt.datetime.strptime(value, FRONT_MATTER_DATE_FORMAT).date()  # noqa: DTZ007
    except ValueError:
        return value


def parse_front_matter_lines(lines: cabc.Iterable[str]) -> FrontMatter:
    """Parse the lines between the front matter delimiters.

    Parameters
    ----------
    lines : Iterable[str]
        Raw lines of the metadata block, without the ``---`` delimiters.

    Returns
    -------
    FrontMatter
        Mapping of lowercased keys to trimmed values or parsed dates. Later
        duplicate keys replace earlier ones.

    Raises
    ------
    MalformedFrontMatterError
        If a non-blank line has no colon, or an empty key or value.
    """
    front_matter: FrontMatter = {}
    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue
        key, separator, value = line.partition(":")
        key = key.strip().lower()
        value = value.strip()
        if not separator or not key or not value:
            raise MalformedFrontMatterError(line)
        front_matter[key] = _coerce_value(key, value)
    return front_matter


def extract_front_matter(text: str) -> tuple[FrontMatter, str]:
    """Return the parsed front matter and the remaining body of ``text``.

    Documents that do not start with a ``---`` line have no front matter and
    are returned unchanged as the body.

    Raises
    ------
    UnterminatedFrontMatterError
        If the opening delimiter has no closing partner.
    MalformedFrontMatterError
        If a metadata line cannot be split into a key and a value.
    """
    lines = text.split("\n")
    state = _ScanState.START
    block: list[str] = []
    body_start = 0
    for index, line in enumerate(lines):
        match state:
            case _ScanState.START:
                if line.strip() != FRONT_MATTER_DELIMITER:
                    return {}, text
                state = _ScanState.IN_FRONT_MATTER
            case _ScanState.IN_FRONT_MATTER:
                if line.strip() == FRONT_MATTER_DELIMITER:
                    state = _ScanState.BODY
                    body_start = index + 1
                    break
                block.append(line)

    if state is _ScanState.IN_FRONT_MATTER:
        raise UnterminatedFrontMatterError()
    return parse_front_matter_lines(block), "\n".join(lines[body_start:])


__all__ = [
    "FrontMatter",
    "FrontMatterValue",
    "extract_front_matter",
    "parse_front_matter_lines",
]
