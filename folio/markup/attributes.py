"""Serialize HTML attributes and assemble complete tags.

Every element in folio renders through :func:`build_tag`, so the spacing it
produces is a byte-level contract: attributes are joined with single spaces
and prefixed by exactly one space, and an empty attribute list adds nothing.

Examples
--------
>>> from folio.markup.attributes import build_attributes, build_tag
>>> build_tag("a", build_attributes(id="home", classes=["nav", "active"]), "Home")
'<a id="home" class="nav active">Home</a>'
>>> build_tag("br", [], self_closing=True)
'<br />'
"""

from __future__ import annotations

import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class AriaRole(enum.StrEnum):
    """ARIA landmark and widget roles accepted by :func:`build_attributes`."""

    ALERT = "alert"
    ARTICLE = "article"
    BANNER = "banner"
    BUTTON = "button"
    COMPLEMENTARY = "complementary"
    CONTENTINFO = "contentinfo"
    DIALOG = "dialog"
    FORM = "form"
    HEADING = "heading"
    IMG = "img"
    LINK = "link"
    LIST = "list"
    LISTITEM = "listitem"
    MAIN = "main"
    MENU = "menu"
    NAVIGATION = "navigation"
    NOTE = "note"
    PRESENTATION = "presentation"
    REGION = "region"
    SEARCH = "search"
    STATUS = "status"
    TAB = "tab"
    TABLE = "table"
    TABPANEL = "tabpanel"


def scalar(name: str, value: str | None) -> str | None:
    """Return ``name="value"`` or ``None`` when the value is missing or empty."""
    if value is None or value == "":
        return None
    return f'{name}="{value}"'


def flag(name: str, enabled: bool | None) -> str | None:  # noqa: FBT001
    """Return the bare attribute name when ``enabled`` is ``True``."""
    return name if enabled is True else None


def enum_value(name: str, value: enum.Enum | None) -> str | None:
    """Serialize a string-backed enum member using its raw value."""
    if value is None:
        return None
    return scalar(name, str(value.value))


def build_attributes(
    *,
    id: str | None = None,  # noqa: A002
    classes: cabc.Sequence[str] | None = None,
    role: AriaRole | None = None,
    label: str | None = None,
    data: cabc.Mapping[str, str] | None = None,
    additional: cabc.Iterable[str] = (),
) -> list[str]:
    """Collect the common element attributes into serialized fragments.

    Parameters
    ----------
    id : str, optional
        Element identifier.
    classes : Sequence[str], optional
        Class names joined into a single ``class`` attribute.
    role : AriaRole, optional
        ARIA role.
    label : str, optional
        Value for ``aria-label``.
    data : Mapping[str, str], optional
        Values emitted as ``data-<key>`` attributes.
    additional : Iterable[str]
        Pre-serialized fragments appended after everything else.

    Returns
    -------
    list[str]
        Attribute fragments in emission order.
    """
    candidates: list[str | None] = [scalar("id", id)]
    if classes:
        candidates.append(scalar("class", " ".join(classes)))
    candidates.append(enum_value("role", role))
    candidates.append(scalar("aria-label", label))
    if data:
        candidates.extend(scalar(f"data-{key}", value) for key, value in data.items())
    attributes = [fragment for fragment in candidates if fragment is not None]
    attributes.extend(additional)
    return attributes


def build_tag(
    tag: str,
    attributes: cabc.Sequence[str],
    content: str = "",
    *,
    self_closing: bool = False,
    no_closing_tag: bool = False,
) -> str:
    """Render a tag in one of its three textual shapes.

    Parameters
    ----------
    tag : str
        Element name.
    attributes : Sequence[str]
        Serialized attribute fragments.
    content : str
        Markup placed between the opening and closing tags.
    self_closing : bool
        Emit ``<tag attrs />`` and ignore ``content``.
    no_closing_tag : bool
        Emit only ``<tag attrs>``; used for void elements without a slash.

    Returns
    -------
    str
        The serialized element.
    """
    attribute_string = " " + " ".join(attributes) if attributes else ""
    if self_closing:
        return f"<{tag}{attribute_string} />"
    if no_closing_tag:
        return f"<{tag}{attribute_string}>"
    return f"<{tag}{attribute_string}>{content}</{tag}>"


__all__ = [
    "AriaRole",
    "build_attributes",
    "build_tag",
    "enum_value",
    "flag",
    "scalar",
]
