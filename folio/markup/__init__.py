"""Content nodes, the composition DSL and tag serialization helpers.

Examples
--------
>>> from folio.markup import Element, markup_builder, render_all
>>> @markup_builder
... def nav(items):
...     for label, href in items:
...         yield Element("a", label, attributes=[f'href="{href}"'])
>>> render_all(nav([("Home", "/")]))
'<a href="/">Home</a>'
"""

from .attributes import AriaRole, build_attributes, build_tag, enum_value, flag, scalar
from .builder import (
    Composable,
    ComposedSequence,
    compose,
    either_first,
    either_second,
    flatten_many,
    markup_builder,
    optional,
    render_all,
    sequence,
    single,
)
from .classes import ClassedMarkup, add_classes, inject_classes
from .element import Element
from .escaping import escape_html
from .nodes import AnyMarkup, Composite, Markup, MarkupString, is_leaf, resolve

__all__ = [
    "AnyMarkup",
    "AriaRole",
    "ClassedMarkup",
    "Composable",
    "ComposedSequence",
    "Composite",
    "Element",
    "Markup",
    "MarkupString",
    "add_classes",
    "build_attributes",
    "build_tag",
    "compose",
    "either_first",
    "either_second",
    "enum_value",
    "escape_html",
    "flag",
    "flatten_many",
    "inject_classes",
    "is_leaf",
    "markup_builder",
    "optional",
    "render_all",
    "resolve",
    "scalar",
    "sequence",
    "single",
]
