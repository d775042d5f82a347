"""Common literal values used across folio.

These constants keep delimiters, class names and formats centralized so the
renderers, the pipeline and the tests import the same values without
drifting. Intended for internal use within the folio package.

Examples
--------
>>> from folio import _constants
>>> _constants.HEADING_CLASS_TEMPLATE.format(level=2)
'markdown-heading-2'
>>> _constants.ELEMENT_CLASS_TEMPLATE.format(kind="p")
'markdown-p'
"""

FRONT_MATTER_DELIMITER = "---"
FRONT_MATTER_DATE_FORMAT = "%B %d, %Y"
FRONT_MATTER_DATE_KEY = "date"
FRONT_MATTER_PUBLISHED_KEY = "published"

CONTENT_CLASS = "markdown-content"
FALLBACK_CLASS = "markdown-fallback"
TOC_ID = "table-of-contents"
TOC_CLASS = "markdown-toc"
TOC_TITLE = "Table of Contents"
HEADING_CLASS_TEMPLATE = "markdown-heading-{level}"
ELEMENT_CLASS_TEMPLATE = "markdown-{kind}"

EXTERNAL_LINK_PREFIXES = ("http://", "https://")
