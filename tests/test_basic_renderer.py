"""Unit tests for the plain Markdown to HTML renderer.

``folio.render.HtmlRenderer`` emits unstyled HTML for each node kind of the
parsed tree. These tests pin the exact markup for the common block and inline
constructs, the content errors raised for empty links, images and code
blocks, and the comment produced by ``render_safely``.

Usage
-----
Run ``pytest tests/test_basic_renderer.py -v``. No fixtures are required.
"""

from __future__ import annotations

import pytest

from folio.errors import (
    InvalidCodeBlockError,
    InvalidLinkDestinationError,
    MissingImageSourceError,
)
from folio.render import HtmlRenderer, parse_markdown


def render(text: str) -> str:
    return HtmlRenderer().render(parse_markdown(text))


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("# Hi *there*", "<h1>Hi <em>there</em></h1>"),
        ("### Deep", "<h3>Deep</h3>"),
        ("one\n\ntwo", "<p>one</p><p>two</p>"),
        ("**bold** and *em*", "<p><strong>bold</strong> and <em>em</em></p>"),
        ("use `x < y`", "<p>use <code>x &lt; y</code></p>"),
        ("a\nb", "<p>a\nb</p>"),
        ("a  \nb", "<p>a<br />b</p>"),
        ("***", "<hr />"),
        ("> quoted", "<blockquote><p>quoted</p></blockquote>"),
        ("- a\n- b", "<ul><li>a</li><li>b</li></ul>"),
        ("1. a\n2. b", "<ol><li>a</li><li>b</li></ol>"),
    ],
)
def test_renders_common_constructs(source: str, expected: str) -> None:
    """Each construct maps onto its plain HTML element."""
    assert render(source) == expected


def test_loose_list_items_keep_paragraphs() -> None:
    """Blank lines between items wrap their content in paragraphs."""
    assert render("- a\n\n- b") == "<ul><li><p>a</p></li><li><p>b</p></li></ul>"


def test_text_is_escaped() -> None:
    """Markup characters in text are entity-escaped."""
    html = render("a > b & 'c'")
    assert html == "<p>a &gt; b &amp; &#x27;c&#x27;</p>", html


def test_internal_links_have_no_target() -> None:
    assert render("[home](/index.html)") == '<p><a href="/index.html">home</a></p>'


def test_external_links_open_in_new_tab() -> None:
    """http and https destinations get a target and rel attribute."""
    html = render("[site](https://example.com)")
    assert html == (
        '<p><a href="https://example.com" target="_blank" rel="noopener">'
        "site</a></p>"
    )


def test_images_render_alt_text() -> None:
    html = render("![A *fine* cat](cat.png)")
    assert html == '<p><img src="cat.png" alt="A fine cat" /></p>'


def test_code_blocks_are_escaped_verbatim() -> None:
    html = render("```python\nif a < b:\n    pass\n```")
    assert html == "<pre><code>if a &lt; b:\n    pass\n</code></pre>"


def test_indented_code_blocks_render_like_fences() -> None:
    assert render("    x = 1\n") == "<pre><code>x = 1\n</code></pre>"


def test_tables_use_header_cells_in_head_only() -> None:
    html = render("| A | B |\n|---|---|\n| 1 | 2 |")
    assert html == (
        "<table><thead><tr><th>A</th><th>B</th></tr></thead>"
        "<tbody><tr><td>1</td><td>2</td></tr></tbody></table>"
    )


def test_raw_html_passes_through() -> None:
    html = render('<div class="note">kept</div>\n\ntext <kbd>K</kbd>')
    assert html.startswith('<div class="note">kept</div>')
    assert html.endswith("<p>text <kbd>K</kbd></p>")


def test_empty_link_destination_raises() -> None:
    with pytest.raises(InvalidLinkDestinationError):
        render("[link]()")


def test_empty_image_source_raises() -> None:
    with pytest.raises(MissingImageSourceError):
        render("![alt]()")


def test_whitespace_code_block_raises() -> None:
    with pytest.raises(InvalidCodeBlockError):
        render("```\n   \n```")


def test_render_safely_returns_error_comment() -> None:
    """Content errors become a single HTML comment naming the problem."""
    html = HtmlRenderer().render_safely(parse_markdown("ok\n\n[link]()"))
    assert html == "<!-- Rendering error: Link destination is missing or invalid -->"


def test_render_safely_passes_valid_documents_through() -> None:
    tree = parse_markdown("# Fine")
    assert HtmlRenderer().render_safely(tree) == "<h1>Fine</h1>"


def test_renderer_is_reusable() -> None:
    """Rendering twice with one instance yields identical output."""
    renderer = HtmlRenderer()
    tree = parse_markdown("# A\n\n| x |\n|---|\n| y |")
    assert renderer.render(tree) == renderer.render(tree)
