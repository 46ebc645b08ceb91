"""Shared page layout for DSM HTML export."""

from __future__ import annotations

from htpy import Element, Node, body, h1, head, header, html, main, meta, p, style, title
from markupsafe import Markup

from ._css import CSS


def base_page(*, page_title: str, subtitle: str, content: Node) -> str:
    """Render a full HTML page as a string.

    Args:
        page_title: Title shown in the header and the browser tab.
        subtitle: Line shown under the title.
        content: The main content node.

    Returns:
        Complete HTML document as a string.

    """
    page = html(lang="en")[
        _render_head(page_title),
        body[
            _render_header(page_title, subtitle),
            main[content],
        ],
    ]
    return f"<!DOCTYPE html>\n{page}"


def _render_head(page_title: str) -> Element:
    """Render HTML <head> with inline CSS."""
    return head[
        meta(charset="UTF-8"),
        meta(name="viewport", content="width=device-width, initial-scale=1.0"),
        title[page_title],
        style[Markup(CSS)],  # noqa: S704
    ]


def _render_header(page_title: str, subtitle: str) -> Element:
    """Render the page header."""
    return header[
        h1[page_title],
        p(".subtitle")[subtitle],
    ]
