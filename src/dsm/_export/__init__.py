"""HTML export of dependency structure matrices."""

from .html import render_html

__all__ = ["render_html"]
