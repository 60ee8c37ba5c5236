"""Renderers module: HTML output of loaded documents."""

from .html_node import Comment, HtmlElement, RawHtml
from .html_renderer import HtmlRenderer
from .render_state import RenderState

__all__ = ["Comment", "HtmlElement", "HtmlRenderer", "RawHtml", "RenderState"]
