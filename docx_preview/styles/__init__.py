"""Styles module: inheritance resolution and CSS class naming."""

from .style_resolver import StyleResolver

__all__ = ["StyleResolver"]
