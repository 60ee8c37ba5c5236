"""
Style resolver for DOCX documents.

Applies ``basedOn`` inheritance to parsed styles, assigns their CSS class
names and links numbering levels to the paragraph styles that use them.
"""

import logging
from typing import Dict, List, Optional, Set

from ..models.styles import NumberingStyle, Style, SubStyle
from ..utils.helpers import copy_style_properties, escape_class_name, key_by, merge_deep

logger = logging.getLogger(__name__)


class StyleResolver:
    """
    Resolves styles and their inheritance.

    Args:
        class_name: Output class prefix
        debug: Log broken style references
    """

    def __init__(self, class_name: str = "word", debug: bool = False):
        self.class_name = class_name
        self.debug = debug
        self.style_map: Dict[str, Style] = {}

    def process_styles(self, styles: List[Style]) -> Dict[str, Style]:
        """
        Resolve inheritance in place and index styles by id.

        Derived values win over base values. Base sub-styles missing on the
        derived style are copied; shared targets receive base-only keys.

        Returns:
            Mapping of style id to style
        """
        self.style_map = key_by([s for s in styles if s.id is not None], lambda s: s.id)

        resolved: Set[str] = set()
        for style in styles:
            self._resolve(style, resolved, set())

        for style in styles:
            style.css_name = self.process_style_name(style.id)

        return self.style_map

    def _resolve(self, style: Style, resolved: Set[str], chain: Set[str]) -> None:
        key = style.id if style.id is not None else str(id(style))
        if key in resolved or not style.based_on:
            resolved.add(key)
            return
        if key in chain:
            if self.debug:
                logger.warning(f"Circular basedOn chain at style {style.id}")
            return

        base = self.style_map.get(style.based_on)
        if base is None:
            if self.debug:
                logger.warning(f"Can't find base style {style.based_on}")
            resolved.add(key)
            return

        chain.add(key)
        self._resolve(base, resolved, chain)
        self._merge_base(style, base)
        resolved.add(key)

    @staticmethod
    def _merge_base(style: Style, base: Style) -> None:
        style.paragraph_props = merge_deep(style.paragraph_props, base.paragraph_props)
        style.run_props = merge_deep(style.run_props, base.run_props)

        for base_values in base.styles:
            own = next((s for s in style.styles if s.target == base_values.target), None)
            if own is not None:
                copy_style_properties(base_values.values, own.values)
            else:
                style.styles.append(SubStyle(base_values.target, dict(base_values.values), base_values.mod))

    def process_style_name(self, name: Optional[str]) -> str:
        return f"{self.class_name}_{escape_class_name(name)}" if name else self.class_name

    def find_style(self, name: Optional[str]) -> Optional[Style]:
        return self.style_map.get(name) if name else None

    def process_numberings(self, numberings: List[NumberingStyle]) -> None:
        """Point the numbering reference of linked paragraph styles at the level using them."""
        for num in numberings:
            if not num.p_style_name:
                continue
            style = self.find_style(num.p_style_name)
            if style is not None and style.paragraph_props is not None and style.paragraph_props.numbering:
                style.paragraph_props.numbering.level = num.level
