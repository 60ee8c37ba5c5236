"""
Formatting property parser.

One routine decodes the property children of ``pPr``, ``rPr``, ``tblPr``,
``trPr`` and ``tcPr`` into CSS declarations. Context-specific elements are
handed to an optional handler first.
"""

import logging
from typing import Callable, Dict, Optional

from . import units, values
from .xml_parser import xml

logger = logging.getLogger(__name__)

PropertyHandler = Callable[[object], bool]

# Recognized but carrying no CSS.
_IGNORED = {
    "vertAlign", "kern", "noWrap",
    "bCs", "iCs", "szCs", "tabs", "outlineLvl", "contextualSpacing",
    "tblStyleColBandSize", "tblStyleRowBandSize", "webHidden",
    "pageBreakBefore", "suppressLineNumbers", "keepLines", "keepNext",
    "lang", "widowControl", "bidi", "rtl", "noProof",
}

_DASHED_UNDERLINES = {
    "dash", "dashDotDotHeavy", "dashDotHeavy", "dashedHeavy",
    "dashLong", "dashLongHeavy", "dotDash", "dotDotDash",
}


class FormatParser:
    """
    Decoder of formatting properties into CSS maps.

    Args:
        ignore_width: Skip cell widths (``tcW``)
        debug: Log unknown property elements
    """

    def __init__(self, ignore_width: bool = False, debug: bool = False):
        self.ignore_width = ignore_width
        self.debug = debug

    def parse_default_properties(self, elem, style: Optional[Dict[str, str]] = None,
                                 child_style: Optional[Dict[str, str]] = None,
                                 handler: Optional[PropertyHandler] = None) -> Dict[str, str]:
        """
        Decode the children of a property element.

        Args:
            elem: Property container (``pPr``, ``rPr``, ``tblPr``...)
            style: Map receiving the declarations, created when None
            child_style: Map receiving cell borders and margins declared on a table
            handler: Called first for every child; returning True consumes it

        Returns:
            The style map
        """
        if style is None:
            style = {}
        container = xml.local_name(elem)

        for c in xml.elements(elem):
            if handler is not None and handler(c):
                continue

            name = xml.local_name(c)

            if name == "jc":
                style["text-align"] = values.value_of_jc(c)
            elif name == "textAlignment":
                style["vertical-align"] = values.value_of_text_alignment(c)
            elif name == "color":
                style["color"] = xml.color_attr(c, "val", None, values.AUTOS["color"])
            elif name == "sz":
                style["min-height"] = xml.length_attr(c, "val", units.FONT_SIZE)
                style["font-size"] = style["min-height"]
            elif name == "shd":
                style["background-color"] = xml.color_attr(c, "fill", None, values.AUTOS["shd"])
            elif name == "highlight":
                style["background-color"] = xml.color_attr(c, "val", None, values.AUTOS["highlight"])
            elif name == "position":
                style["vertical-align"] = xml.length_attr(c, "val", units.FONT_SIZE)
            elif name == "tcW":
                if not self.ignore_width:
                    style["width"] = values.value_of_size(c, "w")
            elif name == "tblW":
                style["width"] = values.value_of_size(c, "w")
            elif name == "trHeight":
                style["height"] = xml.length_attr(c, "val")
            elif name == "strike":
                style["text-decoration"] = "line-through" if xml.bool_attr(c, "val", True) else "none"
            elif name == "b":
                style["font-weight"] = "bold" if xml.bool_attr(c, "val", True) else "normal"
            elif name == "i":
                style["font-style"] = "italic" if xml.bool_attr(c, "val", True) else "normal"
            elif name == "caps":
                style["text-transform"] = "uppercase" if xml.bool_attr(c, "val", True) else "none"
            elif name == "smallCaps":
                style["text-transform"] = "lowercase" if xml.bool_attr(c, "val", True) else "none"
            elif name == "u":
                self._parse_underline(c, style)
            elif name in ("ind", "tblInd"):
                self._parse_indentation(c, style)
            elif name == "rFonts":
                self._parse_font(c, style)
            elif name == "tblBorders":
                self._parse_border_properties(c, child_style if child_style is not None else style)
            elif name == "tblCellSpacing":
                style["border-spacing"] = values.value_of_margin(c)
                style["border-collapse"] = "separate"
            elif name in ("pBdr", "tcBorders"):
                self._parse_border_properties(c, style)
            elif name == "bdr":
                style["border"] = values.value_of_border(c)
            elif name == "vanish":
                if xml.bool_attr(c, "val", True):
                    style["display"] = "none"
            elif name in ("tblCellMar", "tcMar"):
                self._parse_margin_properties(c, child_style if child_style is not None else style)
            elif name == "tblLayout":
                style["table-layout"] = values.value_of_tbl_layout(c)
            elif name == "vAlign":
                style["vertical-align"] = values.value_of_text_alignment(c)
            elif name == "spacing":
                if container == "pPr":
                    self._parse_spacing(c, style)
            elif name == "wordWrap":
                if xml.bool_attr(c, "val"):
                    style["overflow-wrap"] = "break-word"
            elif name in _IGNORED:
                pass
            elif self.debug:
                logger.warning(f"Unknown document element: {container}.{name}")

        return style

    @staticmethod
    def _parse_underline(elem, style: Dict[str, str]) -> None:
        val = xml.attr(elem, "val")
        if val is None:
            return

        if val in _DASHED_UNDERLINES:
            style["text-decoration-style"] = "dashed"
        elif val in ("dotted", "dottedHeavy"):
            style["text-decoration-style"] = "dotted"
        elif val == "double":
            style["text-decoration-style"] = "double"
        elif val in ("single", "thick", "words"):
            style["text-decoration"] = "underline"
        elif val in ("wave", "wavyDouble", "wavyHeavy"):
            style["text-decoration-style"] = "wavy"
        elif val == "none":
            style["text-decoration"] = "none"

        color = xml.color_attr(elem, "color")
        if color:
            style["text-decoration-color"] = color

    @staticmethod
    def _parse_indentation(elem, style: Dict[str, str]) -> None:
        first_line = xml.length_attr(elem, "firstLine")
        hanging = xml.length_attr(elem, "hanging")
        left = xml.length_attr(elem, "left") or xml.length_attr(elem, "start")
        right = xml.length_attr(elem, "right") or xml.length_attr(elem, "end")

        if first_line:
            style["text-indent"] = first_line
        if hanging:
            style["text-indent"] = f"-{hanging}"
        if left:
            style["margin-left"] = left
        if right:
            style["margin-right"] = right

    @staticmethod
    def _parse_font(elem, style: Dict[str, str]) -> None:
        fonts = [f for f in (xml.attr(elem, "ascii"), values.theme_value(elem, "asciiTheme")) if f]
        if fonts:
            style["font-family"] = ", ".join(fonts)

    @staticmethod
    def _parse_border_properties(elem, output: Dict[str, str]) -> None:
        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name in ("start", "left"):
                output["border-left"] = values.value_of_border(c)
            elif name in ("end", "right"):
                output["border-right"] = values.value_of_border(c)
            elif name == "top":
                output["border-top"] = values.value_of_border(c)
            elif name == "bottom":
                output["border-bottom"] = values.value_of_border(c)

    @staticmethod
    def _parse_margin_properties(elem, output: Dict[str, str]) -> None:
        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name in ("left", "right", "top", "bottom"):
                output[f"padding-{name}"] = values.value_of_margin(c)

    @staticmethod
    def _parse_spacing(elem, style: Dict[str, str]) -> None:
        """Margins from ``before``/``after`` and line height by line rule."""
        before = xml.length_attr(elem, "before")
        after = xml.length_attr(elem, "after")
        line = xml.int_attr(elem, "line")
        line_rule = xml.attr(elem, "lineRule")

        if before:
            style["margin-top"] = before
        if after:
            style["margin-bottom"] = after

        if line is None:
            return

        if line_rule == "auto":
            style["line-height"] = f"{line / 240:.2f}"
        elif line_rule == "atLeast":
            style["line-height"] = f"calc(100% + {_points(line)}pt)"
        else:
            style["min-height"] = f"{_points(line)}pt"
            style["line-height"] = style["min-height"]


def _points(twips: int) -> str:
    value = twips / 20
    return f"{value:g}"
