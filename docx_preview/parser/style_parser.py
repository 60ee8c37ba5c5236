"""
Style parser for DOCX documents.

Parses ``styles.xml`` into ``Style`` records: document defaults, paragraph,
character, table and numbering styles, including the conditional formatting
blocks of table styles.
"""

import logging
from typing import List

from ..models.styles import Style, SubStyle
from .format_parser import FormatParser
from .paragraph_properties import parse_paragraph_properties, parse_run_properties
from .xml_parser import xml

logger = logging.getLogger(__name__)

STYLE_TARGETS = {
    "paragraph": "p",
    "table": "table",
    "character": "span",
    "numbering": "p",
}

# tblStylePr type -> (class modifier on the table, selector inside it)
TABLE_STYLE_SELECTORS = {
    "firstRow": (".first-row", "tr.first-row td"),
    "lastRow": (".last-row", "tr.last-row td"),
    "firstCol": (".first-col", "td.first-col"),
    "lastCol": (".last-col", "td.last-col"),
    "band1Vert": (":not(.no-vband)", "td.odd-col"),
    "band2Vert": (":not(.no-vband)", "td.even-col"),
    "band1Horz": (":not(.no-hband)", "tr.odd-row"),
    "band2Horz": (":not(.no-hband)", "tr.even-row"),
}

_IGNORED_STYLE_ELEMENTS = {
    "rsid", "qFormat", "hidden", "semiHidden", "unhideWhenUsed", "autoRedefine", "uiPriority",
}


class StyleParser:
    """Parser for the styles part."""

    def __init__(self, format_parser: FormatParser):
        self.format_parser = format_parser

    def parse_styles_file(self, root) -> List[Style]:
        result = []
        for elem in xml.elements(root):
            name = xml.local_name(elem)
            if name == "style":
                result.append(self.parse_style(elem))
            elif name == "docDefaults":
                result.append(self.parse_default_styles(elem))
        logger.debug(f"Parsed {len(result)} styles")
        return result

    def parse_default_styles(self, elem) -> Style:
        """Document defaults become an anonymous style applying to spans and paragraphs."""
        result = Style()

        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "rPrDefault":
                r_pr = xml.element(c, "rPr")
                if r_pr is not None:
                    result.styles.append(SubStyle("span", self.format_parser.parse_default_properties(r_pr)))
            elif name == "pPrDefault":
                p_pr = xml.element(c, "pPr")
                if p_pr is not None:
                    result.styles.append(SubStyle("p", self.format_parser.parse_default_properties(p_pr)))

        return result

    def parse_style(self, elem) -> Style:
        result = Style(
            id=xml.attr(elem, "styleId"),
            is_default=bool(xml.bool_attr(elem, "default")),
            target=STYLE_TARGETS.get(xml.attr(elem, "type")),
        )

        for c in xml.elements(elem):
            name = xml.local_name(c)

            if name == "basedOn":
                result.based_on = xml.attr(c, "val")
            elif name == "name":
                result.name = xml.attr(c, "val")
            elif name == "link":
                result.linked = xml.attr(c, "val")
            elif name == "next":
                result.next = xml.attr(c, "val")
            elif name == "aliases":
                result.aliases = (xml.attr(c, "val") or "").split(",")
            elif name == "pPr":
                result.styles.append(SubStyle("p", self.format_parser.parse_default_properties(c)))
                result.paragraph_props = parse_paragraph_properties(c)
            elif name == "rPr":
                result.styles.append(SubStyle("span", self.format_parser.parse_default_properties(c)))
                result.run_props = parse_run_properties(c)
            elif name in ("tblPr", "tcPr"):
                result.styles.append(SubStyle("td", self.format_parser.parse_default_properties(c)))
            elif name == "tblStylePr":
                result.styles.extend(self.parse_table_style(c))
            elif name in _IGNORED_STYLE_ELEMENTS:
                pass
            elif self.format_parser.debug:
                logger.warning(f"Unknown style element: {name}")

        return result

    def parse_table_style(self, elem) -> List[SubStyle]:
        """Conditional formatting of a table style as selector-scoped sub-styles."""
        selectors = TABLE_STYLE_SELECTORS.get(xml.attr(elem, "type"))
        if selectors is None:
            return []

        mod, selector = selectors
        result = []
        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "pPr":
                target = f"{selector} p"
            elif name == "rPr":
                target = f"{selector} span"
            elif name in ("tblPr", "tcPr"):
                target = selector
            else:
                continue
            result.append(SubStyle(target, self.format_parser.parse_default_properties(c), mod))

        return result
