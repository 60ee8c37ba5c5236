"""
XML accessor layer for DOCX parts.

Wraps lxml element trees with namespace-agnostic lookups by local name and
typed attribute readers used by every part parser.
"""

import logging
import re
from typing import List, Optional, Tuple

from lxml import etree as lxml_etree

from ..exceptions import ParsingError
from . import units
from .units import LengthUsage

logger = logging.getLogger(__name__)

NS = {
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "pic": "http://schemas.openxmlformats.org/drawingml/2006/picture",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
    "mc": "http://schemas.openxmlformats.org/markup-compatibility/2006",
    "m": "http://schemas.openxmlformats.org/officeDocument/2006/math",
    "svg": "http://www.w3.org/2000/svg",
    "mathml": "http://www.w3.org/1998/Math/MathML",
}

KNOWN_COLORS = {
    "black", "blue", "cyan", "darkBlue", "darkCyan", "darkGray", "darkGreen",
    "darkMagenta", "darkRed", "darkYellow", "green", "lightGray", "magenta",
    "none", "red", "white", "yellow",
}

_XML_DECLARATION = re.compile(r"<\?.*\?>")

_parser = lxml_etree.XMLParser(remove_blank_text=False, resolve_entities=False, huge_tree=True)


def parse_xml_string(text: str, trim_xml_declaration: bool = False, path: Optional[str] = None):
    """
    Parse part text into an element tree.

    Args:
        text: XML text
        trim_xml_declaration: Remove the ``<?xml ...?>`` prolog before parsing
        path: Part path, reported on failure

    Returns:
        lxml ElementTree

    Raises:
        ParsingError: if the XML is malformed
    """
    if trim_xml_declaration:
        text = _XML_DECLARATION.sub("", text, count=1)

    try:
        root = lxml_etree.fromstring(text.encode("utf-8"), _parser)
    except lxml_etree.XMLSyntaxError as e:
        raise ParsingError("Malformed XML", str(e), path=path) from e

    return root.getroottree()


def serialize_xml(tree) -> bytes:
    return lxml_etree.tostring(tree, xml_declaration=True, encoding="UTF-8", standalone=True)


class XmlParser:
    """Namespace-agnostic accessors over lxml elements."""

    @staticmethod
    def local_name(elem) -> str:
        return lxml_etree.QName(elem).localname

    @staticmethod
    def namespace(elem) -> Optional[str]:
        return lxml_etree.QName(elem).namespace

    def elements(self, elem, local_name: Optional[str] = None) -> List:
        """Child elements, optionally filtered by local name."""
        if elem is None:
            return []
        result = []
        for child in elem:
            if not isinstance(child.tag, str):
                continue
            if local_name is None or self.local_name(child) == local_name:
                result.append(child)
        return result

    def element(self, elem, local_name: str):
        if elem is None:
            return None
        for child in elem:
            if isinstance(child.tag, str) and self.local_name(child) == local_name:
                return child
        return None

    def first_element(self, elem):
        children = self.elements(elem)
        return children[0] if children else None

    def element_attr(self, elem, local_name: str, attr_local_name: str) -> Optional[str]:
        child = self.element(elem, local_name)
        return self.attr(child, attr_local_name) if child is not None else None

    def attrs(self, elem) -> List[Tuple[str, str]]:
        """Attributes as ``(local_name, value)`` pairs in document order."""
        return [(lxml_etree.QName(key).localname, value) for key, value in elem.attrib.items()]

    def attr(self, elem, local_name: str) -> Optional[str]:
        if elem is None:
            return None
        for key, value in elem.attrib.items():
            if lxml_etree.QName(key).localname == local_name:
                return value
        return None

    def int_attr(self, elem, attr_name: str, default: Optional[int] = None) -> Optional[int]:
        value = self.attr(elem, attr_name)
        if not value:
            return default
        number = units.parse_int(value)
        return number if number is not None else default

    def hex_attr(self, elem, attr_name: str, default: Optional[int] = None) -> Optional[int]:
        value = self.attr(elem, attr_name)
        if not value:
            return default
        number = units.parse_int(value, 16)
        return number if number is not None else default

    def float_attr(self, elem, attr_name: str, default: Optional[float] = None) -> Optional[float]:
        value = self.attr(elem, attr_name)
        if not value:
            return default
        number = units.parse_float(value)
        return number if number is not None else default

    def bool_attr(self, elem, attr_name: str, default: Optional[bool] = None) -> Optional[bool]:
        return units.convert_boolean(self.attr(elem, attr_name), default)

    def length_attr(self, elem, attr_name: str, usage: LengthUsage = units.DXA) -> Optional[str]:
        return units.convert_length(self.attr(elem, attr_name), usage)

    def text_content(self, elem) -> str:
        if elem is None:
            return ""
        return "".join(elem.itertext())

    def size_value(self, elem, usage: LengthUsage = units.DXA) -> Optional[str]:
        return units.convert_length(self.text_content(elem), usage)

    def color_attr(self, elem, attr_name: str, default: Optional[str] = None,
                   auto_color: str = "black") -> Optional[str]:
        """
        Read a colour attribute as a CSS colour.

        ``auto`` maps to ``auto_color``, named highlight colours pass through,
        hex values get a ``#`` prefix and theme colours become CSS variables.
        """
        value = self.attr(elem, attr_name)

        if value:
            if value == "auto":
                return auto_color
            if value in KNOWN_COLORS:
                return value
            return f"#{value}"

        theme_color = self.attr(elem, "themeColor")
        return f"var(--docx-{theme_color}-color)" if theme_color else default


xml = XmlParser()
