"""
Parser module for DOCX parts.

XML accessors, unit conversion and the per-part parsers producing the
document model.
"""

from .document_parser import DocumentParser
from .format_parser import FormatParser
from .numbering_parser import NumberingParser
from .style_parser import StyleParser
from .xml_parser import NS, XmlParser, parse_xml_string, xml

__all__ = [
    "DocumentParser",
    "FormatParser",
    "NumberingParser",
    "StyleParser",
    "NS",
    "XmlParser",
    "parse_xml_string",
    "xml",
]
