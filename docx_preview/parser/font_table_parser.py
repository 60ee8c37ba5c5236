"""Font table parser for DOCX documents."""

from typing import List

from ..models.parts import EmbedFontRef, FontDeclaration
from .xml_parser import xml

EMBED_FONT_TYPES = {
    "embedRegular": "regular",
    "embedBold": "bold",
    "embedItalic": "italic",
    "embedBoldItalic": "boldItalic",
}


def parse_fonts(root) -> List[FontDeclaration]:
    return [parse_font(elem) for elem in xml.elements(root, "font")]


def parse_font(elem) -> FontDeclaration:
    result = FontDeclaration(name=xml.attr(elem, "name"))

    for child in xml.elements(elem):
        name = xml.local_name(child)
        if name == "family":
            result.family = xml.attr(child, "val")
        elif name == "altName":
            result.alt_name = xml.attr(child, "val")
        elif name in EMBED_FONT_TYPES:
            result.embed_font_refs.append(EmbedFontRef(
                id=xml.attr(child, "id"),
                key=xml.attr(child, "fontKey"),
                type=EMBED_FONT_TYPES[name],
            ))

    return result
