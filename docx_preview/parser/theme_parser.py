"""Theme parser for DOCX documents."""

from ..models.parts import ColorScheme, FontInfo, FontScheme, Theme
from .xml_parser import xml


def parse_theme(root) -> Theme:
    """Parse the colour and font schemes of a theme part."""
    result = Theme()
    theme_elements = xml.element(root, "themeElements")

    for elem in xml.elements(theme_elements):
        name = xml.local_name(elem)
        if name == "clrScheme":
            result.color_scheme = _parse_color_scheme(elem)
        elif name == "fontScheme":
            result.font_scheme = _parse_font_scheme(elem)

    return result


def _parse_color_scheme(elem) -> ColorScheme:
    result = ColorScheme(name=xml.attr(elem, "name"))

    for color in xml.elements(elem):
        srgb = xml.element(color, "srgbClr")
        system = xml.element(color, "sysClr")
        if srgb is not None:
            result.colors[xml.local_name(color)] = xml.attr(srgb, "val")
        elif system is not None:
            result.colors[xml.local_name(color)] = xml.attr(system, "lastClr")

    return result


def _parse_font_scheme(elem) -> FontScheme:
    result = FontScheme(name=xml.attr(elem, "name"))

    for font in xml.elements(elem):
        name = xml.local_name(font)
        if name == "majorFont":
            result.major_font = _parse_font_info(font)
        elif name == "minorFont":
            result.minor_font = _parse_font_info(font)

    return result


def _parse_font_info(elem) -> FontInfo:
    return FontInfo(
        latin_typeface=xml.element_attr(elem, "latin", "typeface"),
        ea_typeface=xml.element_attr(elem, "ea", "typeface"),
        cs_typeface=xml.element_attr(elem, "cs", "typeface"),
    )
