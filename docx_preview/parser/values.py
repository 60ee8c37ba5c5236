"""Converters from single WordprocessingML property elements to CSS values."""

from typing import Optional

from . import units
from .xml_parser import xml

AUTOS = {
    "shd": "inherit",
    "color": "black",
    "border_color": "black",
    "highlight": "transparent",
}

CNF_STYLE_CLASSES = [
    "first-row", "last-row", "first-col", "last-col",
    "odd-col", "even-col", "odd-row", "even-row",
    "ne-cell", "nw-cell", "se-cell", "sw-cell",
]


def theme_value(elem, attr_name: str) -> Optional[str]:
    value = xml.attr(elem, attr_name)
    return f"var(--docx-{value}-font)" if value else None


def value_of_size(elem, attr_name: str) -> Optional[str]:
    usage = units.DXA
    size_type = xml.attr(elem, "type")
    if size_type == "pct":
        usage = units.PERCENT
    elif size_type == "auto":
        return "auto"
    return xml.length_attr(elem, attr_name, usage)


def value_of_margin(elem) -> Optional[str]:
    return xml.length_attr(elem, "w")


def value_of_border(elem) -> str:
    if xml.attr(elem, "val") == "nil":
        return "none"

    color = xml.color_attr(elem, "color")
    size = xml.length_attr(elem, "sz", units.BORDER)
    return f"{size} solid {AUTOS['border_color'] if color == 'auto' else color}"


def value_of_tbl_layout(elem) -> str:
    return "fixed" if xml.attr(elem, "val") == "fixed" else "auto"


def class_name_of_cnf_style(elem) -> str:
    value = xml.attr(elem, "val") or ""
    return " ".join(name for i, name in enumerate(CNF_STYLE_CLASSES) if i < len(value) and value[i] == "1")


def value_of_jc(elem) -> Optional[str]:
    value = xml.attr(elem, "val")
    if value in ("start", "left"):
        return "left"
    if value == "center":
        return "center"
    if value in ("end", "right"):
        return "right"
    if value == "both":
        return "justify"
    return value


def value_of_vert_align(elem, as_tag_name: bool = False) -> Optional[str]:
    value = xml.attr(elem, "val")
    if value == "subscript":
        return "sub"
    if value == "superscript":
        return "sup" if as_tag_name else "super"
    return None if as_tag_name else value


def value_of_text_alignment(elem) -> Optional[str]:
    value = xml.attr(elem, "val")
    return {
        "auto": "baseline",
        "baseline": "baseline",
        "top": "top",
        "center": "middle",
        "bottom": "bottom",
    }.get(value, value)


def add_size(a: Optional[str], b: Optional[str]) -> Optional[str]:
    if a is None:
        return b
    if b is None:
        return a
    return f"calc({a} + {b})"


def class_name_of_tbl_look(elem) -> str:
    """Classes enabling conditional table formatting, from attributes or the legacy hex mask."""
    mask = xml.hex_attr(elem, "val", 0)
    flags = [
        ("firstRow", 0x0020, "first-row"),
        ("lastRow", 0x0040, "last-row"),
        ("firstColumn", 0x0080, "first-col"),
        ("lastColumn", 0x0100, "last-col"),
        ("noHBand", 0x0200, "no-hband"),
        ("noVBand", 0x0400, "no-vband"),
    ]
    return " ".join(name for attr_name, bit, name in flags
                    if xml.bool_attr(elem, attr_name) or mask & bit)
