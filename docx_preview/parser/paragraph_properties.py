"""
Paragraph and run property parser.

Decodes the non-CSS properties of ``pPr``/``rPr`` (numbering, tabs, section
breaks, keep/page-break flags) onto a paragraph node or a style.
"""

from typing import List, Union

from ..models.section import (
    LineSpacing,
    NumberingReference,
    ParagraphProperties,
    ParagraphTab,
    RunProperties,
)
from . import units
from .section_parser import parse_section_properties
from .xml_parser import NS, xml

PropertyTarget = Union[ParagraphProperties, RunProperties]


def parse_common_property(elem, props: PropertyTarget) -> bool:
    if xml.namespace(elem) != NS["w"]:
        return False

    name = xml.local_name(elem)
    if name == "color":
        props.color = xml.color_attr(elem, "val")
    elif name == "sz":
        props.font_size = xml.length_attr(elem, "val", units.FONT_SIZE)
    else:
        return False
    return True


def _parse_tabs(elem) -> List[ParagraphTab]:
    return [
        ParagraphTab(
            position=xml.length_attr(e, "pos"),
            leader=xml.attr(e, "leader"),
            style=xml.attr(e, "val"),
        )
        for e in xml.elements(elem, "tab")
    ]


def _parse_numbering(elem) -> NumberingReference:
    result = NumberingReference()
    for child in xml.elements(elem):
        name = xml.local_name(child)
        if name == "numId":
            result.id = xml.attr(child, "val")
        elif name == "ilvl":
            result.level = xml.int_attr(child, "val")
    return result


def parse_line_spacing(elem) -> LineSpacing:
    return LineSpacing(
        before=xml.length_attr(elem, "before"),
        after=xml.length_attr(elem, "after"),
        line=xml.int_attr(elem, "line"),
        line_rule=xml.attr(elem, "lineRule"),
    )


def parse_paragraph_property(elem, props: ParagraphProperties) -> bool:
    """
    Apply one ``pPr`` child to ``props``.

    Returns:
        True when the element is fully consumed. ``spacing`` and
        ``textAlignment`` return False so that their CSS is emitted as well.
    """
    if xml.namespace(elem) != NS["w"]:
        return False

    if parse_common_property(elem, props):
        return True

    name = xml.local_name(elem)
    if name == "tabs":
        props.tabs = _parse_tabs(elem)
    elif name == "sectPr":
        props.section_props = parse_section_properties(elem)
    elif name == "numPr":
        props.numbering = _parse_numbering(elem)
    elif name == "spacing":
        props.line_spacing = parse_line_spacing(elem)
        return False
    elif name == "textAlignment":
        props.text_alignment = xml.attr(elem, "val")
        return False
    elif name == "keepNext":
        props.keep_lines = xml.bool_attr(elem, "val", True)
        props.keep_next = xml.bool_attr(elem, "val", True)
    elif name == "pageBreakBefore":
        props.page_break_before = xml.bool_attr(elem, "val", True)
    elif name == "outlineLvl":
        props.outline_level = xml.int_attr(elem, "val")
    elif name == "pStyle":
        props.style_name = xml.attr(elem, "val")
    elif name == "rPr":
        props.run_props = parse_run_properties(elem)
    else:
        return False

    return True


def parse_paragraph_properties(elem) -> ParagraphProperties:
    result = ParagraphProperties()
    for child in xml.elements(elem):
        parse_paragraph_property(child, result)
    return result


def parse_run_properties(elem) -> RunProperties:
    result = RunProperties()
    for child in xml.elements(elem):
        parse_common_property(child, result)
    return result
