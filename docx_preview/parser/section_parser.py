"""Section parser for DOCX documents."""

from __future__ import annotations

from typing import List

from ..models.section import (
    Border,
    Borders,
    Column,
    Columns,
    HeaderFooterReference,
    PageMargins,
    PageNumber,
    PageSize,
    SectionProperties,
)
from . import units
from .xml_parser import xml


def parse_border(elem) -> Border:
    return Border(
        type=xml.attr(elem, "val"),
        color=xml.attr(elem, "color"),
        size=xml.length_attr(elem, "sz", units.BORDER),
        offset=xml.length_attr(elem, "space", units.POINT),
        frame=xml.bool_attr(elem, "frame"),
        shadow=xml.bool_attr(elem, "shadow"),
    )


def parse_borders(elem) -> Borders:
    result = Borders()
    for child in xml.elements(elem):
        side = xml.local_name(child)
        if side in ("left", "top", "right", "bottom"):
            setattr(result, side, parse_border(child))
    return result


def _parse_columns(elem) -> Columns:
    return Columns(
        number_of_columns=xml.int_attr(elem, "num"),
        space=xml.length_attr(elem, "space"),
        separator=xml.bool_attr(elem, "sep"),
        equal_width=xml.bool_attr(elem, "equalWidth", True),
        columns=[
            Column(width=xml.length_attr(e, "w"), space=xml.length_attr(e, "space"))
            for e in xml.elements(elem, "col")
        ],
    )


def _parse_page_number(elem) -> PageNumber:
    return PageNumber(
        chap_sep=xml.attr(elem, "chapSep"),
        chap_style=xml.attr(elem, "chapStyle"),
        format=xml.attr(elem, "fmt"),
        start=xml.int_attr(elem, "start"),
    )


def _parse_reference(elem) -> HeaderFooterReference:
    return HeaderFooterReference(id=xml.attr(elem, "id"), type=xml.attr(elem, "type"))


def parse_section_properties(elem) -> SectionProperties:
    """Parse a ``sectPr`` element."""
    section = SectionProperties()

    for child in xml.elements(elem):
        name = xml.local_name(child)

        if name == "pgSz":
            section.page_size = PageSize(
                width=xml.length_attr(child, "w"),
                height=xml.length_attr(child, "h"),
                orientation=xml.attr(child, "orient"),
            )
        elif name == "type":
            section.type = xml.attr(child, "val")
        elif name == "pgMar":
            section.page_margins = PageMargins(
                left=xml.length_attr(child, "left"),
                right=xml.length_attr(child, "right"),
                top=xml.length_attr(child, "top"),
                bottom=xml.length_attr(child, "bottom"),
                header=xml.length_attr(child, "header"),
                footer=xml.length_attr(child, "footer"),
                gutter=xml.length_attr(child, "gutter"),
            )
        elif name == "cols":
            section.columns = _parse_columns(child)
        elif name == "headerReference":
            refs: List[HeaderFooterReference] = section.header_refs or []
            refs.append(_parse_reference(child))
            section.header_refs = refs
        elif name == "footerReference":
            refs = section.footer_refs or []
            refs.append(_parse_reference(child))
            section.footer_refs = refs
        elif name == "titlePg":
            section.title_page = xml.bool_attr(child, "val", True)
        elif name == "pgBorders":
            section.page_borders = parse_borders(child)
        elif name == "pgNumType":
            section.page_number = _parse_page_number(child)

    return section
