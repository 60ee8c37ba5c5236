"""Properties parser for DOCX documents: core, extended (app) and custom properties."""

from __future__ import annotations

from typing import List, Optional

from ..models.parts import CoreProperties, CustomProperty, ExtendedProperties
from . import units
from .xml_parser import xml

CORE_TEXT_FIELDS = {
    "title": "title",
    "description": "description",
    "subject": "subject",
    "creator": "creator",
    "keywords": "keywords",
    "language": "language",
    "lastModifiedBy": "last_modified_by",
}

EXTENDED_TEXT_FIELDS = {
    "Template": "template",
    "Application": "application",
    "Company": "company",
    "AppVersion": "app_version",
}

EXTENDED_INT_FIELDS = {
    "TotalTime": "total_time",
    "Pages": "pages",
    "Words": "words",
    "Characters": "characters",
    "Lines": "lines",
    "Paragraphs": "paragraphs",
}


def parse_core_properties(root) -> CoreProperties:
    result = CoreProperties()

    for elem in xml.elements(root):
        name = xml.local_name(elem)
        if name in CORE_TEXT_FIELDS:
            setattr(result, CORE_TEXT_FIELDS[name], xml.text_content(elem))
        elif name == "revision":
            result.revision = _int_text(elem)

    return result


def parse_extended_properties(root) -> ExtendedProperties:
    result = ExtendedProperties()

    for elem in xml.elements(root):
        name = xml.local_name(elem)
        if name in EXTENDED_TEXT_FIELDS:
            setattr(result, EXTENDED_TEXT_FIELDS[name], xml.text_content(elem))
        elif name in EXTENDED_INT_FIELDS:
            setattr(result, EXTENDED_INT_FIELDS[name], _int_text(elem))

    return result


def parse_custom_properties(root) -> List[CustomProperty]:
    """Custom properties; the value's type is the local name of its variant element."""
    result = []

    for elem in xml.elements(root, "property"):
        value = xml.first_element(elem)
        result.append(CustomProperty(
            format_id=xml.attr(elem, "fmtid"),
            name=xml.attr(elem, "name"),
            type=xml.local_name(value) if value is not None else None,
            value=xml.text_content(value) if value is not None else None,
        ))

    return result


def _int_text(elem) -> Optional[int]:
    return units.parse_int(xml.text_content(elem))
