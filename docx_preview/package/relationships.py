"""
Relationships for DOCX packages.

Handles relationship types, ``.rels`` parsing and relationship-file paths.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..parser.xml_parser import xml
from ..utils.helpers import split_path

_OFFICE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
_PACKAGE = "http://schemas.openxmlformats.org/package/2006/relationships"


class RelationshipTypes:
    OFFICE_DOCUMENT = f"{_OFFICE}/officeDocument"
    FONT_TABLE = f"{_OFFICE}/fontTable"
    IMAGE = f"{_OFFICE}/image"
    NUMBERING = f"{_OFFICE}/numbering"
    STYLES = f"{_OFFICE}/styles"
    STYLES_WITH_EFFECTS = "http://schemas.microsoft.com/office/2007/relationships/stylesWithEffects"
    THEME = f"{_OFFICE}/theme"
    SETTINGS = f"{_OFFICE}/settings"
    WEB_SETTINGS = f"{_OFFICE}/webSettings"
    HYPERLINK = f"{_OFFICE}/hyperlink"
    FOOTNOTES = f"{_OFFICE}/footnotes"
    ENDNOTES = f"{_OFFICE}/endnotes"
    FOOTER = f"{_OFFICE}/footer"
    HEADER = f"{_OFFICE}/header"
    EXTENDED_PROPERTIES = f"{_OFFICE}/extended-properties"
    CORE_PROPERTIES = f"{_PACKAGE}/metadata/core-properties"
    CUSTOM_PROPERTIES = f"{_PACKAGE}/metadata/custom-properties"


@dataclass
class Relationship:
    id: Optional[str]
    type: Optional[str]
    target: Optional[str]
    target_mode: Optional[str] = None

    @property
    def is_external(self) -> bool:
        return self.target_mode == "External"


# Loaded from the package root; fall back to the conventional path when _rels/.rels omits one.
TOP_LEVEL_RELATIONSHIPS = [
    Relationship(None, RelationshipTypes.OFFICE_DOCUMENT, "word/document.xml"),
    Relationship(None, RelationshipTypes.EXTENDED_PROPERTIES, "docProps/app.xml"),
    Relationship(None, RelationshipTypes.CORE_PROPERTIES, "docProps/core.xml"),
    Relationship(None, RelationshipTypes.CUSTOM_PROPERTIES, "docProps/custom.xml"),
]


def parse_relationships(root) -> List[Relationship]:
    return [
        Relationship(
            id=xml.attr(e, "Id"),
            type=xml.attr(e, "Type"),
            target=xml.attr(e, "Target"),
            target_mode=xml.attr(e, "TargetMode"),
        )
        for e in xml.elements(root)
    ]


def relationships_path(part_path: Optional[str] = None) -> str:
    """``word/document.xml`` -> ``word/_rels/document.xml.rels``; None -> ``_rels/.rels``."""
    if part_path is None:
        return "_rels/.rels"
    folder, file_name = split_path(part_path)
    return f"{folder}_rels/{file_name}.rels"
