"""
Models module for parsed DOCX content.

Node dataclasses for the document tree plus the typed payloads of every
package part.
"""

from .nodes import (
    BookmarkEnd,
    BookmarkStart,
    Break,
    ComplexField,
    DocumentElement,
    DocxElement,
    DomType,
    Hyperlink,
    Image,
    ImageHref,
    Instruction,
    Note,
    NoteReference,
    Paragraph,
    Run,
    SimpleField,
    Symbol,
    Table,
    TableCell,
    TableColumn,
    TableRow,
    Text,
    VmlElement,
)
from .parts import (
    ColorScheme,
    CoreProperties,
    CustomProperty,
    EmbedFontRef,
    ExtendedProperties,
    FontDeclaration,
    FontInfo,
    FontScheme,
    NoteProperties,
    Settings,
    Theme,
)
from .section import (
    Border,
    Borders,
    Column,
    Columns,
    HeaderFooterReference,
    LineSpacing,
    NumberingReference,
    PageMargins,
    PageNumber,
    PageSize,
    ParagraphProperties,
    ParagraphTab,
    RunProperties,
    SectionProperties,
)
from .styles import (
    AbstractNumbering,
    Numbering,
    NumberingBulletPicture,
    NumberingDefinitions,
    NumberingLevel,
    NumberingLevelOverride,
    NumberingPicBullet,
    NumberingStyle,
    Style,
    SubStyle,
)

__all__ = [
    "AbstractNumbering",
    "BookmarkEnd",
    "BookmarkStart",
    "Border",
    "Borders",
    "Break",
    "ColorScheme",
    "Column",
    "Columns",
    "ComplexField",
    "CoreProperties",
    "CustomProperty",
    "DocumentElement",
    "DocxElement",
    "DomType",
    "EmbedFontRef",
    "ExtendedProperties",
    "FontDeclaration",
    "FontInfo",
    "FontScheme",
    "HeaderFooterReference",
    "Hyperlink",
    "Image",
    "ImageHref",
    "Instruction",
    "LineSpacing",
    "Note",
    "NoteProperties",
    "NoteReference",
    "Numbering",
    "NumberingBulletPicture",
    "NumberingDefinitions",
    "NumberingLevel",
    "NumberingLevelOverride",
    "NumberingPicBullet",
    "NumberingReference",
    "NumberingStyle",
    "PageMargins",
    "PageNumber",
    "PageSize",
    "Paragraph",
    "ParagraphProperties",
    "ParagraphTab",
    "Run",
    "RunProperties",
    "SectionProperties",
    "Settings",
    "SimpleField",
    "Style",
    "SubStyle",
    "Symbol",
    "Table",
    "TableCell",
    "TableColumn",
    "TableRow",
    "Text",
    "Theme",
    "VmlElement",
]
