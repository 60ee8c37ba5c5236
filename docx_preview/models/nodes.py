"""
Document node models.

Every parsed WordprocessingML construct becomes one of these nodes. A node owns
its children through ``children``; the ``parent`` link is a weak reference
attached after parsing by the renderer and never keeps a node alive.
"""

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from .section import ParagraphProperties, RunProperties, SectionProperties


class DomType(str, Enum):
    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    RUN = "run"
    BREAK = "break"
    NO_BREAK_HYPHEN = "noBreakHyphen"
    TABLE = "table"
    ROW = "row"
    CELL = "cell"
    HYPERLINK = "hyperlink"
    DRAWING = "drawing"
    IMAGE = "image"
    TEXT = "text"
    TAB = "tab"
    SYMBOL = "symbol"
    BOOKMARK_START = "bookmarkStart"
    BOOKMARK_END = "bookmarkEnd"
    FOOTER = "footer"
    HEADER = "header"
    FOOTNOTE_REFERENCE = "footnoteReference"
    ENDNOTE_REFERENCE = "endnoteReference"
    FOOTNOTE = "footnote"
    ENDNOTE = "endnote"
    SIMPLE_FIELD = "simpleField"
    COMPLEX_FIELD = "complexField"
    INSTRUCTION = "instruction"
    VML_PICTURE = "vmlPicture"
    MML_MATH = "mmlMath"
    MML_MATH_PARAGRAPH = "mmlMathParagraph"
    MML_FRACTION = "mmlFraction"
    MML_NUMERATOR = "mmlNumerator"
    MML_DENOMINATOR = "mmlDenominator"
    MML_RADICAL = "mmlRadical"
    MML_BASE = "mmlBase"
    MML_DEGREE = "mmlDegree"
    MML_SUPERSCRIPT = "mmlSuperscript"
    MML_SUBSCRIPT = "mmlSubscript"
    MML_SUB_ARGUMENT = "mmlSubArgument"
    MML_SUPER_ARGUMENT = "mmlSuperArgument"
    MML_NARY = "mmlNary"
    MML_DELIMITER = "mmlDelimiter"
    VML_ELEMENT = "vmlElement"
    INSERTED = "inserted"
    DELETED = "deleted"
    DELETED_TEXT = "deletedText"


@dataclass(eq=False)
class DocxElement:
    """Base node: type tag, ordered children and a flat CSS property map."""

    type: DomType = DomType.DOCUMENT
    children: List["DocxElement"] = field(default_factory=list)
    css_style: Dict[str, str] = field(default_factory=dict)
    props: Optional[Dict[str, Any]] = None
    style_name: Optional[str] = None
    class_name: Optional[str] = None
    _parent_ref: Optional[weakref.ReferenceType] = field(default=None, init=False, repr=False)

    # nodes compare by identity
    __hash__ = object.__hash__

    def __eq__(self, other: object) -> bool:
        return self is other

    @property
    def parent(self) -> Optional["DocxElement"]:
        return self._parent_ref() if self._parent_ref is not None else None

    @parent.setter
    def parent(self, value: Optional["DocxElement"]) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    def iter_descendants(self) -> Iterator["DocxElement"]:
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def find_parent(self, node_type: DomType) -> Optional["DocxElement"]:
        parent = self.parent
        while parent is not None and parent.type != node_type:
            parent = parent.parent
        return parent

    def get_text(self) -> str:
        return "".join(child.get_text() for child in self.children)


@dataclass(eq=False)
class DocumentElement(DocxElement):
    type: DomType = DomType.DOCUMENT
    props: Optional[SectionProperties] = None


@dataclass(eq=False)
class Paragraph(DocxElement, ParagraphProperties):
    type: DomType = DomType.PARAGRAPH


@dataclass(eq=False)
class Run(DocxElement, RunProperties):
    type: DomType = DomType.RUN
    id: Optional[str] = None
    vertical_align: Optional[str] = None
    field_run: bool = False


@dataclass(eq=False)
class Text(DocxElement):
    type: DomType = DomType.TEXT
    text: str = ""

    def get_text(self) -> str:
        return self.text if self.type == DomType.TEXT else ""


@dataclass(eq=False)
class Break(DocxElement):
    """Line, page, column or last-rendered page break."""

    type: DomType = DomType.BREAK
    break_type: str = "textWrapping"


@dataclass(eq=False)
class Symbol(DocxElement):
    type: DomType = DomType.SYMBOL
    font: Optional[str] = None
    char: Optional[str] = None


@dataclass(eq=False)
class NoteReference(DocxElement):
    type: DomType = DomType.FOOTNOTE_REFERENCE
    id: Optional[str] = None


@dataclass(eq=False)
class Note(DocxElement):
    type: DomType = DomType.FOOTNOTE
    id: Optional[str] = None
    note_type: Optional[str] = None


@dataclass(eq=False)
class Hyperlink(DocxElement):
    type: DomType = DomType.HYPERLINK
    id: Optional[str] = None
    href: Optional[str] = None


@dataclass
class TableColumn:
    width: Optional[str] = None


@dataclass(eq=False)
class Table(DocxElement):
    type: DomType = DomType.TABLE
    columns: Optional[List[TableColumn]] = None
    cell_style: Dict[str, str] = field(default_factory=dict)
    col_band_size: Optional[int] = None
    row_band_size: Optional[int] = None


@dataclass(eq=False)
class TableRow(DocxElement):
    type: DomType = DomType.ROW
    is_header: Optional[bool] = None


@dataclass(eq=False)
class TableCell(DocxElement):
    type: DomType = DomType.CELL
    vertical_merge: Optional[str] = None
    span: Optional[int] = None


@dataclass(eq=False)
class Image(DocxElement):
    type: DomType = DomType.IMAGE
    src: Optional[str] = None


@dataclass(eq=False)
class BookmarkStart(DocxElement):
    type: DomType = DomType.BOOKMARK_START
    id: Optional[str] = None
    name: Optional[str] = None
    col_first: Optional[int] = None
    col_last: Optional[int] = None


@dataclass(eq=False)
class BookmarkEnd(DocxElement):
    type: DomType = DomType.BOOKMARK_END
    id: Optional[str] = None


@dataclass(eq=False)
class SimpleField(DocxElement):
    type: DomType = DomType.SIMPLE_FIELD
    instruction: Optional[str] = None
    lock: bool = False
    dirty: bool = False


@dataclass(eq=False)
class ComplexField(DocxElement):
    """``fldChar`` marker: begin, separate or end."""

    type: DomType = DomType.COMPLEX_FIELD
    char_type: Optional[str] = None
    lock: bool = False
    dirty: bool = False


@dataclass(eq=False)
class Instruction(DocxElement):
    type: DomType = DomType.INSTRUCTION
    text: str = ""


@dataclass
class ImageHref:
    id: Optional[str] = None
    title: Optional[str] = None


@dataclass(eq=False)
class VmlElement(DocxElement):
    """Legacy vector shape mapped onto an SVG tag."""

    type: DomType = DomType.VML_ELEMENT
    tag_name: Optional[str] = None
    css_style_text: Optional[str] = None
    attrs: Dict[str, str] = field(default_factory=dict)
    image_href: Optional[ImageHref] = None
