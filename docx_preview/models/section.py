"""Section, border and paragraph property models."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Border:
    type: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    offset: Optional[str] = None
    frame: Optional[bool] = None
    shadow: Optional[bool] = None


@dataclass
class Borders:
    top: Optional[Border] = None
    left: Optional[Border] = None
    right: Optional[Border] = None
    bottom: Optional[Border] = None


@dataclass
class Column:
    width: Optional[str] = None
    space: Optional[str] = None


@dataclass
class Columns:
    number_of_columns: Optional[int] = None
    space: Optional[str] = None
    separator: Optional[bool] = None
    equal_width: bool = True
    columns: List[Column] = field(default_factory=list)


@dataclass
class PageSize:
    width: Optional[str] = None
    height: Optional[str] = None
    orientation: Optional[str] = None


@dataclass
class PageMargins:
    top: Optional[str] = None
    right: Optional[str] = None
    bottom: Optional[str] = None
    left: Optional[str] = None
    header: Optional[str] = None
    footer: Optional[str] = None
    gutter: Optional[str] = None


@dataclass
class PageNumber:
    start: Optional[int] = None
    chap_sep: Optional[str] = None
    chap_style: Optional[str] = None
    format: Optional[str] = None


@dataclass
class HeaderFooterReference:
    """Relationship id of a header/footer part tagged ``first``, ``even`` or ``default``."""

    id: Optional[str] = None
    type: Optional[str] = None


@dataclass
class SectionProperties:
    """Page layout shared by a contiguous run of body content."""

    type: Optional[str] = None
    page_size: Optional[PageSize] = None
    page_margins: Optional[PageMargins] = None
    page_borders: Optional[Borders] = None
    page_number: Optional[PageNumber] = None
    columns: Optional[Columns] = None
    header_refs: Optional[List[HeaderFooterReference]] = None
    footer_refs: Optional[List[HeaderFooterReference]] = None
    title_page: Optional[bool] = None


@dataclass
class ParagraphTab:
    style: Optional[str] = None
    leader: Optional[str] = None
    position: Optional[str] = None


@dataclass
class NumberingReference:
    id: Optional[str] = None
    level: Optional[int] = None


@dataclass
class LineSpacing:
    before: Optional[str] = None
    after: Optional[str] = None
    line: Optional[int] = None
    line_rule: Optional[str] = None


@dataclass
class RunProperties:
    color: Optional[str] = None
    font_size: Optional[str] = None


@dataclass
class ParagraphProperties(RunProperties):
    section_props: Optional[SectionProperties] = None
    tabs: Optional[List[ParagraphTab]] = None
    numbering: Optional[NumberingReference] = None
    border: Optional[Borders] = None
    text_alignment: Optional[str] = None
    line_spacing: Optional[LineSpacing] = None
    keep_lines: Optional[bool] = None
    keep_next: Optional[bool] = None
    page_break_before: Optional[bool] = None
    outline_level: Optional[int] = None
    style_name: Optional[str] = None
    run_props: Optional[RunProperties] = None
