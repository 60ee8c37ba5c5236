"""
Document body parser.

Recursive descent over WordprocessingML body content (document, headers,
footers, footnotes and endnotes) producing the node tree of
``docx_preview.models.nodes``.
"""

import logging
from typing import Callable, Dict, List, Optional

from ..models.nodes import (
    BookmarkEnd,
    BookmarkStart,
    Break,
    ComplexField,
    DocumentElement,
    DocxElement,
    DomType,
    Hyperlink,
    Image,
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
)
from ..options import Options
from . import units, values
from .format_parser import FormatParser
from .paragraph_properties import parse_paragraph_property
from .section_parser import parse_section_properties
from .vml_parser import parse_vml_picture
from .xml_parser import xml

logger = logging.getLogger(__name__)

# Namespaces whose mc:Choice branches are understood; everything else uses mc:Fallback.
SUPPORTED_NAMESPACES: frozenset = frozenset()

MATH_TAGS = {
    "oMath": DomType.MML_MATH,
    "oMathPara": DomType.MML_MATH_PARAGRAPH,
    "f": DomType.MML_FRACTION,
    "num": DomType.MML_NUMERATOR,
    "den": DomType.MML_DENOMINATOR,
    "rad": DomType.MML_RADICAL,
    "deg": DomType.MML_DEGREE,
    "e": DomType.MML_BASE,
    "sSup": DomType.MML_SUPERSCRIPT,
    "sSub": DomType.MML_SUBSCRIPT,
    "sup": DomType.MML_SUPER_ARGUMENT,
    "sub": DomType.MML_SUB_ARGUMENT,
    "d": DomType.MML_DELIMITER,
    "nary": DomType.MML_NARY,
}


class DocumentParser:
    """
    Parser turning body XML into document nodes.

    One instance is shared by every part of a document so that all of them
    honour the same options.
    """

    def __init__(self, options: Optional[Options] = None):
        self.options = options or Options()
        self.format_parser = FormatParser(ignore_width=self.options.ignore_width, debug=self.options.debug)

    def parse_document_file(self, root) -> DocumentElement:
        body = xml.element(root, "body")
        background = xml.element(root, "background")
        sect_pr = xml.element(body, "sectPr")

        return DocumentElement(
            children=self.parse_body_elements(body),
            props=parse_section_properties(sect_pr) if sect_pr is not None else None,
            css_style=self.parse_background(background) if background is not None else {},
        )

    @staticmethod
    def parse_background(elem) -> Dict[str, str]:
        result = {}
        color = xml.color_attr(elem, "color")
        if color:
            result["background-color"] = color
        return result

    def parse_header_footer(self, root, node_type: DomType) -> DocxElement:
        """Parse a header or footer part root."""
        return DocxElement(type=node_type, children=self.parse_body_elements(root))

    def parse_notes(self, root, elem_name: str, node_type: DomType) -> List[Note]:
        """
        Parse the notes of a footnotes or endnotes part.

        Args:
            root: Part root
            elem_name: ``footnote`` or ``endnote``
            node_type: Node type of the produced notes
        """
        return [
            Note(
                type=node_type,
                id=xml.attr(elem, "id"),
                note_type=xml.attr(elem, "type"),
                children=self.parse_body_elements(elem),
            )
            for elem in xml.elements(root, elem_name)
        ]

    def parse_body_elements(self, elem) -> List[DocxElement]:
        children: List[DocxElement] = []

        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "p":
                children.append(self.parse_paragraph(c))
            elif name == "tbl":
                children.append(self.parse_table(c))
            elif name == "sdt":
                children.extend(self.parse_sdt(c, self.parse_body_elements))

        return children

    @staticmethod
    def parse_sdt(elem, parser: Callable) -> List[DocxElement]:
        content = xml.element(elem, "sdtContent")
        return parser(content) if content is not None else []

    # Tables

    def parse_table(self, elem) -> Table:
        result = Table()

        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "tr":
                result.children.append(self.parse_table_row(c))
            elif name == "tblGrid":
                result.columns = [TableColumn(width=xml.length_attr(e, "w")) for e in xml.elements(c, "gridCol")]
            elif name == "tblPr":
                self.parse_table_properties(c, result)

        return result

    def parse_table_properties(self, elem, table: Table) -> None:
        table.css_style = {}
        table.cell_style = {}

        def handler(c) -> bool:
            name = xml.local_name(c)
            if name == "tblStyle":
                table.style_name = xml.attr(c, "val")
            elif name == "tblLook":
                table.class_name = values.class_name_of_tbl_look(c)
            elif name == "tblpPr":
                self._parse_table_position(c, table)
            elif name == "tblStyleColBandSize":
                table.col_band_size = xml.int_attr(c, "val")
            elif name == "tblStyleRowBandSize":
                table.row_band_size = xml.int_attr(c, "val")
            else:
                return False
            return True

        self.format_parser.parse_default_properties(elem, table.css_style, table.cell_style, handler)

        if table.css_style.get("text-align") in ("center", "right"):
            align = table.css_style.pop("text-align")
            table.css_style["margin-left"] = "auto"
            if align == "center":
                table.css_style["margin-right"] = "auto"

    @staticmethod
    def _parse_table_position(elem, table: Table) -> None:
        style = table.css_style
        style["float"] = "left"
        style["margin-bottom"] = values.add_size(style.get("margin-bottom"), xml.length_attr(elem, "bottomFromText"))
        style["margin-left"] = values.add_size(style.get("margin-left"), xml.length_attr(elem, "leftFromText"))
        style["margin-right"] = values.add_size(style.get("margin-right"), xml.length_attr(elem, "rightFromText"))
        style["margin-top"] = values.add_size(style.get("margin-top"), xml.length_attr(elem, "topFromText"))

    def parse_table_row(self, elem) -> TableRow:
        result = TableRow()

        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "tc":
                result.children.append(self.parse_table_cell(c))
            elif name == "trPr":
                self._parse_table_row_properties(c, result)

        return result

    def _parse_table_row_properties(self, elem, row: TableRow) -> None:
        def handler(c) -> bool:
            name = xml.local_name(c)
            if name == "cnfStyle":
                row.class_name = values.class_name_of_cnf_style(c)
            elif name == "tblHeader":
                row.is_header = xml.bool_attr(c, "val", True)
            else:
                return False
            return True

        row.css_style = self.format_parser.parse_default_properties(elem, {}, None, handler)

    def parse_table_cell(self, elem) -> TableCell:
        result = TableCell()

        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "tbl":
                result.children.append(self.parse_table(c))
            elif name == "p":
                result.children.append(self.parse_paragraph(c))
            elif name == "tcPr":
                self._parse_table_cell_properties(c, result)

        return result

    def _parse_table_cell_properties(self, elem, cell: TableCell) -> None:
        def handler(c) -> bool:
            name = xml.local_name(c)
            if name == "gridSpan":
                cell.span = xml.int_attr(c, "val")
            elif name == "vMerge":
                cell.vertical_merge = xml.attr(c, "val") or "continue"
            elif name == "cnfStyle":
                cell.class_name = values.class_name_of_cnf_style(c)
            else:
                return False
            return True

        cell.css_style = self.format_parser.parse_default_properties(elem, {}, None, handler)

    # Paragraphs

    def parse_paragraph(self, elem) -> Paragraph:
        result = Paragraph()

        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "pPr":
                self.parse_paragraph_properties(c, result)
            elif name == "r":
                result.children.append(self.parse_run(c))
            elif name == "hyperlink":
                result.children.append(self.parse_hyperlink(c))
            elif name == "fldSimple":
                result.children.append(self.parse_simple_field(c))
            elif name == "bookmarkStart":
                result.children.append(BookmarkStart(
                    id=xml.attr(c, "id"),
                    name=xml.attr(c, "name"),
                    col_first=xml.int_attr(c, "colFirst"),
                    col_last=xml.int_attr(c, "colLast"),
                ))
            elif name == "bookmarkEnd":
                result.children.append(BookmarkEnd(id=xml.attr(c, "id")))
            elif name in ("oMath", "oMathPara"):
                result.children.append(self.parse_math_element(c))
            elif name == "sdt":
                result.children.extend(self.parse_sdt(c, lambda e: self.parse_paragraph(e).children))
            elif name == "ins":
                result.children.append(DocxElement(type=DomType.INSERTED, children=self.parse_paragraph(c).children))
            elif name == "del":
                result.children.append(DocxElement(type=DomType.DELETED, children=self.parse_paragraph(c).children))

        return result

    def parse_paragraph_properties(self, elem, paragraph: Paragraph) -> None:
        def handler(c) -> bool:
            if parse_paragraph_property(c, paragraph):
                return True
            name = xml.local_name(c)
            if name == "pStyle":
                paragraph.style_name = xml.attr(c, "val")
            elif name == "cnfStyle":
                paragraph.class_name = values.class_name_of_cnf_style(c)
            elif name == "framePr":
                if xml.attr(c, "dropCap") == "drop":
                    paragraph.css_style["float"] = "left"
            elif name == "rPr":
                pass
            else:
                return False
            return True

        paragraph.css_style = {}
        self.format_parser.parse_default_properties(elem, paragraph.css_style, None, handler)

    def parse_simple_field(self, elem) -> SimpleField:
        """``fldSimple`` keeps its cached result runs as children."""
        return SimpleField(
            instruction=xml.attr(elem, "instr"),
            lock=bool(xml.bool_attr(elem, "lock", False)),
            dirty=bool(xml.bool_attr(elem, "dirty", False)),
            children=[self.parse_run(r) for r in xml.elements(elem, "r")],
        )

    # Math

    def parse_math_element(self, elem) -> DocxElement:
        props_tag = f"{xml.local_name(elem)}Pr"
        result = DocxElement(type=MATH_TAGS[xml.local_name(elem)])

        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name in MATH_TAGS:
                result.children.append(self.parse_math_element(c))
            elif name == "r":
                result.children.append(self.parse_run(c))
            elif name == props_tag:
                result.props = self._parse_math_properties(c)

        return result

    @staticmethod
    def _parse_math_properties(elem) -> Dict[str, object]:
        result: Dict[str, object] = {}
        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "chr":
                result["char"] = xml.attr(c, "val")
            elif name == "degHide":
                result["hide_degree"] = xml.bool_attr(c, "val", True)
            elif name == "begChr":
                result["begin_char"] = xml.attr(c, "val")
            elif name == "endChr":
                result["end_char"] = xml.attr(c, "val")
        return result

    # Runs

    def parse_hyperlink(self, elem) -> Hyperlink:
        result = Hyperlink()
        anchor = xml.attr(elem, "anchor")
        rel_id = xml.attr(elem, "id")

        if anchor:
            result.href = f"#{anchor}"
        if rel_id:
            result.id = rel_id

        for c in xml.elements(elem, "r"):
            result.children.append(self.parse_run(c))

        return result

    def parse_run(self, elem) -> Run:
        result = Run()

        for c in xml.elements(elem):
            content = self.check_alternate_content(c)
            if content is None:
                continue
            name = xml.local_name(content)

            if name == "t":
                result.children.append(Text(text=xml.text_content(content)))
            elif name == "delText":
                result.children.append(Text(type=DomType.DELETED_TEXT, text=xml.text_content(content)))
            elif name == "fldSimple":
                result.children.append(self.parse_simple_field(content))
            elif name == "instrText":
                result.field_run = True
                result.children.append(Instruction(text=xml.text_content(content)))
            elif name == "fldChar":
                result.field_run = True
                result.children.append(ComplexField(
                    char_type=xml.attr(content, "fldCharType"),
                    lock=bool(xml.bool_attr(content, "lock", False)),
                    dirty=bool(xml.bool_attr(content, "dirty", False)),
                ))
            elif name == "noBreakHyphen":
                result.children.append(DocxElement(type=DomType.NO_BREAK_HYPHEN))
            elif name == "br":
                result.children.append(Break(break_type=xml.attr(content, "type") or "textWrapping"))
            elif name == "lastRenderedPageBreak":
                result.children.append(Break(break_type="lastRenderedPageBreak"))
            elif name == "sym":
                result.children.append(Symbol(font=xml.attr(content, "font"), char=xml.attr(content, "char")))
            elif name == "tab":
                result.children.append(DocxElement(type=DomType.TAB))
            elif name == "footnoteReference":
                result.children.append(NoteReference(type=DomType.FOOTNOTE_REFERENCE, id=xml.attr(content, "id")))
            elif name == "endnoteReference":
                result.children.append(NoteReference(type=DomType.ENDNOTE_REFERENCE, id=xml.attr(content, "id")))
            elif name == "drawing":
                drawing = self.parse_drawing(content)
                if drawing is not None:
                    result.children = [drawing]
            elif name == "pict":
                result.children.append(parse_vml_picture(content))
            elif name == "rPr":
                self.parse_run_properties(content, result)

        return result

    def parse_run_properties(self, elem, run: Run) -> None:
        def handler(c) -> bool:
            name = xml.local_name(c)
            if name == "rStyle":
                run.style_name = xml.attr(c, "val")
            elif name == "vertAlign":
                run.vertical_align = values.value_of_vert_align(c, True)
            else:
                return False
            return True

        run.css_style = {}
        self.format_parser.parse_default_properties(elem, run.css_style, None, handler)

    @staticmethod
    def check_alternate_content(elem):
        """
        Resolve ``mc:AlternateContent`` to the branch to parse.

        Returns:
            The element itself when it is not alternate content, the first child
            of the chosen branch, or None when no branch applies
        """
        if xml.local_name(elem) != "AlternateContent":
            return elem

        choice = xml.element(elem, "Choice")
        if choice is not None:
            requires = xml.attr(choice, "Requires")
            if elem.nsmap.get(requires) in SUPPORTED_NAMESPACES:
                return xml.first_element(choice)

        return xml.first_element(xml.element(elem, "Fallback"))

    # Drawings

    def parse_drawing(self, elem) -> Optional[DocxElement]:
        for c in xml.elements(elem):
            if xml.local_name(c) in ("inline", "anchor"):
                return self._parse_drawing_wrapper(c)
        return None

    def _parse_drawing_wrapper(self, elem) -> DocxElement:
        result = DocxElement(type=DomType.DRAWING)
        style = result.css_style
        is_anchor = xml.local_name(elem) == "anchor"
        simple_pos = xml.bool_attr(elem, "simplePos")
        wrap_type = None

        pos_x = {"relative": "page", "align": "left", "offset": "0"}
        pos_y = {"relative": "page", "align": "top", "offset": "0"}

        for c in xml.elements(elem):
            name = xml.local_name(c)

            if name == "simplePos":
                if simple_pos:
                    pos_x["offset"] = xml.length_attr(c, "x", units.EMU)
                    pos_y["offset"] = xml.length_attr(c, "y", units.EMU)
            elif name == "extent":
                style["width"] = xml.length_attr(c, "cx", units.EMU)
                style["height"] = xml.length_attr(c, "cy", units.EMU)
            elif name in ("positionH", "positionV"):
                if not simple_pos:
                    pos = pos_x if name == "positionH" else pos_y
                    align = xml.element(c, "align")
                    offset = xml.element(c, "posOffset")

                    pos["relative"] = xml.attr(c, "relativeFrom") or pos["relative"]
                    if align is not None:
                        pos["align"] = xml.text_content(align)
                    if offset is not None:
                        pos["offset"] = xml.size_value(offset, units.EMU)
            elif name in ("wrapTopAndBottom", "wrapNone"):
                wrap_type = name
            elif name == "graphic":
                graphic = self._parse_graphic(c)
                if graphic is not None:
                    result.children.append(graphic)

        if wrap_type == "wrapTopAndBottom":
            style["display"] = "block"
            if pos_x["align"]:
                style["text-align"] = pos_x["align"]
                style["width"] = "100%"
        elif wrap_type == "wrapNone":
            style["display"] = "block"
            style["position"] = "relative"
            style["width"] = "0px"
            style["height"] = "0px"
            if pos_x["offset"]:
                style["left"] = pos_x["offset"]
            if pos_y["offset"]:
                style["top"] = pos_y["offset"]
        elif is_anchor and pos_x["align"] in ("left", "right"):
            style["float"] = pos_x["align"]

        return result

    def _parse_graphic(self, elem) -> Optional[Image]:
        graphic_data = xml.element(elem, "graphicData")
        for c in xml.elements(graphic_data):
            if xml.local_name(c) == "pic":
                return self._parse_picture(c)
        return None

    @staticmethod
    def _parse_picture(elem) -> Image:
        result = Image()
        blip = xml.element(xml.element(elem, "blipFill"), "blip")
        result.src = xml.attr(blip, "embed")

        xfrm = xml.element(xml.element(elem, "spPr"), "xfrm")
        result.css_style["position"] = "relative"

        for c in xml.elements(xfrm):
            name = xml.local_name(c)
            if name == "ext":
                result.css_style["width"] = xml.length_attr(c, "cx", units.EMU)
                result.css_style["height"] = xml.length_attr(c, "cy", units.EMU)
            elif name == "off":
                result.css_style["left"] = xml.length_attr(c, "x", units.EMU)
                result.css_style["top"] = xml.length_attr(c, "y", units.EMU)

        return result
