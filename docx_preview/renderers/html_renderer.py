"""
HTML renderer for DOCX documents.

Materializes a loaded ``WordDocument`` as an ``HtmlElement`` tree: one
``<section>`` per document section with its header, body article, notes and
footer, plus the style sheets describing styles, numbering, theme and fonts.
Images, bullet pictures and embedded fonts are resolved by tasks scheduled on
the render state; they patch the tree once their data is loaded.
"""

import logging
from typing import Callable, Dict, List, Optional, Union

from ..document import WordDocument
from ..exceptions import RenderingError
from ..layout.section_splitter import split_by_section
from ..models.nodes import (
    BookmarkStart,
    Break,
    DocumentElement,
    DocxElement,
    DomType,
    Hyperlink,
    Image,
    Note,
    NoteReference,
    Paragraph,
    Run,
    Symbol,
    Table,
    TableCell,
    TableColumn,
    Text,
    VmlElement,
)
from ..models.section import HeaderFooterReference, SectionProperties
from ..options import Options
from ..parser.units import length_to_points
from ..parser.xml_parser import NS
from ..styles.style_resolver import StyleResolver
from ..utils.helpers import copy_style_properties, key_by
from . import css
from .html_node import Comment, HtmlElement, HtmlNode, RawHtml, create_style_element
from .render_state import PendingTab, RenderState
from .tab_stops import update_paragraph_tabs

logger = logging.getLogger(__name__)

Rendered = Union[HtmlNode, List[HtmlNode], None]

# cell properties inherited from the table-level cell style
CELL_STYLE_PROPERTIES = [
    "border-left", "border-right", "border-top", "border-bottom",
    "padding-left", "padding-right", "padding-top", "padding-bottom",
]

_HEX = set("0123456789abcdefABCDEF")


def select_header_footer_ref(refs: Optional[List[HeaderFooterReference]], props: SectionProperties,
                             page: int, first_of_section: bool) -> Optional[HeaderFooterReference]:
    """
    Pick the header or footer reference for a page.

    ``first`` applies to the first page of a section with a title page,
    ``even`` to odd page indices (even page numbers), ``default`` otherwise.
    """
    if not refs:
        return None

    def find(ref_type: str) -> Optional[HeaderFooterReference]:
        return next((r for r in refs if r.type == ref_type), None)

    ref = find("first") if props.title_page and first_of_section else None
    if ref is None and page % 2 == 1:
        ref = find("even")
    return ref or find("default")


class HtmlRenderer:
    """
    Renders a loaded document into HTML containers.

    One renderer may render several times, but not concurrently: each call to
    ``render`` creates its own ``RenderState``.

    Args:
        document: Loaded document
        options: Rendering options (the document's options by default)
    """

    def __init__(self, document: WordDocument, options: Optional[Options] = None):
        self.document = document
        self.options = options or document.options
        self.class_name = self.options.class_name
        self.root_selector = f".{self.class_name}-wrapper" if self.options.in_wrapper else ":root"
        self.style_resolver = StyleResolver(self.class_name, self.options.debug)
        self.style_map: Dict[str, object] = {}
        self.footnote_map: Dict[Optional[str], Note] = {}
        self.endnote_map: Dict[Optional[str], Note] = {}
        self.default_tab_size: Optional[str] = None

        self._dispatch: Dict[DomType, Callable[[DocxElement, RenderState], Rendered]] = {
            DomType.PARAGRAPH: self.render_paragraph,
            DomType.BOOKMARK_START: self.render_bookmark_start,
            DomType.BOOKMARK_END: lambda elem, state: None,
            DomType.RUN: self.render_run,
            DomType.TABLE: self.render_table,
            DomType.ROW: self.render_table_row,
            DomType.CELL: self.render_table_cell,
            DomType.HYPERLINK: self.render_hyperlink,
            DomType.DRAWING: self.render_drawing,
            DomType.IMAGE: self.render_image,
            DomType.TEXT: self.render_text,
            DomType.DELETED_TEXT: self.render_deleted_text,
            DomType.TAB: self.render_tab,
            DomType.SYMBOL: self.render_symbol,
            DomType.BREAK: self.render_break,
            DomType.FOOTER: lambda elem, state: self.render_container(elem, "footer", state),
            DomType.HEADER: lambda elem, state: self.render_container(elem, "header", state),
            DomType.FOOTNOTE: lambda elem, state: self.render_container(elem, "li", state),
            DomType.ENDNOTE: lambda elem, state: self.render_container(elem, "li", state),
            DomType.FOOTNOTE_REFERENCE: self.render_footnote_reference,
            DomType.ENDNOTE_REFERENCE: self.render_endnote_reference,
            DomType.NO_BREAK_HYPHEN: lambda elem, state: HtmlElement("wbr"),
            DomType.SIMPLE_FIELD: self.render_children,
            DomType.VML_PICTURE: self.render_vml_picture,
            DomType.VML_ELEMENT: self.render_vml_element,
            DomType.MML_MATH: lambda elem, state: self.render_container_ns(
                elem, NS["mathml"], "math", state, {"xmlns": NS["mathml"]}),
            DomType.MML_MATH_PARAGRAPH: lambda elem, state: self.render_container(elem, "span", state),
            DomType.MML_FRACTION: self._mathml("mfrac"),
            DomType.MML_NUMERATOR: self._mathml("mrow"),
            DomType.MML_DENOMINATOR: self._mathml("mrow"),
            DomType.MML_RADICAL: self.render_mml_radical,
            DomType.MML_DEGREE: self._mathml("mn"),
            DomType.MML_SUPERSCRIPT: self._mathml("msup"),
            DomType.MML_SUBSCRIPT: self._mathml("msub"),
            DomType.MML_BASE: self._mathml("mrow"),
            DomType.MML_SUPER_ARGUMENT: self._mathml("mn"),
            DomType.MML_SUB_ARGUMENT: self._mathml("mn"),
            DomType.MML_DELIMITER: self.render_mml_delimiter,
            DomType.MML_NARY: self.render_mml_nary,
            DomType.INSERTED: self.render_inserted,
            DomType.DELETED: self.render_deleted,
        }

    def _mathml(self, tag: str) -> Callable[[DocxElement, RenderState], HtmlElement]:
        return lambda elem, state: self.render_container_ns(elem, NS["mathml"], tag, state)

    # Entry point

    def render(self, body_container: HtmlElement, style_container: Optional[HtmlElement] = None) -> RenderState:
        """
        Render the document.

        Both containers are cleared first. Styles go to ``style_container``,
        or to ``body_container`` when none is given. Must be called while an
        event loop is running; resource tasks are left on the returned state.

        Args:
            body_container: Receives the rendered sections
            style_container: Receives the style sheets

        Returns:
            The state of this render, holding the pending resource tasks

        Raises:
            RenderingError: if no body container is given or the document has no body
        """
        if body_container is None:
            raise RenderingError("Body container is required")

        document = self.document
        if document.document is None:
            raise RenderingError("Document has no main document part")

        style_dom = style_container if style_container is not None else body_container
        state = RenderState(style_container=style_dom)

        style_dom.clear()
        body_container.clear()

        style_dom.append(Comment("docx-preview library predefined styles"))
        style_dom.append(create_style_element(css.default_style(self.class_name)))

        if self.options.use_mathml_polyfill:
            style_dom.append(Comment("docx-preview mathml polyfill styles"))
            style_dom.append(create_style_element(""))

        if document.theme is not None:
            style_dom.append(Comment("docx-preview document theme values"))
            style_dom.append(create_style_element(css.theme_style(document.theme, self.class_name)))

        self.style_map = {}
        if document.styles is not None:
            self.style_map = self.style_resolver.process_styles(document.styles)
            style_dom.append(Comment("docx-preview document styles"))
            style_dom.append(create_style_element(
                css.styles_to_css(document.styles, self.style_map, self.class_name, self.options.debug)))

        if document.numbering is not None:
            numberings = document.numbering.dom_numberings
            self.style_resolver.process_numberings(numberings)
            style_dom.append(Comment("docx-preview document numbering styles"))
            style_dom.append(self.render_numbering(numberings, state))

        self.footnote_map = key_by(document.footnotes_part.payload or [], lambda n: n.id) \
            if document.footnotes_part is not None else {}
        self.endnote_map = key_by(document.endnotes_part.payload or [], lambda n: n.id) \
            if document.endnotes_part is not None else {}

        if document.settings is not None:
            self.default_tab_size = document.settings.default_tab_stop

        if not self.options.ignore_fonts and document.fonts is not None:
            self.render_font_table(document.fonts, state)

        sections = self.render_sections(document.document, state)

        if self.options.in_wrapper:
            body_container.append(self.render_wrapper(sections))
        else:
            body_container.extend(sections)

        self.refresh_tab_stops(state)
        logger.debug(f"Rendered {len(sections)} sections, {len(state.tasks)} resource tasks pending")
        return state

    def render_wrapper(self, children: List[HtmlElement]) -> HtmlElement:
        return HtmlElement("div", classes=[f"{self.class_name}-wrapper"], children=children)

    # Styles

    def find_style(self, name: Optional[str]):
        return self.style_map.get(name) if name else None

    def process_style_name(self, name: Optional[str]) -> str:
        return self.style_resolver.process_style_name(name)

    def render_numbering(self, numberings, state: RenderState) -> HtmlElement:
        text, bullets = css.numbering_to_css(numberings, self.class_name, self.root_selector)

        for variable, src in bullets:
            state.schedule(self._load_bullet(variable, src, state))

        return create_style_element(text)

    async def _load_bullet(self, variable: str, src: str, state: RenderState) -> None:
        data = await self.document.load_numbering_image(src)
        if data is None:
            if self.options.debug:
                logger.warning(f"Can't load numbering picture {src}")
            return
        state.style_container.append(create_style_element(f"{self.root_selector} {{ {variable}: url({data}) }}"))

    def render_font_table(self, fonts, state: RenderState) -> None:
        for font in fonts:
            for ref in font.embed_font_refs:
                state.schedule(self._load_font(font, ref, state))

    async def _load_font(self, font, ref, state: RenderState) -> None:
        data = await self.document.load_font(ref.id, ref.key)
        if data is None:
            return
        state.style_container.append(Comment(f"docx-preview {font.name} font"))
        state.style_container.append(create_style_element(css.font_face(font.name, data, ref.type)))
        self.refresh_tab_stops(state)

    # Tree preparation

    def process_element(self, element: DocxElement) -> None:
        """Attach parent links and push table cell styles down to the cells."""
        for child in element.children:
            child.parent = element
            if child.type == DomType.TABLE:
                self.process_table(child)
            else:
                self.process_element(child)

    def process_table(self, table: Table) -> None:
        for row in table.children:
            row.parent = table
            for cell in row.children:
                cell.parent = row
                cell.css_style = copy_style_properties(table.cell_style, cell.css_style, CELL_STYLE_PROPERTIES)
                self.process_element(cell)

    # Sections

    def render_sections(self, document: DocumentElement, state: RenderState) -> List[HtmlElement]:
        result: List[HtmlElement] = []

        self.process_element(document)
        sections = split_by_section(document.children, self.options, self.find_style)
        prev_props = None

        for index, section in enumerate(sections):
            state.footnote_ids = []

            props = section.sect_props or document.props or SectionProperties()
            section_element = self.create_section(props, state)
            section_element.set_style(document.css_style)

            if self.options.render_headers:
                self.render_header_footer(props.header_refs, props, len(result),
                                          prev_props is not props, section_element, state)

            content = HtmlElement("article")
            content.extend(self.render_elements(section.elements, state))
            section_element.append(content)

            if self.options.render_footnotes:
                self.render_notes(state.footnote_ids, self.footnote_map, section_element, state)

            if self.options.render_endnotes and index == len(sections) - 1:
                self.render_notes(state.endnote_ids, self.endnote_map, section_element, state)

            if self.options.render_footers:
                self.render_header_footer(props.footer_refs, props, len(result),
                                          prev_props is not props, section_element, state)

            result.append(section_element)
            prev_props = props

        return result

    def create_section(self, props: SectionProperties, state: RenderState) -> HtmlElement:
        elem = HtmlElement("section", classes=[self.class_name])
        state.line_width = None

        if props.page_margins is not None:
            elem.set_style({
                "padding-left": props.page_margins.left,
                "padding-right": props.page_margins.right,
                "padding-top": props.page_margins.top,
                "padding-bottom": props.page_margins.bottom,
            })

        if props.page_size is not None:
            if not self.options.ignore_width:
                elem.set_style({"width": props.page_size.width})
            if not self.options.ignore_height:
                elem.set_style({"min-height": props.page_size.height})

            width = length_to_points(props.page_size.width)
            if width is not None:
                margins = props.page_margins
                left = length_to_points(margins.left) if margins is not None else None
                right = length_to_points(margins.right) if margins is not None else None
                state.line_width = width - (left or 0.0) - (right or 0.0)

        if props.columns is not None and props.columns.number_of_columns:
            elem.set_style({
                "column-count": str(props.columns.number_of_columns),
                "column-gap": props.columns.space,
            })
            if props.columns.separator:
                elem.style["column-rule"] = "1px solid black"

        return elem

    def render_header_footer(self, refs: Optional[List[HeaderFooterReference]], props: SectionProperties,
                             page: int, first_of_section: bool, into: HtmlElement, state: RenderState) -> None:
        ref = select_header_footer_ref(refs, props, page, first_of_section)
        part = self.document.find_part_by_rel_id(ref.id, self.document.document_part) if ref else None

        if part is None or part.payload is None:
            return

        state.current_part = part
        if part.path not in state.used_header_footer_parts:
            self.process_element(part.payload)
            state.used_header_footer_parts.add(part.path)
        into.extend(self.render_elements([part.payload], state))
        state.current_part = None

    def render_notes(self, note_ids: List[str], notes_map: Dict[Optional[str], Note],
                     into: HtmlElement, state: RenderState) -> None:
        notes = [notes_map[i] for i in note_ids if i in notes_map]
        if notes:
            into.append(HtmlElement("ol", children=self.render_elements(notes, state)))

    # Dispatch

    def render_elements(self, elems: Optional[List[DocxElement]], state: RenderState) -> List[HtmlNode]:
        result: List[HtmlNode] = []
        for elem in elems or []:
            rendered = self.render_element(elem, state)
            if isinstance(rendered, list):
                result.extend(r for r in rendered if r is not None)
            elif rendered is not None:
                result.append(rendered)
        return result

    def render_element(self, elem: DocxElement, state: RenderState) -> Rendered:
        handler = self._dispatch.get(elem.type)
        return handler(elem, state) if handler is not None else None

    def render_children(self, elem: DocxElement, state: RenderState,
                        into: Optional[HtmlElement] = None) -> List[HtmlNode]:
        result = self.render_elements(elem.children, state)
        if into is not None:
            into.extend(result)
        return result

    def render_container(self, elem: DocxElement, tag: str, state: RenderState) -> HtmlElement:
        return HtmlElement(tag, children=self.render_children(elem, state))

    def render_container_ns(self, elem: DocxElement, ns: str, tag: str, state: RenderState,
                            attrs: Optional[Dict[str, str]] = None) -> HtmlElement:
        return HtmlElement(tag, attrs=attrs, children=self.render_children(elem, state), ns=ns)

    def render_class(self, elem: DocxElement, output: HtmlElement) -> None:
        if elem.class_name:
            output.class_name = elem.class_name
        if elem.style_name:
            output.add_class(self.process_style_name(elem.style_name))

    # Paragraphs and runs

    def render_paragraph(self, elem: Paragraph, state: RenderState) -> HtmlElement:
        result = HtmlElement("p")

        style = self.find_style(elem.style_name)
        if elem.tabs is None and style is not None and style.paragraph_props is not None:
            elem.tabs = style.paragraph_props.tabs

        self.render_class(elem, result)
        self.render_children(elem, state, result)
        result.set_style(elem.css_style)
        result.set_style({"color": elem.color, "font-size": elem.font_size})

        numbering = elem.numbering
        if numbering is None and style is not None and style.paragraph_props is not None:
            numbering = style.paragraph_props.numbering
        if numbering is not None:
            result.add_class(css.numbering_class(self.class_name, numbering.id, numbering.level))

        return result

    def render_run(self, elem: Run, state: RenderState) -> Optional[HtmlElement]:
        if elem.field_run:
            return None

        result = HtmlElement("span")
        if elem.id:
            result.set("id", elem.id)

        self.render_class(elem, result)
        result.set_style(elem.css_style)

        if elem.vertical_align:
            wrapper = HtmlElement(elem.vertical_align)
            self.render_children(elem, state, wrapper)
            result.append(wrapper)
        else:
            self.render_children(elem, state, result)

        return result

    def render_text(self, elem: Text, state: RenderState) -> str:
        return elem.text

    def render_deleted_text(self, elem: Text, state: RenderState) -> Optional[str]:
        return elem.text if self.options.render_changes else None

    def render_break(self, elem: Break, state: RenderState) -> Optional[HtmlElement]:
        if elem.break_type == "textWrapping":
            return HtmlElement("br")
        return None

    def render_symbol(self, elem: Symbol, state: RenderState) -> HtmlElement:
        span = HtmlElement("span")
        if elem.font:
            span.style["font-family"] = elem.font
        if elem.char and set(elem.char) <= _HEX:
            span.append(RawHtml(f"&#x{elem.char};"))
        return span

    def tab_stop_class(self) -> str:
        return f"{self.class_name}-tab-stop"

    def render_tab(self, elem: DocxElement, state: RenderState) -> HtmlElement:
        span = HtmlElement("span", children=[RawHtml("&emsp;")])

        if self.options.experimental:
            span.class_name = self.tab_stop_class()
            paragraph = elem.find_parent(DomType.PARAGRAPH)
            stops = getattr(paragraph, "tabs", None)
            state.tabs.append(PendingTab(span, elem, paragraph, stops, state.line_width))

        return span

    def refresh_tab_stops(self, state: RenderState) -> None:
        if not self.options.experimental:
            return

        groups: Dict[int, List[PendingTab]] = {}
        for tab in state.tabs:
            groups.setdefault(id(tab.paragraph), []).append(tab)

        for pending in groups.values():
            update_paragraph_tabs(pending[0].paragraph, pending, self.default_tab_size)

    def render_hyperlink(self, elem: Hyperlink, state: RenderState) -> HtmlElement:
        result = HtmlElement("a")

        self.render_children(elem, state, result)
        result.set_style(elem.css_style)

        if elem.href:
            result.set("href", elem.href)
        elif elem.id:
            rels = self.document.document_part.rels if self.document.document_part else []
            rel = next((r for r in rels if r.id == elem.id and r.is_external), None)
            result.set("href", rel.target if rel else None)

        return result

    def render_bookmark_start(self, elem: BookmarkStart, state: RenderState) -> HtmlElement:
        return HtmlElement("span", attrs={"id": elem.name})

    def render_footnote_reference(self, elem: NoteReference, state: RenderState) -> HtmlElement:
        state.footnote_ids.append(elem.id)
        return HtmlElement("sup", children=[str(len(state.footnote_ids))])

    def render_endnote_reference(self, elem: NoteReference, state: RenderState) -> HtmlElement:
        state.endnote_ids.append(elem.id)
        return HtmlElement("sup", children=[str(len(state.endnote_ids))])

    def render_inserted(self, elem: DocxElement, state: RenderState) -> Rendered:
        if self.options.render_changes:
            return self.render_container(elem, "ins", state)
        return self.render_children(elem, state)

    def render_deleted(self, elem: DocxElement, state: RenderState) -> Optional[HtmlElement]:
        if self.options.render_changes:
            return self.render_container(elem, "del", state)
        return None

    # Tables

    def render_table(self, elem: Table, state: RenderState) -> HtmlElement:
        result = HtmlElement("table")

        state.enter_table()
        try:
            if elem.columns:
                result.append(self.render_table_columns(elem.columns))

            self.render_class(elem, result)
            self.render_children(elem, state, result)
            result.set_style(elem.css_style)
        finally:
            state.leave_table()

        return result

    @staticmethod
    def render_table_columns(columns: List[TableColumn]) -> HtmlElement:
        result = HtmlElement("colgroup")
        for col in columns:
            col_elem = HtmlElement("col")
            if col.width:
                col_elem.style["width"] = col.width
            result.append(col_elem)
        return result

    def render_table_row(self, elem: DocxElement, state: RenderState) -> HtmlElement:
        result = HtmlElement("tr")

        state.cell_position.col = 0

        self.render_class(elem, result)
        self.render_children(elem, state, result)
        result.set_style(elem.css_style)

        state.cell_position.row += 1
        return result

    def render_table_cell(self, elem: TableCell, state: RenderState) -> HtmlElement:
        result = HtmlElement("td")
        key = state.cell_position.col

        if elem.vertical_merge:
            if elem.vertical_merge == "restart":
                state.vertical_merge[key] = result
                result.set("rowspan", 1)
            elif state.vertical_merge.get(key) is not None:
                merged = state.vertical_merge[key]
                merged.set("rowspan", merged.get("rowspan", 1) + 1)
                result.style["display"] = "none"
        else:
            state.vertical_merge[key] = None

        self.render_class(elem, result)
        self.render_children(elem, state, result)
        result.set_style(elem.css_style)

        if elem.span:
            result.set("colspan", elem.span)

        state.cell_position.col += elem.span or 1
        return result

    # Drawings and images

    def render_drawing(self, elem: DocxElement, state: RenderState) -> HtmlElement:
        result = HtmlElement("div", style={
            "display": "inline-block",
            "position": "relative",
            "text-indent": "0px",
        })

        self.render_children(elem, state, result)
        result.set_style(elem.css_style)
        return result

    def render_image(self, elem: Image, state: RenderState) -> HtmlElement:
        result = HtmlElement("img", style=elem.css_style)

        if elem.src:
            state.schedule(self._load_image(elem.src, result, "src", state.current_part))

        return result

    async def _load_image(self, rel_id: str, target: HtmlElement, attr: str, part) -> None:
        url = await self.document.load_document_image(rel_id, part)
        if url is not None:
            target.set(attr, url)
        elif self.options.debug:
            logger.warning(f"Can't load image {rel_id}")

    def render_vml_picture(self, elem: DocxElement, state: RenderState) -> HtmlElement:
        return HtmlElement("div", children=self.render_children(elem, state))

    def render_vml_element(self, elem: VmlElement, state: RenderState) -> HtmlElement:
        container = HtmlElement("svg", ns=NS["svg"])
        if elem.css_style_text:
            container.set("style", elem.css_style_text)

        container.append(self._render_vml_shape(elem, state))
        return container

    def _render_vml_shape(self, elem: VmlElement, state: RenderState) -> HtmlElement:
        result = HtmlElement(elem.tag_name or "g", attrs=elem.attrs, ns=NS["svg"])

        if elem.image_href is not None and elem.image_href.id:
            state.schedule(self._load_image(elem.image_href.id, result, "href", state.current_part))

        for child in elem.children:
            if isinstance(child, VmlElement):
                result.append(self._render_vml_shape(child, state))

        return result

    # Math

    def render_mml_radical(self, elem: DocxElement, state: RenderState) -> HtmlElement:
        base = next((e for e in elem.children if e.type == DomType.MML_BASE), None)
        base_nodes = [base] if base is not None else []

        if elem.props and elem.props.get("hide_degree"):
            return HtmlElement("msqrt", children=self.render_elements(base_nodes, state), ns=NS["mathml"])

        degree = next((e for e in elem.children if e.type == DomType.MML_DEGREE), None)
        nodes = base_nodes + ([degree] if degree is not None else [])
        return HtmlElement("mroot", children=self.render_elements(nodes, state), ns=NS["mathml"])

    def render_mml_delimiter(self, elem: DocxElement, state: RenderState) -> HtmlElement:
        props = elem.props or {}
        mathml = NS["mathml"]

        children: List[HtmlNode] = [HtmlElement("mo", children=[props.get("begin_char") or "("], ns=mathml)]
        children.extend(self.render_children(elem, state))
        children.append(HtmlElement("mo", children=[props.get("end_char") or ")"], ns=mathml))

        return HtmlElement("mrow", children=children, ns=mathml)

    def render_mml_nary(self, elem: DocxElement, state: RenderState) -> HtmlElement:
        mathml = NS["mathml"]
        children: List[HtmlNode] = []
        grouped = key_by(elem.children, lambda x: x.type)

        sup = grouped.get(DomType.MML_SUPER_ARGUMENT)
        sub = grouped.get(DomType.MML_SUB_ARGUMENT)
        sup_elem = HtmlElement("mo", children=self.render_elements([sup], state), ns=mathml) if sup else None
        sub_elem = HtmlElement("mo", children=self.render_elements([sub], state), ns=mathml) if sub else None

        char = (elem.props or {}).get("char")
        if char:
            char_elem = HtmlElement("mo", children=[char], ns=mathml)

            if sup_elem is not None and sub_elem is not None:
                children.append(HtmlElement("munderover", children=[char_elem, sub_elem, sup_elem], ns=mathml))
            elif sup_elem is not None:
                children.append(HtmlElement("mover", children=[char_elem, sup_elem], ns=mathml))
            elif sub_elem is not None:
                children.append(HtmlElement("munder", children=[char_elem, sub_elem], ns=mathml))
            else:
                children.append(char_elem)

        base = grouped.get(DomType.MML_BASE)
        if base is not None:
            children.extend(self.render_children(base, state))

        return HtmlElement("mrow", children=children, ns=mathml)
