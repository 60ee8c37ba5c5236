"""
Tests for DocumentParser.
"""

import pytest

from docx_preview.models.nodes import (
    Break,
    ComplexField,
    DomType,
    Hyperlink,
    Image,
    Instruction,
    NoteReference,
    Paragraph,
    SimpleField,
    Symbol,
    Table,
    Text,
    VmlElement,
)
from docx_preview.options import Options
from docx_preview.parser.document_parser import DocumentParser


@pytest.mark.unit
class TestDocumentParser:
    """Test cases for body parsing."""

    @pytest.fixture
    def parser(self):
        return DocumentParser(Options(debug=False))

    @pytest.fixture
    def parse_body(self, parser, xml_element):
        def parse(body):
            root = xml_element(f"<w:document><w:body>{body}</w:body></w:document>")
            return parser.parse_document_file(root)
        return parse

    def test_paragraph_with_runs(self, parse_body):
        """Test a paragraph with a style and two formatted runs."""
        document = parse_body(
            '<w:p><w:pPr><w:pStyle w:val="Title"/><w:jc w:val="center"/></w:pPr>'
            '<w:r><w:t>Hello</w:t></w:r>'
            '<w:r><w:rPr><w:rStyle w:val="Strong"/><w:b/></w:rPr><w:t xml:space="preserve"> world</w:t></w:r></w:p>'
        )

        paragraph = document.children[0]
        assert isinstance(paragraph, Paragraph)
        assert paragraph.style_name == "Title"
        assert paragraph.css_style == {"text-align": "center"}
        assert paragraph.get_text() == "Hello world"

        run = paragraph.children[1]
        assert run.style_name == "Strong"
        assert run.css_style == {"font-weight": "bold"}

    def test_document_background_and_sect_pr(self, parser, xml_element):
        """Test document-level background and section properties."""
        root = xml_element(
            '<w:document><w:background w:color="FFFF00"/><w:body><w:p/>'
            '<w:sectPr><w:pgSz w:w="12240" w:h="15840"/><w:titlePg/>'
            '<w:headerReference w:type="default" r:id="rId7"/></w:sectPr></w:body></w:document>'
        )

        document = parser.parse_document_file(root)

        assert document.css_style == {"background-color": "#FFFF00"}
        assert document.props.page_size.width == "612.00pt"
        assert document.props.title_page is True
        assert document.props.header_refs[0].id == "rId7"
        assert len(document.children) == 1

    def test_run_content(self, parse_body):
        """Test the inline content kinds of a run."""
        document = parse_body(
            '<w:p><w:r><w:tab/><w:br/><w:br w:type="page"/><w:lastRenderedPageBreak/>'
            '<w:sym w:font="Wingdings" w:char="F04A"/><w:noBreakHyphen/>'
            '<w:footnoteReference w:id="2"/><w:endnoteReference w:id="3"/>'
            '<w:delText>gone</w:delText></w:r></w:p>'
        )

        children = document.children[0].children[0].children
        assert children[0].type == DomType.TAB
        assert isinstance(children[1], Break) and children[1].break_type == "textWrapping"
        assert children[2].break_type == "page"
        assert children[3].break_type == "lastRenderedPageBreak"
        assert isinstance(children[4], Symbol) and children[4].char == "F04A"
        assert children[5].type == DomType.NO_BREAK_HYPHEN
        assert isinstance(children[6], NoteReference) and children[6].type == DomType.FOOTNOTE_REFERENCE
        assert children[7].type == DomType.ENDNOTE_REFERENCE and children[7].id == "3"
        assert isinstance(children[8], Text) and children[8].type == DomType.DELETED_TEXT
        assert children[8].text == "gone"

    def test_vertical_align_run(self, parse_body):
        """Test superscript runs."""
        document = parse_body('<w:p><w:r><w:rPr><w:vertAlign w:val="superscript"/></w:rPr><w:t>2</w:t></w:r></w:p>')

        assert document.children[0].children[0].vertical_align == "sup"

    def test_complex_field_runs(self, parse_body):
        """Test that field code runs are flagged."""
        document = parse_body(
            '<w:p><w:r><w:fldChar w:fldCharType="begin"/></w:r>'
            '<w:r><w:instrText> PAGE </w:instrText></w:r>'
            '<w:r><w:fldChar w:fldCharType="end"/></w:r></w:p>'
        )

        runs = document.children[0].children
        assert all(run.field_run for run in runs)
        assert isinstance(runs[0].children[0], ComplexField)
        assert runs[0].children[0].char_type == "begin"
        assert isinstance(runs[1].children[0], Instruction)
        assert runs[1].children[0].text == " PAGE "

    def test_simple_field_keeps_runs(self, parse_body):
        """Test that fldSimple keeps its cached result."""
        document = parse_body('<w:p><w:fldSimple w:instr=" NUMPAGES "><w:r><w:t>4</w:t></w:r></w:fldSimple></w:p>')

        field = document.children[0].children[0]
        assert isinstance(field, SimpleField)
        assert field.instruction == " NUMPAGES "
        assert field.get_text() == "4"

    def test_hyperlinks(self, parse_body):
        """Test internal and external hyperlinks."""
        document = parse_body(
            '<w:p><w:hyperlink w:anchor="intro"><w:r><w:t>Intro</w:t></w:r></w:hyperlink>'
            '<w:hyperlink r:id="rId9"><w:r><w:t>Site</w:t></w:r></w:hyperlink></w:p>'
        )

        internal, external = document.children[0].children
        assert isinstance(internal, Hyperlink)
        assert internal.href == "#intro"
        assert external.id == "rId9"
        assert external.href is None

    def test_bookmarks(self, parse_body):
        """Test bookmark markers."""
        document = parse_body('<w:p><w:bookmarkStart w:id="0" w:name="_Toc1"/><w:bookmarkEnd w:id="0"/></w:p>')

        start, end = document.children[0].children
        assert start.name == "_Toc1"
        assert end.type == DomType.BOOKMARK_END

    def test_tracked_changes(self, parse_body):
        """Test inserted and deleted wrappers."""
        document = parse_body(
            '<w:p><w:ins w:id="1"><w:r><w:t>new</w:t></w:r></w:ins>'
            '<w:del w:id="2"><w:r><w:delText>old</w:delText></w:r></w:del></w:p>'
        )

        inserted, deleted = document.children[0].children
        assert inserted.type == DomType.INSERTED
        assert inserted.get_text() == "new"
        assert deleted.type == DomType.DELETED

    def test_structured_document_tags_are_unwrapped(self, parse_body):
        """Test that sdt content is inlined at block and run level."""
        document = parse_body(
            '<w:sdt><w:sdtContent><w:p><w:sdt><w:sdtContent><w:r><w:t>x</w:t></w:r>'
            '</w:sdtContent></w:sdt></w:p></w:sdtContent></w:sdt>'
        )

        assert document.children[0].get_text() == "x"

    def test_alternate_content_uses_fallback(self, parse_body):
        """Test that unsupported mc:Choice branches fall back."""
        document = parse_body(
            '<w:p><w:r><mc:AlternateContent><mc:Choice Requires="wps"><w:t>choice</w:t></mc:Choice>'
            '<mc:Fallback><w:t>fallback</w:t></mc:Fallback></mc:AlternateContent></w:r></w:p>'
        )

        assert document.children[0].get_text() == "fallback"

    def test_table(self, parse_body):
        """Test table grid, properties, rows and cells."""
        document = parse_body(
            '<w:tbl><w:tblPr><w:tblStyle w:val="Grid"/><w:jc w:val="center"/>'
            '<w:tblLook w:firstRow="1" w:noVBand="1"/>'
            '<w:tblBorders><w:bottom w:val="single" w:sz="4" w:color="auto"/></w:tblBorders></w:tblPr>'
            '<w:tblGrid><w:gridCol w:w="2000"/><w:gridCol w:w="3000"/></w:tblGrid>'
            '<w:tr><w:trPr><w:tblHeader/></w:trPr>'
            '<w:tc><w:tcPr><w:gridSpan w:val="2"/><w:vMerge w:val="restart"/></w:tcPr><w:p/></w:tc></w:tr>'
            '<w:tr><w:tc><w:tcPr><w:vMerge/></w:tcPr><w:p/></w:tc></w:tr></w:tbl>'
        )

        table = document.children[0]
        assert isinstance(table, Table)
        assert table.style_name == "Grid"
        assert table.class_name == "first-row no-vband"
        assert [c.width for c in table.columns] == ["100.00pt", "150.00pt"]
        assert table.css_style == {"margin-left": "auto", "margin-right": "auto"}
        assert table.cell_style["border-bottom"] == "0.50pt solid black"

        first_row, second_row = table.children
        assert first_row.is_header is True
        assert first_row.children[0].span == 2
        assert first_row.children[0].vertical_merge == "restart"
        assert second_row.children[0].vertical_merge == "continue"

    def test_floating_table(self, parse_body):
        """Test positioned tables."""
        document = parse_body('<w:tbl><w:tblPr><w:tblpPr w:leftFromText="180" w:topFromText="0"/></w:tblPr></w:tbl>')

        style = document.children[0].css_style
        assert style["float"] == "left"
        assert style["margin-left"] == "9.00pt"
        assert style["margin-top"] == "0.00pt"

    def test_inline_drawing(self, parse_body):
        """Test an inline picture."""
        document = parse_body(
            '<w:p><w:r><w:drawing><wp:inline><wp:extent cx="952500" cy="476250"/>'
            '<a:graphic><a:graphicData><pic:pic><pic:blipFill><a:blip r:embed="rId4"/></pic:blipFill>'
            '<pic:spPr><a:xfrm><a:off x="0" y="0"/><a:ext cx="952500" cy="476250"/></a:xfrm></pic:spPr>'
            '</pic:pic></a:graphicData></a:graphic></wp:inline></w:drawing></w:r></w:p>'
        )

        drawing = document.children[0].children[0].children[0]
        assert drawing.type == DomType.DRAWING
        assert drawing.css_style["width"] == "75.00pt"
        image = drawing.children[0]
        assert isinstance(image, Image)
        assert image.src == "rId4"
        assert image.css_style["height"] == "37.50pt"

    def test_anchored_drawing_without_wrap(self, parse_body):
        """Test a floating picture positioned by offsets."""
        document = parse_body(
            '<w:p><w:r><w:drawing><wp:anchor simplePos="0"><wp:positionH relativeFrom="column">'
            '<wp:posOffset>127000</wp:posOffset></wp:positionH><wp:wrapNone/></wp:anchor></w:drawing></w:r></w:p>'
        )

        style = document.children[0].children[0].children[0].css_style
        assert style["position"] == "relative"
        assert style["left"] == "10.00pt"
        assert style["top"] == "0"

    def test_vml_picture(self, parse_body):
        """Test VML shapes mapped onto SVG descriptions."""
        document = parse_body(
            '<w:p><w:r><w:pict xmlns:o="urn:schemas-microsoft-com:office:office">'
            '<v:rect style="width:10pt" fillcolor="red">'
            '<v:stroke color="blue"/><v:imagedata r:id="rId3" o:title="pic"/></v:rect>'
            '<v:line from="0,0" to="10,20"/></w:pict></w:r></w:p>'
        )

        picture = document.children[0].children[0].children[0]
        assert picture.type == DomType.VML_PICTURE
        rect, line = picture.children
        assert isinstance(rect, VmlElement)
        assert rect.tag_name == "image"
        assert rect.css_style_text == "width:10pt"
        assert rect.attrs["fill"] == "red"
        assert rect.attrs["stroke"] == "blue"
        assert rect.image_href.id == "rId3"
        assert line.attrs["x2"] == "10"
        assert line.attrs["y2"] == "20"

    def test_math(self, parse_body):
        """Test Office Math nodes and their properties."""
        document = parse_body(
            '<w:p><m:oMath><m:rad><m:radPr><m:degHide m:val="1"/></m:radPr><m:deg/>'
            '<m:e><m:r><m:t>x</m:t></m:r></m:e></m:rad>'
            '<m:nary><m:naryPr><m:chr m:val="&#8721;"/></m:naryPr><m:sub/><m:sup/><m:e/></m:nary>'
            '</m:oMath></w:p>'
        )

        math = document.children[0].children[0]
        assert math.type == DomType.MML_MATH
        radical, nary = math.children
        assert radical.props == {"hide_degree": True}
        assert [c.type for c in radical.children] == [DomType.MML_DEGREE, DomType.MML_BASE]
        assert nary.props == {"char": "∑"}

    def test_header_footer_and_notes(self, parser, xml_element):
        """Test header and notes part roots."""
        header = parser.parse_header_footer(xml_element('<w:hdr><w:p/><w:p/></w:hdr>'), DomType.HEADER)
        notes = parser.parse_notes(
            xml_element('<w:footnotes><w:footnote w:type="separator" w:id="-1"><w:p/></w:footnote>'
                        '<w:footnote w:id="1"><w:p><w:r><w:t>Note</w:t></w:r></w:p></w:footnote></w:footnotes>'),
            "footnote", DomType.FOOTNOTE)

        assert header.type == DomType.HEADER
        assert len(header.children) == 2
        assert [n.id for n in notes] == ["-1", "1"]
        assert notes[0].note_type == "separator"
        assert notes[1].get_text() == "Note"
