"""
Tests for SectionSplitter.
"""

import pytest

from docx_preview.layout.section_splitter import SectionSplitter, is_page_break_element, split_by_section
from docx_preview.models.nodes import Break, Paragraph, Run, Table, Text
from docx_preview.models.section import ParagraphProperties, SectionProperties
from docx_preview.models.styles import Style
from docx_preview.options import Options


def paragraph(*runs, **kwargs):
    return Paragraph(children=list(runs), **kwargs)


def run(*children):
    return Run(children=list(children))


def text(value):
    return Text(text=value)


@pytest.mark.unit
class TestPageBreakElement:
    """Test cases for page break detection."""

    def test_page_break(self):
        """Test that page breaks always split."""
        assert is_page_break_element(Break(break_type="page"), Options())

    def test_line_break(self):
        """Test that line breaks never split."""
        assert not is_page_break_element(Break(break_type="textWrapping"), Options())
        assert not is_page_break_element(text("x"), Options())

    def test_last_rendered_page_break(self):
        """Test that rendered page break markers depend on the option."""
        marker = Break(break_type="lastRenderedPageBreak")

        assert not is_page_break_element(marker, Options())
        assert is_page_break_element(marker, Options(ignore_last_rendered_page_break=False))


@pytest.mark.unit
class TestSectionSplitter:
    """Test cases for splitting body content."""

    @pytest.fixture
    def options(self):
        return Options()

    def test_no_breaks_single_section(self, options):
        """Test that a body without breaks is one section."""
        elements = [paragraph(run(text("a"))), Table(), paragraph()]

        sections = split_by_section(elements, options)

        assert len(sections) == 1
        assert sections[0].elements == elements
        assert sections[0].sect_props is None

    def test_page_break_inside_run(self, options):
        """Test splitting a paragraph and its run at a page break."""
        before = text("A")
        after = text("B")
        page_break = Break(break_type="page")
        p = paragraph(run(before, page_break, after))

        sections = split_by_section([p], options)

        assert len(sections) == 2
        head = sections[0].elements[0]
        tail = sections[1].elements[0]
        assert head is p
        assert head.get_text() == "A"
        assert tail.get_text() == "B"
        assert tail.children[0].children == [page_break, after]
        assert head.children[0].children == [before]

    def test_split_paragraph_keeps_properties(self, options):
        """Test that the tail paragraph copies the paragraph properties."""
        p = paragraph(run(text("A")), run(Break(break_type="page")), run(text("B")), style_name="Body")

        sections = split_by_section([p], options)

        tail = sections[1].elements[0]
        assert tail is not p
        assert tail.style_name == "Body"
        assert tail.get_text() == "B"
        assert p.get_text() == "A"
        assert len(tail.children) == 2

    def test_break_at_end_of_paragraph(self, options):
        """Test that a trailing break starts an empty next section."""
        p = paragraph(run(text("A"), Break(break_type="page")))

        sections = split_by_section([p, paragraph(run(text("B")))], options)

        assert len(sections) == 2
        assert sections[0].elements == [p]
        assert sections[1].elements[0].get_text() == "B"

    def test_break_pages_disabled(self):
        """Test that page breaks are kept inline when break_pages is off."""
        p = paragraph(run(text("A"), Break(break_type="page"), text("B")))

        sections = split_by_section([p], Options(break_pages=False))

        assert len(sections) == 1
        assert p.get_text() == "AB"

    def test_section_properties_end_section(self, options):
        """Test that a paragraph carrying sectPr closes its section."""
        first_props = SectionProperties(type="nextPage")
        first = paragraph(run(text("A")), section_props=first_props)
        second = paragraph(run(text("B")))

        sections = split_by_section([first, second], options)

        assert [s.elements for s in sections] == [[first], [second]]
        assert sections[0].sect_props is first_props

    def test_section_properties_propagate_backwards(self, options):
        """Test that buckets without properties take the next bucket's properties."""
        props = SectionProperties(type="continuous")
        elements = [
            paragraph(run(text("A"), Break(break_type="page"), text("B"))),
            paragraph(run(text("C")), section_props=props),
            paragraph(run(text("D"))),
        ]

        sections = split_by_section(elements, options)

        assert [s.sect_props for s in sections] == [props, props, None]

    def test_page_break_before_style(self, options):
        """Test that pageBreakBefore starts a new section."""
        styles = {"Chapter": Style(id="Chapter", paragraph_props=ParagraphProperties(page_break_before=True))}
        first = paragraph(run(text("intro")))
        chapter = paragraph(run(text("chapter")), style_name="Chapter")

        sections = SectionSplitter(options, styles.get).split([first, chapter])

        assert [s.elements for s in sections] == [[first], [chapter]]

    def test_page_break_before_on_first_paragraph(self, options):
        """Test that pageBreakBefore on leading content adds no empty section."""
        styles = {"Chapter": Style(id="Chapter", paragraph_props=ParagraphProperties(page_break_before=True))}
        chapter = paragraph(run(text("chapter")), style_name="Chapter")

        sections = SectionSplitter(options, styles.get).split([chapter])

        assert len(sections) == 1
        assert sections[0].elements == [chapter]

    def test_split_output_is_stable(self, options):
        """Test that splitting split output keeps pageBreakBefore paragraphs first."""
        styles = {"Chapter": Style(id="Chapter", paragraph_props=ParagraphProperties(page_break_before=True))}
        chapters = [paragraph(run(text("one")), style_name="Chapter"),
                    paragraph(run(text("two")), style_name="Chapter")]
        elements = [paragraph(run(text("a"), Break(break_type="page"), text("b"))), chapters[0],
                    paragraph(run(text("c"))), chapters[1]]
        splitter = SectionSplitter(options, styles.get)

        first = splitter.split(elements)
        second = splitter.split([e for s in first for e in s.elements])

        for sections in (first, second):
            starts = [s.elements[0] for s in sections if s.elements]
            assert all(chapter in starts for chapter in chapters)
        assert [s.elements.index(c) for s in second for c in chapters if c in s.elements] == [0, 0]

    def test_split_keeps_all_content(self, options):
        """Test that run content across sections equals the input content in order."""
        elements = [
            paragraph(run(text("a"), Break(break_type="page"), text("b")), run(text("c"))),
            Table(),
            paragraph(run(text("d")), run(Break(break_type="page")), run(text("e"), text("f"))),
            paragraph(run(text("g")), section_props=SectionProperties()),
            paragraph(run(text("h"))),
        ]
        expected = [n for p in elements for r in p.children for n in r.children]

        sections = split_by_section(elements, options)

        actual = [n for s in sections for p in s.elements for r in p.children for n in r.children]
        assert actual == expected
        assert sum(isinstance(e, Table) for s in sections for e in s.elements) == 1

    def test_several_breaks_in_one_paragraph(self, options):
        """Test that every page break of a paragraph starts a section."""
        p = paragraph(run(text("a"), Break(break_type="page"), text("b"), Break(break_type="page"), text("c")))

        sections = split_by_section([p], options)

        assert [[e.get_text() for e in s.elements] for s in sections] == [["a"], ["b"], ["c"]]

    def test_section_properties_follow_split_tail(self, options):
        """Test that a split paragraph's section properties close the tail's section."""
        props = SectionProperties(type="nextPage")
        p = paragraph(run(text("a"), Break(break_type="page"), text("b")), section_props=props)
        after = paragraph(run(text("c")))

        sections = split_by_section([p, after], options)

        assert [[e.get_text() for e in s.elements] for s in sections] == [["a"], ["b"], ["c"]]
        assert [s.sect_props for s in sections] == [props, props, None]

    def test_leading_break_starts_section_before_paragraph(self, options):
        """Test that a break opening a paragraph moves the whole paragraph."""
        first = paragraph(run(text("a")))
        page_break = Break(break_type="page")
        second = paragraph(run(page_break, text("b")))

        sections = split_by_section([first, second], options)

        assert [s.elements for s in sections] == [[first], [second]]
        assert second.children[0].children[0] is page_break

    def test_tables_do_not_split(self, options):
        """Test that non-paragraph elements never carry breaks."""
        table = Table(children=[])

        sections = split_by_section([table], options)

        assert sections[0].elements == [table]
