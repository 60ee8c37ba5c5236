"""
Section splitter for DOCX documents.

Splits the flat body of a document into page/section buckets at section
properties, ``pageBreakBefore`` paragraph styles and page-break markers,
splitting a paragraph (and its run) when the break occurs inside it.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..models.nodes import Break, DocxElement, DomType
from ..models.section import SectionProperties
from ..models.styles import Style
from ..options import Options

logger = logging.getLogger(__name__)

StyleLookup = Callable[[Optional[str]], Optional[Style]]


@dataclass
class Section:
    """One bucket of body content sharing a set of section properties."""

    sect_props: Optional[SectionProperties] = None
    elements: List[DocxElement] = field(default_factory=list)


def is_page_break_element(elem: DocxElement, options: Options) -> bool:
    """
    Whether ``elem`` forces a page split.

    ``page`` breaks always do. ``lastRenderedPageBreak`` markers do unless
    ``ignore_last_rendered_page_break`` is set.
    """
    if elem.type != DomType.BREAK or not isinstance(elem, Break):
        return False
    if elem.break_type == "page":
        return True
    return elem.break_type == "lastRenderedPageBreak" and not options.ignore_last_rendered_page_break


class SectionSplitter:
    """
    Splits body elements into sections.

    Args:
        options: Rendering options (``break_pages``, ``ignore_last_rendered_page_break``)
        find_style: Style lookup by id, used for ``pageBreakBefore``
    """

    def __init__(self, options: Options, find_style: Optional[StyleLookup] = None):
        self.options = options
        self.find_style = find_style or (lambda name: None)

    def split(self, elements: List[DocxElement]) -> List[Section]:
        current = Section()
        result = [current]

        for elem in elements:
            handled = None
            if elem.type == DomType.PARAGRAPH:
                # a break opening the paragraph starts the section before it
                if self._find_page_break(elem) == (0, 0):
                    handled = elem.children[0].children[0]
                if (handled is not None or self._has_page_break_before(elem)) and current.elements:
                    current = Section()
                    result.append(current)

            # each split tail is scanned again for further breaks
            while elem is not None:
                current.elements.append(elem)

                if elem.type != DomType.PARAGRAPH:
                    break

                sect_props = getattr(elem, "section_props", None)
                p_break_index, r_break_index = self._find_page_break(elem, handled)

                if sect_props is None and p_break_index == -1:
                    break

                tail = None
                if p_break_index != -1:
                    handled = elem.children[p_break_index].children[r_break_index]
                    tail = self._split_paragraph(elem, p_break_index, r_break_index)

                # section properties close the bucket holding the end of the paragraph
                current.sect_props = sect_props if tail is None else None
                current = Section()
                result.append(current)
                elem = tail

        self._propagate_section_properties(result)
        logger.debug(f"Split body into {len(result)} sections")
        return result

    def _has_page_break_before(self, paragraph: DocxElement) -> bool:
        style = self.find_style(paragraph.style_name)
        return bool(style is not None and style.paragraph_props is not None
                    and style.paragraph_props.page_break_before)

    def _find_page_break(self, paragraph: DocxElement, after: Optional[DocxElement] = None):
        """
        Indices of the first run holding a page break and of the break inside it, or (-1, -1).

        With ``after``, only breaks following that node are considered.
        """
        if not self.options.break_pages:
            return -1, -1

        searching = after is None
        for p_index, child in enumerate(paragraph.children):
            for r_index, grandchild in enumerate(child.children):
                if not searching:
                    searching = grandchild is after
                elif is_page_break_element(grandchild, self.options):
                    return p_index, r_index
        return -1, -1

    @staticmethod
    def _split_paragraph(paragraph: DocxElement, p_break_index: int, r_break_index: int) -> Optional[DocxElement]:
        """
        Move content from the break onwards into a new sibling paragraph.

        Content of the break run preceding the break stays with ``paragraph``
        in a new run; the original run keeps the break and what follows.

        Returns:
            The new paragraph, or None when nothing follows the break
        """
        children = paragraph.children
        break_run = children[p_break_index]
        split_run = r_break_index < len(break_run.children) - 1

        if p_break_index >= len(children) - 1 and not split_run:
            return None

        tail = dataclasses.replace(paragraph, children=children[p_break_index:])
        tail.parent = paragraph.parent
        paragraph.children = children[:p_break_index]

        if split_run:
            run_children = break_run.children
            head_run = dataclasses.replace(break_run, children=run_children[:r_break_index])
            head_run.parent = paragraph
            for child in head_run.children:
                child.parent = head_run
            paragraph.children.append(head_run)
            break_run.children = run_children[r_break_index:]

        for child in tail.children:
            child.parent = tail

        return tail

    @staticmethod
    def _propagate_section_properties(sections: List[Section]) -> None:
        """Buckets without section properties take those of the next bucket that has them."""
        current = None
        for section in reversed(sections):
            if section.sect_props is None:
                section.sect_props = current
            else:
                current = section.sect_props


def split_by_section(elements: List[DocxElement], options: Options,
                     find_style: Optional[StyleLookup] = None) -> List[Section]:
    return SectionSplitter(options, find_style).split(elements)
