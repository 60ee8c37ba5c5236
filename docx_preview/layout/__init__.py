"""Layout module: splitting the document body into sections."""

from .section_splitter import Section, SectionSplitter, is_page_break_element, split_by_section

__all__ = ["Section", "SectionSplitter", "is_page_break_element", "split_by_section"]
