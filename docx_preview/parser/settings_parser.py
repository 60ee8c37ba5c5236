"""
Settings parser for DOCX documents.

Reads the few ``settings.xml`` values the renderer uses: the default tab
stop, note properties and automatic hyphenation.
"""

from ..models.parts import NoteProperties, Settings
from .xml_parser import xml


def parse_settings(root) -> Settings:
    result = Settings()

    for elem in xml.elements(root):
        name = xml.local_name(elem)
        if name == "defaultTabStop":
            result.default_tab_stop = xml.length_attr(elem, "val")
        elif name == "footnotePr":
            result.footnote_props = _parse_note_properties(elem)
        elif name == "endnotePr":
            result.endnote_props = _parse_note_properties(elem)
        elif name == "autoHyphenation":
            result.auto_hyphenation = xml.bool_attr(elem, "val", True)

    return result


def _parse_note_properties(elem) -> NoteProperties:
    result = NoteProperties()

    for child in xml.elements(elem):
        name = xml.local_name(child)
        if name == "numFmt":
            result.numbering_format = xml.attr(child, "val")
        elif name in ("footnote", "endnote"):
            result.default_note_ids.append(xml.attr(child, "id"))

    return result
