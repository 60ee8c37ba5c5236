"""Models for the auxiliary parts: theme, settings, font table and document properties."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class ColorScheme:
    name: Optional[str] = None
    colors: Dict[str, str] = field(default_factory=dict)


@dataclass
class FontInfo:
    latin_typeface: Optional[str] = None
    ea_typeface: Optional[str] = None
    cs_typeface: Optional[str] = None


@dataclass
class FontScheme:
    name: Optional[str] = None
    major_font: Optional[FontInfo] = None
    minor_font: Optional[FontInfo] = None


@dataclass
class Theme:
    color_scheme: Optional[ColorScheme] = None
    font_scheme: Optional[FontScheme] = None


@dataclass
class NoteProperties:
    numbering_format: Optional[str] = None
    default_note_ids: List[str] = field(default_factory=list)


@dataclass
class Settings:
    default_tab_stop: Optional[str] = None
    footnote_props: Optional[NoteProperties] = None
    endnote_props: Optional[NoteProperties] = None
    auto_hyphenation: Optional[bool] = None


@dataclass
class EmbedFontRef:
    id: Optional[str] = None
    key: Optional[str] = None
    type: Optional[str] = None


@dataclass
class FontDeclaration:
    name: Optional[str] = None
    alt_name: Optional[str] = None
    family: Optional[str] = None
    embed_font_refs: List[EmbedFontRef] = field(default_factory=list)


@dataclass
class CoreProperties:
    title: Optional[str] = None
    description: Optional[str] = None
    subject: Optional[str] = None
    creator: Optional[str] = None
    keywords: Optional[str] = None
    language: Optional[str] = None
    last_modified_by: Optional[str] = None
    revision: Optional[int] = None


@dataclass
class ExtendedProperties:
    template: Optional[str] = None
    total_time: Optional[int] = None
    pages: Optional[int] = None
    words: Optional[int] = None
    characters: Optional[int] = None
    application: Optional[str] = None
    lines: Optional[int] = None
    paragraphs: Optional[int] = None
    company: Optional[str] = None
    app_version: Optional[str] = None


@dataclass
class CustomProperty:
    format_id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    value: Optional[str] = None
