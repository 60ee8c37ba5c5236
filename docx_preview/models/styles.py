"""Style and numbering models."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .section import ParagraphProperties, RunProperties


@dataclass
class SubStyle:
    """CSS values applied to ``target`` (a tag or selector) under a style class."""

    target: str
    values: Dict[str, str] = field(default_factory=dict)
    mod: Optional[str] = None


@dataclass
class Style:
    id: Optional[str] = None
    name: Optional[str] = None
    css_name: Optional[str] = None
    aliases: Optional[List[str]] = None
    target: Optional[str] = None
    based_on: Optional[str] = None
    is_default: bool = False
    styles: List[SubStyle] = field(default_factory=list)
    linked: Optional[str] = None
    next: Optional[str] = None
    paragraph_props: Optional[ParagraphProperties] = None
    run_props: Optional[RunProperties] = None


@dataclass
class NumberingPicBullet:
    id: Optional[int] = None
    src: Optional[str] = None
    style: Optional[str] = None


@dataclass
class NumberingStyle:
    """One numbering level flattened for CSS emission, keyed by ``(id, level)``."""

    id: Optional[str] = None
    level: Optional[int] = None
    p_style_name: Optional[str] = None
    p_style: Dict[str, str] = field(default_factory=dict)
    r_style: Dict[str, str] = field(default_factory=dict)
    level_text: Optional[str] = None
    start: Optional[int] = None
    suff: str = "tab"
    format: Optional[str] = None
    bullet: Optional[NumberingPicBullet] = None


@dataclass
class NumberingLevel:
    level: Optional[int] = None
    start: Optional[str] = None
    restart: Optional[int] = None
    format: Optional[str] = None
    text: Optional[str] = None
    justification: Optional[str] = None
    bullet_picture_id: Optional[str] = None
    paragraph_style: Optional[str] = None
    paragraph_props: Optional[ParagraphProperties] = None
    run_props: Optional[RunProperties] = None


@dataclass
class NumberingLevelOverride:
    level: Optional[int] = None
    start: Optional[int] = None
    numbering_level: Optional[NumberingLevel] = None


@dataclass
class Numbering:
    id: Optional[str] = None
    abstract_id: Optional[str] = None
    overrides: List[NumberingLevelOverride] = field(default_factory=list)


@dataclass
class AbstractNumbering:
    id: Optional[str] = None
    name: Optional[str] = None
    multi_level_type: Optional[str] = None
    numbering_style_link: Optional[str] = None
    style_link: Optional[str] = None
    levels: List[NumberingLevel] = field(default_factory=list)


@dataclass
class NumberingBulletPicture:
    id: Optional[str] = None
    reference_id: Optional[str] = None
    style: Optional[str] = None


@dataclass
class NumberingDefinitions:
    """Payload of the numbering part."""

    numberings: List[Numbering] = field(default_factory=list)
    abstract_numberings: List[AbstractNumbering] = field(default_factory=list)
    bullet_pictures: List[NumberingBulletPicture] = field(default_factory=list)
    dom_numberings: List[NumberingStyle] = field(default_factory=list)
