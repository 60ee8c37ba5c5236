"""
Numbering parser for DOCX documents.

Parses ``numbering.xml`` into the typed definitions (abstract numberings,
concrete numberings with level overrides, picture bullets) and flattens every
concrete numbering level into a ``NumberingStyle`` ready for CSS emission.
"""

import copy
import logging
from typing import Dict, List, Optional

from ..models.styles import (
    AbstractNumbering,
    Numbering,
    NumberingBulletPicture,
    NumberingDefinitions,
    NumberingLevel,
    NumberingLevelOverride,
    NumberingPicBullet,
    NumberingStyle,
)
from .format_parser import FormatParser
from .paragraph_properties import parse_paragraph_properties, parse_run_properties
from .xml_parser import xml

logger = logging.getLogger(__name__)


class NumberingParser:
    """Parser for the numbering part."""

    def __init__(self, format_parser: FormatParser):
        self.format_parser = format_parser

    def parse(self, root) -> NumberingDefinitions:
        """
        Parse the numbering part root.

        Returns:
            NumberingDefinitions with ``dom_numberings`` populated
        """
        result = NumberingDefinitions()
        pic_bullets: List[NumberingPicBullet] = []
        abstract_levels: Dict[str, Dict[int, NumberingStyle]] = {}

        for elem in xml.elements(root):
            name = xml.local_name(elem)
            if name == "numPicBullet":
                bullet_picture = self._parse_bullet_picture(elem)
                if bullet_picture is not None:
                    result.bullet_pictures.append(bullet_picture)
                    pic_bullets.append(NumberingPicBullet(
                        id=int(bullet_picture.id) if (bullet_picture.id or "").isdigit() else None,
                        src=bullet_picture.reference_id,
                        style=bullet_picture.style,
                    ))
            elif name == "abstractNum":
                result.abstract_numberings.append(self._parse_abstract_numbering(elem))
            elif name == "num":
                result.numberings.append(self._parse_numbering(elem))

        # Level styles need the picture bullets, which may be declared after the abstract numberings.
        for elem in xml.elements(root, "abstractNum"):
            abstract_id = xml.attr(elem, "abstractNumId")
            abstract_levels[abstract_id] = {
                style.level: style
                for style in (self._parse_level_style(lvl, pic_bullets) for lvl in xml.elements(elem, "lvl"))
            }

        override_elems = {
            xml.attr(elem, "numId"): xml.elements(elem, "lvlOverride")
            for elem in xml.elements(root, "num")
        }

        for numbering in result.numberings:
            levels = abstract_levels.get(numbering.abstract_id)
            if levels is None:
                if self.format_parser.debug:
                    logger.warning(f"Numbering {numbering.id} references unknown abstract numbering "
                                   f"{numbering.abstract_id}")
                continue

            styles = {level: copy.deepcopy(style) for level, style in levels.items()}
            for override, elem in zip(numbering.overrides, override_elems.get(numbering.id, [])):
                lvl = xml.element(elem, "lvl")
                if lvl is not None:
                    styles[override.level] = self._parse_level_style(lvl, pic_bullets)
                if override.start is not None and override.level in styles:
                    styles[override.level].start = override.start

            for level in sorted(k for k in styles if k is not None):
                style = styles[level]
                style.id = numbering.id
                result.dom_numberings.append(style)

        logger.debug(f"Parsed {len(result.numberings)} numberings, "
                     f"{len(result.abstract_numberings)} abstract numberings")
        return result

    def _parse_level_style(self, elem, bullets: List[NumberingPicBullet]) -> NumberingStyle:
        result = NumberingStyle(level=xml.int_attr(elem, "ilvl"))

        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "pPr":
                self.format_parser.parse_default_properties(c, result.p_style)
            elif name == "rPr":
                self.format_parser.parse_default_properties(c, result.r_style)
            elif name == "lvlPicBulletId":
                bullet_id = xml.int_attr(c, "val")
                result.bullet = next((b for b in bullets if b.id == bullet_id), None)
            elif name == "lvlText":
                result.level_text = xml.attr(c, "val")
            elif name == "pStyle":
                result.p_style_name = xml.attr(c, "val")
            elif name == "numFmt":
                result.format = xml.attr(c, "val")
            elif name == "suff":
                result.suff = xml.attr(c, "val")
            elif name == "start":
                result.start = xml.int_attr(c, "val")

        return result

    @staticmethod
    def _parse_bullet_picture(elem) -> Optional[NumberingBulletPicture]:
        pict = xml.element(elem, "pict")
        shape = xml.element(pict, "shape")
        imagedata = xml.element(shape, "imagedata")
        if imagedata is None:
            return None
        return NumberingBulletPicture(
            id=xml.attr(elem, "numPicBulletId"),
            reference_id=xml.attr(imagedata, "id"),
            style=xml.attr(shape, "style"),
        )

    def _parse_numbering(self, elem) -> Numbering:
        result = Numbering(id=xml.attr(elem, "numId"))
        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "abstractNumId":
                result.abstract_id = xml.attr(c, "val")
            elif name == "lvlOverride":
                result.overrides.append(self._parse_level_override(c))
        return result

    def _parse_level_override(self, elem) -> NumberingLevelOverride:
        result = NumberingLevelOverride(level=xml.int_attr(elem, "ilvl"))
        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "startOverride":
                result.start = xml.int_attr(c, "val")
            elif name == "lvl":
                result.numbering_level = self._parse_numbering_level(c)
        return result

    def _parse_abstract_numbering(self, elem) -> AbstractNumbering:
        result = AbstractNumbering(id=xml.attr(elem, "abstractNumId"))
        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "name":
                result.name = xml.attr(c, "val")
            elif name == "multiLevelType":
                result.multi_level_type = xml.attr(c, "val")
            elif name == "numStyleLink":
                result.numbering_style_link = xml.attr(c, "val")
            elif name == "styleLink":
                result.style_link = xml.attr(c, "val")
            elif name == "lvl":
                result.levels.append(self._parse_numbering_level(c))
        return result

    @staticmethod
    def _parse_numbering_level(elem) -> NumberingLevel:
        result = NumberingLevel(level=xml.int_attr(elem, "ilvl"))
        for c in xml.elements(elem):
            name = xml.local_name(c)
            if name == "start":
                result.start = xml.attr(c, "val")
            elif name == "lvlRestart":
                result.restart = xml.int_attr(c, "val")
            elif name == "numFmt":
                result.format = xml.attr(c, "val")
            elif name == "lvlText":
                result.text = xml.attr(c, "val")
            elif name == "lvlJc":
                result.justification = xml.attr(c, "val")
            elif name == "lvlPicBulletId":
                result.bullet_picture_id = xml.attr(c, "val")
            elif name == "pStyle":
                result.paragraph_style = xml.attr(c, "val")
            elif name == "pPr":
                result.paragraph_props = parse_paragraph_properties(c)
            elif name == "rPr":
                result.run_props = parse_run_properties(c)
        return result
