"""
Word document loader.

Opens a package, walks its relationship graph from the top-level
relationships and loads every known part with the payload parser registered
for its relationship type.
"""

import asyncio
import functools
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .media.fonts import deobfuscate
from .media.resources import ResourceStore, sniff_mime_type, to_data_url
from .models.nodes import DomType
from .options import Options
from .package.opc_package import OpenXmlPackage
from .package.part import Part
from .package.relationships import TOP_LEVEL_RELATIONSHIPS, Relationship, RelationshipTypes
from .parser.document_parser import DocumentParser
from .parser.font_table_parser import parse_fonts
from .parser.numbering_parser import NumberingParser
from .parser.properties_parser import (
    parse_core_properties,
    parse_custom_properties,
    parse_extended_properties,
)
from .parser.settings_parser import parse_settings
from .parser.style_parser import StyleParser
from .parser.theme_parser import parse_theme
from .utils.helpers import normalize_path, resolve_path, split_path

logger = logging.getLogger(__name__)

PayloadFactory = Callable[[DocumentParser, Any], Any]

# relationship type -> (document attribute, payload parser)
PART_TYPES: Dict[str, Tuple[Optional[str], PayloadFactory]] = {
    RelationshipTypes.OFFICE_DOCUMENT: (
        "document_part", lambda parser, root: parser.parse_document_file(root)),
    RelationshipTypes.FONT_TABLE: (
        "font_table_part", lambda parser, root: parse_fonts(root)),
    RelationshipTypes.NUMBERING: (
        "numbering_part", lambda parser, root: NumberingParser(parser.format_parser).parse(root)),
    RelationshipTypes.STYLES: (
        "styles_part", lambda parser, root: StyleParser(parser.format_parser).parse_styles_file(root)),
    RelationshipTypes.THEME: (
        "theme_part", lambda parser, root: parse_theme(root)),
    RelationshipTypes.FOOTNOTES: (
        "footnotes_part", lambda parser, root: parser.parse_notes(root, "footnote", DomType.FOOTNOTE)),
    RelationshipTypes.ENDNOTES: (
        "endnotes_part", lambda parser, root: parser.parse_notes(root, "endnote", DomType.ENDNOTE)),
    RelationshipTypes.HEADER: (
        None, lambda parser, root: parser.parse_header_footer(root, DomType.HEADER)),
    RelationshipTypes.FOOTER: (
        None, lambda parser, root: parser.parse_header_footer(root, DomType.FOOTER)),
    RelationshipTypes.CORE_PROPERTIES: (
        "core_props_part", lambda parser, root: parse_core_properties(root)),
    RelationshipTypes.EXTENDED_PROPERTIES: (
        "extended_props_part", lambda parser, root: parse_extended_properties(root)),
    RelationshipTypes.CUSTOM_PROPERTIES: (
        "custom_props_part", lambda parser, root: parse_custom_properties(root)),
    RelationshipTypes.SETTINGS: (
        "settings_part", lambda parser, root: parse_settings(root)),
}


class WordDocument:
    """
    Loaded document: the package, its parts and the parsed payloads.

    Use ``await WordDocument.load(data, options)``; the instance is complete
    once ``load`` returns.
    """

    def __init__(self, package: OpenXmlPackage, options: Optional[Options] = None):
        self.package = package
        self.options = options or Options()
        self.parser = DocumentParser(self.options)
        self.resources = ResourceStore()

        self.rels: List[Relationship] = []
        self.parts: List[Part] = []
        self.parts_map: Dict[str, Part] = {}
        self._tasks: Dict[str, "asyncio.Task[Part]"] = {}

        self.document_part: Optional[Part] = None
        self.font_table_part: Optional[Part] = None
        self.numbering_part: Optional[Part] = None
        self.styles_part: Optional[Part] = None
        self.theme_part: Optional[Part] = None
        self.footnotes_part: Optional[Part] = None
        self.endnotes_part: Optional[Part] = None
        self.core_props_part: Optional[Part] = None
        self.extended_props_part: Optional[Part] = None
        self.custom_props_part: Optional[Part] = None
        self.settings_part: Optional[Part] = None

    @classmethod
    async def load(cls, data: Union[bytes, str], options: Union[Options, Dict[str, Any], None] = None) -> "WordDocument":
        """
        Load a document.

        Args:
            data: Zip package bytes or raw document XML
            options: Options instance or mapping

        Returns:
            Loaded WordDocument

        Raises:
            PackageError: if the input cannot be opened
            ParsingError: if a part contains malformed XML
        """
        options = Options.from_value(options)
        package = await OpenXmlPackage.load(data, options.trim_xml_declaration)
        document = cls(package, options)

        document.rels = await package.load_relationships() or []

        tasks = []
        for default in TOP_LEVEL_RELATIONSHIPS:
            rel = next((r for r in document.rels if r.type == default.type), default)
            tasks.append(document._load_relationship_part(resolve_path(rel.target, ""), rel.type))
        await asyncio.gather(*tasks)

        # parts first reached again while still loading are joined here
        await asyncio.gather(*document._tasks.values())

        logger.debug(f"Loaded document with {len(document.parts)} parts")
        return document

    async def _load_relationship_part(self, path: str, rel_type: Optional[str]) -> Optional[Part]:
        path = normalize_path(path)

        if path in self.parts_map:
            return self.parts_map[path]

        if not self.package.exists(path):
            logger.debug(f"Relationship target {path} is not in the package")
            return None

        part_type = PART_TYPES.get(rel_type)
        if part_type is None and not self.options.load_unknown_parts:
            return None

        attribute, factory = part_type or (None, None)
        part = Part(
            self.package,
            path,
            rel_type=rel_type,
            parse_payload=functools.partial(factory, self.parser) if factory is not None else None,
            keep_origin=self.options.keep_origin,
        )
        self.parts_map[path] = part
        self.parts.append(part)
        if attribute is not None:
            setattr(self, attribute, part)

        task = asyncio.ensure_future(self._load_part_tree(part))
        self._tasks[path] = task
        return await task

    async def _load_part_tree(self, part: Part) -> Part:
        await part.load()

        if part.rels:
            folder = part.folder
            await asyncio.gather(*(
                self._load_relationship_part(resolve_path(rel.target, folder), rel.type)
                for rel in part.rels
                if not rel.is_external and rel.target
            ))

        return part

    # Payload shortcuts

    @property
    def document(self):
        return self.document_part.payload if self.document_part else None

    @property
    def styles(self):
        return self.styles_part.payload if self.styles_part else None

    @property
    def numbering(self):
        return self.numbering_part.payload if self.numbering_part else None

    @property
    def theme(self):
        return self.theme_part.payload if self.theme_part else None

    @property
    def settings(self):
        return self.settings_part.payload if self.settings_part else None

    @property
    def fonts(self):
        return self.font_table_part.payload if self.font_table_part else None

    @property
    def core_properties(self):
        return self.core_props_part.payload if self.core_props_part else None

    @property
    def extended_properties(self):
        return self.extended_props_part.payload if self.extended_props_part else None

    @property
    def custom_properties(self):
        return self.custom_props_part.payload if self.custom_props_part else None

    # Relationship lookups

    @staticmethod
    def get_path_by_id(part: Part, rel_id: str) -> Optional[str]:
        rel = part.find_relationship(rel_id)
        return resolve_path(rel.target, split_path(part.path)[0]) if rel else None

    def find_part_by_rel_id(self, rel_id: str, base_part: Optional[Part] = None) -> Optional[Part]:
        rels = base_part.rels if base_part is not None else self.rels
        rel = next((r for r in rels if r.id == rel_id), None)
        if rel is None:
            return None
        folder = base_part.folder if base_part is not None else ""
        return self.parts_map.get(resolve_path(rel.target, folder))

    # Resources

    async def _load_resource(self, part: Optional[Part], rel_id: str) -> Tuple[Optional[str], Optional[bytes]]:
        if part is None or not rel_id:
            return None, None
        path = self.get_path_by_id(part, rel_id)
        if path is None:
            return None, None
        return path, await self.package.load_bytes(path)

    def _to_url(self, path: str, data: Optional[bytes]) -> Optional[str]:
        if data is None:
            return None
        mime_type = sniff_mime_type(data, path, self.package.content_type(path))
        if self.options.use_base64_url:
            return to_data_url(data, mime_type)
        return self.resources.create_url(data, mime_type)

    async def load_document_image(self, rel_id: str, part: Optional[Part] = None) -> Optional[str]:
        """URL of an image referenced from ``part`` (the main document by default)."""
        path, data = await self._load_resource(part or self.document_part, rel_id)
        return self._to_url(path, data)

    async def load_numbering_image(self, rel_id: str) -> Optional[str]:
        path, data = await self._load_resource(self.numbering_part, rel_id)
        return self._to_url(path, data)

    async def load_font(self, rel_id: str, key: Optional[str]) -> Optional[str]:
        """URL of an embedded font, deobfuscated with its font key."""
        path, data = await self._load_resource(self.font_table_part, rel_id)
        if data is not None and key:
            data = deobfuscate(data, key)
        return self._to_url(path, data)

    # Saving

    def save(self) -> bytes:
        """
        Write the package back.

        Returns:
            Zip archive bytes; parts not marked modified keep their original bytes
        """
        for part in self.parts:
            part.save()
        return self.package.save()
