"""
Package reader for DOCX files.

Opens the zip container (or a bare XML string), exposes part bytes and text
by normalized path, loads relationship files and writes the package back.
"""

import io
import logging
import posixpath
import zipfile
from typing import Dict, List, Optional, Union

from ..exceptions import PackageError
from ..parser.xml_parser import parse_xml_string, xml
from ..utils.helpers import normalize_path
from .relationships import Relationship, parse_relationships, relationships_path

logger = logging.getLogger(__name__)

CONTENT_TYPES_PATH = "[Content_Types].xml"
RAW_DOCUMENT_PATH = "word/document.xml"


class OpenXmlPackage:
    """
    Addressable store of package entries.

    Entries are read once when the package is opened. ``update`` replaces an
    entry in memory and ``save`` writes a new archive in which untouched
    entries keep their original bytes.
    """

    def __init__(self, archive: Optional[zipfile.ZipFile] = None, text: Optional[str] = None,
                 trim_xml_declaration: bool = True):
        self.trim_xml_declaration = trim_xml_declaration
        self._text = text
        self._entries: Dict[str, bytes] = {}
        self._infos: Dict[str, zipfile.ZipInfo] = {}
        self._order: List[str] = []
        self._content_types: Dict[str, str] = {}
        self._default_types: Dict[str, str] = {}

        if archive is not None:
            for info in archive.infolist():
                if info.is_dir():
                    continue
                self._entries[info.filename] = archive.read(info.filename)
                self._infos[info.filename] = info
                self._order.append(info.filename)
            self._parse_content_types()

    @classmethod
    async def load(cls, source: Union[bytes, bytearray, str], trim_xml_declaration: bool = True) -> "OpenXmlPackage":
        """
        Open a package.

        Args:
            source: Zip archive bytes, or raw document XML text
            trim_xml_declaration: Strip XML prologs before parsing parts

        Raises:
            PackageError: if ``source`` is neither text nor a zip archive
        """
        if isinstance(source, str):
            logger.debug("Opened raw XML document")
            return cls(text=source, trim_xml_declaration=trim_xml_declaration)

        if not isinstance(source, (bytes, bytearray, memoryview)):
            raise PackageError("Unsupported package source", type(source).__name__)

        try:
            with zipfile.ZipFile(io.BytesIO(bytes(source))) as archive:
                package = cls(archive, trim_xml_declaration=trim_xml_declaration)
        except zipfile.BadZipFile as e:
            raise PackageError("Input is not a zip package", str(e)) from e

        logger.debug(f"Opened package with {len(package._entries)} entries")
        return package

    @property
    def is_raw(self) -> bool:
        return self._text is not None

    @property
    def paths(self) -> List[str]:
        return list(self._order)

    def get(self, path: str) -> Optional[bytes]:
        """Entry bytes, or None when the package has no such entry."""
        path = normalize_path(path)
        if self.is_raw:
            return self._text.encode("utf-8") if path == RAW_DOCUMENT_PATH else None
        return self._entries.get(path)

    def exists(self, path: str) -> bool:
        return self.get(path) is not None

    def update(self, path: str, content: Union[str, bytes]) -> None:
        path = normalize_path(path)
        if isinstance(content, str):
            content = content.encode("utf-8")
        if path not in self._entries:
            self._order.append(path)
        self._entries[path] = content

    async def load_text(self, path: str) -> Optional[str]:
        data = self.get(path)
        if data is None:
            return None
        return data.decode("utf-8-sig")

    async def load_bytes(self, path: str) -> Optional[bytes]:
        return self.get(path)

    async def load_relationships(self, path: Optional[str] = None) -> Optional[List[Relationship]]:
        """
        Relationships declared for a part, or for the package root when ``path`` is None.

        Returns:
            Relationship list, or None if the part has no relationship file
        """
        rels_path = relationships_path(path)
        text = await self.load_text(rels_path)
        if text is None:
            return None
        tree = self.parse_xml_document(text, rels_path)
        return parse_relationships(tree.getroot())

    def parse_xml_document(self, text: str, path: Optional[str] = None):
        return parse_xml_string(text, self.trim_xml_declaration, path=path)

    def content_type(self, path: str) -> Optional[str]:
        """Content type declared in ``[Content_Types].xml`` for a part."""
        path = normalize_path(path)
        override = self._content_types.get(f"/{path}")
        if override:
            return override
        extension = posixpath.splitext(path)[1].lstrip(".").lower()
        return self._default_types.get(extension)

    def save(self) -> bytes:
        """Write the package as a zip archive."""
        if self.is_raw:
            raise PackageError("Cannot save a raw XML document as a package")

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
            for name in self._order:
                info = self._infos.get(name)
                if info is None:
                    info = zipfile.ZipInfo(name)
                    info.compress_type = zipfile.ZIP_DEFLATED
                archive.writestr(info, self._entries[name])

        logger.debug(f"Saved package with {len(self._order)} entries")
        return buffer.getvalue()

    def _parse_content_types(self) -> None:
        data = self._entries.get(CONTENT_TYPES_PATH)
        if data is None:
            return

        root = self.parse_xml_document(data.decode("utf-8-sig"), CONTENT_TYPES_PATH).getroot()
        for elem in xml.elements(root):
            name = xml.local_name(elem)
            if name == "Override":
                self._content_types[xml.attr(elem, "PartName") or ""] = xml.attr(elem, "ContentType")
            elif name == "Default":
                extension = (xml.attr(elem, "Extension") or "").lower()
                self._default_types[extension] = xml.attr(elem, "ContentType")
