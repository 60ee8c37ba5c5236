"""
Package part record.

A part is identified by its package path, owns its relationships and holds the
typed payload produced by the payload parser registered for its relationship type.
"""

import asyncio
import logging
from typing import Any, Callable, List, Optional

from ..parser.xml_parser import serialize_xml
from ..utils.helpers import split_path
from .opc_package import OpenXmlPackage
from .relationships import Relationship

logger = logging.getLogger(__name__)

PayloadParser = Callable[[Any], Any]


class Part:
    """One XML payload within the package."""

    def __init__(self, package: OpenXmlPackage, path: str, rel_type: Optional[str] = None,
                 parse_payload: Optional[PayloadParser] = None, keep_origin: bool = False):
        self.package = package
        self.path = path
        self.rel_type = rel_type
        self.rels: List[Relationship] = []
        self.payload: Any = None
        self.xml_document = None
        self.modified = False
        self._parse_payload = parse_payload
        self._keep_origin = keep_origin

    @property
    def folder(self) -> str:
        return split_path(self.path)[0]

    @property
    def is_raw(self) -> bool:
        return self._parse_payload is None

    async def load(self) -> "Part":
        """
        Load relationships and XML concurrently, then parse the payload.

        Raw parts have no payload parser; only their relationships are loaded
        and their content stays in the package as is.
        """
        if self.is_raw:
            self.rels = await self.package.load_relationships(self.path) or []
            logger.debug(f"Loaded raw part {self.path} ({len(self.rels)} relationships)")
            return self

        rels, text = await asyncio.gather(
            self.package.load_relationships(self.path),
            self.package.load_text(self.path),
        )
        self.rels = rels or []

        if text is None:
            return self

        tree = self.package.parse_xml_document(text, self.path)
        if self._keep_origin:
            self.xml_document = tree

        self.payload = self._parse_payload(tree.getroot())

        logger.debug(f"Loaded part {self.path} ({len(self.rels)} relationships)")
        return self

    def find_relationship(self, rel_id: str) -> Optional[Relationship]:
        return next((rel for rel in self.rels if rel.id == rel_id), None)

    def mark_modified(self) -> None:
        """Flag the kept XML tree for re-serialization by ``save``."""
        if self.xml_document is None:
            raise ValueError(f"Part {self.path} was loaded without keep_origin")
        self.modified = True

    def save(self) -> None:
        if self.modified and self.xml_document is not None:
            self.package.update(self.path, serialize_xml(self.xml_document))
            self.modified = False

    def __repr__(self) -> str:
        return f"Part(path={self.path!r}, rels={len(self.rels)})"
