"""
Resource URLs for binary package content.

Images and fonts become either ``data:`` URLs or references into an
in-memory ``blob:`` store owned by the document.
"""

import base64
import io
import logging
import mimetypes
import uuid
from typing import Dict, Optional, Tuple

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


def sniff_mime_type(data: bytes, path: Optional[str] = None, content_type: Optional[str] = None) -> str:
    """
    Determine the MIME type of binary content.

    Images are identified by Pillow. Other content uses the declared content
    type, then the file extension.
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            mime = Image.MIME.get(image.format)
            if mime:
                return mime
    except (UnidentifiedImageError, OSError, ValueError):
        logger.debug(f"Pillow could not identify {path or 'resource'}")

    if content_type:
        return content_type
    if path:
        guessed, _ = mimetypes.guess_type(path)
        if guessed:
            return guessed
    return DEFAULT_MIME_TYPE


def to_data_url(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


class ResourceStore:
    """
    Registry of ``blob:`` references handed out while rendering.

    A reference stays valid until it is revoked or the store is cleared.
    """

    PREFIX = "blob:docx-preview/"

    def __init__(self):
        self._entries: Dict[str, Tuple[bytes, str]] = {}

    def create_url(self, data: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> str:
        url = f"{self.PREFIX}{uuid.uuid4()}"
        self._entries[url] = (data, mime_type)
        return url

    def get(self, url: str) -> Optional[Tuple[bytes, str]]:
        return self._entries.get(url)

    def revoke(self, url: str) -> None:
        self._entries.pop(url, None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, url: str) -> bool:
        return url in self._entries
