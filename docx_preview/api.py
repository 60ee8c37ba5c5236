"""
Public API of docx-preview.

Coroutines load and render documents; the synchronous wrappers drive them
with ``asyncio.run`` for callers without an event loop.
"""

import asyncio
import logging
from dataclasses import dataclass
from html import escape
from typing import Any, Dict, Optional, Union

from .document import WordDocument
from .exceptions import RenderingError
from .options import Options
from .renderers.html_node import HtmlElement
from .renderers.html_renderer import HtmlRenderer

logger = logging.getLogger(__name__)

Source = Union[bytes, bytearray, str]
OptionsLike = Union[Options, Dict[str, Any], None]


@dataclass
class RenderResult:
    """Rendered document together with its output containers."""

    document: WordDocument
    body: HtmlElement
    styles: HtmlElement

    def to_html(self, title: Optional[str] = None) -> str:
        """Standalone HTML page holding the style sheets and the body."""
        if title is None:
            core = self.document.core_properties
            title = core.title if core is not None and core.title else "Document"

        head = "".join(child.to_html() if not isinstance(child, str) else escape(child)
                       for child in self.styles.children)
        body = "".join(child.to_html() if not isinstance(child, str) else escape(child)
                       for child in self.body.children)

        return (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{escape(title)}</title>\n"
            f"{head}\n"
            "</head>\n"
            "<body>\n"
            f"{body}\n"
            "</body>\n"
            "</html>\n"
        )


async def parse_async(data: Source, options: OptionsLike = None) -> WordDocument:
    """
    Load a document and all of its parts.

    Args:
        data: Zip package bytes or raw document XML
        options: Options instance or mapping of option names

    Returns:
        Loaded document
    """
    return await WordDocument.load(data, Options.from_value(options))


async def render_async(data: Source, body_container: Optional[HtmlElement],
                       style_container: Optional[HtmlElement] = None,
                       options: OptionsLike = None) -> WordDocument:
    """
    Load a document and render it into the given containers.

    Resource tasks started by the render are joined before returning.

    Raises:
        RenderingError: if ``body_container`` is None
    """
    if body_container is None:
        raise RenderingError("Body container is required")

    options = Options.from_value(options)
    document = await parse_async(data, options)

    state = HtmlRenderer(document, options).render(body_container, style_container)
    await state.join()

    logger.debug("Render complete")
    return document


async def render_document_async(data: Source, options: OptionsLike = None) -> RenderResult:
    """Render into fresh containers and return them with the document."""
    body = HtmlElement("div")
    styles = HtmlElement("div")
    document = await render_async(data, body, styles, options)
    return RenderResult(document, body, styles)


def parse(data: Source, options: OptionsLike = None) -> WordDocument:
    return asyncio.run(parse_async(data, options))


def render(data: Source, body_container: Optional[HtmlElement],
           style_container: Optional[HtmlElement] = None, options: OptionsLike = None) -> WordDocument:
    return asyncio.run(render_async(data, body_container, style_container, options))


def render_document(data: Source, options: OptionsLike = None) -> RenderResult:
    return asyncio.run(render_document_async(data, options))
