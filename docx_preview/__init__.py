"""
docx-preview - DOCX to HTML rendering library.

Reads a DOCX package, parses its parts into a document model and renders
the model as HTML with generated CSS.

Main Components:
- WordDocument: loaded package, parts and parsed payloads
- HtmlRenderer: HTML/CSS output
- Options: loading and rendering switches
- parse / render / render_document: public entry points (and ``*_async`` coroutines)
"""

from .api import (
    RenderResult,
    parse,
    parse_async,
    render,
    render_async,
    render_document,
    render_document_async,
)
from .document import WordDocument
from .exceptions import (
    ConfigurationError,
    DocxPreviewError,
    PackageError,
    ParsingError,
    RenderingError,
)
from .options import Options
from .renderers import HtmlElement, HtmlRenderer
from .version import __version__

__all__ = [
    "ConfigurationError",
    "DocxPreviewError",
    "HtmlElement",
    "HtmlRenderer",
    "Options",
    "PackageError",
    "ParsingError",
    "RenderResult",
    "RenderingError",
    "WordDocument",
    "__version__",
    "parse",
    "parse_async",
    "render",
    "render_async",
    "render_document",
    "render_document_async",
]
