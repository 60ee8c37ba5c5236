"""
Pytest configuration for docx-preview
"""

import io
import logging
import re
import sys
import zipfile
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple, Union

import pytest

from docx_preview.parser.xml_parser import parse_xml_string

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
OFFICE_RELS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
PACKAGE_RELS = "http://schemas.openxmlformats.org/package/2006/relationships"

NAMESPACES = " ".join([
    f'xmlns:w="{W_NS}"',
    f'xmlns:r="{OFFICE_RELS}"',
    'xmlns:wp="http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"',
    'xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main"',
    'xmlns:pic="http://schemas.openxmlformats.org/drawingml/2006/picture"',
    'xmlns:m="http://schemas.openxmlformats.org/officeDocument/2006/math"',
    'xmlns:v="urn:schemas-microsoft-com:vml"',
    'xmlns:mc="http://schemas.openxmlformats.org/markup-compatibility/2006"',
    'xmlns:wps="http://schemas.microsoft.com/office/word/2010/wordprocessingShape"',
])

CONTENT_TYPES = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">
    <Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>
    <Default Extension="xml" ContentType="application/xml"/>
    <Default Extension="png" ContentType="image/png"/>
    <Override PartName="/word/document.xml" ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>
</Types>"""

Rel = Union[Tuple[str, str, str], Tuple[str, str, str, str]]


def with_namespaces(snippet: str) -> str:
    """Declare the WordprocessingML namespaces on the first element of ``snippet``."""
    return re.sub(r"^\s*<([\w:]+)", lambda m: f"<{m.group(1)} {NAMESPACES}", snippet, count=1)


def document_xml(body: str) -> str:
    return ('<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
            f"<w:document {NAMESPACES}><w:body>{body}</w:body></w:document>")


def rels_xml(rels: Sequence[Rel]) -> str:
    """
    Relationship file for ``(id, type, target[, mode])`` tuples.

    Short types (``styles``) expand to office relationship types.
    """
    items = []
    for rel in rels:
        rel_id, rel_type, target = rel[:3]
        if "://" not in rel_type:
            rel_type = f"{OFFICE_RELS}/{rel_type}"
        mode = f' TargetMode="{rel[3]}"' if len(rel) > 3 else ""
        items.append(f'<Relationship Id="{rel_id}" Type="{rel_type}" Target="{target}"{mode}/>')
    return (f'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
            f'<Relationships xmlns="{PACKAGE_RELS}">{"".join(items)}</Relationships>')


def build_docx(parts: Dict[str, Union[str, bytes]], root_rels: Optional[Sequence[Rel]] = None) -> bytes:
    """Zip ``parts``, adding a content types file and root relationships when missing."""
    entries = dict(parts)
    entries.setdefault("[Content_Types].xml", CONTENT_TYPES)
    entries.setdefault("_rels/.rels", rels_xml(root_rels or [("rId1", "officeDocument", "word/document.xml")]))

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        for name, content in entries.items():
            archive.writestr(name, content.encode("utf-8") if isinstance(content, str) else content)
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    # the CLI installs its own handler on the package logger
    package_logger = logging.getLogger("docx_preview")
    package_logger.handlers.clear()
    package_logger.propagate = True

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def xml_element():
    """Parse a namespaced snippet such as ``<w:rPr><w:b/></w:rPr>`` into an lxml element."""
    def parse(snippet: str):
        return parse_xml_string(with_namespaces(snippet)).getroot()
    return parse


@pytest.fixture
def make_document_xml():
    return document_xml


@pytest.fixture
def make_rels():
    def make(*rels: Rel) -> str:
        return rels_xml(rels)
    return make


@pytest.fixture
def make_docx():
    return build_docx


@pytest.fixture
def png_bytes():
    """A 4x4 red PNG image."""
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), (255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def simple_docx():
    """Package with one paragraph, a styles part and a settings part."""
    return build_docx({
        "word/document.xml": document_xml(
            '<w:p><w:pPr><w:pStyle w:val="Heading1"/></w:pPr>'
            '<w:r><w:t>Hello</w:t></w:r><w:r><w:rPr><w:b/></w:rPr><w:t xml:space="preserve"> world</w:t></w:r></w:p>'
            '<w:sectPr><w:pgSz w:w="11906" w:h="16838"/>'
            '<w:pgMar w:top="1440" w:right="1440" w:bottom="1440" w:left="1440"/></w:sectPr>'
        ),
        "word/_rels/document.xml.rels": rels_xml([
            ("rId1", "styles", "styles.xml"),
            ("rId2", "settings", "settings.xml"),
        ]),
        "word/styles.xml": with_namespaces(
            '<w:styles>'
            '<w:style w:type="paragraph" w:default="1" w:styleId="Normal"><w:name w:val="Normal"/>'
            '<w:rPr><w:sz w:val="22"/></w:rPr></w:style>'
            '<w:style w:type="paragraph" w:styleId="Heading1"><w:name w:val="heading 1"/>'
            '<w:basedOn w:val="Normal"/><w:rPr><w:color w:val="2F5496"/></w:rPr></w:style>'
            '</w:styles>'
        ),
        "word/settings.xml": with_namespaces(
            '<w:settings><w:defaultTabStop w:val="720"/></w:settings>'
        ),
    })


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    logging.raiseExceptions = False
