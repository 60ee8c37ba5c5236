"""
Tests for OpenXmlPackage and relationship helpers.
"""

import asyncio
import io
import zipfile

import pytest

from docx_preview.exceptions import PackageError
from docx_preview.package.opc_package import OpenXmlPackage
from docx_preview.package.relationships import (
    RelationshipTypes,
    parse_relationships,
    relationships_path,
)
from docx_preview.parser.xml_parser import parse_xml_string
from docx_preview.utils.helpers import normalize_path, resolve_path, split_path


def load(source, trim=True):
    return asyncio.run(OpenXmlPackage.load(source, trim))


@pytest.mark.unit
class TestOpenXmlPackage:
    """Test cases for OpenXmlPackage."""

    def test_load_zip_entries(self, simple_docx):
        """Test that every archive entry is addressable by path."""
        package = load(simple_docx)

        assert not package.is_raw
        assert "word/document.xml" in package.paths
        assert package.exists("word/styles.xml")
        assert package.exists("/word/styles.xml")
        assert package.get("word/missing.xml") is None

    def test_load_raw_xml(self, make_document_xml):
        """Test that raw XML is served as the main document only."""
        text = make_document_xml("<w:p/>")
        package = load(text)

        assert package.is_raw
        assert package.get("word/document.xml") == text.encode("utf-8")
        assert package.get("word/styles.xml") is None
        assert asyncio.run(package.load_relationships()) is None

    def test_load_invalid_bytes(self):
        """Test that non-zip bytes are rejected."""
        with pytest.raises(PackageError):
            load(b"not a zip archive")

    def test_load_unsupported_source(self):
        """Test that unsupported source types are rejected."""
        with pytest.raises(PackageError) as exc_info:
            load(12345)

        assert "int" in str(exc_info.value)

    def test_load_text(self, simple_docx):
        """Test loading part text."""
        package = load(simple_docx)

        text = asyncio.run(package.load_text("word/settings.xml"))

        assert "defaultTabStop" in text
        assert asyncio.run(package.load_text("word/nothing.xml")) is None

    def test_load_relationships(self, simple_docx):
        """Test loading root and part relationships."""
        package = load(simple_docx)

        root_rels = asyncio.run(package.load_relationships())
        doc_rels = asyncio.run(package.load_relationships("word/document.xml"))

        assert [r.type for r in root_rels] == [RelationshipTypes.OFFICE_DOCUMENT]
        assert {r.target for r in doc_rels} == {"styles.xml", "settings.xml"}
        assert asyncio.run(package.load_relationships("word/styles.xml")) is None

    def test_content_type(self, simple_docx):
        """Test content type overrides and extension defaults."""
        package = load(simple_docx)

        assert package.content_type("word/document.xml").endswith("document.main+xml")
        assert package.content_type("word/media/image1.png") == "image/png"
        assert package.content_type("word/media/image1.bin") is None

    def test_save_unmodified_is_identical(self, simple_docx):
        """Test that saving an untouched package keeps every entry's bytes."""
        package = load(simple_docx)

        saved = package.save()

        with zipfile.ZipFile(io.BytesIO(simple_docx)) as original, zipfile.ZipFile(io.BytesIO(saved)) as result:
            assert original.namelist() == result.namelist()
            for name in original.namelist():
                assert original.read(name) == result.read(name)

    def test_update_and_save(self, simple_docx):
        """Test that updated entries are written and new entries appended."""
        package = load(simple_docx)
        package.update("word/settings.xml", "<changed/>")
        package.update("custom/new.xml", b"<new/>")

        with zipfile.ZipFile(io.BytesIO(package.save())) as result:
            assert result.read("word/settings.xml") == b"<changed/>"
            assert result.read("custom/new.xml") == b"<new/>"

    def test_save_raw_document_fails(self, make_document_xml):
        """Test that a raw XML document cannot be saved as a package."""
        package = load(make_document_xml("<w:p/>"))

        with pytest.raises(PackageError):
            package.save()


@pytest.mark.unit
class TestRelationships:
    """Test cases for relationship parsing and paths."""

    def test_parse_relationships(self, make_rels):
        """Test parsing a relationship file."""
        text = make_rels(
            ("rId1", "styles", "styles.xml"),
            ("rId2", "hyperlink", "https://example.com", "External"),
        )
        rels = parse_relationships(parse_xml_string(text, True).getroot())

        assert rels[0].id == "rId1"
        assert rels[0].type == RelationshipTypes.STYLES
        assert not rels[0].is_external
        assert rels[1].is_external
        assert rels[1].target == "https://example.com"

    @pytest.mark.parametrize("part_path,expected", [
        (None, "_rels/.rels"),
        ("word/document.xml", "word/_rels/document.xml.rels"),
        ("word/theme/theme1.xml", "word/theme/_rels/theme1.xml.rels"),
    ])
    def test_relationships_path(self, part_path, expected):
        """Test relationship file locations."""
        assert relationships_path(part_path) == expected


@pytest.mark.unit
class TestPathHelpers:
    """Test cases for package path helpers."""

    @pytest.mark.parametrize("target,base,expected", [
        ("styles.xml", "word/", "word/styles.xml"),
        ("media/image1.png", "word", "word/media/image1.png"),
        ("../customXml/item1.xml", "word/", "customXml/item1.xml"),
        ("/word/footnotes.xml", "word/theme/", "word/footnotes.xml"),
        ("word/document.xml", "", "word/document.xml"),
        ("./header1.xml", "word/", "word/header1.xml"),
    ])
    def test_resolve_path(self, target, base, expected):
        """Test resolving relationship targets against a folder."""
        assert resolve_path(target, base) == expected

    def test_split_path(self):
        """Test splitting paths into folder and file name."""
        assert split_path("word/document.xml") == ("word/", "document.xml")
        assert split_path("document.xml") == ("", "document.xml")

    def test_normalize_path(self):
        """Test stripping the leading slash."""
        assert normalize_path("/word/document.xml") == "word/document.xml"
        assert normalize_path("word/document.xml") == "word/document.xml"
