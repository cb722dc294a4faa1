"""
Integration tests for building an EPUB from a source directory.

Verifies that loading, compiling and writing are wired together.
"""

import zipfile

import pytest
from lxml import etree

from md2epub import (
    BookMetadata,
    EmptySourceSet,
    InvalidMetadata,
    Md2EpubConfig,
    PackageWriteError,
    build_from_directory,
)


OPF_NS = {"opf": "http://www.idpf.org/2007/opf", "dc": "http://purl.org/dc/elements/1.1/"}


@pytest.fixture
def config():
    """Configuration with nested TOC enabled."""
    return Md2EpubConfig(_env_file=None, toc_depth=2)


class TestBuildFromDirectory:
    """Test the full directory to .epub pipeline."""

    def test_full_book(self, source_dir, sample_metadata, config, tmp_path):
        """Test a book with cover, stylesheet and nested TOC."""
        destination = build_from_directory(
            source_dir,
            sample_metadata,
            tmp_path / "out.epub",
            cover_path=source_dir / "cover.png",
            stylesheet_path=source_dir / "style.css",
            config=config,
        )

        with zipfile.ZipFile(destination) as epub:
            names = epub.namelist()
            assert names[0] == "mimetype"
            assert "OEBPS/images/cover.png" in names
            assert epub.read("OEBPS/styles/stylesheet.css") == b"body { margin: 0; }"

            opf = etree.fromstring(epub.read("OEBPS/content.opf"))
            idrefs = opf.xpath("//opf:spine/opf:itemref/@idref", namespaces=OPF_NS)
            assert idrefs == ["nav", "chapter01", "chapter02", "chapter03"]

            covers = opf.xpath("//opf:item[@properties='cover-image']", namespaces=OPF_NS)
            assert len(covers) == 1
            assert covers[0].get("media-type") == "image/png"

            nav = epub.read("OEBPS/nav.xhtml").decode("utf-8")
            assert 'href="chapter01.xhtml#why-epub"' in nav

            conclusion = epub.read("OEBPS/chapter03.xhtml").decode("utf-8")
            assert "<h1>Conclusion</h1>" in conclusion

            for name in names:
                if name.endswith((".xhtml", ".opf", ".ncx", ".xml")):
                    etree.fromstring(epub.read(name))

    def test_without_cover(self, source_dir, sample_metadata, config, tmp_path):
        """Test that no cover item is written when no cover is given."""
        destination = build_from_directory(
            source_dir, sample_metadata, tmp_path / "out.epub", config=config
        )
        with zipfile.ZipFile(destination) as epub:
            assert not any(name.startswith("OEBPS/images/") for name in epub.namelist())
            assert b"cover-image" not in epub.read("OEBPS/content.opf")

    def test_builds_are_byte_identical(self, source_dir, sample_metadata, config, tmp_path):
        """Test that rebuilding from the same sources gives the same bytes."""
        first = build_from_directory(
            source_dir, sample_metadata, tmp_path / "a.epub",
            cover_path=source_dir / "cover.png", config=config,
        )  # fmt: skip
        second = build_from_directory(
            source_dir, sample_metadata, tmp_path / "b.epub",
            cover_path=source_dir / "cover.png", config=config,
        )  # fmt: skip
        assert first.read_bytes() == second.read_bytes()

    def test_empty_directory(self, sample_metadata, config, tmp_path):
        """Test that an empty source directory produces no output."""
        sources = tmp_path / "empty"
        sources.mkdir()
        destination = tmp_path / "out.epub"
        with pytest.raises(EmptySourceSet):
            build_from_directory(sources, sample_metadata, destination, config=config)
        assert not destination.exists()

    def test_invalid_metadata_writes_nothing(self, source_dir, config, tmp_path):
        """Test that compile errors are raised before anything is written."""
        destination = tmp_path / "out.epub"
        with pytest.raises(InvalidMetadata):
            build_from_directory(
                source_dir, BookMetadata(identifier="", title="T"), destination, config=config
            )
        assert not destination.exists()

    def test_write_error(self, source_dir, sample_metadata, config, tmp_path):
        """Test that a missing output directory is reported as a write error."""
        destination = tmp_path / "missing" / "out.epub"
        with pytest.raises(PackageWriteError):
            build_from_directory(source_dir, sample_metadata, destination, config=config)
        assert not destination.exists()
