"""
md2epub - Compile markdown documents into EPUB 3 ebooks.

Example:
    from md2epub import BookMetadata, compile_book, write_epub

    metadata = BookMetadata(identifier="urn:uuid:...", title="My Book", authors=["Jane Doe"])
    package = compile_book([("01-intro.md", "# Introduction\\n\\nHello.")], metadata)
    write_epub(package, "my-book.epub")
"""

from .compiler import compile_book
from .epub import EPUBBuilder, write_epub
from .models import (
    BookMetadata,
    CoverImage,
    EpubPackage,
    Md2EpubConfig,
    RenderedChapter,
    SourceDocument,
    TableOfContentsEntry,
)
from .sources import build_from_directory, load_cover, load_sources, load_stylesheet
from .utils.exceptions import (
    CompileError,
    EmptySourceSet,
    InvalidCover,
    InvalidMetadata,
    Md2EpubError,
    PackageWriteError,
    SourceReadError,
    UnsupportedMarkup,
)


__version__ = "1.0.0"

__all__ = [
    "BookMetadata",
    "CompileError",
    "CoverImage",
    "EPUBBuilder",
    "EmptySourceSet",
    "EpubPackage",
    "InvalidCover",
    "InvalidMetadata",
    "Md2EpubConfig",
    "Md2EpubError",
    "PackageWriteError",
    "RenderedChapter",
    "SourceDocument",
    "SourceReadError",
    "TableOfContentsEntry",
    "UnsupportedMarkup",
    "build_from_directory",
    "compile_book",
    "load_cover",
    "load_sources",
    "load_stylesheet",
    "write_epub",
]
