"""Data models for md2epub."""

from .book import Author, BookMetadata, CoverImage, Publisher, Subject
from .chapter import RenderedChapter, SourceDocument, TableOfContentsEntry
from .config import Md2EpubConfig
from .package import EpubPackage, ManifestItem


__all__ = [
    "Author",
    "BookMetadata",
    "CoverImage",
    "EpubPackage",
    "ManifestItem",
    "Md2EpubConfig",
    "Publisher",
    "RenderedChapter",
    "SourceDocument",
    "Subject",
    "TableOfContentsEntry",
]
