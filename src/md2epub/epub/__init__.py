"""EPUB serialization module for md2epub."""

from .builder import EPUBBuilder
from .writer import write_epub


__all__ = ["EPUBBuilder", "write_epub"]
