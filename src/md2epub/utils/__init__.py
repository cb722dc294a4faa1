"""Shared utilities for md2epub."""

from .exceptions import (
    CompileError,
    EmptySourceSet,
    InvalidCover,
    InvalidMetadata,
    Md2EpubError,
    PackageWriteError,
    SourceReadError,
    UnsupportedMarkup,
)


__all__ = [
    "CompileError",
    "EmptySourceSet",
    "InvalidCover",
    "InvalidMetadata",
    "Md2EpubError",
    "PackageWriteError",
    "SourceReadError",
    "UnsupportedMarkup",
]
