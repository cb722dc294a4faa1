"""Custom exception hierarchy for md2epub."""

from pathlib import Path


class Md2EpubError(Exception):
    """Base exception for all md2epub errors."""


class CompileError(Md2EpubError):
    """Raised when a set of sources cannot be compiled into a package."""


class EmptySourceSet(CompileError):
    """Raised when no source documents are supplied."""

    def __init__(self) -> None:
        super().__init__("No source documents supplied")


class InvalidMetadata(CompileError):
    """Raised when required book metadata is missing or blank."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Required metadata is empty: {', '.join(fields)}")


class UnsupportedMarkup(CompileError):
    """Raised in strict mode when a document uses markup outside the supported subset."""

    def __init__(self, document: str, tag: str):
        self.document = document
        self.tag = tag
        super().__init__(f"{document}: unsupported markup <{tag}>")


class PackageWriteError(Md2EpubError):
    """Raised when the EPUB container cannot be written to its destination."""

    def __init__(self, destination: Path, cause: OSError):
        self.destination = destination
        self.cause = cause
        super().__init__(f"Could not write {destination}: {cause}")


class SourceReadError(Md2EpubError):
    """Raised when a source, cover or stylesheet file cannot be read."""


class InvalidCover(Md2EpubError):
    """Raised when a cover image has an unrecognised media type."""
