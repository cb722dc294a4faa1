"""Pydantic models for book metadata and the cover image."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Media types accepted for a cover image, keyed by file extension
IMAGE_MEDIA_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    "webp": "image/webp",
}

# Used for dcterms:modified when the metadata carries no timestamp (matches the ZIP epoch)
DEFAULT_MODIFIED = datetime(1980, 1, 1, tzinfo=UTC)


class Author(BaseModel):
    """Book author information."""

    model_config = ConfigDict(frozen=True)

    name: str


class Publisher(BaseModel):
    """Publisher information."""

    model_config = ConfigDict(frozen=True)

    name: str


class Subject(BaseModel):
    """Book subject/tag information."""

    model_config = ConfigDict(frozen=True)

    name: str


class BookMetadata(BaseModel):
    """Descriptive metadata written to the package document.

    Only ``identifier``, ``title`` and ``language`` are required, and the
    compiler rejects them when blank. Authors and subjects keep their
    insertion order. Plain strings are accepted wherever an ``Author``,
    ``Publisher`` or ``Subject`` is expected.
    """

    model_config = ConfigDict(frozen=True)

    # Required fields
    identifier: str = Field(..., description="Unique book identifier (ISBN, UUID, ...)")
    title: str = Field(..., description="Book title")
    language: str = Field(default="en", description="Book language tag")

    # Related entities
    authors: list[Author] = Field(default_factory=list)
    publisher: Publisher | None = None
    subjects: list[Subject] = Field(default_factory=list)

    # Optional metadata
    date: str | None = None
    description: str | None = None
    rights: str | None = None
    modified: datetime | None = Field(
        default=None, description="Timestamp written as dcterms:modified"
    )

    @field_validator("identifier", "title", "language", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        """Strip surrounding whitespace from the required text fields."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("authors", "subjects", mode="before")
    @classmethod
    def wrap_names(cls, v: Any) -> Any:
        """Accept bare strings in place of name models."""
        if isinstance(v, list | tuple):
            return [{"name": item} if isinstance(item, str) else item for item in v]
        return v

    @field_validator("publisher", mode="before")
    @classmethod
    def wrap_publisher(cls, v: Any) -> Any:
        """Accept a bare string as the publisher name."""
        if isinstance(v, str):
            return {"name": v} if v.strip() else None
        return v

    def get_author_names(self) -> list[str]:
        """Get list of author names."""
        return [author.name for author in self.authors]

    def get_subject_names(self) -> list[str]:
        """Get list of subject names."""
        return [subject.name for subject in self.subjects]

    def modified_timestamp(self) -> str:
        """Return the dcterms:modified value in the form EPUB 3 requires."""
        modified = self.modified or DEFAULT_MODIFIED
        if modified.tzinfo is not None:
            modified = modified.astimezone(UTC)
        return modified.strftime("%Y-%m-%dT%H:%M:%SZ")


class CoverImage(BaseModel):
    """Cover image bytes together with their declared media type."""

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(..., repr=False)
    media_type: str
    file_name: str | None = Field(
        default=None, description="File name inside the container (defaults to cover.<ext>)"
    )

    @field_validator("media_type")
    @classmethod
    def check_media_type(cls, v: str) -> str:
        """Only image media types can be used for a cover."""
        if not v.startswith("image/"):
            raise ValueError(f"cover media type must be an image type, got {v!r}")
        return v

    def get_file_name(self) -> str:
        """Get the file name used inside the container."""
        if self.file_name:
            return self.file_name
        for extension, media_type in IMAGE_MEDIA_TYPES.items():
            if media_type == self.media_type:
                return f"cover.{extension}"
        return "cover." + self.media_type.split("/")[-1].split("+")[0]
