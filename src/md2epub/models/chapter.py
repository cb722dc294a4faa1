"""Pydantic models for source documents, chapters and TOC entries."""

from pydantic import BaseModel, ConfigDict, Field


class SourceDocument(BaseModel):
    """A single markdown input, positioned within the book."""

    model_config = ConfigDict(frozen=True)

    position: int = Field(..., ge=1, description="1-based position in reading order")
    path: str = Field(..., description="Original file name or path")
    title: str = Field(..., description="Display title")
    body: str = Field(default="", description="Markdown text (title heading removed)")


class TableOfContentsEntry(BaseModel):
    """Single entry in the navigation document and NCX."""

    model_config = ConfigDict(frozen=True)

    href: str = Field(..., description="Chapter file, optionally with a #fragment")
    title: str
    anchor: str = Field(..., description="Stable identifier for the entry")
    children: list["TableOfContentsEntry"] = Field(default_factory=list)

    def has_children(self) -> bool:
        """Check if entry has nested entries."""
        return len(self.children) > 0


class RenderedChapter(BaseModel):
    """A source document rendered to XHTML markup, ready for packaging."""

    model_config = ConfigDict(frozen=True)

    position: int = Field(..., ge=1)
    file_name: str = Field(..., description="File name stem (e.g., chapter01)")
    title: str
    body: str = Field(default="", description="XHTML fragment for the chapter section")
    sections: list[TableOfContentsEntry] = Field(
        default_factory=list, description="Sub-heading entries for nested TOCs"
    )

    @property
    def href(self) -> str:
        """Path of the chapter document relative to the package document."""
        return f"{self.file_name}.xhtml"

    @property
    def item_id(self) -> str:
        """Manifest/spine identifier of the chapter."""
        return self.file_name


TableOfContentsEntry.model_rebuild()
