"""Pydantic model for a compiled EPUB package."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .book import BookMetadata, CoverImage
from .chapter import RenderedChapter, TableOfContentsEntry


NAV_ID = "nav"
NAV_HREF = "nav.xhtml"
NCX_ID = "ncx"
NCX_HREF = "toc.ncx"
STYLESHEET_ID = "stylesheet"
STYLESHEET_HREF = "styles/stylesheet.css"
COVER_ID = "cover-image"
IMAGES_DIR = "images"


class ManifestItem(BaseModel):
    """Single <item> of the package manifest."""

    model_config = ConfigDict(frozen=True)

    id: str
    href: str
    media_type: str
    properties: str | None = None


class EpubPackage(BaseModel):
    """Everything needed to serialize one EPUB container.

    The spine always starts with the navigation document, followed by the
    chapters in their source order.
    """

    model_config = ConfigDict(frozen=True)

    metadata: BookMetadata
    chapters: list[RenderedChapter] = Field(..., min_length=1)
    toc: list[TableOfContentsEntry]
    cover: CoverImage | None = None
    stylesheet: str | None = None

    @model_validator(mode="after")
    def check_chapters(self) -> "EpubPackage":
        """Chapter file names are unique and each chapter has one TOC entry."""
        names = [chapter.file_name for chapter in self.chapters]
        if len(set(names)) != len(names):
            raise ValueError("chapter file names must be unique")
        if len(self.toc) != len(self.chapters):
            raise ValueError(
                f"expected {len(self.chapters)} TOC entries, got {len(self.toc)}"
            )
        return self

    @property
    def spine(self) -> list[str]:
        """Reading order as manifest item ids."""
        return [NAV_ID, *(chapter.item_id for chapter in self.chapters)]

    @property
    def cover_href(self) -> str | None:
        """Path of the cover image relative to the package document."""
        if self.cover is None:
            return None
        return f"{IMAGES_DIR}/{self.cover.get_file_name()}"

    @property
    def manifest(self) -> list[ManifestItem]:
        """All items bundled in the container, in manifest order."""
        items = [
            ManifestItem(id=NCX_ID, href=NCX_HREF, media_type="application/x-dtbncx+xml"),
            ManifestItem(
                id=NAV_ID, href=NAV_HREF, media_type="application/xhtml+xml", properties="nav"
            ),
        ]
        items.extend(
            ManifestItem(id=chapter.item_id, href=chapter.href, media_type="application/xhtml+xml")
            for chapter in self.chapters
        )
        if self.stylesheet is not None:
            items.append(ManifestItem(id=STYLESHEET_ID, href=STYLESHEET_HREF, media_type="text/css"))
        if self.cover is not None and self.cover_href is not None:
            items.append(
                ManifestItem(
                    id=COVER_ID,
                    href=self.cover_href,
                    media_type=self.cover.media_type,
                    properties="cover-image",
                )
            )
        return items

    def toc_depth(self) -> int:
        """Deepest nesting level of the table of contents."""

        def depth(entries: list[TableOfContentsEntry]) -> int:
            if not entries:
                return 0
            return 1 + max(depth(entry.children) for entry in entries)

        return max(depth(self.toc), 1)
