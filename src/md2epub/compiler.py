"""Compile markdown sources into an EpubPackage."""

from collections.abc import Sequence
from pathlib import Path

from .display import get_logger
from .models import (
    BookMetadata,
    CoverImage,
    EpubPackage,
    Md2EpubConfig,
    RenderedChapter,
    SourceDocument,
    TableOfContentsEntry,
)
from .parser.markdown import MarkdownRenderer, chapter_file_name, pad_width, split_title
from .utils.exceptions import EmptySourceSet, InvalidMetadata


logger = get_logger(__name__)

REQUIRED_METADATA = ("identifier", "title", "language")


def check_metadata(metadata: BookMetadata) -> None:
    """Raise InvalidMetadata if a required field is blank."""
    missing = [name for name in REQUIRED_METADATA if not getattr(metadata, name).strip()]
    if missing:
        raise InvalidMetadata(missing)


def read_documents(documents: Sequence[tuple[str | Path, str]]) -> list[SourceDocument]:
    """Turn (path, text) pairs into positioned source documents with titles."""
    sources = []
    for position, (path, text) in enumerate(documents, start=1):
        title, body = split_title(str(path), text, position)
        sources.append(SourceDocument(position=position, path=str(path), title=title, body=body))
    return sources


def render_chapter(
    source: SourceDocument,
    file_name: str,
    renderer: MarkdownRenderer,
    toc_depth: int = 1,
) -> RenderedChapter:
    """Render a single source document into a chapter."""
    markup = renderer.render(source.body, document=source.path, reserved_id=file_name)
    sections = renderer.section_entries(file_name, markup.sections) if toc_depth > 1 else []
    return RenderedChapter(
        position=source.position,
        file_name=file_name,
        title=source.title,
        body=markup.body,
        sections=sections,
    )


def compile_book(
    documents: Sequence[tuple[str | Path, str]],
    metadata: BookMetadata,
    cover: CoverImage | None = None,
    stylesheet: str | None = None,
    config: Md2EpubConfig | None = None,
) -> EpubPackage:
    """
    Compile ordered markdown documents into an EPUB package.

    Each document becomes one chapter, in input order. Compilation has no
    side effects: the result is a value that ``write_epub`` serializes.

    Args:
        documents: Ordered (file path, markdown text) pairs
        metadata: Book metadata
        cover: Optional cover image
        stylesheet: Optional CSS text linked from every chapter
        config: Compiler settings (defaults from the environment)

    Returns:
        The compiled EpubPackage

    Raises:
        EmptySourceSet: If no documents are supplied
        InvalidMetadata: If identifier, title or language is blank
        UnsupportedMarkup: In strict mode, for markup outside the supported subset
    """
    if not documents:
        raise EmptySourceSet()
    check_metadata(metadata)
    config = config or Md2EpubConfig()

    logger.info(
        f"Compiling '{metadata.title}' from {len(documents)} documents",
        extra={"emoji": "book"},
    )

    sources = read_documents(documents)
    width = pad_width(len(sources), config.min_pad_width)
    renderer = MarkdownRenderer(strict=config.strict_markup)

    chapters: list[RenderedChapter] = []
    toc: list[TableOfContentsEntry] = []
    for source in sources:
        chapter = render_chapter(
            source, chapter_file_name(source.position, width), renderer, config.toc_depth
        )
        logger.debug(
            f"{source.path} -> {chapter.href} ({chapter.title})", extra={"emoji": "chapter"}
        )
        chapters.append(chapter)
        toc.append(
            TableOfContentsEntry(
                href=chapter.href,
                title=chapter.title,
                anchor=chapter.file_name,
                children=chapter.sections,
            )
        )

    package = EpubPackage(
        metadata=metadata,
        chapters=chapters,
        toc=toc,
        cover=cover,
        stylesheet=stylesheet,
    )
    logger.info(
        f"Compiled {len(chapters)} chapters ({len(package.manifest)} manifest items)",
        extra={"emoji": "complete"},
    )
    return package
