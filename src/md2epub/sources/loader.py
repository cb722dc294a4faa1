"""Reading source documents, cover images and stylesheets from disk."""

from pathlib import Path

from ..compiler import compile_book
from ..display import get_logger
from ..epub import write_epub
from ..models import BookMetadata, CoverImage, Md2EpubConfig
from ..models.book import IMAGE_MEDIA_TYPES
from ..utils.exceptions import InvalidCover, SourceReadError


logger = get_logger(__name__)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8").lstrip("\ufeff")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Could not read {path}: {e}") from e


def load_sources(directory: str | Path, pattern: str = "*.md") -> list[tuple[str, str]]:
    """
    Read the source documents of a book.

    Files matching ``pattern`` directly inside ``directory`` are returned in
    lexical file-name order; numeric prefixes (``01-intro.md``) are the
    conventional way to control ordering.

    Args:
        directory: Directory holding the markdown files
        pattern: Glob pattern for source files

    Returns:
        List of (file name, text) tuples

    Raises:
        SourceReadError: If the directory or a file cannot be read
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise SourceReadError(f"Source directory not found: {directory}")

    paths = sorted((p for p in directory.glob(pattern) if p.is_file()), key=lambda p: p.name)
    logger.debug(f"Found {len(paths)} source files in {directory}")
    return [(path.name, _read_text(path)) for path in paths]


def media_type_for(path: str | Path) -> str:
    """
    Infer an image media type from a file extension.

    Raises:
        InvalidCover: If the extension is not a supported image format
    """
    extension = Path(path).suffix[1:].lower()
    try:
        return IMAGE_MEDIA_TYPES[extension]
    except KeyError:
        raise InvalidCover(f"Unsupported cover image format: {Path(path).name}") from None


def load_cover(path: str | Path) -> CoverImage:
    """Read a cover image file."""
    path = Path(path)
    media_type = media_type_for(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceReadError(f"Could not read cover {path}: {e}") from e
    extension = "jpg" if media_type == "image/jpeg" else path.suffix[1:].lower()
    return CoverImage(data=data, media_type=media_type, file_name=f"cover.{extension}")


def load_stylesheet(path: str | Path) -> str:
    """Read a CSS stylesheet file."""
    return _read_text(Path(path))


def build_from_directory(
    directory: str | Path,
    metadata: BookMetadata,
    destination: str | Path,
    cover_path: str | Path | None = None,
    stylesheet_path: str | Path | None = None,
    config: Md2EpubConfig | None = None,
) -> Path:
    """
    Load a source directory, compile it and write the EPUB.

    Args:
        directory: Directory holding the markdown files
        metadata: Book metadata
        destination: Path of the .epub file to write
        cover_path: Optional cover image file
        stylesheet_path: Optional CSS file
        config: Compiler settings (defaults from the environment)

    Returns:
        Path to the generated .epub file
    """
    config = config or Md2EpubConfig()
    documents = load_sources(directory, config.source_glob)
    cover = load_cover(cover_path) if cover_path is not None else None
    stylesheet = load_stylesheet(stylesheet_path) if stylesheet_path is not None else None

    package = compile_book(documents, metadata, cover=cover, stylesheet=stylesheet, config=config)
    return write_epub(package, destination)
