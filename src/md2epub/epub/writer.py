"""Atomic EPUB write step."""

import os
import tempfile
from pathlib import Path

from ..display import get_logger
from ..models import EpubPackage
from ..utils.exceptions import PackageWriteError
from .builder import EPUBBuilder


logger = get_logger(__name__)


def _file_mode() -> int:
    """Permissions a plainly created file would get under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


# Read once at import; os.umask is process-wide
FILE_MODE = _file_mode()


def write_epub(package: EpubPackage, destination: str | Path) -> Path:
    """
    Serialize a package and write it to ``destination``.

    The archive is built in memory, written to a temporary file next to the
    destination and moved into place, so a failed write never leaves a
    partial container behind.

    Args:
        package: Compiled package
        destination: Path of the .epub file to create or replace

    Returns:
        The destination path

    Raises:
        PackageWriteError: If the file cannot be written
    """
    destination = Path(destination)
    data = EPUBBuilder(package).build()

    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            prefix=f".{destination.stem}.",
            suffix=".epub.tmp",
            dir=destination.parent,
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(data)
        os.chmod(tmp_path, FILE_MODE)
        os.replace(tmp_path, destination)
    except OSError as e:
        logger.error(f"Failed to write {destination}: {e}")
        raise PackageWriteError(destination, e) from e
    finally:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink(missing_ok=True)

    logger.info(f"Wrote {destination} ({len(data)} bytes)", extra={"emoji": "package"})
    return destination
