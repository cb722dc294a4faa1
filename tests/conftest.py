"""Shared pytest fixtures and configuration for md2epub tests."""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from md2epub.models import BookMetadata, CoverImage, Md2EpubConfig


PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"fake image data"


@pytest.fixture
def sample_metadata() -> BookMetadata:
    """Sample book metadata."""
    return BookMetadata(
        identifier="urn:uuid:1b4e28ba-2fa1-11d2-883f-0016d3cca427",
        title="Practical Markdown Publishing",
        language="en",
        authors=["Ada Writer", "Ben Editor"],
        publisher="Small Press",
        date="2025-01-01",
        description="A short book about turning notes into ebooks.",
        rights="CC BY 4.0",
        subjects=["Publishing", "Markdown"],
        modified=datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC),
    )


@pytest.fixture
def sample_documents() -> list[tuple[str, str]]:
    """Three markdown documents covering the supported subset."""
    return [
        (
            "01-introduction.md",
            "# Introduction\n\nWelcome to the book.\n\n## Why EPUB\n\nBecause readers like it.\n",
        ),
        (
            "02-usage.md",
            "# Usage\n\n"
            "```python\nx = 1 < 2\n```\n\n"
            "| Name | Value |\n|------|-------|\n| a    | 1     |\n",
        ),
        ("03-conclusion.md", "That is all.\n"),
    ]


@pytest.fixture
def sample_cover() -> CoverImage:
    """Sample PNG cover image."""
    return CoverImage(data=PNG_BYTES, media_type="image/png")


@pytest.fixture
def default_config() -> Md2EpubConfig:
    """Configuration with defaults, independent of the environment."""
    return Md2EpubConfig(_env_file=None)


@pytest.fixture
def source_dir(tmp_path: Path, sample_documents) -> Path:
    """Directory of markdown sources plus a cover and a stylesheet."""
    directory = tmp_path / "book"
    directory.mkdir()
    for name, text in sample_documents:
        (directory / name).write_text(text, encoding="utf-8")
    (directory / "cover.png").write_bytes(PNG_BYTES)
    (directory / "style.css").write_text("body { margin: 0; }", encoding="utf-8")
    return directory


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on location."""
    for item in items:
        # Auto-mark integration tests
        if "integration" in str(item.path):
            item.add_marker(pytest.mark.integration)
        # Auto-mark unit tests
        elif "unit" in str(item.path):
            item.add_marker(pytest.mark.unit)
