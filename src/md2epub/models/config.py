"""Application configuration with Pydantic Settings."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..display.constants import VALID_LOG_LEVELS


class Md2EpubConfig(BaseSettings):
    """Compiler configuration with environment variable support.

    Configuration can be set via:
    1. Environment variables (prefixed with MD2EPUB_)
    2. .env file
    3. Direct instantiation

    Example:
        export MD2EPUB_TOC_DEPTH=2
        export MD2EPUB_LOG_LEVEL=DEBUG

        config = Md2EpubConfig()
        print(config.toc_depth)  # 2
    """

    model_config = SettingsConfigDict(
        env_prefix="MD2EPUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Compilation
    min_pad_width: int = Field(
        default=2, ge=1, le=6, description="Minimum digits in chapter file names"
    )
    toc_depth: int = Field(
        default=1, ge=1, le=2, description="1 = chapters only, 2 = include ## sections"
    )
    strict_markup: bool = Field(
        default=False, description="Reject markup outside the supported subset"
    )

    # Sources
    source_glob: str = Field(default="*.md", description="File pattern for source documents")

    # Logging
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        """Normalise and validate the log level name."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"invalid log level: {v}")
        return level
