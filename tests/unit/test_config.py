"""Unit tests for Md2EpubConfig settings."""

import pytest
from pydantic import ValidationError

from md2epub.display import VALID_LOG_LEVELS
from md2epub.models import Md2EpubConfig


class TestMd2EpubConfig:
    """Test configuration defaults and environment loading."""

    def test_defaults(self, default_config):
        """Test default values."""
        assert default_config.min_pad_width == 2
        assert default_config.toc_depth == 1
        assert default_config.strict_markup is False
        assert default_config.source_glob == "*.md"
        assert default_config.log_level == "INFO"
        assert default_config.log_file is None

    def test_environment_overrides(self, monkeypatch):
        """Test MD2EPUB_ environment variables."""
        monkeypatch.setenv("MD2EPUB_TOC_DEPTH", "2")
        monkeypatch.setenv("MD2EPUB_STRICT_MARKUP", "true")
        monkeypatch.setenv("MD2EPUB_SOURCE_GLOB", "*.markdown")
        config = Md2EpubConfig(_env_file=None)
        assert config.toc_depth == 2
        assert config.strict_markup is True
        assert config.source_glob == "*.markdown"

    def test_env_file(self, tmp_path):
        """Test loading from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("MD2EPUB_MIN_PAD_WIDTH=3\n")
        config = Md2EpubConfig(_env_file=env_file)
        assert config.min_pad_width == 3

    def test_log_level_normalised(self):
        """Test that log levels are upper-cased."""
        assert Md2EpubConfig(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Md2EpubConfig(_env_file=None, log_level="LOUD")

    @pytest.mark.parametrize("level", VALID_LOG_LEVELS)
    def test_valid_log_levels_accepted(self, level):
        """Test that every documented level name is accepted."""
        assert Md2EpubConfig(_env_file=None, log_level=level.lower()).log_level == level

    @pytest.mark.parametrize("field,value", [("min_pad_width", 0), ("toc_depth", 3)])
    def test_bounds(self, field, value):
        """Test numeric bounds."""
        with pytest.raises(ValidationError):
            Md2EpubConfig(_env_file=None, **{field: value})
