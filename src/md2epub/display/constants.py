"""Constants for the Rich logging setup."""

# Emoji mappings for log levels and operations
EMOJI_MAP = {
    "debug": "🔍",
    "info": "ℹ️",  # noqa: RUF001
    "success": "✓",
    "warning": "⚠️",
    "error": "✗",
    "critical": "🚨",
    "book": "📚",
    "chapter": "📄",
    "css": "🎨",
    "images": "🖼️",
    "package": "📦",
    "complete": "✓",
}

# Log format
LOG_FORMAT = "%(message)s"
FILE_LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "[%Y-%m-%d %H:%M:%S]"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
