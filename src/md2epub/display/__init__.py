"""
Rich-based logging for md2epub.

Library modules log through the standard ``logging`` hierarchy under the
``md2epub`` namespace; applications opt into Rich console output with
``setup_rich_logger`` or ``configure_logging``.
"""

from .constants import EMOJI_MAP, VALID_LOG_LEVELS
from .rich_logger import EmojiLoggerAdapter, configure_logging, get_logger, setup_rich_logger


__all__ = [
    "EMOJI_MAP",
    "VALID_LOG_LEVELS",
    "EmojiLoggerAdapter",
    "configure_logging",
    "get_logger",
    "setup_rich_logger",
]
