"""Rich-based logger configuration for md2epub."""

import logging
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler

from .constants import DATE_FORMAT, EMOJI_MAP, FILE_LOG_FORMAT, LOG_FORMAT


if TYPE_CHECKING:
    from ..models import Md2EpubConfig


ROOT_LOGGER = "md2epub"


def setup_rich_logger(
    name: str = ROOT_LOGGER,
    level: int = logging.INFO,
    show_time: bool = True,
    show_path: bool = False,
) -> logging.Logger:
    """
    Set up a Rich-based logger with emoji support.

    Args:
        name: Logger name
        level: Logging level (default: INFO)
        show_time: Show timestamp in logs
        show_path: Show file path in logs

    Returns:
        Configured logger instance
    """
    console = Console(stderr=True)

    # Create Rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
        markup=True,
        log_time_format=DATE_FORMAT,
    )

    # Configure handler
    rich_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Create logger
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()  # Clear any existing handlers
    logger.addHandler(rich_handler)

    return logger


def configure_logging(config: "Md2EpubConfig") -> logging.Logger:
    """
    Configure the md2epub logger from settings.

    Installs the Rich console handler at ``config.log_level`` and, when
    ``config.log_file`` is set, a plain file handler alongside it.

    Args:
        config: Application configuration

    Returns:
        The configured package logger
    """
    level = logging.getLevelName(config.log_level)
    logger = setup_rich_logger(ROOT_LOGGER, level)

    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> "EmojiLoggerAdapter":
    """Get an emoji-prefixing logger for a module."""
    return EmojiLoggerAdapter(logging.getLogger(name), {})


class EmojiLoggerAdapter(logging.LoggerAdapter[logging.Logger]):
    """
    Logger adapter that adds emojis to log messages.

    Usage:
        logger = get_logger(__name__)
        logger.info("Compiling book", extra={"emoji": "book"})
    """

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Log with an emoji prefix chosen for the record's own level."""
        if self.isEnabledFor(level):
            msg, kwargs = self.process(msg, kwargs, level)
            self.logger.log(level, msg, *args, **kwargs)

    def process(self, msg: str, kwargs: Any, levelno: int = logging.INFO) -> tuple[str, Any]:
        """Add emoji prefix to messages based on level or extra data."""
        # Check for explicit emoji in extra
        extra = kwargs.get("extra", {})
        emoji_key = extra.pop("emoji", None) if isinstance(extra, dict) else None

        # Determine emoji
        if emoji_key and emoji_key in EMOJI_MAP:
            emoji = EMOJI_MAP[emoji_key]
        else:
            # Use level-based emoji
            if levelno >= logging.CRITICAL:
                emoji = EMOJI_MAP["critical"]
            elif levelno >= logging.ERROR:
                emoji = EMOJI_MAP["error"]
            elif levelno >= logging.WARNING:
                emoji = EMOJI_MAP["warning"]
            elif levelno >= logging.INFO:
                emoji = EMOJI_MAP["info"]
            elif levelno >= logging.DEBUG:
                emoji = EMOJI_MAP["debug"]
            else:
                emoji = ""

        # Add emoji prefix
        if emoji:
            msg = f"{emoji} {msg}"

        return msg, kwargs
