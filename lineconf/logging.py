"""
Logging configuration for lineconf.

The library only ever emits records through loggers namespaced under
``lineconf``; handlers are installed by applications via ``setup_logging``.

Features:
- Console output with optional colors
- Optional file output
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

ROOT_LOGGER_NAME = "lineconf"


class Colors:
    """ANSI color codes."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    BRIGHT_RED = "\033[91m"


LEVEL_COLORS = {
    logging.DEBUG: Colors.DIM + Colors.CYAN,
    logging.INFO: Colors.GREEN,
    logging.WARNING: Colors.YELLOW,
    logging.ERROR: Colors.RED,
    logging.CRITICAL: Colors.BOLD + Colors.BRIGHT_RED,
}


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds ANSI colors to log output.

    Level names are colored by severity. The record is restored after
    formatting so other handlers see the original values.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname

        if self.use_colors:
            level_color = LEVEL_COLORS.get(record.levelno, "")
            record.levelname = f"{level_color}{record.levelname:8}{Colors.RESET}"

        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


class PlainFormatter(logging.Formatter):
    """Plain formatter without colors for file output."""

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        record.levelname = f"{record.levelname:8}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


@dataclass
class LogConfig:
    """Logging configuration."""

    # Console settings
    console_level: str = "WARNING"
    console_colors: bool = True

    # File settings (disabled when file_path is None)
    file_path: str | None = None
    file_level: str = "DEBUG"

    # Format
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


def get_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "warn": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return levels.get(level_str.lower(), logging.INFO)


def setup_logging(config: LogConfig | None = None) -> logging.Logger:
    """
    Configure the ``lineconf`` logger hierarchy.

    Args:
        config: Logging configuration (uses defaults if None)

    Returns:
        The configured root ``lineconf`` logger
    """
    if config is None:
        config = LogConfig()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(get_log_level(config.console_level))

    # Colors only make sense on a terminal
    use_colors = config.console_colors and hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    console_handler.setFormatter(
        ColoredFormatter(fmt=config.format, datefmt=config.date_format, use_colors=use_colors)
    )
    root_logger.addHandler(console_handler)

    if config.file_path:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(get_log_level(config.file_level))
        file_handler.setFormatter(PlainFormatter(fmt=config.format, datefmt=config.date_format))
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name (will be prefixed with lineconf)

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
