# -*- coding: utf-8 -*-

"""
Logging for the scraper.

All loggers live under the "busho_scraper" namespace so that one call to
setup_logging() configures the whole package:

    from busho_scraper.log import get_logger, setup_logging

    setup_logging(level="DEBUG", log_file="scrape.log")
    logger = get_logger(__name__)
    logger.info("処理中 (1/3): %s", url)
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "busho_scraper"

COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
    "RESET": "\033[0m",
    "DIM": "\033[2m",
}


class ConsoleFormatter(logging.Formatter):
    """HH:MM:SS [LEVEL] module: message, coloured on a TTY."""

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color and hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if self.use_color:
            color = COLORS.get(record.levelname, COLORS["RESET"])
            reset = COLORS["RESET"]
            dim = COLORS["DIM"]
        else:
            color = reset = dim = ""

        name = record.name
        if name.startswith(ROOT_LOGGER + "."):
            name = name[len(ROOT_LOGGER) + 1:]

        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        formatted = f"{dim}{timestamp}{reset} {color}[{record.levelname:7}]{reset} {name}: {record.getMessage()}"
        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)
        return formatted


class FileFormatter(logging.Formatter):
    """No colours, full timestamps."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(level: str = "INFO", log_file: Optional[str] = None, quiet: bool = False) -> None:
    """
    Configure the package logger.

    Console output goes to stderr so that stdout stays clean for the JSON
    result. The optional log file always records DEBUG.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(logging.DEBUG if log_file else getattr(logging, level.upper()))
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    if not quiet:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(getattr(logging, level.upper()))
        console.setFormatter(ConsoleFormatter())
        root.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(FileFormatter())
        root.addHandler(fh)


def get_logger(name: str) -> logging.Logger:
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    if name.startswith("__"):
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
