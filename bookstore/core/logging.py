"""Console logging for the book store service.

Everything logs under the ``bookstore`` logger; modules take a child
logger from ``get_logger`` so their name shows up in each line.
"""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "bookstore"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Formatter that paints the level and logger name with ANSI colors."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    NAME_COLOR = "\033[34m"
    RESET = "\033[0m"

    def format(self, record):
        # Colors go on a copy; the record is shared with any other handler
        record = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        record.name = f"{self.NAME_COLOR}{record.name}{self.RESET}"
        return super().format(record)


def setup_logging(
    level: str = "INFO",
    stream: Optional[TextIO] = None,
    colors: Optional[bool] = None,
) -> logging.Logger:
    """Point the ``bookstore`` logger at a single console handler.

    Calling it again swaps the handler, which is how each new app picks
    up the current ``sys.stdout``. Colors are used only when the stream
    is a terminal unless ``colors`` says otherwise. Unknown level names
    fall back to INFO.
    """
    stream = stream if stream is not None else sys.stdout
    if colors is None:
        colors = hasattr(stream, "isatty") and stream.isatty()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(stream)
    formatter_cls = ColoredFormatter if colors else logging.Formatter
    handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.handlers = [handler]
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
