import logging
import os

from rich.logging import RichHandler

DEFAULT_NAME = "shopsim"


class CenteredFormatter(logging.Formatter):
    """Pads logger names to the widest one seen so far, so messages line up."""

    name_width = 14

    def __init__(self, fmt=None, datefmt=None, style="%", initial_width=14):
        super().__init__(fmt, datefmt, style)
        CenteredFormatter.name_width = initial_width

    def format(self, record):
        CenteredFormatter.name_width = max(
            CenteredFormatter.name_width, len(record.name)
        )
        record.name = record.name.center(CenteredFormatter.name_width)
        return super().format(record)


def log_level() -> int:
    return logging.DEBUG if os.getenv("DEBUG") else logging.INFO


def get_logger(name=None) -> logging.Logger:
    """
    Return a logger that writes through rich's RichHandler.

    Handlers are attached once per name, later calls reuse the same logger.
    """
    logger = logging.getLogger(name or DEFAULT_NAME)
    level = log_level()
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(CenteredFormatter("[%(name)s]  %(message)s"))
        handler.setLevel(level)
        logger.addHandler(handler)

        logger.propagate = False
        logger.debug(f"Logger for '{logger.name}' attached to RichHandler.")

    return logger
