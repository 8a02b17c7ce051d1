import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from metabrowser.constants import APP_NAME, LOG_LEVEL_ENV


def setup_logging(level: str | None = None) -> logging.Logger:
    logger = logging.getLogger(APP_NAME)
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    logger.setLevel(getattr(logging, name, logging.WARNING))
    if logger.handlers:
        return logger
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
