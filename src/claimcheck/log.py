"""Logging configuration with Rich formatting.

Provides setup_logging() for app initialization and get_logger() for module-level
loggers, all under the "claimcheck" hierarchy so LOG_LEVEL applies to our code only.
"""

import logging
from rich.logging import RichHandler
from .config import get_settings

LOGGER_ROOT = "claimcheck"

def setup_logging():
    settings = get_settings()
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)]
    )
    logging.getLogger(LOGGER_ROOT).setLevel(settings.LOG_LEVEL)

    # Backend libraries are chatty about malformed documents
    logging.getLogger("pypdf").setLevel(logging.ERROR)

def get_logger(name: str):
    return logging.getLogger(f"{LOGGER_ROOT}.{name}")
