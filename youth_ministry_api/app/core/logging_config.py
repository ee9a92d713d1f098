"""
Logging configuration for the application.

``setup_logging`` installs the service's console handler (and an
optional file handler) on the root logger.  Level and log file default
to ``settings.log_level`` and ``settings.log_file``.  Handlers installed
here are tagged by name, so calling the function again, as happens
when tests build several apps, only adjusts the level.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings

CONSOLE_HANDLER_NAME = "youth_ministry.console"
FILE_HANDLER_NAME = "youth_ministry.file"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Parameters
    ----------
    level : Optional[str]
        Logging level name, case insensitive.  Unknown names fall back to
        ``INFO``.  Defaults to ``settings.log_level``.
    logfile : Optional[str]
        File to additionally log to, resolved against the working
        directory.  Defaults to ``settings.log_file``; empty disables it.
    """
    level = level or settings.log_level
    logfile = logfile if logfile is not None else settings.log_file

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(logger, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile and not _has_handler(logger, FILE_HANDLER_NAME):
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
