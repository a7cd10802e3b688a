"""
Logging configuration for the Blog List API.

``configure_logging`` attaches a console handler, and a file handler
when ``Settings.log_file`` is set, to the ``blog_list_api`` package
logger.  ``Settings.debug`` forces the ``DEBUG`` level; otherwise
``Settings.log_level`` is used.  Handlers installed by an earlier call
are replaced, so every ``create_app`` call logs according to its own
settings without stacking duplicate handlers.
"""

import logging
from pathlib import Path

from .config import Settings


PACKAGE_LOGGER = "blog_list_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def configure_logging(settings: Settings) -> logging.Logger:
    """Configure and return the package logger for ``settings``."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_blog_list_api", False):
            logger.removeHandler(handler)
            handler.close()

    logger.setLevel(resolve_level(settings))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        handler._blog_list_api = True
        logger.addHandler(handler)
    return logger
