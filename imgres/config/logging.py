"""Logging configuration for imgres."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field
from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "imgres"


class LoggingConfig(BaseModel):
    """Logging settings.

    Parameters
    ----------
    level : str
        Log level name.
    format : str
        Message format passed to the handler's formatter.
    """

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="%(message)s", description="Log message format")


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Install a rich handler on the package logger.

    Messages go to stderr so they never mix with generated output.

    Parameters
    ----------
    config : LoggingConfig | None
        Logging settings. Defaults to ``LoggingConfig()``.

    Returns
    -------
    logging.Logger
        The package logger.
    """
    config = config or LoggingConfig()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.level.upper())
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True), show_time=False, show_path=False
    )
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)

    return logger
