"""Logging configuration."""

import logging
import sys

from orama_core.config import get_settings


def setup_logging(level: str | None = None) -> None:
    """Configure logging for applications embedding the client.

    The library never calls this itself.

    Args:
        level: Log level name. Defaults to ``OramaSettings.log_level``.
    """
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        logging.Logger: Configured logger instance.
    """
    return logging.getLogger(name)
