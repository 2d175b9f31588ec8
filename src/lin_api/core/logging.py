"""
Logging setup for the request builders.
"""

import logging
from typing import Optional

ROOT_LOGGER = "lin_api"


def setup_logging(level: Optional[str] = None, debug: bool = False) -> None:
    """Configure the package logger."""
    if debug:
        level = "DEBUG"
    resolved = getattr(logging, (level or "INFO").upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(resolved)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
