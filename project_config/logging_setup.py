"""Logger factory for the project.

Library modules obtain their logger via::

    from project_config.logging_setup import get_logger
    logger = get_logger(__name__)
    logger.info("...")

Loggers carry a ``NullHandler`` so nothing is emitted unless the application
configures logging (e.g. with ``enable_console_logging``).
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "qevolve"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str = ROOT_LOGGER_NAME, level: int = logging.NOTSET) -> logging.Logger:
    """Return a library logger that stays silent until configured.

    - Attaches exactly one NullHandler
    - Sets ``level`` (NOTSET defers to the parent logger)
    - Keeps propagation so application handlers receive the records
    """
    logger = logging.getLogger(name)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.setLevel(level)
    return logger


def enable_console_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a console handler to the ``qevolve`` root logger (idempotent)."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    console_handler = next(
        (h for h in logger.handlers if getattr(h, "_qevolve_console", False)), None
    )
    if console_handler is None:
        console_handler = logging.StreamHandler()
        console_handler._qevolve_console = True  # type: ignore[attr-defined]
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)
    console_handler.setLevel(level)
    return logger


__all__ = ["get_logger", "enable_console_logging", "ROOT_LOGGER_NAME", "LOG_FORMAT"]
