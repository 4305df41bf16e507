"""Project-level helpers that are not part of the ``qevolve`` physics API.

Public surface:
    from project_config.logging_setup import get_logger, enable_console_logging
"""

from .logging_setup import get_logger, enable_console_logging

__all__ = [
    "get_logger",
    "enable_console_logging",
]
