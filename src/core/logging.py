"""Logging configuration helpers.

Output goes through Rich so log lines share the console style of the CLI.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from core.config import AppSettings, normalize_log_level

_LOGGING_CONFIGURED = False


def configure_logging(level: str | None = None, settings: AppSettings | None = None) -> None:
    """Configure process-wide logging once, from settings unless `level` is given.

    Raises `ValueError` for an unknown `level`, like the settings validator.
    """

    global _LOGGING_CONFIGURED
    level_name = normalize_log_level(level) if level is not None else None
    if _LOGGING_CONFIGURED:
        return

    settings = settings or AppSettings()
    level_name = level_name or settings.log_level

    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(name)s | %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
    _LOGGING_CONFIGURED = True
