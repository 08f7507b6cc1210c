"""
Logging setup for the DRRS toggle tool.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

_LOG_INITIALISED = False
_CONSOLE_FORMAT = "{message}"
_DEBUG_FORMAT = "<level>{level: <8}</level> | {name}:{function}:{line} - {message}"
_WARNING_NO = _logger.level("WARNING").no


def _below_warning(record) -> bool:
    return record["level"].no < _WARNING_NO


def configure(*, debug: bool = False, log_path: Optional[Path] = None) -> None:
    """
    Configure loguru for the tool.

    Only the first call takes effect. The status report goes to stdout and
    warnings and errors to stderr; debug mode lowers stdout to DEBUG and
    switches both console sinks to a diagnostic format.
    """
    global _LOG_INITIALISED
    if _LOG_INITIALISED:
        return

    console_format = _DEBUG_FORMAT if debug else _CONSOLE_FORMAT
    _logger.remove()
    if sys.stdout is not None:
        _logger.add(
            sys.stdout,
            level="DEBUG" if debug else "INFO",
            format=console_format,
            filter=_below_warning,
        )
    if sys.stderr is not None:
        _logger.add(sys.stderr, level="WARNING", format=console_format)
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            log_path,
            level="DEBUG",
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
            backtrace=True,
            diagnose=False,
        )
    _LOG_INITIALISED = True


def get_logger():
    """Return the shared logger instance."""
    configure()
    return _logger
