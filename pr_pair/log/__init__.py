# AGPL-3.0 License

import logging
import os
import sys
from enum import Enum
from typing import Mapping, Optional

from loguru import logger

DEBUG_ENV_VARS = ("DEBUG", "PR_CHECKLIST_DEBUG")


class LoggingFormat(str, Enum):
    CONSOLE = "CONSOLE"
    JSON = "JSON"


def is_debug_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when DEBUG or PR_CHECKLIST_DEBUG is set to a non-empty value."""
    environ = os.environ if environ is None else environ
    return any(environ.get(name) for name in DEBUG_ENV_VARS)


def setup_logger(level: str = "WARNING", fmt: LoggingFormat = LoggingFormat.CONSOLE):
    # stdout is reserved for the checklist itself, so every sink writes to stderr
    level_no = logging.getLevelName(level.upper())
    if type(level_no) is not int:
        level_no = logging.WARNING

    logger.remove(None)
    if fmt == LoggingFormat.JSON:
        logger.add(
            sys.stderr,
            level=level_no,
            format="{message}",
            colorize=False,
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            level=level_no,
            colorize=True,
            format="<level>{level: <8}</level> | {name}:{function} - {message}",
        )
    return logger


def setup_logger_from_env(environ: Optional[Mapping[str, str]] = None, force_debug: bool = False):
    """Configure logging from PR_PAIR_LOG_LEVEL, PR_PAIR_LOG_FORMAT and the debug variables."""
    environ = os.environ if environ is None else environ
    default_level = "DEBUG" if force_debug or is_debug_enabled(environ) else "WARNING"
    level = environ.get("PR_PAIR_LOG_LEVEL", default_level)
    try:
        fmt = LoggingFormat(environ.get("PR_PAIR_LOG_FORMAT", "CONSOLE").upper())
    except ValueError:
        fmt = LoggingFormat.CONSOLE
    return setup_logger(level, fmt)


def get_logger(*args, **kwargs):
    return logger
