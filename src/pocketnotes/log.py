# SPDX-License-Identifier: MIT

import logging
from logging.config import dictConfig
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler

from pocketnotes.configuration import DEFAULT_LOG_LEVEL


def _console_handler() -> logging.Handler:
    # stderr so log lines never interleave with the rendered screen
    return RichHandler(console=Console(stderr=True), show_path=False)


def setup_logging(level: str = DEFAULT_LOG_LEVEL, log_file: Optional[str] = None) -> None:
    """
    Configure the ``pocketnotes`` logger once at start-up.

    Console output goes through rich on stderr. When ``log_file`` is set,
    records go to that file instead.
    """
    level = level.upper()

    handler: dict[str, Any]
    if log_file is not None:
        handler = {
            "class": "logging.FileHandler",
            "filename": log_file,
            "encoding": "utf-8",
            "formatter": "file",
        }
    else:
        handler = {"()": _console_handler, "formatter": "console"}

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {"format": "%(name)s: %(message)s"},
                "file": {
                    "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {"default": handler},
            "loggers": {
                "pocketnotes": {
                    "level": level,
                    "handlers": ["default"],
                    "propagate": False,
                },
            },
        }
    )
