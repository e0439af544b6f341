#!/usr/bin/env python
"""
logging_helper.py – shared loggers for quotevote modules.

Usage:
    from quotevote.utils.logging_helper import get_logger
    log = get_logger()                  # 'quotevote.<calling module>'
    log.info("It works")

Every logger writes to logs/<module>.log. Warnings and errors are also echoed
to stderr so they don't mix with the CLI's own console output.
Set QUOTEVOTE_LOG_LEVEL (e.g. DEBUG) to see dropped votes, and
QUOTEVOTE_LOG_DIR to move the log files.
"""

from __future__ import annotations

import inspect
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

from quotevote.utils.paths import LOG_DIR

FILE_FMT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
ECHO_FMT = "[%(levelname)s] %(name)s: %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"


def _caller_module(depth: int = 2) -> str:
    frame = inspect.stack()[depth]
    module = inspect.getmodule(frame[0])
    if module and module.__name__ != "__main__":
        return module.__name__.rsplit(".", 1)[-1]
    return Path(frame.filename).stem


def _env_level(default: int) -> int:
    name = os.environ.get("QUOTEVOTE_LOG_LEVEL", "").upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def get_logger(name: Optional[str] = None,
               level: int = logging.INFO,
               log_dir: Union[str, Path, None] = None) -> logging.Logger:
    """Return the ``quotevote.<name>`` logger, configuring it on first use.

    *name* defaults to the calling module's last dotted component.
    """
    name = name or _caller_module()
    logger = logging.getLogger(f"quotevote.{name}")
    if logger.handlers:
        return logger

    level = _env_level(level)
    logger.setLevel(level)

    folder = Path(log_dir or os.environ.get("QUOTEVOTE_LOG_DIR") or LOG_DIR)
    folder.mkdir(parents=True, exist_ok=True)
    to_file = logging.FileHandler(folder / f"{name}.log", encoding="utf-8", delay=True)
    to_file.setFormatter(logging.Formatter(FILE_FMT, DATE_FMT))
    to_file.setLevel(level)

    echo = logging.StreamHandler(sys.stderr)
    echo.setFormatter(logging.Formatter(ECHO_FMT))
    echo.setLevel(max(level, logging.WARNING))

    logger.addHandler(to_file)
    logger.addHandler(echo)
    logger.propagate = False
    return logger
