#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Logging setup shared by the orgwriter command line entry points.

The library itself only creates module loggers; handlers are attached here,
once, by whichever entry point is running.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name or number into a numeric logging level.

    Raises
    ------
    ValueError
        If ``log_level`` names no standard level

    Examples
    --------
    >>> resolve_log_level("debug")
    10

    """
    if isinstance(log_level, int):
        return log_level
    name = str(log_level).strip().upper()
    if name not in LOG_LEVEL_NAMES:
        raise ValueError(f"Unknown log level {log_level!r}; expected one of {', '.join(LOG_LEVEL_NAMES)}")
    return getattr(logging, name)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Replace the root logger's handlers with a stderr handler (and a file).

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name such as ``"INFO"``.
    log_file : str, optional
        Also append records to this file.
    trace_mode : bool, default False
        Force DEBUG and include timestamps and logger names.

    Returns
    -------
    logging.Logger
        The root logger.

    """
    level = logging.DEBUG if trace_mode else resolve_log_level(log_level)
    formatter = logging.Formatter(
        _TRACE_FORMAT if trace_mode else _PLAIN_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.debug("Logging to file: %s", log_file)

    return root_logger
