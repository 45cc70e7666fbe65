"""
Logging configuration for the enumgen CLI.

``setup_logging()`` is called once by main.py; modules only do
``logger = logging.getLogger(__name__)``.

Console verbosity, highest precedence first:
    --debug / -v / -q  >  ENUMGEN_LOG_LEVEL  >  WARNING

Every record carries a ``task`` attribute naming the generation task
that was running when it was logged (``-`` outside of a task), so
interleaved output of ``enumgen generate`` stays attributable:

    12:00:01 [bundle-lines] Created enum class(es) for files in ...

A log file (ENUMGEN_LOG_FILE, level ENUMGEN_LOG_FILE_LEVEL) is useful
when enumgen runs as a step of a larger build.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_NO_TASK = "-"
_current_task: ContextVar[str] = ContextVar("enumgen_task", default=_NO_TASK)

# Warnings and errors are user-facing: keep them short
_FMT_CONSOLE = "%(levelname)s: %(message)s"

# -v: which task said what
_FMT_INFO = "%(asctime)s [%(task)s] %(message)s"

# --debug and the log file: add logger and line
_FMT_DETAIL = "%(asctime)s %(levelname)-7s [%(task)s] %(name)s:%(lineno)d  %(message)s"

_DATEFMT_SHORT = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


class _TaskFilter(logging.Filter):
    """Stamp records with the task from ``task_context()``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.task = _current_task.get()
        return True


@contextmanager
def task_context(name: str) -> Iterator[None]:
    """Attribute every record logged inside the block to task *name*.

    Usage::

        with task_context("bundle-lines"):
            logger.info("scanning")  # -> "[bundle-lines] scanning"
    """
    token = _current_task.set(name)
    try:
        yield
    finally:
        _current_task.reset(token)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with enumgen's console/file setup.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a log file, appended to.
        log_file_level: Level for the log file; defaults to ``level``.
    """
    console_level = _parse_level(level)
    task_filter = _TaskFilter()

    if console_level <= logging.DEBUG:
        console_fmt = logging.Formatter(_FMT_DETAIL, datefmt=_DATEFMT_SHORT)
    elif console_level <= logging.INFO:
        console_fmt = logging.Formatter(_FMT_INFO, datefmt=_DATEFMT_SHORT)
    else:
        console_fmt = logging.Formatter(_FMT_CONSOLE)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(console_fmt)
    console.addFilter(task_filter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        root_level = min(root_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DETAIL, datefmt=_DATEFMT_FILE))
        fh.addFilter(task_filter)
        root.addHandler(fh)

    root.setLevel(root_level)


def _parse_level(level: str | None) -> int:
    """Map a level name to its number; unknown or empty names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
