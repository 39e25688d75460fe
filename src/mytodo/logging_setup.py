# src/mytodo/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """Let mytodo records through; everything else only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "mytodo" or record.name.startswith("mytodo."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_file: str | Path = ".local/mytodo/mytodo.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Route all logs to `log_file` and the filtered ones to stderr.

    Replaces whatever handlers the root logger already has, so repeated calls
    do not duplicate output. The REPL prints to stdout; logs stay on stderr.
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())

    task_log = logging.FileHandler(str(log_file), encoding="utf-8")
    task_log.setLevel(file_level)
    task_log.setFormatter(fmt)

    root.addHandler(console)
    root.addHandler(task_log)

    # warnings.warn(...) arrives as 'py.warnings' and goes through the same filter.
    logging.captureWarnings(True)
