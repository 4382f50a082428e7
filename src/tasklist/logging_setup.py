# src/tasklist/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "tasklist.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    The console doubles as the task list screen, so stderr records must not
    drown the rendered list:
    - store/persistence/console records ('tasklist.*') pass at the handler level
    - anything else (warnings, sqlite/dotenv internals) only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "tasklist" or name.startswith("tasklist."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path | None = ".local/tasklist",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure the root logger for the tasklist CLI.

    - stderr: `console_level`, filtered so the list stays readable
    - <log_dir>/tasklist.log: `file_level`, unfiltered; this is where the
      DEBUG lines for ignored store calls and the tracebacks of failed
      saves/loads end up. Pass log_dir=None (in-memory runs) to skip it.

    Call once from main() before the store is built, so the load of the
    saved list is already logged.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # main() may run more than once in a process (tests); avoid duplicate handlers.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / LOG_FILE_NAME), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
