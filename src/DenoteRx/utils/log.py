"""DenoteRx logging utilities.

All modules log through the shared `DenoteRx` logger. The compiler only
emits DEBUG records (visited fields, keyword reordering); the CLI decides
where they go by calling `configure_logging` once per command.

Records look like: mm-dd HH:MM:SS [<LVL>] <message>
where LVL is one of: DEBG/INFO/WARN/ERRO.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final


_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}

_FORMAT: Final[str] = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATE_FORMAT: Final[str] = "%m-%d %H:%M:%S"


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("DenoteRx")


def log_file_path(log_dir: str | Path, action: str) -> Path:
    """Return a fresh per-run log file path under `<log_dir>/<action>/`."""
    timestamp = datetime.now().strftime("%m%d%H%M%S")
    return Path(log_dir) / action / f"{action}_{timestamp}.log"


def configure_logging(
    *,
    level: str = "INFO",
    action: str = "denote-rx",
    log_dir: str | Path | None = None,
) -> Path | None:
    """Route the DenoteRx logger to the console and optionally a file.

    The console shows records at `level` and above so rendered patterns on
    stdout stay clean; the file, when enabled, always records DEBUG.

    Args:
        level: Console logging level name (e.g., INFO, DEBUG).
        action: CLI command name, used for the log file location.
        log_dir: Base directory for log files, or None for console only.

    Returns:
        Path of the log file, or None when file logging is off.
    """
    console_level = logging.getLevelName((level or "INFO").upper())
    if not isinstance(console_level, int):
        console_level = logging.INFO
    formatter = _AbbrevLevelFormatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(formatter)
    log.addHandler(console)

    path: Path | None = None
    if log_dir is not None:
        path = log_file_path(log_dir, action)
        path.parent.mkdir(parents=True, exist_ok=True)
        mirror = logging.FileHandler(path, encoding="utf-8")
        mirror.setLevel(logging.DEBUG)
        mirror.setFormatter(formatter)
        log.addHandler(mirror)

    log.setLevel(logging.DEBUG if path is not None else console_level)
    log.propagate = False
    return path
