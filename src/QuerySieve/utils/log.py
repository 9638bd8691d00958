"""QuerySieve logging.

Library modules log through `log` only. The CLI calls `configure_logging`,
which attaches a console handler and, optionally, a per-run log file. Lines
look like `mm-dd HH:MM:SS [LVL] message` with LVL one of DEBG/INFO/WARN/ERRO.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

_LEVEL_ABBREV = {"DEBUG": "DEBG", "WARNING": "WARN", "ERROR": "ERRO", "CRITICAL": "ERRO"}

log = logging.getLogger("QuerySieve")
log.addHandler(logging.NullHandler())


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        record.levelabbr = _LEVEL_ABBREV.get(record.levelname, record.levelname[:4])
        return super().format(record)


def _run_log_path(log_dir: str, action: str) -> Path:
    """Return `<log_dir>/<action>/<action>_<mmddHHMMSS>.log`, creating the directory."""
    action_dir = Path(log_dir) / action
    action_dir.mkdir(parents=True, exist_ok=True)
    return action_dir / f"{action}_{datetime.now():%m%d%H%M%S}.log"


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> None:
    """Replace the handlers of `log`.

    Args:
        level: Console level name; unknown names fall back to INFO.
        action: CLI command name; a log file is only written when set.
        log_to_file: Mirror every record, DEBUG included, to a run log file.
        log_dir: Base directory for run log files.
    """
    console_level = logging.getLevelName(level.upper())
    if not isinstance(console_level, int):
        console_level = logging.INFO
    formatter = _AbbrevLevelFormatter("%(asctime)s [%(levelabbr)s] %(message)s", "%m-%d %H:%M:%S")

    console = logging.StreamHandler()
    console.setLevel(console_level)
    handlers: list[logging.Handler] = [console]
    if log_to_file and action:
        run_file = logging.FileHandler(_run_log_path(log_dir, action), encoding="utf-8")
        run_file.setLevel(logging.DEBUG)
        handlers.append(run_file)

    for old in log.handlers:
        old.close()
    log.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        log.addHandler(handler)
    log.setLevel(min(logging.DEBUG, console_level))
    log.propagate = False
