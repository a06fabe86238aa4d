"""
Append-only log of the renames performed on disk.

Each run with logging enabled appends a blank line and an RFC 2822 timestamp,
followed by one "<source> -> <target>" line per renamed file. Paths are
shortened the same way as on the console.
"""
from datetime import datetime
from email.utils import format_datetime
from pathlib import Path

from tvshow.errors import ChangeLogError
from tvshow.utils.file_util import shorten_path


def _append(log_file: Path, text: str) -> None:
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as log:
            log.write(text)
    except OSError as e:
        raise ChangeLogError(f"unable to write to log file {log_file}: {e.strerror or e}") from e


def append_time(log_file: Path, now: datetime | None = None) -> None:
    """Append the current local time to the log file."""
    now = now or datetime.now().astimezone()
    _append(log_file, f"\n{format_datetime(now)}\n")


def append_change(log_file: Path, source: Path, target: Path) -> None:
    """Log the file renaming modification to the log file."""
    _append(log_file, f"{shorten_path(source)} -> {shorten_path(target)}\n")
