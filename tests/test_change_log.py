from datetime import datetime, timedelta, timezone

import pytest

from tvshow.errors import ChangeLogError
from tvshow.utils import change_log


def test_append_time_writes_rfc_2822_timestamp(tmp_path):
    log_file = tmp_path / "tv-renamer.log"
    now = datetime(2024, 3, 9, 14, 5, 7, tzinfo=timezone(timedelta(hours=1)))

    change_log.append_time(log_file, now)

    assert log_file.read_text(encoding="utf-8") == "\nSat, 09 Mar 2024 14:05:07 +0100\n"


def test_entries_are_appended(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    log_file = tmp_path / "logs" / "tv-renamer.log"
    now = datetime(2024, 3, 9, 14, 5, 7, tzinfo=timezone.utc)

    change_log.append_time(log_file, now)
    change_log.append_change(log_file, tmp_path / "Show" / "a.mkv", tmp_path / "Show" / "Show 1x01.mkv")
    change_log.append_change(log_file, tmp_path / "Show" / "b.mkv", tmp_path / "Show" / "Show 1x02.mkv")
    change_log.append_time(log_file, now)

    assert log_file.read_text(encoding="utf-8").split("\n") == [
        "",
        "Sat, 09 Mar 2024 14:05:07 +0000",
        "./Show/a.mkv -> ./Show/Show 1x01.mkv",
        "./Show/b.mkv -> ./Show/Show 1x02.mkv",
        "",
        "Sat, 09 Mar 2024 14:05:07 +0000",
        "",
    ]


def test_unwritable_log_file(tmp_path):
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(ChangeLogError, match="unable to write to log file"):
        change_log.append_time(blocker / "tv-renamer.log")
