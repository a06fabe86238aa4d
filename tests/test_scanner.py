import os

import pytest

from tests.conftest import touch
from tvshow.errors import DirectoryUnreadableError, ExtensionSourceUnavailableError
from tvshow.rename.models import FlatDirectory, SeasonDirectories
from tvshow.rename.scanner import collect_episodes, scan_directory

VIDEO = frozenset({"mkv", "mp4", "avi"})


def names(season):
    return [path.name for path in season.episodes]


def test_flat_directory_keeps_videos_sorted_case_insensitively(series_dir):
    touch(series_dir, "two.mkv", "One.mkv", "three.mkv", "notes.txt", "cover.jpg", "Bonus.MKV")
    (series_dir / "Extras").mkdir()

    result = scan_directory(series_dir, video_extensions=VIDEO)

    assert isinstance(result, FlatDirectory)
    assert result.season.season_number == 1
    assert result.season.directory == series_dir
    assert names(result.season) == ["One.mkv", "three.mkv", "two.mkv"]


def test_flat_directory_uses_callers_season_number(series_dir):
    touch(series_dir, "a.mp4")
    result = scan_directory(series_dir, season_number=4, video_extensions=VIDEO)
    assert result.season.season_number == 4


def test_extension_match_is_exact(series_dir):
    touch(series_dir, "a.mkv", "b.mkv.part", "c.xmkv", "mkv", ".mkv")
    assert names(collect_episodes(series_dir, 1, VIDEO)) == ["a.mkv"]


def test_mixed_extensions_are_all_collected(series_dir):
    touch(series_dir, "b.avi", "a.mkv", "c.mp4", "d.mkv")
    assert names(collect_episodes(series_dir, 1, VIDEO)) == ["a.mkv", "b.avi", "c.mp4", "d.mkv"]


def test_season_directories(series_dir):
    touch(series_dir, "Season2/b.mkv", "Season2/a.mkv", "Season1/pilot.mkv", "Season1/readme.txt")

    result = scan_directory(series_dir, video_extensions=VIDEO)

    assert isinstance(result, SeasonDirectories)
    assert [season.season_number for season in result.seasons] == [1, 2]
    assert names(result.seasons[0]) == ["pilot.mkv"]
    assert names(result.seasons[1]) == ["a.mkv", "b.mkv"]
    assert result.seasons[1].directory == series_dir / "Season2"


def test_season_directories_are_ordered_numerically(series_dir):
    touch(series_dir, "Season 10/x.mkv", "Season 2/x.mkv", "Specials/x.mkv", "Season 1/x.mkv")
    result = scan_directory(series_dir, video_extensions=VIDEO)
    assert [season.season_number for season in result.seasons] == [0, 1, 2, 10]


def test_unnumbered_directories_are_skipped(series_dir):
    touch(series_dir, "Season 1/x.mkv", "Extras/x.mkv", "Season Extras/x.mkv", "loose.mkv")
    result = scan_directory(series_dir, video_extensions=VIDEO)
    assert [season.season_number for season in result.seasons] == [1]


def test_season_file_does_not_make_directory_season_structured(series_dir):
    touch(series_dir, "season finale.mkv")
    result = scan_directory(series_dir, video_extensions=VIDEO)
    assert isinstance(result, FlatDirectory)
    assert names(result.season) == ["season finale.mkv"]


def test_detect_seasons_disabled_treats_directory_as_flat(series_dir):
    touch(series_dir, "Season 1/x.mkv", "loose.mkv")
    result = scan_directory(series_dir, video_extensions=VIDEO, detect_seasons=False)
    assert isinstance(result, FlatDirectory)
    assert names(result.season) == ["loose.mkv"]


def test_rescan_is_deterministic(series_dir):
    touch(series_dir, "Season 1/B.mkv", "Season 1/a.mkv", "Season 1/c.MP4", "Season 2/z.avi", "Season 2/Y.avi")
    first = scan_directory(series_dir, video_extensions=VIDEO)
    second = scan_directory(series_dir, video_extensions=VIDEO)
    assert first == second


def test_extensions_come_from_mime_directory(series_dir, mime_dir):
    touch(series_dir, "a.m4v", "b.mov")
    result = scan_directory(series_dir, mime_dir=mime_dir)
    assert names(result.season) == ["a.m4v"]


def test_unreadable_extension_source(series_dir, tmp_path):
    with pytest.raises(ExtensionSourceUnavailableError):
        scan_directory(series_dir, mime_dir=tmp_path / "missing")


def test_missing_directory(tmp_path):
    with pytest.raises(DirectoryUnreadableError):
        scan_directory(tmp_path / "missing", video_extensions=VIDEO)


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root can read any directory")
def test_unreadable_season_directory(series_dir):
    touch(series_dir, "Season 1/x.mkv")
    season = series_dir / "Season 1"
    season.chmod(0o000)
    try:
        with pytest.raises(DirectoryUnreadableError):
            scan_directory(series_dir, video_extensions=VIDEO)
    finally:
        season.chmod(0o755)
