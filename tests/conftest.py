"""
Pytest configuration and fixtures for tv-renamer tests.
"""
from datetime import date
from pathlib import Path

import pytest

from tvshow.utils import logger
from tvshow.utils.tvdb import EpisodeMetadata, EpisodeNotFoundError, SeriesNotFoundError

MIME_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<mime-type xmlns="http://www.freedesktop.org/standards/shared-mime-info" type="{mime_type}">
  <comment>{comment}</comment>
{globs}
</mime-type>
"""


def write_mime_type(directory: Path, name: str, mime_type: str, *patterns: str) -> Path:
    globs = "\n".join(f'  <glob pattern="{pattern}"/>' for pattern in patterns)
    path = directory / f"{name}.xml"
    path.write_text(MIME_TEMPLATE.format(mime_type=mime_type, comment=name, globs=globs), encoding="utf-8")
    return path


@pytest.fixture
def mime_dir(tmp_path: Path) -> Path:
    """A shared-mime-info style video directory recognizing mkv, mp4 and avi."""
    directory = tmp_path / "mime" / "video"
    directory.mkdir(parents=True)
    write_mime_type(directory, "x-matroska", "video/x-matroska", "*.mkv")
    write_mime_type(directory, "mp4", "video/mp4", "*.mp4", "*.m4v")
    write_mime_type(directory, "x-msvideo", "video/x-msvideo", "*.avi")
    return directory


@pytest.fixture
def series_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "TV Series"
    directory.mkdir()
    return directory


def touch(directory: Path, *names: str) -> list[Path]:
    """Create empty files (and their parent directories) below `directory`."""
    paths = []
    for name in names:
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(name, encoding="utf-8")
        paths.append(path)
    return paths


@pytest.fixture(autouse=True)
def _reset_log_level():
    level = logger.get_log_level()
    yield
    logger.set_log_level(level)


class FakeTvdbClient:
    """In-memory stand-in for TvdbClient."""

    def __init__(self, episodes=None, series=None):
        # {(season, episode): EpisodeMetadata}
        self.episodes = episodes or {}
        self.series = series if series is not None else {"TV Series": 81189}
        self.searches = []
        self.lookups = []

    def search_series(self, series_name):
        self.searches.append(series_name)
        if series_name not in self.series:
            raise SeriesNotFoundError(series_name)
        return self.series[series_name]

    def get_episode(self, series_id, season, episode):
        self.lookups.append((series_id, season, episode))
        if (season, episode) not in self.episodes:
            raise EpisodeNotFoundError(series_id, season, episode)
        return self.episodes[(season, episode)]


@pytest.fixture
def fake_client():
    return FakeTvdbClient(
        episodes={
            (1, 1): EpisodeMetadata("Pilot", date(2008, 1, 20)),
            (1, 2): EpisodeMetadata("Cat's in the Bag...", date(2008, 1, 27)),
            (1, 3): EpisodeMetadata("...And the Bag's in the River"),
            (2, 1): EpisodeMetadata("Seven Thirty-Seven", date(2009, 3, 8)),
        }
    )
