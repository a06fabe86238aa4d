"""
Directory scanning for episodes and season directories.

A series directory is either flat, holding the video files of one season, or
season-structured, holding one subdirectory per season ("Season 1",
"Specials", ...). `scan_directory` decides which by looking for a child
directory whose name contains "season" and returns the matching scan result.

Only regular files with a recognized video extension are collected. Episodes
are sorted case-insensitively by filename so repeated runs on an unchanged
directory assign the same episode number to the same file.
"""
import os
from pathlib import Path

from tvshow.errors import DirectoryUnreadableError, EntryUnreadableError
from tvshow.rename.models import FlatDirectory, Season, SeasonDirectories, ScanResult
from tvshow.rename.parser import derive_season_number
from tvshow.utils import DEFAULT_SEASON_NUMBER, LogLevel, logger, mime_util


def _list_directory(directory: Path) -> list[tuple[Path, bool, bool]]:
    """List the immediate children of a directory as (path, is_dir, is_file) tuples."""
    try:
        with os.scandir(directory) as entries:
            children = list(entries)
    except OSError as e:
        raise DirectoryUnreadableError(directory) from e

    listing = []
    for entry in children:
        try:
            listing.append((Path(entry.path), entry.is_dir(), entry.is_file()))
        except OSError as e:
            raise EntryUnreadableError(directory) from e
    return listing


def _episode_sort_key(path: Path) -> tuple[str, str]:
    return path.name.lower(), path.name


def collect_episodes(directory: Path, season_number: int, video_extensions: frozenset[str]) -> Season:
    """Collect the video files of a directory into a `Season`."""
    directory = Path(directory)
    episodes = [
        path
        for path, _, is_file in _list_directory(directory)
        if is_file and path.suffix[1:] in video_extensions
    ]
    episodes.sort(key=_episode_sort_key)

    logger.log(
        "scan.episodes",
        LogLevel.DEBUG,
        directory=str(directory),
        season=season_number,
        episodes=len(episodes),
    )
    return Season(season_number=season_number, directory=directory, episodes=tuple(episodes))


def collect_seasons(directory: Path, video_extensions: frozenset[str]) -> list[Season]:
    """
    Collect the episodes of every season subdirectory, ordered by season number.

    Subdirectories are visited in path order; those whose name carries no
    season number (e.g. "Extras") are ignored.
    """
    directory = Path(directory)
    subdirectories = sorted(str(path) for path, is_dir, _ in _list_directory(directory) if is_dir)

    seasons = []
    for subdirectory in subdirectories:
        season_number = derive_season_number(subdirectory)
        if season_number is None:
            logger.log("scan.ignored", LogLevel.DEBUG, directory=subdirectory)
            continue
        seasons.append(collect_episodes(Path(subdirectory), season_number, video_extensions))

    seasons.sort(key=lambda season: season.season_number)
    return seasons


def has_season_directories(directory: Path) -> bool:
    """Whether any child of the directory is a directory with "season" in its name."""
    return any(is_dir and "season" in path.name.lower() for path, is_dir, _ in _list_directory(directory))


def scan_directory(
        directory: Path,
        season_number: int = DEFAULT_SEASON_NUMBER,
        video_extensions: frozenset[str] | None = None,
        detect_seasons: bool = True,
        mime_dir: Path | None = None,
) -> ScanResult:
    """
    Scan a series directory for episodes.

    Args:
        directory: Directory to scan.
        season_number: Season number of the episodes of a flat directory.
        video_extensions: Recognized extensions without the dot. Obtained from
            `mime_util.get_video_extensions(mime_dir)` when omitted.
        detect_seasons: When False the directory is always treated as flat.
        mime_dir: Explicit shared-mime-info directory for the extensions.

    Returns:
        `SeasonDirectories` when season subdirectories are present, otherwise
        `FlatDirectory`.

    Raises:
        DirectoryUnreadableError, EntryUnreadableError, ExtensionSourceUnavailableError
    """
    directory = Path(directory)
    if video_extensions is None:
        video_extensions = mime_util.get_video_extensions(mime_dir)

    if detect_seasons and has_season_directories(directory):
        seasons = collect_seasons(directory, video_extensions)
        logger.log(
            "scan.seasons",
            LogLevel.INFO,
            directory=str(directory),
            seasons=",".join(str(season.season_number) for season in seasons),
        )
        return SeasonDirectories(seasons=tuple(seasons))

    return FlatDirectory(season=collect_episodes(directory, season_number, video_extensions))
