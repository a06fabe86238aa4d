"""Data models for the rename package."""
from dataclasses import dataclass, field
from pathlib import Path

from tvshow.rename.tokenizer import TemplateToken, default_template
from tvshow.utils import constants
from tvshow.utils.tvdb import EpisodeMetadata


@dataclass(frozen=True)
class Config:
    """Settings of one renaming run, built once from the command line."""
    directory: Path
    series_name: str
    season_number: int = constants.DEFAULT_SEASON_NUMBER
    episode_start: int = constants.DEFAULT_EPISODE_START
    pad_length: int = constants.DEFAULT_PAD_LENGTH
    template: tuple[TemplateToken, ...] = field(default_factory=lambda: tuple(default_template()))
    dry_run: bool = False
    verbose: bool = False
    log_changes: bool = False
    automatic: bool = False
    interactive: bool = False
    tvdb: bool = True
    language: str = constants.DEFAULT_LANGUAGE
    log_file: Path = constants.CHANGE_LOG_FILE
    mime_dir: Path | None = constants.MIME_DIR
    progress: bool = True


@dataclass(frozen=True)
class SeasonContext:
    """Naming context of the season being renamed."""
    series_name: str
    season_number: int
    # Directory receiving the renamed files; None keeps each file in its own directory
    destination: Path | None = None


@dataclass(frozen=True)
class Season:
    """One directory's worth of episodes, sorted case-insensitively by filename."""
    season_number: int
    directory: Path
    episodes: tuple[Path, ...] = ()


@dataclass(frozen=True)
class FlatDirectory:
    """Scan result of a directory holding the episodes of a single season."""
    season: Season


@dataclass(frozen=True)
class SeasonDirectories:
    """Scan result of a directory holding one subdirectory per season."""
    seasons: tuple[Season, ...]


ScanResult = FlatDirectory | SeasonDirectories


@dataclass(frozen=True)
class RenameResult:
    """Represents the outcome for one episode."""
    source: Path
    target: Path
    status: str
    reason: str | None = None


__all__ = [
    "Config",
    "SeasonContext",
    "Season",
    "FlatDirectory",
    "SeasonDirectories",
    "ScanResult",
    "RenameResult",
    "EpisodeMetadata",
]
