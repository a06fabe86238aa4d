"""
Exception types raised while renaming a series.

Every fatal condition derives from `RenamerError` so the command line can
report it with the tool prefix and exit non-zero. Target collisions are not
errors; they are reported as skipped results by the batch orchestrator.
"""
from pathlib import Path


class RenamerError(Exception):
    """Base exception for all fatal renaming errors."""

    pass


class ConfigError(RenamerError):
    """Exception for invalid arguments or an unusable base directory."""

    pass


class ScanError(RenamerError):
    """Base exception for directory scanning failures."""

    pass


class DirectoryUnreadableError(ScanError):
    """Exception for a directory that cannot be listed."""

    def __init__(self, directory: Path):
        self.directory = directory
        super().__init__(f"unable to read {str(directory)!r} directory")


class EntryUnreadableError(ScanError):
    """Exception for a directory entry whose metadata cannot be retrieved."""

    def __init__(self, directory: Path):
        self.directory = directory
        super().__init__(f"unable to read entry in {str(directory)!r}")


class ExtensionSourceUnavailableError(ScanError):
    """Exception for when the list of video extensions cannot be obtained."""

    def __init__(self, source: Path, reason: str):
        self.source = source
        super().__init__(f"error obtaining video extensions from {source}: {reason}")


class TargetError(RenamerError):
    """Base exception for target path derivation failures."""

    pass


class NoExtensionError(TargetError):
    """Exception for a source file without an extension."""

    def __init__(self, source: Path):
        self.source = source
        super().__init__(f"{str(source)!r} has no file extension")


class NoParentDirectoryError(TargetError):
    """Exception for a source path without a parent directory."""

    def __init__(self, source: Path):
        self.source = source
        super().__init__(f"{str(source)!r} has no parent directory")


class EpisodeDoesNotExistError(RenamerError):
    """Exception for an episode index the metadata service does not know."""

    def __init__(self, episode: int, season: int, source: Path):
        self.episode = episode
        self.season = season
        self.source = source
        super().__init__(f"unable to find episode {episode} of season {season} for {str(source)!r}")


class RenameFailedError(RenamerError):
    """Exception for a filesystem rename that failed."""

    def __init__(self, source: Path, target: Path, cause: OSError):
        self.source = source
        self.target = target
        super().__init__(f"rename failed: {cause.strerror or cause}")


class ChangeLogError(RenamerError):
    """Exception for a change log that cannot be written."""

    pass
