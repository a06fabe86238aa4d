"""
A media module for renaming TV series episodes on disk.

This module renames the video files of a TV series to a consistent naming
scheme built from a user-supplied template, a season number, an incrementing
episode counter and, optionally, episode titles and air dates looked up from
TheTVDB.

The module is organized into several categories:
- Renaming: template tokenizing, directory scanning, target path building and
  the batch orchestrator that performs (or previews) the renames.
- Utilities: constants, structured logging, number padding, path helpers, the
  persisted change log, the video extension source and the TheTVDB client.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
