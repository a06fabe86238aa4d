"""
A module providing constants, utility functions, and logging mechanisms
for renaming TV series.

This module includes the constants and defaults of the renamer, number and
path formatting helpers, the persisted change log, the source of recognized
video extensions and the TheTVDB client. It also integrates a structured
logging mechanism for safe and controlled outputs.
"""

from .constants import (
    CHANGE_LOG_FILE,
    DEFAULT_EPISODE_START,
    DEFAULT_LANGUAGE,
    DEFAULT_PAD_LENGTH,
    DEFAULT_SEASON_NUMBER,
    DEFAULT_TEMPLATE,
    MIME_DIR,
    PAD_CHAR,
    STATUS_DRY_RUN,
    STATUS_OK,
    STATUS_SKIP,
    TOOL_NAME,
    TVDB_API_KEY,
    TVDB_BASE_URL,
    VIDEO_EXTENSIONS,
)
from .logger import LogLevel

__all__ = [
    "TOOL_NAME",
    "DEFAULT_SEASON_NUMBER",
    "DEFAULT_EPISODE_START",
    "DEFAULT_PAD_LENGTH",
    "DEFAULT_TEMPLATE",
    "DEFAULT_LANGUAGE",
    "PAD_CHAR",
    "VIDEO_EXTENSIONS",
    "MIME_DIR",
    "CHANGE_LOG_FILE",
    "TVDB_API_KEY",
    "TVDB_BASE_URL",
    "STATUS_OK",
    "STATUS_SKIP",
    "STATUS_DRY_RUN",
    "LogLevel",
]
