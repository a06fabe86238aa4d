"""
Constants and configuration settings for renaming TV series.

This module contains the defaults used by the renamer: the tool name used to
prefix error messages, default numbering values, the built-in list of video
extensions, TheTVDB API settings, the change log location and the status codes
reported for each episode. Environment variables (optionally from a `.env`
file) override the API credentials and file locations.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Name used to prefix every error message
TOOL_NAME = "tv-renamer"

# Default numbering
DEFAULT_SEASON_NUMBER = 1
DEFAULT_EPISODE_START = 1
DEFAULT_PAD_LENGTH = 2
PAD_CHAR = "0"

# Template used when none is supplied on the command line
DEFAULT_TEMPLATE = "${Series} ${Season}x${Episode} ${TVDB_Title}"

# Accepted video file extensions when no shared-mime-info database is available
VIDEO_EXTENSIONS = {"mkv", "mp4", "avi", "mov", "m4v", "mpg", "mpeg", "ogv", "webm", "wmv", "flv", "ts"}

# shared-mime-info database holding one XML description per video type
MIME_VIDEO_DIR = Path("/usr/share/mime/video")
MIME_DIR = Path(os.environ["TV_RENAMER_MIME_DIR"]) if os.getenv("TV_RENAMER_MIME_DIR") else None

# TheTVDB API configuration
TVDB_API_KEY = os.getenv("TVDB_API_KEY")
TVDB_PIN = os.getenv("TVDB_PIN")
TVDB_BASE_URL = "https://api4.thetvdb.com/v4"
TVDB_TIMEOUT = 10
DEFAULT_LANGUAGE = "eng"

# Append-only log of the renames performed
CHANGE_LOG_NAME = "tv-renamer.log"
CHANGE_LOG_FILE = Path(os.getenv("TV_RENAMER_LOG_FILE") or Path.home() / CHANGE_LOG_NAME).expanduser()

# Processing status codes
STATUS_OK = "OK"
STATUS_SKIP = "SKIP"
STATUS_DRY_RUN = "DRY-RUN"
