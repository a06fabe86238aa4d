"""
Parsing of season directory names.

Season directories are recognized by name: "Season 1", "season2", "Season 10"
carry their number, while "Season 0", "season0" and "Specials" hold the
specials and map to season 0.
"""
from pathlib import Path

SPECIALS_NAMES = ("season0", "season 0", "specials")


def derive_season_number(directory: str | Path) -> int | None:
    """
    Derive the season number from a directory name.

    Returns None when the name does not carry a season number, e.g. "Extras".
    """
    name = Path(directory).name.lower()
    if name in SPECIALS_NAMES:
        return 0

    remainder = name.replace("season", "").replace(" ", "")
    if remainder.isascii() and remainder.isdigit():
        return int(remainder)
    return None
