"""
Path helpers for building filenames and displaying paths.

This module contains the filename sanitizer applied to rendered episode names
and the path shortener used for console output and the change log.
"""
import os
from pathlib import Path


def sanitize_filename(name: str) -> str:
    """
    Make a rendered name usable as a single path component.

    Surrounding whitespace is removed and every "/" is replaced with "-" so a
    series name such as "A/B" stays readable as "A-B".
    """
    return name.strip().replace("/", "-")


def shorten_path(path: Path, cwd: Path | None = None, home: Path | None = None) -> str:
    """
    Shorten a path for readability.

    A path under the current working directory is shown relative to "." and a
    path under the home directory relative to "~". Other paths are returned
    unchanged.
    """
    path = Path(path)
    for prefix, replacement in ((cwd or Path.cwd(), "."), (home or Path.home(), "~")):
        try:
            relative = path.relative_to(prefix)
        except ValueError:
            continue
        if relative == Path("."):
            return replacement
        return f"{replacement}{os.sep}{relative}"
    return str(path)
