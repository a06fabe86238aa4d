"""
Source of the file extensions recognized as video.

The shared-mime-info database (`/usr/share/mime/video` on Linux) describes one
video type per XML file, each listing its filename globs such as
`<glob pattern="*.mkv"/>`. When that database is not installed the Python
`mimetypes` registry is consulted instead, merged with a built-in list.
Extensions are returned without the leading dot and compared case-sensitively.
"""
import mimetypes
import xml.etree.ElementTree as ElementTree
from pathlib import Path

from tvshow.errors import ExtensionSourceUnavailableError
from tvshow.utils import LogLevel, logger
from tvshow.utils.constants import MIME_VIDEO_DIR, VIDEO_EXTENSIONS


def _glob_extension(pattern: str) -> str | None:
    """Turn a glob such as "*.mkv" into "mkv"; globs that are not plain extensions are ignored."""
    if not pattern.startswith("*."):
        return None
    extension = pattern.rsplit(".", 1)[-1]
    if not extension or any(c in extension for c in "*?["):
        return None
    return extension


def read_mime_directory(mime_dir: Path) -> frozenset[str]:
    """
    Collect the glob extensions of every XML description in a shared-mime-info directory.

    Raises:
        ExtensionSourceUnavailableError: when the directory or one of its files
        cannot be read or parsed, or when no extension is found.
    """
    extensions = set()
    try:
        descriptions = sorted(p for p in mime_dir.iterdir() if p.suffix == ".xml")
        for description in descriptions:
            for element in ElementTree.parse(description).iter():
                if element.tag.rsplit("}", 1)[-1] != "glob":
                    continue
                extension = _glob_extension(element.get("pattern", ""))
                if extension:
                    extensions.add(extension)
    except OSError as e:
        raise ExtensionSourceUnavailableError(mime_dir, e.strerror or str(e)) from e
    except ElementTree.ParseError as e:
        raise ExtensionSourceUnavailableError(mime_dir, f"invalid mime description ({e})") from e

    if not extensions:
        raise ExtensionSourceUnavailableError(mime_dir, "no video extensions found")
    return frozenset(extensions)


def _registry_extensions() -> frozenset[str]:
    """Video extensions known to the `mimetypes` registry plus the built-in list."""
    mimetypes.init()
    extensions = set(VIDEO_EXTENSIONS)
    for suffix, mime_type in mimetypes.types_map.items():
        if mime_type.startswith("video/"):
            extensions.add(suffix.lstrip("."))
    return frozenset(extensions)


def get_video_extensions(mime_dir: Path | None = None) -> frozenset[str]:
    """
    Return the set of extensions recognized as video files.

    An explicitly given `mime_dir` must be readable. Without one, the system
    shared-mime-info directory is used when present, else the registry.
    """
    if mime_dir is not None:
        extensions = read_mime_directory(Path(mime_dir))
        source = str(mime_dir)
    elif MIME_VIDEO_DIR.is_dir():
        extensions = read_mime_directory(MIME_VIDEO_DIR)
        source = str(MIME_VIDEO_DIR)
    else:
        extensions = _registry_extensions()
        source = "mimetypes"

    logger.log("scan.extensions", LogLevel.TRACE, source=source, count=len(extensions))
    return extensions
