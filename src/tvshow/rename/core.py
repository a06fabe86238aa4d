"""
Target path derivation for episode files.

Functions:
- build_target: Computes the path an episode file is renamed to.
- source_extension: Returns the extension of a source file without the dot.
"""
from pathlib import Path

from tvshow.errors import NoExtensionError, NoParentDirectoryError
from tvshow.rename import formatter
from tvshow.rename.models import Config, EpisodeMetadata, SeasonContext
from tvshow.utils import LogLevel, file_util, logger


def source_extension(source: Path) -> str:
    """
    Return the extension of `source` without the leading dot.

    Raises:
        NoExtensionError: when the file has no extension.
    """
    extension = Path(source).suffix[1:]
    if not extension:
        raise NoExtensionError(source)
    return extension


def build_target(
        source: Path,
        context: SeasonContext,
        episode_number: int,
        config: Config,
        metadata: EpisodeMetadata | None = None,
) -> Path:
    """
    Build the target path of an episode file.

    The configured template is rendered for the episode, surrounding whitespace
    is trimmed and every "/" is replaced with "-". The source extension is then
    appended and the filename is joined onto the season's destination
    directory, or onto the source's own directory when the season has none.

    Parameters:
    - source (Path): The episode file being renamed.
    - context (SeasonContext): Series name, season number and destination of the season.
    - episode_number (int): Episode number assigned to the file.
    - config (Config): Run configuration providing the template and pad length.
    - metadata (EpisodeMetadata | None): Looked-up title and air date, if any.

    Returns:
    - Path: The target path.

    Raises:
    - NoExtensionError: The source file has no extension.
    - NoParentDirectoryError: The source path has no parent directory.
    """
    source = Path(source)
    extension = source_extension(source)
    if not source.name or source.parent == source:
        raise NoParentDirectoryError(source)

    rendered = formatter.render_filename(config.template, context, episode_number, config.pad_length, metadata)
    filename = f"{file_util.sanitize_filename(rendered)}.{extension}"

    directory = context.destination if context.destination is not None else source.parent
    target = directory / filename
    logger.log("rename.target", LogLevel.TRACE, source=source.name, target=filename, episode=episode_number)
    return target
