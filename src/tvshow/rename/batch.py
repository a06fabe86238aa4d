# python
"""Batch renaming of the episodes of a series directory.

This module scans the series directory, numbers the episodes season by season,
looks up episode titles on TheTVDB when the template needs them, and renames
(or, in dry-run mode, previews) every file in order. It is sequential: the
episode counter is carried from file to file and every rename completes before
the next target is computed.

Any fatal error stops the run immediately. Renames already performed stay in
place. An existing target is never overwritten silently: it is skipped and
reported, or in interactive mode overwritten only after the operator agrees.
"""
import sys
from collections.abc import Callable
from pathlib import Path

from tqdm import tqdm

from tvshow.errors import ConfigError, EpisodeDoesNotExistError, RenameFailedError
from tvshow.rename import core, scanner, tokenizer
from tvshow.rename.models import Config, EpisodeMetadata, FlatDirectory, RenameResult, Season, SeasonContext
from tvshow.utils import STATUS_DRY_RUN, STATUS_OK, STATUS_SKIP, LogLevel, change_log, logger, system_util, tvdb
from tvshow.utils.file_util import shorten_path

EpisodeLookup = Callable[[SeasonContext, int, Path], EpisodeMetadata]
Prompt = Callable[[str], bool]


def make_episode_lookup(config: Config, client: tvdb.TvdbClient | None = None) -> EpisodeLookup | None:
    """
    Build the episode lookup used while renaming, or None when no lookup is needed.

    Lookups are needed only when TheTVDB is enabled and the template contains a
    title or air date placeholder. The series is searched immediately so an
    unknown series fails before any file is renamed.
    """
    if not config.tvdb or not tokenizer.uses_metadata(config.template):
        return None

    client = client or tvdb.TvdbClient(language=config.language)
    series_ids = {config.series_name: client.search_series(config.series_name)}

    def lookup(context: SeasonContext, episode_number: int, source: Path) -> EpisodeMetadata:
        if context.series_name not in series_ids:
            series_ids[context.series_name] = client.search_series(context.series_name)
        try:
            return client.get_episode(series_ids[context.series_name], context.season_number, episode_number)
        except tvdb.EpisodeNotFoundError as e:
            raise EpisodeDoesNotExistError(episode_number, context.season_number, source) from e

    return lookup


def _report(source: Path, target: Path) -> None:
    logger.safe_print(f"{shorten_path(source)} -> {shorten_path(target)}")


def _resolve_collision(source: Path, target: Path, config: Config, prompt: Prompt) -> tuple[bool, str | None]:
    """
    Decide whether an episode may be renamed onto `target`.

    Returns (proceed, skip_reason).
    """
    if source == target:
        return False, "already named"
    if not target.exists():
        return True, None
    if source.exists() and source.samefile(target):
        # Case-only rename on a case-insensitive filesystem
        return True, None
    if config.interactive and not config.dry_run:
        question = f"episode to be renamed already exists:\n{target}\nIs it okay to overwrite?"
        if prompt(question):
            return True, None
        return False, "overwrite declined"
    return False, "target already exists"


def rename_episode(
        source: Path,
        context: SeasonContext,
        episode_number: int,
        config: Config,
        lookup: EpisodeLookup | None = None,
        prompt: Prompt = system_util.ask_yes_no,
) -> RenameResult:
    """Rename (or preview) a single episode file."""
    metadata = lookup(context, episode_number, source) if lookup else None
    target = core.build_target(source, context, episode_number, config, metadata)

    proceed, reason = _resolve_collision(source, target, config, prompt)
    if not proceed:
        logger.log(
            "rename.skip",
            LogLevel.WARN if reason != "already named" else LogLevel.DEBUG,
            file=shorten_path(source),
            target=shorten_path(target),
            reason=reason,
        )
        return RenameResult(source, target, STATUS_SKIP, reason)

    if config.verbose or config.dry_run:
        _report(source, target)

    if config.dry_run:
        return RenameResult(source, target, STATUS_DRY_RUN)

    try:
        # replace() overwrites an existing target the operator agreed to lose
        source.replace(target)
    except OSError as e:
        raise RenameFailedError(source, target, e) from e

    if config.log_changes:
        change_log.append_change(config.log_file, source, target)
    return RenameResult(source, target, STATUS_OK)


def _show_progress(config: Config) -> bool:
    return config.progress and not (config.verbose or config.dry_run) and sys.stderr.isatty()


def rename_season(
        season: Season,
        context: SeasonContext,
        episode_start: int,
        config: Config,
        lookup: EpisodeLookup | None = None,
        prompt: Prompt = system_util.ask_yes_no,
) -> list[RenameResult]:
    """
    Rename all episodes of a season, numbering them from `episode_start`.

    The episode counter advances for every file, skipped ones included.
    """
    results = []
    episodes = tqdm(
        season.episodes,
        desc=f"Season {context.season_number}",
        unit="file",
        leave=False,
        disable=not _show_progress(config),
    )
    for episode_number, source in enumerate(episodes, start=episode_start):
        results.append(rename_episode(source, context, episode_number, config, lookup, prompt))
    return results


def rename_directory(
        config: Config,
        client: tvdb.TvdbClient | None = None,
        prompt: Prompt = system_util.ask_yes_no,
) -> list[RenameResult]:
    """Rename the episodes of the configured series directory.

    A flat directory is numbered from the configured episode start using the
    configured season number. In a season-structured directory every season
    directory is renamed in ascending season order, each numbered from 1 and
    renamed in place.
    Nothing is looked up or logged when the scan finds no episode.

    Args:
        config (Config): Run configuration.
        client (TvdbClient | None): Metadata client, created on demand when omitted.
        prompt (Callable): Yes/no question asked before overwriting in interactive mode.

    Returns:
        list[RenameResult]: One result per episode file, in rename order.

    Raises:
        RenamerError: On the first fatal error; earlier renames are kept.
    """
    directory = Path(config.directory)
    if not directory.is_dir():
        raise ConfigError(f"{directory} is not a directory")

    scan = scanner.scan_directory(
        directory,
        config.season_number,
        detect_seasons=config.automatic,
        mime_dir=config.mime_dir,
    )
    seasons = (scan.season,) if isinstance(scan, FlatDirectory) else scan.seasons
    if not any(season.episodes for season in seasons):
        return []

    lookup = make_episode_lookup(config, client)

    if config.log_changes and not config.dry_run:
        change_log.append_time(config.log_file)

    results: list[RenameResult] = []
    if isinstance(scan, FlatDirectory):
        context = SeasonContext(config.series_name, scan.season.season_number)
        results.extend(rename_season(scan.season, context, config.episode_start, config, lookup, prompt))
    else:
        for season in seasons:
            context = SeasonContext(config.series_name, season.season_number, destination=season.directory)
            logger.log("rename.season", LogLevel.DEBUG, season=season.season_number, episodes=len(season.episodes))
            results.extend(rename_season(season, context, 1, config, lookup, prompt))

    logger.log(
        "rename.end",
        LogLevel.INFO,
        directory=str(directory),
        ok=sum(1 for r in results if r.status == STATUS_OK),
        skip=sum(1 for r in results if r.status == STATUS_SKIP),
        dry_run=sum(1 for r in results if r.status == STATUS_DRY_RUN),
    )
    return results
