#!/usr/bin/env python3
"""
tv-renamer: rename the episodes of a TV series to a consistent naming scheme.

Renames all videos in a directory according to their season number and episode
count, optionally adding episode titles and air dates from TheTVDB. Season
directories ("Season 1", "Specials", ...) are detected with --automatic and
renamed one season at a time.
"""

import argparse
import sys
from pathlib import Path

import tvshow as tvshow_module
from tvshow import rename
from tvshow.errors import ConfigError, RenamerError
from tvshow.utils import LogLevel, logger, system_util
from tvshow.utils.constants import (
    CHANGE_LOG_FILE,
    DEFAULT_EPISODE_START,
    DEFAULT_LANGUAGE,
    DEFAULT_PAD_LENGTH,
    DEFAULT_SEASON_NUMBER,
    MIME_DIR,
    TOOL_NAME,
)

EPILOG = """
Examples:
  Inside a directory named after the series, holding one.mkv two.mkv three.mkv:
    %(prog)s --no-tvdb            -> "TV Series 1x01.mkv" "TV Series 1x02.mkv" ...

  Season directories can be detected automatically:
    %(prog)s "TV Series" -a       -> "TV Series/Season1/TV Series 1x01 <title>.mkv" ...

  Custom naming templates use ${Series}, ${Season}, ${Episode}, ${TVDB_Title}
  and ${TVDB_FirstAired}:
    %(prog)s -t "${Series} S${Season}E${Episode} - ${TVDB_Title}" -p 2

It is recommended to use --dry-run first. Existing targets are skipped unless
--interactive is given and the overwrite is confirmed.
"""


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"`{value}` is not a number")
    if number < 0:
        raise argparse.ArgumentTypeError(f"`{value}` is negative")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description="Rename TV series episodes by season number and episode count, "
                    "with optional episode titles from TheTVDB.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("directory", nargs="?", help="Directory of the series (default: current directory)")
    parser.add_argument("-a", "--automatic", action="store_true",
                        help="Infer season directories and the series name from the directory structure")
    parser.add_argument("-d", "--dry-run", action="store_true",
                        help="Print the changes that would be made without making them")
    parser.add_argument("-n", "--series-name", help="Name of the series (default: name of the directory)")
    parser.add_argument("-s", "--season-number", type=_non_negative_int, default=DEFAULT_SEASON_NUMBER,
                        help=f"Season number of a directory without season folders (default: {DEFAULT_SEASON_NUMBER})")
    parser.add_argument("-e", "--episode-start", type=_non_negative_int, default=DEFAULT_EPISODE_START,
                        help=f"Episode number to start counting from (default: {DEFAULT_EPISODE_START})")
    parser.add_argument("-p", "--pad-length", type=_non_negative_int, default=DEFAULT_PAD_LENGTH,
                        help=f"Minimum number of digits of episode numbers (default: {DEFAULT_PAD_LENGTH})")
    parser.add_argument("-t", "--template", help="Naming template (default: \"${Series} ${Season}x${Episode} "
                                                 "${TVDB_Title}\")")
    parser.add_argument("-l", "--log-changes", action="store_true",
                        help=f"Log the renames to a file (default: {CHANGE_LOG_FILE})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print every rename being performed")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="Ask before overwriting an existing file instead of skipping it")
    parser.add_argument("--no-tvdb", action="store_true",
                        help="Do not look up episode titles; title placeholders are left empty")
    parser.add_argument("--language", default=DEFAULT_LANGUAGE,
                        help=f"TheTVDB language for episode titles (default: {DEFAULT_LANGUAGE})")
    parser.add_argument("--log-file", help="Change log location (default: $TV_RENAMER_LOG_FILE or ~/tv-renamer.log)")
    parser.add_argument("--mime-dir", help="shared-mime-info video directory listing the video extensions")
    parser.add_argument("--no-progress", action="store_true", help="Disable progress bars")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {tvshow_module.__version__}")
    return parser


def build_config(args: argparse.Namespace) -> rename.Config:
    """Build the run configuration from parsed arguments."""
    directory = Path(args.directory or Path.cwd()).expanduser().resolve()
    series_name = args.series_name or directory.name
    if not series_name:
        raise ConfigError("no value was set for the series name")

    template = rename.tokenize_template(args.template) if args.template is not None else rename.default_template()
    mime_dir = Path(args.mime_dir).expanduser() if args.mime_dir else MIME_DIR

    return rename.Config(
        directory=directory,
        series_name=series_name,
        season_number=args.season_number,
        episode_start=args.episode_start,
        pad_length=args.pad_length,
        template=tuple(template),
        dry_run=args.dry_run,
        verbose=args.verbose,
        log_changes=args.log_changes,
        automatic=args.automatic,
        interactive=args.interactive,
        tvdb=not args.no_tvdb,
        language=args.language,
        log_file=Path(args.log_file).expanduser() if args.log_file else CHANGE_LOG_FILE,
        mime_dir=mime_dir,
        progress=not args.no_progress,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.set_log_level(LogLevel.DEBUG if args.debug else LogLevel.INFO)

    try:
        config = build_config(args)
        logger.log(
            "rename.start",
            LogLevel.DEBUG,
            directory=str(config.directory),
            series=config.series_name,
            automatic=config.automatic,
            dry_run=config.dry_run,
        )
        results = rename.rename_directory(config)
    except RenamerError as e:
        system_util.die(str(e))
    except KeyboardInterrupt:
        system_util.die("interrupted by user")

    if not results:
        logger.log("rename.complete", LogLevel.INFO, msg="No video files found", directory=str(config.directory))
    return 0


if __name__ == "__main__":
    sys.exit(main())
