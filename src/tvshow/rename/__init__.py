"""
File renaming functionality for TV series.

This package contains utilities to tokenize naming templates, scan series
directories for episodes and season directories, build target filenames and
perform the renames in order.

Package organization:
- tokenizer: Template tokens and the tokenizer turning `${Series} ${Season}x${Episode}`
  style templates into them.
- parser: Season number inference from directory names.
- scanner: Classification of a directory as flat or season-structured and
  deterministic episode enumeration.
- formatter: Rendering of template tokens into a filename.
- core: Target path derivation for an episode file.
- batch: The orchestrator renaming every episode of a series directory.

Public API (top-level exports)
- Tokenizing: `tokenize_template`, `default_template`, `uses_metadata`.
- Parsing: `derive_season_number`.
- Scanning: `scan_directory`.
- Target building: `build_target`.
- Batch processing: `rename_directory`, `rename_season`.

Behavior notes:
- Malformed template placeholders are kept as literal text, never rejected.
- An existing target is skipped and reported, or in interactive mode
  overwritten only after confirmation.
- Fatal errors raise subclasses of `tvshow.errors.RenamerError`.

Example:
    from pathlib import Path
    import tvshow.rename as rename
    config = rename.Config(directory=Path("Show"), series_name="Show", tvdb=False)
    results = rename.rename_directory(config)
"""
# Models
from .models import (
    Config,
    FlatDirectory,
    RenameResult,
    Season,
    SeasonContext,
    SeasonDirectories,
)

# Template tokens
from .tokenizer import (
    LiteralChar,
    Placeholder,
    default_template,
    tokenize_template,
    uses_metadata,
)

# Parsing and scanning
from .parser import derive_season_number
from .scanner import scan_directory

# Target building
from .core import build_target

# Batch processing
from .batch import rename_directory, rename_season

__all__ = [
    # Models
    "Config",
    "FlatDirectory",
    "RenameResult",
    "Season",
    "SeasonContext",
    "SeasonDirectories",
    # Template tokens
    "LiteralChar",
    "Placeholder",
    "default_template",
    "tokenize_template",
    "uses_metadata",
    # Parsing and scanning
    "derive_season_number",
    "scan_directory",
    # Target building
    "build_target",
    # Batch processing
    "rename_directory",
    "rename_season",
]
