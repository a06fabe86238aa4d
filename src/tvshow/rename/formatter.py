# python
"""
Rendering of template tokens into an episode filename.

Each token contributes text in order:

- literal characters are copied as-is,
- `${Series}` gives the series name,
- `${Season}` gives the season number without padding,
- `${Episode}` gives the episode number zero-padded to the configured width,
- `${TVDB_Title}` gives the episode title (empty without metadata),
- `${TVDB_FirstAired}` gives the air date as "YYYY-MM-DD" (empty when unknown).

Example:
    render_filename(default_template(), SeasonContext("Show", 1), 3, 2,
                    EpisodeMetadata("Pilot")) -> "Show 1x03 Pilot"
"""
from collections.abc import Iterable
from datetime import date

from tvshow.rename.models import EpisodeMetadata, SeasonContext
from tvshow.rename.tokenizer import LiteralChar, Placeholder, TemplateToken
from tvshow.utils import PAD_CHAR
from tvshow.utils.number_util import to_padded_string


def format_air_date(aired: date) -> str:
    """Format an air date as YYYY-MM-DD."""
    return f"{aired.year}-{to_padded_string(aired.month, '0', 2)}-{to_padded_string(aired.day, '0', 2)}"


def render_filename(
        tokens: Iterable[TemplateToken],
        context: SeasonContext,
        episode_number: int,
        pad_length: int,
        metadata: EpisodeMetadata | None = None,
) -> str:
    """Render the tokens of a template into a filename without extension."""
    parts = []
    for token in tokens:
        if isinstance(token, LiteralChar):
            parts.append(token.char)
        elif token is Placeholder.SERIES:
            parts.append(context.series_name)
        elif token is Placeholder.SEASON:
            parts.append(str(context.season_number))
        elif token is Placeholder.EPISODE:
            parts.append(to_padded_string(episode_number, PAD_CHAR, pad_length))
        elif token is Placeholder.TITLE:
            if metadata is not None:
                parts.append(metadata.title)
        elif token is Placeholder.FIRST_AIRED:
            if metadata is not None and metadata.first_aired is not None:
                parts.append(format_air_date(metadata.first_aired))
        else:
            raise TypeError(f"unknown template token: {token!r}")
    return "".join(parts)
