"""
Tokenizer for episode naming templates.

A template is plain text with placeholders written as `${Name}`, for example
`${Series} ${Season}x${Episode} ${TVDB_Title}`. Tokenizing turns it into an
ordered list of tokens: one `LiteralChar` per character of plain text and one
`Placeholder` per recognized placeholder.

Malformed or unknown placeholders are never an error. Their characters are
kept as literal text, so `${invalid}` renders as "${invalid}".

Adding a placeholder means adding a `Placeholder` member here and a branch in
`formatter.render_filename`.
"""
from dataclasses import dataclass
from enum import Enum

from tvshow.utils.constants import DEFAULT_TEMPLATE


class Placeholder(Enum):
    """Named placeholders, valued by the name written inside `${...}`."""
    SERIES = "Series"
    SEASON = "Season"
    EPISODE = "Episode"
    TITLE = "TVDB_Title"
    FIRST_AIRED = "TVDB_FirstAired"


@dataclass(frozen=True)
class LiteralChar:
    """A single character of literal template text."""
    char: str


TemplateToken = LiteralChar | Placeholder

METADATA_PLACEHOLDERS = frozenset({Placeholder.TITLE, Placeholder.FIRST_AIRED})

_PLACEHOLDERS = {f"${{{p.value}}}": p for p in Placeholder}


def match_token(pattern: str) -> Placeholder | None:
    """Match a complete `${Name}` pattern against the recognized placeholders."""
    return _PLACEHOLDERS.get(pattern)


def _literals(text: str) -> list[TemplateToken]:
    return [LiteralChar(c) for c in text]


def tokenize_template(template: str) -> list[TemplateToken]:
    """Convert a template string into an ordered list of tokens."""
    tokens: list[TemplateToken] = []
    pattern = ""
    matching = False

    for character in template:
        if not matching:
            if character == "$":
                matching = True
                pattern = "$"
            else:
                tokens.append(LiteralChar(character))
        elif character == "$":
            tokens.extend(_literals(pattern + character))
            matching = False
        elif character == "{" and pattern == "$":
            pattern += character
        elif character == "{":
            tokens.extend(_literals(pattern + character))
            matching = False
        elif character == "}":
            pattern += character
            placeholder = match_token(pattern)
            if placeholder is not None:
                tokens.append(placeholder)
            else:
                tokens.extend(_literals(pattern))
            matching = False
        else:
            pattern += character

    # An unterminated capture is kept as text
    if matching:
        tokens.extend(_literals(pattern))
    return tokens


def default_template() -> list[TemplateToken]:
    """The template used when none is given."""
    return tokenize_template(DEFAULT_TEMPLATE)


def uses_metadata(tokens) -> bool:
    """Whether rendering the tokens needs an episode lookup."""
    return any(token in METADATA_PLACEHOLDERS for token in tokens)
