"""Query resolution: identifiers, names, characters and emoji."""

from .emoji import (
    SKIN_TONES,
    EmojiRow,
    EmojiSelection,
    compose,
    select_emojis,
    tone_modifier,
)
from .errors import (
    InvalidToneError,
    NoMatchesError,
    ParseError,
    UniError,
    UnknownCodepointError,
    UnknownGroupError,
)
from .identifiers import classify, resolve_identifier, resolve_identifiers
from .lookup import identify_text, search_names

__all__ = [
    "SKIN_TONES",
    "EmojiRow",
    "EmojiSelection",
    "InvalidToneError",
    "NoMatchesError",
    "ParseError",
    "UniError",
    "UnknownCodepointError",
    "UnknownGroupError",
    "classify",
    "compose",
    "identify_text",
    "resolve_identifier",
    "resolve_identifiers",
    "search_names",
    "select_emojis",
    "tone_modifier",
]
