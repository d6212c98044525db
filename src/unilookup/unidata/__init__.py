"""Unicode data repository."""

from .categories import CATEGORIES, canonical_name, category_display_name
from .loader import (
    MAX_CODEPOINT,
    NO_BLOCK,
    SKIN_TONE_MODIFIERS,
    DataUnavailableError,
    fetch_data_file,
    parse_blocks,
    parse_emoji_test,
)
from .repository import UnicodeRepository, get_repository

__all__ = [
    "CATEGORIES",
    "MAX_CODEPOINT",
    "NO_BLOCK",
    "SKIN_TONE_MODIFIERS",
    "DataUnavailableError",
    "UnicodeRepository",
    "canonical_name",
    "category_display_name",
    "fetch_data_file",
    "get_repository",
    "parse_blocks",
    "parse_emoji_test",
]
