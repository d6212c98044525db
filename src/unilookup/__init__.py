"""Unicode lookup tool.

Identify characters, search codepoint names, and print codepoints by
value, range, category or block. Emoji can be listed by group with an
optional skin tone.
"""

__version__ = "1.0.0"

from .config import Config
from .models import Block, Codepoint, Emoji
from .unidata import UnicodeRepository, get_repository

__all__ = [
    "Block",
    "Codepoint",
    "Config",
    "Emoji",
    "UnicodeRepository",
    "get_repository",
]
