"""CLI command modules."""

from .app import UniApp
from .codepoints import identify_command, print_command, search_command
from .emoji import emoji_command

__all__ = [
    "UniApp",
    "emoji_command",
    "identify_command",
    "print_command",
    "search_command",
]
