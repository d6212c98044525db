"""CLI display and formatting utilities."""

from .formatters import (
    display_codepoints,
    display_emoji,
    display_emoji_groups,
    fmt_char,
    format_codepoint,
)

__all__ = [
    "display_codepoints",
    "display_emoji",
    "display_emoji_groups",
    "fmt_char",
    "format_codepoint",
]
