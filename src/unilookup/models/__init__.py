"""Models for the Unicode lookup application."""

from .models import Block, Codepoint, Emoji

__all__ = [
    "Block",
    "Codepoint",
    "Emoji",
]
