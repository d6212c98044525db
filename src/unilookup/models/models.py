"""Data models for the Unicode lookup application."""

from dataclasses import dataclass
from typing import NamedTuple, Tuple

from pydantic import BaseModel, ConfigDict

COMBINING_CATEGORIES = frozenset({"Mn", "Mc", "Me"})


class Codepoint(NamedTuple):
    """A single assigned codepoint."""

    code: int
    name: str
    category: str
    block: str

    @property
    def char(self) -> str:
        """Get the codepoint as a one-character string."""
        return chr(self.code)

    @property
    def is_combining(self) -> bool:
        """Check if the codepoint is a combining mark."""
        return self.category in COMBINING_CATEGORIES

    @property
    def is_printable(self) -> bool:
        """Check if the codepoint has a visible glyph on its own.

        Letters, marks, numbers, punctuation, symbols and the ASCII space.
        """
        return self.category[0] in "LMNPS" or self.code == 0x20

    @property
    def label(self) -> str:
        """Get the U+XXXX label."""
        return f"U+{self.code:04X}"


@dataclass(frozen=True)
class Block:
    """A named, contiguous range of codepoints."""

    start: int
    end: int
    name: str

    def __contains__(self, code: object) -> bool:
        return isinstance(code, int) and self.start <= code <= self.end


class Emoji(BaseModel):
    """Represents one emoji from the emoji test data."""

    sequence: Tuple[int, ...]
    name: str
    group: str
    subgroup: str
    supports_skin_tone: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def text(self) -> str:
        """Get the base sequence as a string."""
        return "".join(chr(cp) for cp in self.sequence)

    def __str__(self) -> str:
        return self.text
