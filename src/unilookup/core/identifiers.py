"""Resolve print identifiers to codepoints.

An identifier is one of:

    Codepoint    U+2042, U2042, 2042
    Range        U+2042..U+2050, 2042..2050
    Category     OtherPunctuation, Po, "Punctuation, Other"
    Block        GeneralPunctuation, "General Punctuation"
    all          Everything

Names are matched case insensitive; spaces, commas and underscores are
ignored. Tokens are classified first and expanded second, so the order in
which shapes are tried lives in one place (``classify``).
"""

import re
from dataclasses import dataclass
from typing import List, Sequence, Union

from ..models import Block, Codepoint
from ..unidata import UnicodeRepository, canonical_name
from .errors import NoMatchesError, ParseError, UnknownCodepointError

RANGE_SEPARATOR = ".."

_HEX = re.compile(r"[0-9a-f]+")


@dataclass(frozen=True)
class AllCodepoints:
    """Every codepoint in the repository."""


@dataclass(frozen=True)
class CategoryIdent:
    """All codepoints with a general category."""

    category: str


@dataclass(frozen=True)
class BlockIdent:
    """All assigned codepoints in a block."""

    block: Block


@dataclass(frozen=True)
class CodepointIdent:
    """A single codepoint value."""

    code: int


@dataclass(frozen=True)
class RangeIdent:
    """An inclusive range of codepoint values; every value must be assigned."""

    start: int
    end: int


Identifier = Union[AllCodepoints, CategoryIdent, BlockIdent, CodepointIdent, RangeIdent]


def _looks_numeric(canon: str) -> bool:
    return (
        canon.startswith("u")
        or RANGE_SEPARATOR in canon
        or _HEX.fullmatch(canon) is not None
    )


def _parse_hex(half: str, token: str) -> int:
    # "U+2042", "U2042" and "2042" are all the same
    digits = half.lstrip("u").lstrip("+")
    if not _HEX.fullmatch(digits):
        raise ParseError(token)
    return int(digits, 16)


def classify(repo: UnicodeRepository, token: str) -> Identifier:
    """Work out what kind of identifier a token is.

    Args:
        repo: Repository to look category and block names up in
        token: Raw token as typed by the user

    Returns:
        The identifier

    Raises:
        ParseError: If the token isn't any known shape
    """
    canon = canonical_name(token.strip())

    if canon == "all":
        return AllCodepoints()

    category = repo.find_category(canon)
    if category is not None:
        return CategoryIdent(category)

    block = repo.find_block(canon)
    if block is not None:
        return BlockIdent(block)

    if canon and _looks_numeric(canon):
        halves = canon.split(RANGE_SEPARATOR)
        if len(halves) > 2:
            raise ParseError(token)
        start = _parse_hex(halves[0], token)
        if len(halves) == 1:
            return CodepointIdent(start)
        end = _parse_hex(halves[1], token)
        if end < start:
            raise ParseError(token)
        return RangeIdent(start, end)

    raise ParseError(token)


def expand(repo: UnicodeRepository, ident: Identifier, token: str) -> List[Codepoint]:
    """Get the codepoints an identifier refers to, in ascending order.

    A category or block without assigned codepoints gives an empty list.

    Raises:
        UnknownCodepointError: If a codepoint or any value in a range isn't
            assigned
    """
    if isinstance(ident, AllCodepoints):
        found = list(repo.codepoints)
    elif isinstance(ident, CategoryIdent):
        found = repo.codepoints_by_category(ident.category)
    elif isinstance(ident, BlockIdent):
        found = repo.codepoints_in_block(ident.block)
    elif isinstance(ident, CodepointIdent):
        found = _expand_range(repo, ident.code, ident.code, token)
    elif isinstance(ident, RangeIdent):
        found = _expand_range(repo, ident.start, ident.end, token)
    else:
        raise TypeError(f"unexpected identifier: {ident!r}")
    return found


def _expand_range(
    repo: UnicodeRepository, start: int, end: int, token: str
) -> List[Codepoint]:
    # Unlike blocks, a gap in an explicit range is an error.
    found = []
    for code in range(start, end + 1):
        info = repo.find_codepoint(code)
        if info is None:
            raise UnknownCodepointError(code, token)
        found.append(info)
    return found


def resolve_identifier(repo: UnicodeRepository, token: str) -> List[Codepoint]:
    """Resolve one token to its codepoints."""
    return expand(repo, classify(repo, token), token)


def resolve_identifiers(
    repo: UnicodeRepository, tokens: Sequence[str]
) -> List[Codepoint]:
    """Resolve several tokens, concatenating the results in token order.

    Stops at the first token that fails; nothing is returned for the tokens
    that did resolve. Overlapping tokens produce duplicate entries, and a
    token that selects nothing adds nothing.

    Raises:
        NoMatchesError: If the tokens together select nothing
    """
    found: List[Codepoint] = []
    for token in tokens:
        found.extend(resolve_identifier(repo, token))
    if not found:
        raise NoMatchesError(" ".join(tokens))
    return found
