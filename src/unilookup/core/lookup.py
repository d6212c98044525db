"""Identify characters and search codepoint names."""

import logging
from typing import Iterable, List

from ..models import Codepoint
from ..unidata import UnicodeRepository
from .errors import NoMatchesError, UnknownCodepointError

logger = logging.getLogger(__name__)


def identify_text(repo: UnicodeRepository, text: str) -> List[Codepoint]:
    """Look up every character of a string, in order.

    Raises:
        UnknownCodepointError: For the first character that isn't assigned
    """
    if any(0xD800 <= ord(c) <= 0xDFFF for c in text):
        # Lone surrogates are what undecodable command line bytes turn into.
        logger.warning("input string is not valid UTF-8")

    found = []
    for char in text:
        info = repo.find_codepoint(ord(char))
        if info is None:
            raise UnknownCodepointError(ord(char), char)
        found.append(info)
    return found


def search_names(repo: UnicodeRepository, words: Iterable[str]) -> List[Codepoint]:
    """Find codepoints whose name contains every one of the words.

    Matching is case insensitive. Empty words are ignored.

    Raises:
        ValueError: If there are no words to search for
        NoMatchesError: If no name matches
    """
    terms = [w.upper() for w in words if w]
    if not terms:
        raise ValueError("need search term")

    found = [
        info
        for info in repo.codepoints
        if all(term in info.name for term in terms)
    ]
    if not found:
        raise NoMatchesError(" ".join(terms))
    return found
