"""Errors raised while resolving queries.

Every error keeps the offending input token verbatim in ``token`` so the
command line can report exactly what failed.
"""

import json


def _quote(token: str) -> str:
    return json.dumps(token, ensure_ascii=False)


class UniError(Exception):
    """Base class for query errors."""

    def __init__(self, message: str, token: str) -> None:
        super().__init__(message)
        self.token = token


class ParseError(UniError):
    """Token isn't a codepoint, range, category, block or "all"."""

    def __init__(self, token: str) -> None:
        super().__init__(f"unknown identifier: {_quote(token)}", token)


class UnknownCodepointError(UniError):
    """A value has no assigned codepoint."""

    def __init__(self, code: int, token: str) -> None:
        super().__init__(f"unknown codepoint: U+{code:04X}", token)
        self.code = code


class UnknownGroupError(UniError):
    """No emoji group or subgroup contains the token."""

    def __init__(self, token: str) -> None:
        super().__init__(f"no such emoji group or subgroup: {_quote(token)}", token)


class InvalidToneError(UniError):
    """Unknown skin tone name."""

    def __init__(self, token: str) -> None:
        super().__init__(f"invalid skin tone: {_quote(token)}", token)


class NoMatchesError(UniError):
    """The query was valid but nothing matched."""

    def __init__(self, token: str = "") -> None:
        super().__init__("no matches", token)
