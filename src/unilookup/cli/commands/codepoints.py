"""Commands that list codepoints: identify, search and print."""

import logging
from typing import Tuple

import click

from ...core import NoMatchesError, UniError
from ...core import identify_text, resolve_identifiers, search_names
from ...unidata import DataUnavailableError
from ..display import display_codepoints
from .app import UniApp

logger = logging.getLogger(__name__)


@click.command("identify")
@click.argument("strings", nargs=-1)
@click.pass_obj
def identify_command(app: UniApp, strings: Tuple[str, ...]) -> None:
    """Identify all the characters in the given strings."""
    text = "".join(app.read_args(strings))

    try:
        found = identify_text(app.repository, text)
    except (UniError, DataUnavailableError) as e:
        app.fail(e)

    display_codepoints(app.out, found, quiet=app.quiet, raw=app.raw)


@click.command("search")
@click.argument("words", nargs=-1)
@click.pass_obj
def search_command(app: UniApp, words: Tuple[str, ...]) -> None:
    """Search codepoint names for all of the words."""
    terms = app.read_args(words)

    try:
        found = search_names(app.repository, terms)
    except NoMatchesError as e:
        app.fail(e, show=not app.quiet)
    except (ValueError, UniError, DataUnavailableError) as e:
        app.fail(e)

    logger.debug("Search for %s matched %d codepoints", terms, len(found))
    display_codepoints(app.out, found, quiet=app.quiet, raw=app.raw, sort=True)


@click.command("print")
@click.argument("idents", nargs=-1)
@click.pass_obj
def print_command(app: UniApp, idents: Tuple[str, ...]) -> None:
    """Print characters by codepoint, range, category, or block.

    \b
        Codepoint    U+2042, U+2042..U+2050
        Category     OtherPunctuation, Po
        Block        GeneralPunctuation
        all          Everything

    Names are matched case insensitive. Spaces and commas are optional and
    can be replaced with an underscore. "Po", "po", "punctuation, OTHER",
    "Punctuation_other", and PunctuationOther are all identical.
    """
    tokens = app.read_args(idents)

    try:
        found = resolve_identifiers(app.repository, tokens)
    except NoMatchesError as e:
        app.fail(e, show=not app.quiet)
    except (UniError, DataUnavailableError) as e:
        app.fail(e)

    display_codepoints(app.out, found, quiet=app.quiet, raw=app.raw, sort=True)
