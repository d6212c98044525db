"""Emoji command."""

from typing import Optional, Tuple

import click

from ...core import InvalidToneError, UniError, select_emojis, tone_modifier
from ...unidata import DataUnavailableError
from ..display import display_emoji, display_emoji_groups
from .app import UniApp


@click.command("emoji")
@click.option(
    "-t",
    "-tone",
    "--tone",
    "tone",
    default=None,
    metavar="TONE",
    help="Skin tone: light, mediumlight, medium, mediumdark, or dark",
)
@click.argument("words", nargs=-1)
@click.pass_obj
def emoji_command(app: UniApp, tone: Optional[str], words: Tuple[str, ...]) -> None:
    """Print emojis by group name.

    \b
         all              Everything.
         groups           All group and subgroup names.
         <anything else>  Emojis matching the group or subgroup.

    The skin tone modifier is applied on supported emojis if --tone is
    given. Note: emojis may consist of multiple codepoints!
    """
    try:
        tone_modifier(tone)
    except InvalidToneError as e:
        raise click.BadParameter(str(e), param_hint="'--tone'") from e

    tokens = [w.lower() for w in app.read_args(words)]

    try:
        selection = select_emojis(app.repository, tokens, tone)
    except (UniError, DataUnavailableError) as e:
        app.fail(e)

    if selection.group_tree is not None:
        display_emoji_groups(app.out, selection.group_tree)
        return
    display_emoji(app.out, selection.rows)
