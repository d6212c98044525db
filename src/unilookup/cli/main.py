"""Command-line interface for the Unicode lookup application.

This is the main entry point that delegates to command modules.
"""

from pathlib import Path
from typing import Any, List, Optional

import click

from ..config import get_config
from ..utils.logging_config import configure_third_party_loggers, setup_logging
from .commands import (
    UniApp,
    emoji_command,
    identify_command,
    print_command,
    search_command,
)

ALIASES = {
    "i": "identify",
    "s": "search",
    "p": "print",
    "e": "emoji",
    "h": "help",
}


class AliasedGroup(click.Group):
    """Group that accepts one-letter aliases and any case for commands."""

    def get_command(
        self, ctx: click.Context, cmd_name: str
    ) -> Optional[click.Command]:
        name = cmd_name.lower()
        return super().get_command(ctx, ALIASES.get(name, name))

    def resolve_command(self, ctx: click.Context, args: List[str]) -> Any:
        # Report the canonical name rather than the alias
        _, cmd, args = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, args


@click.group(
    cls=AliasedGroup, context_settings={"help_option_names": ["-h", "--help"]}
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help='Quiet output; no header, "no matches", etc.',
)
@click.option(
    "-r",
    "--raw",
    is_flag=True,
    help="Raw output; don't substitute control characters or mark combining "
    "characters with ◌. Control characters may mangle the output.",
)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set logging level",
)
@click.option("--log-file", type=click.Path(), help="Log to file")
@click.pass_context
def cli(ctx: Any, quiet: bool, raw: bool, log_level: str, log_file: str) -> None:
    """Print Unicode information about characters.

    Commands may be abbreviated to their first letter; with no arguments a
    command reads one argument per line from stdin.
    """
    setup_logging(log_level=log_level, log_file=Path(log_file) if log_file else None)
    configure_third_party_loggers()

    ctx.obj = UniApp(get_config(), quiet=quiet, raw=raw)


@click.command("help")
@click.pass_context
def help_command(ctx: click.Context) -> None:
    """Show this help."""
    click.echo(ctx.parent.get_help() if ctx.parent else ctx.get_help())


cli.add_command(identify_command)
cli.add_command(search_command)
cli.add_command(print_command)
cli.add_command(emoji_command)
cli.add_command(help_command)


if __name__ == "__main__":
    cli()
