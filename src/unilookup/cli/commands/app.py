"""Shared state for CLI commands."""

import logging
import sys
from typing import List, NoReturn, Optional, Sequence, TextIO

import click
from rich.console import Console
from rich.markup import escape

from ...config import Config
from ...unidata import UnicodeRepository, get_repository

logger = logging.getLogger(__name__)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


class UniApp:
    """Options and resources shared by every command."""

    def __init__(
        self,
        config: Optional[Config] = None,
        quiet: bool = False,
        raw: bool = False,
    ) -> None:
        """Initialize the application.

        Args:
            config: Application configuration; read from the environment if
                not given
            quiet: Suppress headers, summaries, notices and "no matches"
            raw: Print characters without display substitutions
        """
        self.config = config or Config()
        self.quiet = quiet
        self.raw = raw
        self._repository: Optional[UnicodeRepository] = None

    @property
    def repository(self) -> UnicodeRepository:
        """Get the Unicode repository, loading it on first use."""
        if self._repository is None:
            self._repository = get_repository(self.config)
        return self._repository

    @property
    def out(self) -> TextIO:
        """Get the stream query results are written to."""
        return sys.stdout

    def read_args(self, args: Sequence[str]) -> List[str]:
        """Use the command line arguments, or one argument per line of stdin."""
        if args:
            return list(args)

        if not self.quiet:
            err_console.print("uni: reading from stdin...")
        data = sys.stdin.read()
        return data.rstrip("\n").split("\n")

    def fail(self, error: Exception, show: bool = True) -> NoReturn:
        """Report an error and exit with status 1."""
        logger.debug("Command failed: %r", error)
        if show:
            err_console.print(f"[red]uni:[/red] {escape(str(error))}")
        click.get_current_context().exit(1)
