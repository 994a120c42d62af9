"""Click help formatting for the cri commands.

Plain Click output at a fixed width, so the example blocks in command
docstrings wrap the same on every terminal.
"""

from __future__ import annotations

import click

HELP_WIDTH = 88


class _FixedWidthHelp:
    """Render help with a fixed-width formatter."""

    def get_help(self, ctx: click.Context) -> str:
        formatter = click.HelpFormatter(width=HELP_WIDTH)
        self.format_help(ctx, formatter)  # type: ignore[attr-defined]
        return formatter.getvalue().rstrip("\n")


class RichCommand(_FixedWidthHelp, click.Command):
    """Click command with fixed-width help."""


class RichGroup(_FixedWidthHelp, click.Group):
    """Click group with fixed-width help; subcommands default to RichCommand."""

    command_class = RichCommand
