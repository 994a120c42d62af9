"""Command-line interface for chrome-remote-interface."""

from __future__ import annotations

import click

from chrome_remote_interface.cli import RichGroup
from chrome_remote_interface.cli.commands import generate, validate, versions


@click.group(cls=RichGroup)
@click.version_option(package_name="chrome-remote-interface")
def cli() -> None:
    """Generate a Python client API from the Chrome DevTools Protocol.

    Config-driven generation:

        $ cri generate

    Or with explicit config:

        $ cri generate --config cri.yml
    """
    pass


cli.add_command(generate)
cli.add_command(validate)
cli.add_command(versions)


if __name__ == "__main__":
    cli()
