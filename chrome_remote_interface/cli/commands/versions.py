"""Versions command for chrome-remote-interface CLI."""

from __future__ import annotations

import os
from pathlib import Path

import click
from rich.console import Console

from chrome_remote_interface.cli.help_formatter import RichCommand
from chrome_remote_interface.ingestion.loader import (
    DEFAULT_PROTOCOL_VERSION,
    PROTOCOL_ENV_KEY,
    PROTOCOL_VERSIONS,
    SchemaLoader,
    get_default_version,
)

console = Console()


@click.command(cls=RichCommand)
@click.option(
    "--protocol-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Also report which versions have a protocol.json in this directory",
)
def versions(protocol_dir: Path | None) -> None:
    """List the supported protocol versions.

    The active version comes from CRI_PROTOCOL_VERSION; unknown or
    missing values fall back to tot (tip-of-tree).
    """
    active = get_default_version()
    available = (
        SchemaLoader(protocol_dir).available_versions() if protocol_dir else None
    )
    for version in PROTOCOL_VERSIONS:
        marker = " [green](active)[/green]" if version == active else ""
        default = " [dim](default)[/dim]" if version == DEFAULT_PROTOCOL_VERSION else ""
        missing = (
            " [red](missing)[/red]"
            if available is not None and version not in available
            else ""
        )
        console.print(f"  {version}{default}{marker}{missing}", highlight=False)

    env_value = os.environ.get(PROTOCOL_ENV_KEY)
    if env_value is None:
        console.print(f"\n[dim]{PROTOCOL_ENV_KEY} is not set[/dim]")
    elif env_value not in PROTOCOL_VERSIONS:
        console.print(
            f"\n[yellow]{PROTOCOL_ENV_KEY}={env_value!r} is not a known version, "
            f"using '{DEFAULT_PROTOCOL_VERSION}'[/yellow]"
        )
    else:
        console.print(f"\n[dim]{PROTOCOL_ENV_KEY}={env_value}[/dim]")
