"""Generate command for chrome-remote-interface CLI."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from chrome_remote_interface.cli.help_formatter import RichCommand
from chrome_remote_interface.cli.utils import (
    build_file_tree,
    error_label,
    fail,
    load_cli_config,
)
from chrome_remote_interface.core.builder import run_generate
from chrome_remote_interface.errors import CRIError

console = Console()


@click.command(cls=RichCommand)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to cri.yml config file (auto-detected if not specified)",
)
@click.option(
    "--protocol-version",
    "-p",
    help="Protocol version (1-2, 1-3, tot); overrides config and CRI_PROTOCOL_VERSION",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Preview what would be generated without writing files",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show detailed output",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Show full exception stacktraces for troubleshooting",
)
def generate(
    config: Path | None,
    protocol_version: str | None,
    dry_run: bool,
    verbose: bool,
    debug: bool,
) -> None:
    """Generate the rpc package from the Chrome DevTools Protocol schema.

    Reads configuration from cri.yml and writes:
    - One module per domain ({Domain}.py) with types and command functions
    - __init__.py with PROTOCOL_VERSION and DOMAINS
    - .cri-manifest.json (unless options.manifest is false)

    Examples:

        # Generate using cri.yml in current directory
        cri generate

        # Preview without writing files
        cri generate --dry-run

        # Generate against a released protocol version
        cri generate --protocol-version 1-3

        # Show full stacktraces for debugging
        cri generate --debug
    """
    cfg, config_path = load_cli_config(config, debug, protocol_version)

    console.print()
    console.print("[bold]chrome-remote-interface[/bold]", highlight=False)
    console.print()
    console.print(f"[dim]Config:[/dim]   {config_path}")

    if dry_run:
        console.print("[yellow]Dry run mode[/yellow]")
        console.print()

    try:
        files, stats, schema = run_generate(cfg, dry_run=dry_run, verbose=verbose)
    except CRIError as e:
        fail(error_label(e), e, debug)
    except OSError as e:
        fail("File error", e, debug)

    # Summary line
    action = "Would generate" if dry_run else "Generated"
    console.print(
        f"\n[bold green]{action} {stats.files} files[/bold green] "
        f"[dim](protocol {schema.version}: {stats.domains} domains, "
        f"{stats.types} types, {stats.commands} commands)[/dim]"
    )

    # Show changes and the file tree in verbose/dry-run mode
    if verbose or dry_run:
        if stats.modified:
            console.print(f"[yellow]Changed:[/yellow] {', '.join(stats.modified)}")
        if stats.removed:
            label = "Removed" if cfg.options.clean else "No longer generated"
            console.print(f"[yellow]{label}:[/yellow] {', '.join(stats.removed)}")
        console.print()
        console.print(build_file_tree(files, cfg.output_path))
