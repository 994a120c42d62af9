"""Validate command for chrome-remote-interface CLI."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from chrome_remote_interface.adapters.python import PythonGenerator
from chrome_remote_interface.cli.help_formatter import RichCommand
from chrome_remote_interface.cli.utils import error_label, fail, load_cli_config
from chrome_remote_interface.core.builder import collect_statistics, load_schema
from chrome_remote_interface.errors import CRIError

console = Console()


@click.command(cls=RichCommand)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to cri.yml config file",
)
@click.option(
    "--protocol-version",
    "-p",
    help="Protocol version (1-2, 1-3, tot); overrides config and CRI_PROTOCOL_VERSION",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Show full exception stacktraces for troubleshooting",
)
def validate(config: Path | None, protocol_version: str | None, debug: bool) -> None:
    """Validate configuration and the protocol schema.

    Checks that:
    - cri.yml is valid
    - The protocol file for the selected version exists and decodes
    - Every domain, type and command builds and renders

    Nothing is written.

    ## Examples

    Validate using cri.yml in current directory:

        $ cri validate

    Validate before generating:

        $ cri validate && cri generate
    """
    cfg, config_path = load_cli_config(config, debug, protocol_version)
    console.print(f"[green]Config valid:[/green] {config_path}")

    try:
        schema = load_schema(cfg)
        console.print(
            f"[green]Protocol valid:[/green] version '{schema.version}', "
            f"{len(schema.domains)} domains"
        )
        PythonGenerator(package=cfg.package).generate_modules(schema)
    except CRIError as e:
        fail(error_label(e), e, debug)
    except OSError as e:
        fail("File error", e, debug)

    stats = collect_statistics(schema)
    console.print(
        f"[green]Generation valid:[/green] {stats.types} types, "
        f"{stats.commands} commands"
    )
    console.print("\n[bold green]All validations passed[/bold green]")
