"""CLI utility functions for chrome-remote-interface."""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import NoReturn

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.tree import Tree

from chrome_remote_interface.config import CRIConfig, find_config, load_config
from chrome_remote_interface.errors import (
    CRIError,
    SchemaMalformed,
    SchemaNotFound,
    UnresolvedReference,
)

console = Console()

SAMPLE_CONFIG = """
[dim]protocol_dir: ./priv
output: ./chrome_remote_interface/rpc
package: chrome_remote_interface.rpc[/dim]
"""


def load_cli_config(
    config: Path | None, debug: bool, version: str | None = None
) -> tuple[CRIConfig, Path]:
    """Load the config for a command, translating failures to ClickException.

    Args:
        config: Explicit --config path, or None to search for cri.yml
        debug: Print full tracebacks
        version: --protocol-version override

    Returns:
        Tuple of (config, config path)
    """
    try:
        if config:
            config_path = config
        else:
            found_config = find_config()
            if found_config is None:
                console.print("[red]No cri.yml found[/red]")
                console.print("\nCreate a cri.yml file:")
                console.print(SAMPLE_CONFIG)
                raise click.ClickException("Config file not found")
            config_path = found_config
        cfg = load_config(config_path)
    except FileNotFoundError as e:
        fail("Config file not found", e, debug)
    except yaml.YAMLError as e:
        fail("YAML parsing error", e, debug)
    except ValidationError as e:
        fail("Config validation error", e, debug)

    return cfg.with_version(version), config_path


def fail(label: str, error: Exception, debug: bool) -> NoReturn:
    """Print an error (with traceback in debug mode) and abort the command."""
    if debug:
        console.print(traceback.format_exc())
    console.print(f"[red]{label}:[/red] {error}")
    raise click.ClickException(str(error))


def error_label(error: CRIError) -> str:
    """Human label for a generation error."""
    if isinstance(error, SchemaNotFound):
        return "Protocol schema not found"
    if isinstance(error, SchemaMalformed):
        return "Malformed protocol schema"
    if isinstance(error, UnresolvedReference):
        return "Unresolved reference"
    return "Generation error"


def build_file_tree(files: list[Path], output_path: Path) -> Tree:
    """Build a Rich Tree of the files in the generated package.

    Args:
        files: Paths of written (or, in a dry run, planned) files
        output_path: The package directory they live in

    Returns:
        Rich Tree object for display
    """
    tree = Tree(f"[bold]{output_path.name}/[/bold]")
    for path in sorted(files, key=lambda p: p.name.lower()):
        if path.parent != output_path:
            continue
        name = path.name
        if name == "__init__.py":
            style = "magenta"
        elif name.startswith("."):
            style = "dim"
        else:
            style = "green"
        tree.add(f"[{style}]{name}[/{style}]")
    return tree
