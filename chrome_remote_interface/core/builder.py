"""Core generation logic for chrome-remote-interface.

This module wires the pipeline together: load the configured protocol
version, build the schema, render the rpc package and write it out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from chrome_remote_interface.adapters.python import PythonGenerator
from chrome_remote_interface.domain import Schema
from chrome_remote_interface.ingestion import SchemaBuilder
from chrome_remote_interface.manifest import MANIFEST_FILENAME, GenerationManifest

if TYPE_CHECKING:
    from chrome_remote_interface.config import CRIConfig

# Module-level console for output
console = Console()


@dataclass
class GenerationStatistics:
    """Statistics collected during a generation run."""

    domains: int = 0
    types: int = 0
    commands: int = 0
    experimental_domains: int = 0
    files: int = 0
    # Relative to the previous run's manifest, when there is one
    modified: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)


def collect_statistics(schema: Schema) -> GenerationStatistics:
    """Count what a schema will generate (files are counted by the caller)."""
    stats = GenerationStatistics()
    for domain in schema.domains:
        stats.domains += 1
        stats.types += len(domain.types)
        stats.commands += len(domain.commands)
        if domain.experimental:
            stats.experimental_domains += 1
    return stats


def load_schema(config: CRIConfig, verbose: bool = True) -> Schema:
    """Load the configured protocol version, restricted to configured domains.

    Raises:
        SchemaNotFound: If the protocol file for the version is missing
        SchemaMalformed: If the document or a domain in it is invalid
        UnresolvedReference: If a ``$ref`` cannot be decomposed
    """
    schema = SchemaBuilder.from_protocol_dir(
        config.protocol_path, config.version, verbose=verbose
    )
    missing = [name for name in config.domains if schema.get_domain(name) is None]
    if missing:
        console.print(
            f"[yellow]Domains not in protocol '{schema.version}':[/yellow] "
            f"{', '.join(missing)}"
        )
    return schema.select(config.domains)


def run_generate(
    config: CRIConfig,
    dry_run: bool = False,
    verbose: bool = False,
) -> tuple[list[Path], GenerationStatistics, Schema]:
    """Execute a generation run.

    Args:
        config: Parsed CRIConfig
        dry_run: If True, don't write files
        verbose: If True, show detailed output

    Returns:
        Tuple of (list of generated file paths, statistics, schema)
    """
    console.print(f"[dim]Protocol:[/dim] {config.protocol_path}")
    console.print(f"[dim]Output:[/dim]   {config.output_path}")

    schema = load_schema(config)
    stats = collect_statistics(schema)

    if verbose:
        for domain in schema.domains:
            marker = " [yellow](experimental)[/yellow]" if domain.experimental else ""
            console.print(
                f"  [dim]-[/dim] {domain.name}{marker} "
                f"[dim]{len(domain.types)} types, {len(domain.commands)} commands[/dim]"
            )

    generator = PythonGenerator(package=config.package)
    files = generator.generate(schema)
    previous = GenerationManifest.from_file(config.output_path / MANIFEST_FILENAME)
    if previous is not None:
        outputs = generator.build_manifest(schema, files).outputs
        stats.modified = previous.find_modified_files(outputs)
        stats.removed = previous.find_orphaned_files(outputs)

    if dry_run:
        paths = [config.output_path / name for name in files]
    else:
        paths = generator.generate_and_write(
            schema,
            config.output_path,
            manifest=config.options.manifest,
            clean=config.options.clean,
        )

    stats.files = len(paths)
    return paths, stats, schema
