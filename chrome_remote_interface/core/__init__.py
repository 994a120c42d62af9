"""Core generation logic shared by the CLI commands."""

from chrome_remote_interface.core.builder import (
    GenerationStatistics,
    collect_statistics,
    load_schema,
    run_generate,
)

__all__ = [
    "GenerationStatistics",
    "collect_statistics",
    "load_schema",
    "run_generate",
]
