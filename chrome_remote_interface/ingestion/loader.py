"""SchemaLoader - selects a protocol version and reads its protocol.json."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from rich.console import Console

from chrome_remote_interface.errors import SchemaMalformed, SchemaNotFound

# Environment variable selecting the protocol version
PROTOCOL_ENV_KEY = "CRI_PROTOCOL_VERSION"

PROTOCOL_VERSIONS = ("1-2", "1-3", "tot")
DEFAULT_PROTOCOL_VERSION = "tot"
PROTOCOL_FILENAME = "protocol.json"

# Diagnostics go to stderr so they never mix with generated output
console = Console(stderr=True)


def select_version(token: str | None) -> str:
    """Map a requested version token onto the allow-list.

    Unknown, empty or missing tokens fall back to tip-of-tree.
    """
    if token is not None and token in PROTOCOL_VERSIONS:
        return token
    return DEFAULT_PROTOCOL_VERSION


def get_default_version() -> str:
    """Get the protocol version from the environment or fall back to tip-of-tree."""
    return select_version(os.environ.get(PROTOCOL_ENV_KEY))


class SchemaLoader:
    """
    Load protocol documents from a versioned directory.

    Layout::

        {protocol_dir}/1-2/protocol.json
        {protocol_dir}/1-3/protocol.json
        {protocol_dir}/tot/protocol.json
    """

    def __init__(self, protocol_dir: str | Path, verbose: bool = True) -> None:
        self.protocol_dir = Path(protocol_dir)
        self.verbose = verbose

    def path_for(self, version: str | None) -> Path:
        """Path of the protocol file for a (resolved) version."""
        return self.protocol_dir / select_version(version) / PROTOCOL_FILENAME

    def load(self, version: str | None = None) -> dict[str, Any]:
        """
        Read and decode the protocol document for ``version``.

        Returns the raw document; it is guaranteed to hold a ``domains`` list.

        Raises:
            SchemaNotFound: If no file exists for the resolved version
            SchemaMalformed: If the file is not JSON or has no domains list
        """
        resolved = select_version(version)
        if self.verbose:
            console.print(
                f"[dim]Using Chrome DevTools Protocol version:[/dim] '{resolved}'",
                highlight=False,
            )

        path = self.path_for(resolved)
        if not path.is_file():
            raise SchemaNotFound(resolved, path)

        try:
            content = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SchemaMalformed(f"Invalid JSON: {e}", str(path)) from e

        if not isinstance(content, dict):
            raise SchemaMalformed(
                f"Expected an object at the document root, got {type(content).__name__}",
                str(path),
            )
        if not isinstance(content.get("domains"), list):
            raise SchemaMalformed("Missing 'domains' list", str(path))

        return content

    def available_versions(self) -> list[str]:
        """Versions from the allow-list that have a protocol file on disk."""
        return [v for v in PROTOCOL_VERSIONS if self.path_for(v).is_file()]
