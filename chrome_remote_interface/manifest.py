"""Manifest tracking generated modules and the schema they came from.

The manifest carries no timestamps: regenerating from an unchanged schema
must leave every output byte-identical, the manifest included.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path

from pydantic import BaseModel, Field

from chrome_remote_interface.domain import Schema

MANIFEST_FILENAME = ".cri-manifest.json"


class OutputInfo(BaseModel):
    """Information about a generated file."""

    path: str
    hash: str
    domain: str | None = None  # None for the package __init__.py

    model_config = {"frozen": True}


class GenerationManifest(BaseModel):
    """Manifest of one generation run."""

    version: str = "1.0.0"
    protocol_version: str
    package: str
    schema_hash: str
    outputs: list[OutputInfo] = Field(default_factory=list)

    model_config = {"frozen": True}

    def to_json(self) -> str:
        """Serialize manifest to JSON string."""
        return json.dumps(self.model_dump(), indent=2) + "\n"

    @classmethod
    def from_file(cls, path: Path) -> GenerationManifest | None:
        """Load manifest from file, returns None if missing or unreadable."""
        if not path.exists():
            return None
        try:
            content = path.read_text(encoding="utf-8")
            data = json.loads(content)
            return cls.model_validate(data)
        except (json.JSONDecodeError, ValueError):
            return None

    def get_output_paths(self) -> set[str]:
        """Get set of all output file paths."""
        return {o.path for o in self.outputs}

    def find_orphaned_files(self, new_outputs: list[OutputInfo]) -> list[str]:
        """Find files in this manifest that are not in new outputs."""
        new_paths = {o.path for o in new_outputs}
        return sorted(self.get_output_paths() - new_paths)

    def find_modified_files(self, new_outputs: list[OutputInfo]) -> list[str]:
        """Find files that exist in both but have different hashes."""
        current_hashes = {o.path: o.hash for o in self.outputs}
        modified = []
        for output in new_outputs:
            if output.path in current_hashes:
                if current_hashes[output.path] != output.hash:
                    modified.append(output.path)
        return sorted(modified)


def compute_content_hash(content: str) -> str:
    """Compute SHA256 hash of string content (first 16 chars)."""
    return hashlib.sha256(content.encode()).hexdigest()[:16]


def compute_schema_hash(schema: Schema) -> str:
    """Compute hash of a loaded schema for change detection."""
    schema_str = json.dumps(schema.model_dump(mode="json"), sort_keys=True)
    return hashlib.sha256(schema_str.encode()).hexdigest()[:16]
