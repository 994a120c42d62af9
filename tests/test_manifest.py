"""Tests for the generation manifest."""

from pathlib import Path
from typing import Any

from chrome_remote_interface.ingestion import SchemaBuilder
from chrome_remote_interface.manifest import (
    GenerationManifest,
    OutputInfo,
    compute_content_hash,
    compute_schema_hash,
)


def _manifest(*outputs: OutputInfo) -> GenerationManifest:
    return GenerationManifest(
        protocol_version="tot",
        package="chrome_remote_interface.rpc",
        schema_hash="abc",
        outputs=list(outputs),
    )


class TestGenerationManifest:
    """Tests for GenerationManifest."""

    def test_json_roundtrip(self, tmp_path: Path) -> None:
        """Test a written manifest reads back equal."""
        manifest = _manifest(OutputInfo(path="Page.py", hash="h1", domain="Page"))
        path = tmp_path / "manifest.json"
        path.write_text(manifest.to_json())

        assert GenerationManifest.from_file(path) == manifest

    def test_json_has_no_timestamps(self) -> None:
        """Test serialization is stable across calls."""
        manifest = _manifest(OutputInfo(path="Page.py", hash="h1", domain="Page"))

        assert manifest.to_json() == manifest.to_json()
        assert "generated_at" not in manifest.to_json()
        assert manifest.to_json().endswith("}\n")

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing manifest reads as None."""
        assert GenerationManifest.from_file(tmp_path / "nope.json") is None

    def test_corrupt_file(self, tmp_path: Path) -> None:
        """Test an unreadable manifest reads as None."""
        path = tmp_path / "manifest.json"
        path.write_text("{broken")
        assert GenerationManifest.from_file(path) is None

    def test_orphaned_files(self) -> None:
        """Test outputs missing from the new run are orphans."""
        old = _manifest(
            OutputInfo(path="DOM.py", hash="1", domain="DOM"),
            OutputInfo(path="Page.py", hash="2", domain="Page"),
            OutputInfo(path="__init__.py", hash="3"),
        )
        new = [OutputInfo(path="Page.py", hash="2"), OutputInfo(path="__init__.py", hash="4")]

        assert old.find_orphaned_files(new) == ["DOM.py"]
        assert old.find_modified_files(new) == ["__init__.py"]


class TestHashes:
    """Tests for content and schema hashes."""

    def test_content_hash(self) -> None:
        """Test content hashes are short and content-sensitive."""
        assert len(compute_content_hash("a")) == 16
        assert compute_content_hash("a") == compute_content_hash("a")
        assert compute_content_hash("a") != compute_content_hash("b")

    def test_schema_hash_tracks_changes(self, sample_protocol: dict[str, Any]) -> None:
        """Test the schema hash changes when the schema does."""
        first = compute_schema_hash(SchemaBuilder.from_dict(sample_protocol))
        again = compute_schema_hash(SchemaBuilder.from_dict(sample_protocol))
        sample_protocol["domains"][0]["commands"].append({"name": "disable"})
        changed = compute_schema_hash(SchemaBuilder.from_dict(sample_protocol))

        assert first == again
        assert first != changed
