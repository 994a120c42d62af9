"""Configuration schema for chrome-remote-interface.

Defines the cri.yml configuration file format using Pydantic models.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from chrome_remote_interface.adapters.python.renderers.module import DEFAULT_PACKAGE
from chrome_remote_interface.ingestion.loader import (
    get_default_version,
    select_version,
)


class OptionsConfig(BaseModel):
    """Generator options configuration."""

    manifest: bool = True  # Write .cri-manifest.json
    clean: bool = True  # Remove modules for domains dropped since the last run

    model_config = {"frozen": True}


class CRIConfig(BaseModel):
    """
    Root configuration for chrome-remote-interface.

    This is the schema for cri.yml files.

    Example:
        protocol_dir: ./priv        # holds <version>/protocol.json
        output: ./chrome_remote_interface/rpc
        package: chrome_remote_interface.rpc
        version: "1-3"              # default: $CRI_PROTOCOL_VERSION, else tot

        # Only generate some domains (default: all)
        domains:
          - Page
          - Network

        options:
          manifest: true
          clean: true
    """

    protocol_dir: str = "priv"
    output: str
    package: str = DEFAULT_PACKAGE
    version: str = Field(default_factory=get_default_version)
    domains: list[str] = Field(default_factory=list)

    options: OptionsConfig = Field(default_factory=OptionsConfig)

    model_config = {"frozen": True}

    @field_validator("version", mode="before")
    @classmethod
    def resolve_version(cls, v: Any) -> str:
        """Resolve the version against the allow-list; unknown values mean tot."""
        if v is None:
            return get_default_version()
        return select_version(str(v))

    @field_validator("package")
    @classmethod
    def validate_package(cls, v: str) -> str:
        """Validate package is a dotted path of Python identifiers."""
        if not v or not all(part.isidentifier() for part in v.split(".")):
            raise ValueError(
                f"Invalid package '{v}'. Expected a dotted module path like 'myapp.rpc'."
            )
        return v

    @property
    def protocol_path(self) -> Path:
        """Get protocol_dir as Path."""
        return Path(self.protocol_dir)

    @property
    def output_path(self) -> Path:
        """Get output as Path."""
        return Path(self.output)

    def with_version(self, version: str | None) -> CRIConfig:
        """Return a copy using ``version`` (resolved), or this config if None."""
        if version is None:
            return self
        return self.model_copy(update={"version": select_version(version)})

    @classmethod
    def from_yaml(cls, content: str) -> CRIConfig:
        """Parse config from YAML string."""
        data = yaml.safe_load(content)
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: Path | str) -> CRIConfig:
        """Load config from a YAML file."""
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        config = cls.from_yaml(content)
        # Relative paths are relative to the config file, not the cwd
        base = path.parent
        updates = {}
        if not Path(config.protocol_dir).is_absolute():
            updates["protocol_dir"] = str(base / config.protocol_dir)
        if not Path(config.output).is_absolute():
            updates["output"] = str(base / config.output)
        return config.model_copy(update=updates) if updates else config


# Config file discovery
CONFIG_FILENAMES = ["cri.yml", "cri.yaml", ".cri.yml", ".cri.yaml"]


def find_config(start_dir: Path | str | None = None) -> Path | None:
    """
    Find cri.yml config file.

    Searches in:
    1. start_dir (if provided)
    2. Current working directory
    3. Parent directories up to root

    Args:
        start_dir: Directory to start search from

    Returns:
        Path to config file, or None if not found
    """
    if start_dir is None:
        start_dir = Path.cwd()
    else:
        start_dir = Path(start_dir)

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Move to parent
        parent = current.parent
        if parent == current:
            # Reached root
            break
        current = parent

    return None


def load_config(path: Path | str | None = None) -> CRIConfig:
    """
    Load configuration from file.

    If path is not provided, searches for cri.yml in current
    and parent directories.

    Args:
        path: Explicit path to config file

    Returns:
        Parsed CRIConfig

    Raises:
        FileNotFoundError: If no config file found
        ValueError: If config is invalid
    """
    if path is None:
        path = find_config()
        if path is None:
            raise FileNotFoundError(
                "No cri.yml found. Create one or specify path with --config"
            )
    else:
        path = Path(path)

    return CRIConfig.from_file(path)
