"""Ingestion layer - protocol.json loading and domain building."""

from chrome_remote_interface.ingestion.builder import SchemaBuilder
from chrome_remote_interface.ingestion.loader import (
    DEFAULT_PROTOCOL_VERSION,
    PROTOCOL_ENV_KEY,
    PROTOCOL_VERSIONS,
    SchemaLoader,
    get_default_version,
    select_version,
)

__all__ = [
    "DEFAULT_PROTOCOL_VERSION",
    "PROTOCOL_ENV_KEY",
    "PROTOCOL_VERSIONS",
    "SchemaBuilder",
    "SchemaLoader",
    "get_default_version",
    "select_version",
]
