"""
chrome-remote-interface: Chrome DevTools Protocol client API, generated at build time.

Architecture:
    protocol.json → Ingestion (SchemaLoader, SchemaBuilder) → Domain (Schema) → Adapter → .py

Layers:
    - domain/: Pure schema types (domains, type definitions, commands, references)
    - ingestion/: protocol.json loading, version selection and domain object construction
    - adapters/: Output-specific rendering (Python modules under the rpc package)
    - session.py: The runtime contract every generated command dispatches through

Key Concepts:
    - Generation is a one-shot, deterministic pass; nothing is generated at import time
    - Reference resolution is pure name composition, so domains can be emitted in any order
    - Wire method names keep the schema's casing, Python names are snake_case
"""

__version__ = "0.4.1"
