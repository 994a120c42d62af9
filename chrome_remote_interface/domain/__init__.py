"""Domain layer - protocol schema primitives and generated artifacts.

This layer contains output-agnostic concepts:
- Schema, domains, type definitions, commands, properties
- Type references (primitive, array, $ref) and resolved types

Python-specific rendering (naming, annotations, module text) belongs in
adapters/python, not here.
"""

from chrome_remote_interface.domain.module import GeneratedCallable, GeneratedModule
from chrome_remote_interface.domain.schema import (
    Command,
    Domain,
    Property,
    Schema,
    TypeDef,
    TypeKind,
)
from chrome_remote_interface.domain.types import (
    ArrayRef,
    PrimitiveRef,
    Reference,
    ResolvedType,
    TypeRef,
)

__all__ = [
    # Schema
    "Command",
    "Domain",
    "Property",
    "Schema",
    "TypeDef",
    "TypeKind",
    # Types
    "ArrayRef",
    "PrimitiveRef",
    "Reference",
    "ResolvedType",
    "TypeRef",
    # Generated
    "GeneratedCallable",
    "GeneratedModule",
]
