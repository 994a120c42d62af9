"""Schema domain - protocol domains, their types and commands."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from chrome_remote_interface.domain.types import PrimitiveRef, TypeRef


class TypeKind(str, Enum):
    """How a named type definition is shaped."""

    ENUM = "enum"
    OBJECT = "object"
    PRIMITIVE = "primitive"
    ARRAY = "array"
    UNRESOLVED = "unresolved"


class Property(BaseModel):
    """A named field of an object type, or a command parameter/return value."""

    name: str = Field(..., description="Wire name, schema casing")
    description: str | None = Field(None, description="Human-readable description")
    optional: bool = Field(False, description="May be absent on the wire")
    experimental: bool = False
    deprecated: bool = False
    type_ref: TypeRef = Field(default_factory=lambda: PrimitiveRef(name="any"))
    enum: list[str] | None = Field(None, description="Allowed string values")

    model_config = {"frozen": True}


class TypeDef(BaseModel):
    """
    A named type owned by a domain.

    ``primitive`` holds the backing primitive for ENUM and PRIMITIVE kinds,
    ``properties`` the fields of an OBJECT and ``items`` the element of an ARRAY.
    """

    id: str
    description: str | None = None
    experimental: bool = False
    deprecated: bool = False
    kind: TypeKind = TypeKind.UNRESOLVED
    primitive: str | None = None
    enum: list[str] | None = None
    properties: list[Property] = Field(default_factory=list)
    items: TypeRef | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_kind_payload(self) -> TypeDef:
        """Ensure the fields a kind relies on are present."""
        if self.kind == TypeKind.ARRAY and self.items is None:
            raise ValueError(f"Array type '{self.id}' has no element type")
        if self.kind in (TypeKind.ENUM, TypeKind.PRIMITIVE) and not self.primitive:
            raise ValueError(f"Type '{self.id}' has no backing primitive")
        return self


class Command(BaseModel):
    """A remote operation invocable as ``Domain.name``."""

    name: str
    description: str | None = None
    experimental: bool = False
    deprecated: bool = False
    parameters: list[Property] = Field(default_factory=list)
    returns: list[Property] = Field(default_factory=list)

    model_config = {"frozen": True}


class Domain(BaseModel):
    """A named group of types and commands."""

    name: str
    description: str | None = None
    experimental: bool = False
    deprecated: bool = False
    dependencies: list[str] = Field(default_factory=list)
    types: list[TypeDef] = Field(default_factory=list)
    commands: list[Command] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unique_type_ids(self) -> Domain:
        """Type ids must be unique within their domain."""
        seen: set[str] = set()
        for type_def in self.types:
            if type_def.id in seen:
                raise ValueError(f"Duplicate type id '{type_def.id}'")
            seen.add(type_def.id)
        return self

    def get_type(self, type_id: str) -> TypeDef | None:
        """Look up a type by id."""
        return next((t for t in self.types if t.id == type_id), None)


class Schema(BaseModel):
    """A loaded protocol document for one version."""

    version: str
    domains: list[Domain] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unique_domains(self) -> Schema:
        """Domain names must be unique within a schema version."""
        seen: set[str] = set()
        for domain in self.domains:
            if domain.name in seen:
                raise ValueError(f"Duplicate domain '{domain.name}'")
            seen.add(domain.name)
        return self

    @property
    def domain_names(self) -> list[str]:
        """Domain names in schema order."""
        return [d.name for d in self.domains]

    def get_domain(self, name: str) -> Domain | None:
        """Look up a domain by name."""
        return next((d for d in self.domains if d.name == name), None)

    def select(self, names: list[str]) -> Schema:
        """Return a schema restricted to ``names``, keeping schema order.

        An empty list selects every domain.
        """
        if not names:
            return self
        wanted = set(names)
        return self.model_copy(
            update={"domains": [d for d in self.domains if d.name in wanted]}
        )
