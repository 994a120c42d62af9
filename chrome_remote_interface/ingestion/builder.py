"""SchemaBuilder - transforms a raw protocol document into the domain model."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from chrome_remote_interface.domain import (
    ArrayRef,
    Command,
    Domain,
    PrimitiveRef,
    Property,
    Reference,
    Schema,
    TypeDef,
    TypeKind,
    TypeRef,
)
from chrome_remote_interface.errors import SchemaMalformed, located
from chrome_remote_interface.ingestion.loader import (
    DEFAULT_PROTOCOL_VERSION,
    SchemaLoader,
    select_version,
)


class SchemaBuilder:
    """
    Build the domain model from a decoded protocol document.

    Handles:
    - Required fields (``domain``, ``id``, ``name``) and their types
    - Classifying type definitions into TypeKind
    - Decomposing ``$ref`` strings into References
    """

    def __init__(self, version: str = DEFAULT_PROTOCOL_VERSION) -> None:
        self.version = select_version(version)

    @classmethod
    def from_protocol_dir(
        cls,
        path: str | Path,
        version: str | None = None,
        verbose: bool = True,
    ) -> Schema:
        """Load ``{path}/{version}/protocol.json`` and build the schema."""
        resolved = select_version(version)
        document = SchemaLoader(path, verbose=verbose).load(resolved)
        return cls(resolved).build(document)

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], version: str = DEFAULT_PROTOCOL_VERSION
    ) -> Schema:
        """Build a schema from an already decoded document (for testing)."""
        return cls(version).build(data)

    def build(self, document: dict[str, Any]) -> Schema:
        """Build the Schema for a whole document."""
        domains_data = document.get("domains")
        if not isinstance(domains_data, list):
            raise SchemaMalformed("Missing 'domains' list")

        domains = []
        for index, data in enumerate(domains_data):
            name = data.get("domain") if isinstance(data, dict) else None
            with located(str(name) if name else f"domains[{index}]"):
                domains.append(self._build_domain(data))

        try:
            return Schema(version=self.version, domains=domains)
        except ValidationError as e:
            raise SchemaMalformed(_first_error(e)) from e

    def _build_domain(self, data: Any) -> Domain:
        """Build Domain from dict."""
        _require_mapping(data, "domain")
        name = _require_str(data, "domain")

        types = []
        for type_data in _optional_list(data, "types"):
            type_id = type_data.get("id") if isinstance(type_data, dict) else None
            with located(f"{name}.{type_id}" if type_id else name):
                types.append(self._build_type(type_data))

        commands = []
        for command_data in _optional_list(data, "commands"):
            command_name = (
                command_data.get("name") if isinstance(command_data, dict) else None
            )
            with located(f"{name}.{command_name}" if command_name else name):
                commands.append(self._build_command(command_data))

        try:
            return Domain(
                name=name,
                description=data.get("description"),
                experimental=bool(data.get("experimental", False)),
                deprecated=bool(data.get("deprecated", False)),
                dependencies=[str(d) for d in _optional_list(data, "dependencies")],
                types=types,
                commands=commands,
            )
        except ValidationError as e:
            raise SchemaMalformed(_first_error(e)) from e

    def _build_type(self, data: Any) -> TypeDef:
        """Build TypeDef from dict, classifying its kind."""
        _require_mapping(data, "type")
        type_id = _require_str(data, "id")
        schema_type = data.get("type")

        kind = TypeKind.UNRESOLVED
        primitive = None
        items: TypeRef | None = None
        if schema_type == "string" and "enum" in data:
            kind = TypeKind.ENUM
            primitive = "string"
        elif schema_type == "object" and "properties" in data:
            kind = TypeKind.OBJECT
        elif schema_type == "array":
            kind = TypeKind.ARRAY
            items = self._build_items(data).items
        elif isinstance(schema_type, str):
            kind = TypeKind.PRIMITIVE
            primitive = schema_type

        properties = [
            self._build_property(p) for p in _optional_list(data, "properties")
        ]

        try:
            return TypeDef(
                id=type_id,
                description=data.get("description"),
                experimental=bool(data.get("experimental", False)),
                deprecated=bool(data.get("deprecated", False)),
                kind=kind,
                primitive=primitive,
                enum=_enum_values(data),
                properties=properties,
                items=items,
            )
        except ValidationError as e:
            raise SchemaMalformed(_first_error(e)) from e

    def _build_command(self, data: Any) -> Command:
        """Build Command from dict."""
        _require_mapping(data, "command")
        return Command(
            name=_require_str(data, "name"),
            description=data.get("description"),
            experimental=bool(data.get("experimental", False)),
            deprecated=bool(data.get("deprecated", False)),
            parameters=[
                self._build_property(p) for p in _optional_list(data, "parameters")
            ],
            returns=[self._build_property(p) for p in _optional_list(data, "returns")],
        )

    def _build_property(self, data: Any) -> Property:
        """Build Property from a parameter, return value or object field."""
        _require_mapping(data, "property")
        return Property(
            name=_require_str(data, "name"),
            description=data.get("description"),
            optional=bool(data.get("optional", False)),
            experimental=bool(data.get("experimental", False)),
            deprecated=bool(data.get("deprecated", False)),
            type_ref=self._build_type_ref(data),
            enum=_enum_values(data),
        )

    def _build_type_ref(self, node: dict[str, Any]) -> TypeRef:
        """
        Build the TypeRef a node points at.

        ``$ref`` wins over ``type``; a node with neither is ``any``.
        """
        if "$ref" in node:
            return Reference.parse(node["$ref"])
        schema_type = node.get("type")
        if schema_type == "array":
            return self._build_items(node)
        if isinstance(schema_type, str):
            return PrimitiveRef(name=schema_type)
        return PrimitiveRef(name="any")

    def _build_items(self, node: dict[str, Any]) -> ArrayRef:
        """Build the ArrayRef for an array node; missing items mean ``any``."""
        items = node.get("items")
        if isinstance(items, dict):
            return ArrayRef(items=self._build_type_ref(items))
        return ArrayRef(items=PrimitiveRef(name="any"))


def _require_mapping(data: Any, what: str) -> None:
    if not isinstance(data, dict):
        raise SchemaMalformed(f"Expected {what} object, got {type(data).__name__}")


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise SchemaMalformed(f"Missing required field '{key}'")
    return value


def _optional_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise SchemaMalformed(f"Field '{key}' must be a list")
    return value


def _enum_values(data: dict[str, Any]) -> list[str] | None:
    if data.get("enum") is None:
        return None
    return [str(v) for v in _optional_list(data, "enum")]


def _first_error(error: ValidationError) -> str:
    """Condense a pydantic error into one line."""
    details = error.errors()
    if not details:
        return str(error)
    return str(details[0].get("msg", error))
