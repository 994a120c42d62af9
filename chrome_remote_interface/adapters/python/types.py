"""Resolve schema type nodes to Python annotations.

These are pure functions: a type node plus the name of the domain it sits
in always yields the same ResolvedType. Reference resolution only composes
names, so a referenced domain does not have to be generated first, and a
reference to a type that does not exist is passed through as-is.
"""

from __future__ import annotations

from chrome_remote_interface.adapters.python.naming import (
    format_type_name,
    module_name,
)
from chrome_remote_interface.domain import (
    ArrayRef,
    PrimitiveRef,
    Property,
    Reference,
    ResolvedType,
    TypeDef,
    TypeKind,
    TypeRef,
)

ANY = "Any"

PRIMITIVE_TYPES: dict[str, str] = {
    "boolean": "bool",
    "integer": "int",
    "number": "float",
    "string": "str",
    "object": "dict[str, Any]",
    "array": "list[Any]",
    "any": ANY,
}


def cdp_type_to_spec(primitive: str) -> ResolvedType:
    """
    Map a schema primitive to a Python type.

    Unknown names map to ``Any``; the protocol grows new primitives
    independently of this generator.

    Examples:
        >>> cdp_type_to_spec("string").target_name
        'str'
        >>> cdp_type_to_spec("binary").target_name
        'Any'
    """
    return ResolvedType(target_name=PRIMITIVE_TYPES.get(primitive, ANY))


def cdp_ref_to_spec(ref: str | Reference, current_domain: str) -> ResolvedType:
    """
    Resolve a ``$ref`` to the name of the referenced declaration.

    ``Page.FrameId`` seen from ``Network`` becomes ``Page.cdp_frame_id``
    (the ``Page`` module is imported for type checking only). ``FrameId``, or
    ``Page.FrameId`` seen from ``Page`` itself, becomes ``cdp_frame_id``.

    Raises:
        UnresolvedReference: If ``ref`` is a string that is not a valid reference
    """
    reference = ref if isinstance(ref, Reference) else Reference.parse(ref)
    type_name = format_type_name(reference.type_id)

    if reference.domain is None or reference.domain == current_domain:
        return ResolvedType(target_name=type_name, forward=True)

    return ResolvedType(
        target_name=f"{module_name(reference.domain)}.{type_name}",
        referenced_domains=frozenset({reference.domain}),
        forward=True,
    )


def type_ref_to_spec(type_ref: TypeRef, current_domain: str) -> ResolvedType:
    """Resolve any TypeRef; arrays wrap their element in ``list[...]``."""
    if isinstance(type_ref, Reference):
        return cdp_ref_to_spec(type_ref, current_domain)
    if isinstance(type_ref, ArrayRef):
        inner = type_ref_to_spec(type_ref.items, current_domain)
        return inner.model_copy(update={"target_name": f"list[{inner.annotation}]"})
    if isinstance(type_ref, PrimitiveRef):
        return cdp_type_to_spec(type_ref.name)
    return ResolvedType(target_name=ANY)


def param_type_spec(param: Property, domain: str) -> ResolvedType:
    """Resolve the type of a parameter, return value or object field.

    Nullability is left to the caller; see ``property_type_spec``.
    """
    return type_ref_to_spec(param.type_ref, domain)


def property_type_spec(prop: Property, domain: str) -> ResolvedType:
    """Resolve a record field, wrapping optional fields as nullable."""
    resolved = param_type_spec(prop, domain)
    return resolved.nullable() if prop.optional else resolved


def generate_map_type_spec(
    properties: list[Property], domain_name: str
) -> dict[str, ResolvedType]:
    """
    Resolve the fields of an object type.

    Returns field name (wire casing) -> ResolvedType, in schema order.
    Optional properties are nullable, required ones are not.
    """
    return {prop.name: property_type_spec(prop, domain_name) for prop in properties}


def resolve_type_def(type_def: TypeDef, domain: str) -> ResolvedType:
    """
    Resolve a named type definition.

    Enum types resolve to plain ``str``: the allowed values are documented on
    the declaration, not enforced by the type. Object types resolve to
    ``TypedDict``; the fields are resolved by ``generate_map_type_spec``.
    """
    if type_def.kind == TypeKind.ENUM:
        return cdp_type_to_spec("string")
    if type_def.kind == TypeKind.OBJECT:
        fields = generate_map_type_spec(type_def.properties, domain)
        referenced: frozenset[str] = frozenset()
        for field in fields.values():
            referenced |= field.referenced_domains
        return ResolvedType(target_name="TypedDict", referenced_domains=referenced)
    if type_def.kind == TypeKind.PRIMITIVE:
        return cdp_type_to_spec(type_def.primitive or "any")
    if type_def.kind == TypeKind.ARRAY and type_def.items is not None:
        return type_ref_to_spec(ArrayRef(items=type_def.items), domain)
    return ResolvedType(target_name=ANY)


def type_ref_label(type_ref: TypeRef) -> str:
    """Schema-side label for docs: the ``$ref`` text or the primitive name."""
    if isinstance(type_ref, Reference):
        return type_ref.raw
    if isinstance(type_ref, ArrayRef):
        return f"array[{type_ref_label(type_ref.items)}]"
    return type_ref.name
