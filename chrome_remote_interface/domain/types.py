"""Type references and resolved types.

A ``TypeRef`` is what a property or array element points at in the schema:
a primitive name, an array of another ``TypeRef``, or a ``$ref`` to a named
type. A ``ResolvedType`` is the Python annotation the generator computes for
one of those.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from chrome_remote_interface.errors import UnresolvedReference

_REF_PATTERN = re.compile(r"(?:([A-Za-z_]\w*)\.)?([A-Za-z_]\w*)")


class PrimitiveRef(BaseModel):
    """A schema primitive such as ``string`` or ``integer``."""

    name: str

    model_config = {"frozen": True}


class ArrayRef(BaseModel):
    """An array whose elements are another type reference."""

    items: TypeRef

    model_config = {"frozen": True}


class Reference(BaseModel):
    """
    A ``$ref`` to a named type.

    ``domain`` is None for bare references, which resolve in the domain
    that contains them.
    """

    domain: str | None = None
    type_id: str

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, ref: str) -> Reference:
        """Split ``Domain.TypeId`` or ``TypeId`` into a Reference.

        Raises:
            UnresolvedReference: If the string is not one or two identifiers
                joined by a single dot.
        """
        match = _REF_PATTERN.fullmatch(ref) if isinstance(ref, str) else None
        if match is None:
            raise UnresolvedReference(str(ref))
        return cls(domain=match.group(1), type_id=match.group(2))

    @property
    def raw(self) -> str:
        """The reference as written in the schema."""
        return f"{self.domain}.{self.type_id}" if self.domain else self.type_id


TypeRef = PrimitiveRef | ArrayRef | Reference

ArrayRef.model_rebuild()


class ResolvedType(BaseModel):
    """Python annotation computed for a schema type node."""

    target_name: str
    requires_nullable_wrapper: bool = False
    # Domains (other than the current one) whose modules the name points into
    referenced_domains: frozenset[str] = Field(default_factory=frozenset)
    # True when the name mentions a generated type and must be emitted quoted
    forward: bool = False

    model_config = {"frozen": True}

    @property
    def annotation(self) -> str:
        """The annotation text, with ``| None`` when nullable."""
        if self.requires_nullable_wrapper:
            return f"{self.target_name} | None"
        return self.target_name

    @property
    def expression(self) -> str:
        """The annotation as a Python expression safe to evaluate at import time."""
        if self.forward:
            return f'"{self.annotation}"'
        return self.annotation

    def nullable(self) -> ResolvedType:
        """Return this type wrapped in the nullable marker."""
        return self.model_copy(update={"requires_nullable_wrapper": True})
