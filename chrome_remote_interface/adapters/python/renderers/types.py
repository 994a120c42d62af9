"""Type declaration rendering.

Each schema type becomes either a ``TypeAlias`` or a functional ``TypedDict``.
Expressions naming other generated types are quoted, so declarations can
appear in schema order whatever they reference.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from chrome_remote_interface.adapters.python.naming import (
    format_result_type_name,
    format_type_name,
)
from chrome_remote_interface.adapters.python.renderers.docs import DocRenderer
from chrome_remote_interface.adapters.python.types import (
    generate_map_type_spec,
    resolve_type_def,
)
from chrome_remote_interface.domain import Command, ResolvedType, TypeDef, TypeKind
from chrome_remote_interface.errors import SchemaMalformed


@dataclass
class RenderedType:
    """A declaration plus what the module header needs to import for it."""

    name: str
    text: str
    uses_alias: bool = False
    uses_typed_dict: bool = False
    annotations: list[ResolvedType] = field(default_factory=list)


class TypeRenderer:
    """Render TypeDefs to module-level declarations."""

    def __init__(self, doc_renderer: DocRenderer | None = None) -> None:
        self.doc_renderer = doc_renderer or DocRenderer()

    def render(self, type_def: TypeDef, domain: str) -> RenderedType:
        """Render one declaration, preceded by its ``#:`` doc comment."""
        name = format_type_name(type_def.id)
        if not name.isidentifier():
            raise SchemaMalformed(
                f"Type id '{type_def.id}' is not a valid Python identifier"
            )
        comment = self.doc_renderer.render_type_comment(type_def)

        if type_def.kind == TypeKind.OBJECT:
            fields = generate_map_type_spec(type_def.properties, domain)
            body = self._render_typed_dict(name, fields)
            rendered = RenderedType(
                name=name,
                text=body,
                uses_typed_dict=True,
                annotations=list(fields.values()),
            )
        else:
            resolved = resolve_type_def(type_def, domain)
            rendered = RenderedType(
                name=name,
                text=f"{name}: TypeAlias = {resolved.expression}",
                uses_alias=True,
                annotations=[resolved],
            )

        if comment:
            rendered.text = "\n".join([*comment, rendered.text])
        return rendered

    def render_result(
        self, command: Command, domain: str, method: str
    ) -> RenderedType:
        """Render the record of a command's return values, keyed by wire name."""
        name = format_result_type_name(command.name)
        fields = generate_map_type_spec(command.returns, domain)
        return RenderedType(
            name=name,
            text="\n".join(
                [f"#: Result of {method}.", self._render_typed_dict(name, fields)]
            ),
            uses_typed_dict=True,
            annotations=list(fields.values()),
        )

    def _render_typed_dict(self, name: str, fields: dict[str, ResolvedType]) -> str:
        if not fields:
            return f'{name} = TypedDict("{name}", {{}})'
        lines = [f"{name} = TypedDict(", f'    "{name}",', "    {"]
        for field_name, resolved in fields.items():
            lines.append(f"        {json.dumps(field_name)}: {resolved.expression},")
        lines.extend(["    },", ")"])
        return "\n".join(lines)
