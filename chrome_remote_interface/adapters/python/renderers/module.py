"""Module rendering - assembles declarations and functions into source text."""

from __future__ import annotations

import re

from chrome_remote_interface.adapters.python.naming import module_name
from chrome_remote_interface.adapters.python.renderers.command import CommandRenderer
from chrome_remote_interface.adapters.python.renderers.docs import (
    DocRenderer,
    escape_docstring,
)
from chrome_remote_interface.adapters.python.renderers.types import (
    RenderedType,
    TypeRenderer,
)
from chrome_remote_interface.domain import Domain, GeneratedModule, Schema
from chrome_remote_interface.errors import SchemaMalformed, located

_ANY = re.compile(r"\bAny\b")

DEFAULT_PACKAGE = "chrome_remote_interface.rpc"


class ModuleRenderer:
    """
    Render a Domain to a complete Python module.

    Layout:
    - Module docstring (description, status notes)
    - Imports; other domain modules only under TYPE_CHECKING
    - ``__all__``
    - ``experimental()`` accessor
    - Type declarations, schema order
    - Command functions, schema order; a command with return values is
      preceded by its ``<command>_result`` TypedDict
    """

    def __init__(self, package: str = DEFAULT_PACKAGE) -> None:
        self.package = package
        self.doc_renderer = DocRenderer()
        self.type_renderer = TypeRenderer(self.doc_renderer)
        self.command_renderer = CommandRenderer(self.doc_renderer)

    def render(self, domain: Domain, version: str) -> GeneratedModule:
        """Render the module for one domain."""
        if not domain.name.isidentifier():
            raise SchemaMalformed(
                f"Domain name '{domain.name}' is not a valid module name", domain.name
            )

        types: list[RenderedType] = []
        for type_def in domain.types:
            with located(f"{domain.name}.{type_def.id}"):
                types.append(self.type_renderer.render(type_def, domain.name))

        callables = []
        results: list[RenderedType] = []
        command_sections = []
        names = [t.name for t in types]
        for command in domain.commands:
            with located(f"{domain.name}.{command.name}"):
                generated = self.command_renderer.render(command, domain.name)
                callables.append(generated)
                names.append(generated.function_name)
                section = generated.source
                if command.returns:
                    result = self.type_renderer.render_result(
                        command, domain.name, generated.dispatch_method_string
                    )
                    results.append(result)
                    names.append(result.name)
                    section = f"{result.text}\n\n\n{section}"
                command_sections.append(section)

        self._check_unique(domain, names)

        declared = types + results
        referenced = sorted(
            {d for t in declared for a in t.annotations for d in a.referenced_domains}
            - {domain.name}
        )

        docstring = escape_docstring(self.doc_renderer.render_domain(domain, version))
        blocks = [f'"""{docstring}\n"""', "from __future__ import annotations"]
        blocks.extend(self._render_imports(declared, bool(callables), referenced))
        blocks.append(self._render_all(names))

        sections = ["\n\n".join(blocks), self._render_experimental(domain)]
        if types:
            sections.append("\n\n".join(t.text for t in types))
        sections.extend(command_sections)

        return GeneratedModule(
            domain_name=domain.name,
            module_name=module_name(domain.name),
            type_declarations=[t.text for t in types],
            callables=callables,
            referenced_domains=referenced,
            source="\n\n\n".join(sections) + "\n",
        )

    def render_package(self, schema: Schema) -> str:
        """Render the package ``__init__.py`` listing every generated domain."""
        domains = "\n".join(f'    "{name}",' for name in schema.domain_names)
        return "\n".join(
            [
                f'"""Chrome DevTools Protocol domains, version \'{schema.version}\'.',
                "",
                "Generated by chrome-remote-interface. Do not edit.",
                '"""',
                "",
                f'PROTOCOL_VERSION = "{schema.version}"',
                "",
                f"DOMAINS = (\n{domains}\n)" if domains else "DOMAINS = ()",
                "",
                "",
                "def protocol_version() -> str:",
                '    """Gets the current version of the Chrome DevTools Protocol."""',
                "    return PROTOCOL_VERSION",
                "",
            ]
        )

    def _render_imports(
        self, types: list[RenderedType], has_commands: bool, referenced: list[str]
    ) -> list[str]:
        typing_names = set()
        if referenced:
            typing_names.add("TYPE_CHECKING")
        if any(t.uses_alias for t in types):
            typing_names.add("TypeAlias")
        if any(t.uses_typed_dict for t in types):
            typing_names.add("TypedDict")
        if has_commands or any(
            _ANY.search(a.target_name) for t in types for a in t.annotations
        ):
            typing_names.add("Any")
        if has_commands:
            typing_names.add("overload")

        lines = []
        if has_commands:
            lines.append("from collections.abc import Mapping")
        if typing_names:
            # Constants sort before classes before functions, like isort
            ordered = sorted(typing_names, key=lambda n: (not n.isupper(), n))
            lines.append(f"from typing import {', '.join(ordered)}")

        blocks = []
        if lines:
            blocks.append("\n".join(lines))
        if has_commands:
            blocks.append("from chrome_remote_interface import session as _session")
        if referenced:
            if len(referenced) == 1:
                imports = f"    from {self.package} import {referenced[0]}"
            else:
                names = "\n".join(f"        {module_name(d)}," for d in referenced)
                imports = f"    from {self.package} import (\n{names}\n    )"
            blocks.append(f"if TYPE_CHECKING:\n{imports}")
        return blocks

    def _check_unique(self, domain: Domain, names: list[str]) -> None:
        seen: set[str] = set()
        for name in names:
            if name in seen:
                raise SchemaMalformed(
                    f"Generated name '{name}' is defined twice", domain.name
                )
            seen.add(name)

    def _render_all(self, names: list[str]) -> str:
        entries = "\n".join(f'    "{n}",' for n in ["experimental", *names])
        return f"__all__ = [\n{entries}\n]"

    def _render_experimental(self, domain: Domain) -> str:
        return "\n".join(
            [
                "def experimental() -> bool:",
                f'    """Whether the {domain.name} domain is marked experimental."""',
                f"    return {domain.experimental!r}",
            ]
        )
