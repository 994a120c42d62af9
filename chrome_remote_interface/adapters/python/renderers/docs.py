"""Documentation rendering for generated modules.

Pure string formatting: a missing description renders as nothing, never
as an error.
"""

from __future__ import annotations

from chrome_remote_interface.adapters.python.types import type_ref_label
from chrome_remote_interface.domain import Command, Domain, Property, TypeDef

NO_PARAMETERS = "No parameters."
NO_RETURN_VALUE = "No return value."


def format_description(description: str | None) -> str:
    """Normalize a schema description: strip it and trailing line whitespace."""
    if not description:
        return ""
    return "\n".join(line.rstrip() for line in description.strip().splitlines())


def escape_docstring(text: str) -> str:
    """Escape text for use inside a triple-quoted docstring."""
    text = text.replace("\\", "\\\\")
    # A quote right before the closing delimiter would end the string early
    if text.endswith('"'):
        text = text[:-1] + '\\"'
    return text.replace('"""', '\\"\\"\\"')


def indent(text: str, prefix: str) -> str:
    """Indent non-empty lines; empty lines stay empty."""
    return "\n".join(prefix + line if line else "" for line in text.splitlines())


class DocRenderer:
    """Render docstrings and doc comments for domains, types and commands."""

    def render_property(self, prop: Property) -> str:
        """One listing line: ``name - <type-or-ref> - description``."""
        description = " ".join(format_description(prop.description).split())
        if prop.optional:
            description = f"(optional) {description}".rstrip()
        head = f"{prop.name} - <{type_ref_label(prop.type_ref)}>"
        return f"{head} - {description}" if description else head

    def render_command(self, command: Command) -> str:
        """Render the docstring body for a command function."""
        sections = []
        description = format_description(command.description)
        if description:
            sections.append(description)

        sections.append(
            self._render_listing("Parameters", command.parameters, NO_PARAMETERS)
        )
        sections.append(
            self._render_listing("Returns", command.returns, NO_RETURN_VALUE)
        )

        notes = self._render_status("command", command.experimental, command.deprecated)
        if notes:
            sections.append(notes)

        return "\n\n".join(sections)

    def render_type_comment(self, type_def: TypeDef) -> list[str]:
        """Render ``#:`` comment lines documenting a type declaration."""
        paragraphs = []
        description = format_description(type_def.description)
        if description:
            paragraphs.append(description)
        if type_def.enum:
            values = ", ".join(f'"{v}"' for v in type_def.enum)
            paragraphs.append(f"Allowed values: {values}.")
        notes = self._render_status("type", type_def.experimental, type_def.deprecated)
        if notes:
            paragraphs.append(notes)

        lines: list[str] = []
        for paragraph in paragraphs:
            if lines:
                lines.append("#:")
            lines.extend(f"#: {line}" if line else "#:" for line in paragraph.splitlines())
        return lines

    def render_domain(self, domain: Domain, version: str) -> str:
        """Render the module docstring body for a domain."""
        sections = []
        description = format_description(domain.description)
        sections.append(description or f"{domain.name} domain.")

        notes = self._render_status("domain", domain.experimental, domain.deprecated)
        if notes:
            sections.append(notes)

        sections.append(
            f"Generated from Chrome DevTools Protocol version '{version}'. Do not edit."
        )
        return "\n\n".join(sections)

    def _render_listing(
        self, title: str, properties: list[Property], empty: str
    ) -> str:
        if not properties:
            return f"{title}:\n    {empty}"
        lines = [f"    {self.render_property(p)}" for p in properties]
        return f"{title}:\n" + "\n".join(lines)

    def _render_status(self, what: str, experimental: bool, deprecated: bool) -> str:
        notes = []
        if experimental:
            notes.append(f"Experimental: This {what} is experimental.")
        if deprecated:
            notes.append(f"Deprecated: This {what} is deprecated.")
        return "\n".join(notes)
