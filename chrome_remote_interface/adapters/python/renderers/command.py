"""Command function rendering.

Every command becomes one function with three call shapes::

    navigate(session)
    navigate(session, parameters)
    navigate(session, parameters, options)

All three dispatch to ``session.execute_command`` with the wire method
``"Page.navigate"``. Parameters are passed through unvalidated. A command
with return values is annotated ``CommandResult[navigate_result]``, where
``navigate_result`` is a TypedDict of the returned fields.
"""

from __future__ import annotations

import json

from chrome_remote_interface.adapters.python.naming import (
    format_function_name,
    format_result_type_name,
)
from chrome_remote_interface.adapters.python.renderers.docs import (
    DocRenderer,
    escape_docstring,
    indent,
)
from chrome_remote_interface.domain import Command, GeneratedCallable
from chrome_remote_interface.errors import SchemaMalformed

SESSION = "_session.CommandSession"
RESULT = "_session.CommandResult"
PARAMETERS = "Mapping[str, Any]"
OPTIONS = "_session.CommandOptions"


def wire_method(domain: str, command: str) -> str:
    """The method identifier sent on the wire, schema casing preserved."""
    return f"{domain}.{command}"


class CommandRenderer:
    """Render Commands to overloaded dispatch functions."""

    def __init__(self, doc_renderer: DocRenderer | None = None) -> None:
        self.doc_renderer = doc_renderer or DocRenderer()

    def render(self, command: Command, domain: str) -> GeneratedCallable:
        """Render the function for one command."""
        function_name = format_function_name(command.name)
        if not function_name.isidentifier():
            raise SchemaMalformed(
                f"Command name '{command.name}' is not a valid Python identifier"
            )
        method = wire_method(domain, command.name)
        doc_text = self.doc_renderer.render_command(command)
        result = self.result_annotation(command)

        overloads = [
            self._render_overload(function_name, [f"session: {SESSION}"], result),
            self._render_overload(
                function_name,
                [f"session: {SESSION}", f"parameters: {PARAMETERS}"],
                result,
            ),
            self._render_overload(
                function_name,
                [
                    f"session: {SESSION}",
                    f"parameters: {PARAMETERS}",
                    f"options: {OPTIONS}",
                ],
                result,
            ),
        ]
        implementation = "\n".join(
            [
                f"def {function_name}(",
                f"    session: {SESSION},",
                f"    parameters: {PARAMETERS} | None = None,",
                f"    options: {OPTIONS} | None = None,",
                f") -> {result}:",
                self._render_docstring(doc_text),
                "    return _session.execute_command(",
                "        session,",
                f"        {json.dumps(method)},",
                "        {} if parameters is None else parameters,",
                "        [] if options is None else options,",
                "    )",
            ]
        )

        return GeneratedCallable(
            command_name=command.name,
            function_name=function_name,
            arities=(1, 2, 3),
            doc_text=doc_text,
            dispatch_method_string=method,
            source="\n\n\n".join([*overloads, implementation]),
        )

    def result_annotation(self, command: Command) -> str:
        """Return annotation: the result record when the command returns values."""
        if not command.returns:
            return RESULT
        return f"{RESULT}[{format_result_type_name(command.name)}]"

    def _render_overload(
        self, function_name: str, arguments: list[str], result: str
    ) -> str:
        signature = ", ".join(arguments)
        line = f"def {function_name}({signature}) -> {result}: ..."
        if len(line) > 88:
            args = "\n".join(f"    {a}," for a in arguments)
            line = f"def {function_name}(\n{args}\n) -> {result}: ..."
        return f"@overload\n{line}"

    def _render_docstring(self, doc_text: str) -> str:
        body = escape_docstring(doc_text)
        if "\n" not in body:
            return f'    """{body}"""'
        return f'    """{indent(body, "    ").lstrip()}\n    """'
