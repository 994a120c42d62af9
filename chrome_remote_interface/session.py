"""Runtime contract between generated command functions and the transport.

Generated modules never talk to a browser themselves. Every command function
calls ``execute_command`` here, which hands the call to whatever session
object the caller passed in. Connecting, framing, timeouts and retries all
belong to that session.

Results are values, not exceptions::

    result = Page.navigate(session, {"url": "https://example.com"})
    if result.ok:
        frame_id = result.result["frameId"]
    else:
        print(result.kind, result.payload)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

# Per-call overrides such as ("timeout", 5000)
CommandOptions = Sequence[tuple[str, Any]]

# Shape of a successful result; generated modules bind it to a TypedDict
ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class CommandOk(Generic[ResultT]):
    """A successful command; ``result`` is the decoded result object."""

    result: ResultT = field(default_factory=dict)  # type: ignore[assignment]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class CommandError:
    """A failed command.

    ``kind`` names the failure class (for example ``"protocol"`` for an
    error response or ``"timeout"``); ``payload`` carries the details.
    """

    kind: str
    payload: Any = None

    @property
    def ok(self) -> bool:
        return False


CommandResult = CommandOk[ResultT] | CommandError


@runtime_checkable
class CommandSession(Protocol):
    """Anything that can send one protocol command and wait for its result."""

    def execute_command(
        self,
        method: str,
        parameters: Mapping[str, Any],
        options: CommandOptions,
    ) -> CommandResult: ...


def execute_command(
    session: CommandSession,
    method: str,
    parameters: Mapping[str, Any],
    options: CommandOptions,
) -> CommandResult:
    """Dispatch ``method`` through ``session`` and return its result unchanged."""
    return session.execute_command(method, parameters, options)
