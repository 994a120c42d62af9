"""Generation errors.

Everything here aborts a generation run. Runtime dispatch failures are not
exceptions; see ``chrome_remote_interface.session.CommandError``.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


class CRIError(Exception):
    """Base class for schema loading and code generation failures."""

    def __init__(self, message: str, location: str | None = None) -> None:
        self.message = message
        self.location = location
        super().__init__(f"{location}: {message}" if location else message)

    def at(self, location: str) -> CRIError:
        """Return a copy of this error annotated with where it happened."""
        return CRIError(self.message, location)


class SchemaNotFound(CRIError):
    """No protocol file exists for the resolved version."""

    def __init__(
        self, version: str, path: Path | str, location: str | None = None
    ) -> None:
        self.version = version
        self.path = Path(path)
        super().__init__(
            f"No protocol schema for version '{version}' at {self.path}", location
        )

    def at(self, location: str) -> SchemaNotFound:
        return SchemaNotFound(self.version, self.path, location)


class SchemaMalformed(CRIError):
    """The protocol document failed to decode or lacks a required field."""

    def at(self, location: str) -> SchemaMalformed:
        return SchemaMalformed(self.message, location)


class UnresolvedReference(CRIError):
    """A ``$ref`` string does not decompose into a domain/type pair."""

    def __init__(self, ref: str, location: str | None = None) -> None:
        self.ref = ref
        super().__init__(f"Cannot resolve reference '{ref}'", location)

    def at(self, location: str) -> UnresolvedReference:
        return UnresolvedReference(self.ref, location)


@contextmanager
def located(location: str) -> Iterator[None]:
    """Attach ``location`` to any generation error raised inside the block.

    The innermost block wins, so nest from coarse (domain) to fine (command).
    """
    try:
        yield
    except CRIError as e:
        if e.location:
            raise
        raise e.at(location) from e
