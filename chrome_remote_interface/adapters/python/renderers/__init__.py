"""Python renderers - implementation details for module generation."""

from chrome_remote_interface.adapters.python.renderers.command import (
    CommandRenderer,
    wire_method,
)
from chrome_remote_interface.adapters.python.renderers.docs import (
    NO_PARAMETERS,
    NO_RETURN_VALUE,
    DocRenderer,
)
from chrome_remote_interface.adapters.python.renderers.module import (
    DEFAULT_PACKAGE,
    ModuleRenderer,
)
from chrome_remote_interface.adapters.python.renderers.types import (
    RenderedType,
    TypeRenderer,
)

__all__ = [
    "DEFAULT_PACKAGE",
    "NO_PARAMETERS",
    "NO_RETURN_VALUE",
    "CommandRenderer",
    "DocRenderer",
    "ModuleRenderer",
    "RenderedType",
    "TypeRenderer",
    "wire_method",
]
