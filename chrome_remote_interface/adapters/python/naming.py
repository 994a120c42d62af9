"""Naming conventions for generated Python code.

Schema identifiers are mixedCase/CamelCase (``FrameId``, ``getDOMCounters``);
generated Python names are snake_case. Type names also carry ``TYPE_PREFIX``
so they never shadow builtins, keywords or user code.
"""

from __future__ import annotations

import keyword
import re

TYPE_PREFIX = "cdp_"

# Names every generated module defines or imports itself
RESERVED_MODULE_NAMES = frozenset(
    {
        "annotations",
        "experimental",
        "overload",
        "Any",
        "TYPE_CHECKING",
        "TypeAlias",
        "TypedDict",
    }
)

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_REPEATED_UNDERSCORES = re.compile(r"_+")


def underscore(name: str) -> str:
    """
    Convert a schema identifier to snake_case.

    A trailing ``ID`` is treated as one word so ``FrameID`` becomes
    ``frame_id``; runs of capitals stay together (``DOM`` -> ``dom``,
    ``HTTPRequest`` -> ``http_request``).

    Examples:
        >>> underscore("FrameId")
        'frame_id'
        >>> underscore("FrameID")
        'frame_id'
        >>> underscore("getDOMCounters")
        'get_dom_counters'
    """
    if name.endswith("ID"):
        name = name[:-2] + "_id"
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    name = _REPEATED_UNDERSCORES.sub("_", name.replace("-", "_"))
    return name.strip("_").lower()


def format_type_name(type_id: str) -> str:
    """Name of the generated declaration for a schema type id."""
    return f"{TYPE_PREFIX}{underscore(type_id)}"


def format_function_name(command: str) -> str:
    """Name of the generated function for a schema command."""
    name = underscore(command)
    if keyword.iskeyword(name) or name in RESERVED_MODULE_NAMES:
        return f"{name}_"
    return name


def module_name(domain: str) -> str:
    """Module name for a domain.

    Kept in schema casing so qualified type names read ``Page.cdp_frame_id``.
    """
    return domain


def format_result_type_name(command: str) -> str:
    """Name of the generated record describing a command's return values."""
    return f"{underscore(command)}_result"
