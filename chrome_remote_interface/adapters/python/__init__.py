"""Python Adapter: Render protocol domains to importable modules."""

from chrome_remote_interface.adapters.python.generator import PythonGenerator
from chrome_remote_interface.adapters.python.naming import (
    TYPE_PREFIX,
    format_function_name,
    format_result_type_name,
    format_type_name,
    underscore,
)
from chrome_remote_interface.adapters.python.renderers import (
    CommandRenderer,
    DocRenderer,
    ModuleRenderer,
    TypeRenderer,
)
from chrome_remote_interface.adapters.python.types import (
    cdp_ref_to_spec,
    cdp_type_to_spec,
    generate_map_type_spec,
    param_type_spec,
    resolve_type_def,
)

__all__ = [
    "TYPE_PREFIX",
    "CommandRenderer",
    "DocRenderer",
    "ModuleRenderer",
    "PythonGenerator",
    "TypeRenderer",
    "cdp_ref_to_spec",
    "cdp_type_to_spec",
    "format_function_name",
    "format_result_type_name",
    "format_type_name",
    "generate_map_type_spec",
    "param_type_spec",
    "resolve_type_def",
    "underscore",
]
