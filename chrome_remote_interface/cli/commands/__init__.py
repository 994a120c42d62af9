"""CLI commands for chrome-remote-interface.

Commands are registered by importing them in __main__.py.
"""

from __future__ import annotations

from chrome_remote_interface.cli.commands.generate import generate
from chrome_remote_interface.cli.commands.validate import validate
from chrome_remote_interface.cli.commands.versions import versions

__all__ = [
    "generate",
    "validate",
    "versions",
]
