"""CLI utilities for chrome-remote-interface.

Custom Click help formatters and shared helpers for the command modules.
"""

from __future__ import annotations

from chrome_remote_interface.cli.help_formatter import RichCommand, RichGroup

__all__ = [
    "RichCommand",
    "RichGroup",
]
