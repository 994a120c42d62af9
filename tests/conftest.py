"""Shared fixtures: a small protocol document in the shape of protocol.json."""

from __future__ import annotations

import copy
import importlib
import json
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from types import ModuleType
from typing import Any

import pytest

from chrome_remote_interface.session import CommandOk, CommandResult

SAMPLE_PROTOCOL: dict[str, Any] = {
    "version": {"major": "1", "minor": "3"},
    "domains": [
        {
            "domain": "Network",
            "description": "Network domain allows tracking network activities of the page.",
            "types": [
                {
                    "id": "LoaderId",
                    "description": "Unique loader identifier.",
                    "type": "string",
                },
                {"id": "RequestId", "type": "string"},
                {
                    "id": "Headers",
                    "description": "Request / response headers as keys / values of JSON object.",
                    "type": "object",
                },
                {
                    "id": "ResourcePriority",
                    "description": "Loading priority of a resource request.",
                    "type": "string",
                    "enum": ["VeryLow", "Low", "Medium", "High", "VeryHigh"],
                },
                {
                    "id": "Initiator",
                    "type": "object",
                    "properties": [
                        {"name": "type", "type": "string", "enum": ["parser", "script"]},
                        {"name": "url", "type": "string", "optional": True},
                        {"name": "requestId", "$ref": "RequestId", "optional": True},
                    ],
                },
            ],
            "commands": [
                {"name": "enable", "description": "Enables network tracking."},
                {
                    "name": "getResponseBody",
                    "description": "Returns content served for the given request.",
                    "parameters": [
                        {
                            "name": "requestId",
                            "$ref": "RequestId",
                            "description": "Identifier of the network request.",
                        }
                    ],
                    "returns": [
                        {"name": "body", "type": "string", "description": "Response body."},
                        {"name": "base64Encoded", "type": "boolean"},
                    ],
                },
            ],
        },
        {
            "domain": "Page",
            "description": "Actions and events related to the inspected page belong to the page domain.",
            "dependencies": ["Network"],
            "types": [
                {
                    "id": "FrameId",
                    "description": "Unique frame identifier.",
                    "type": "string",
                },
                {
                    "id": "Frame",
                    "description": "Information about the Frame on the page.",
                    "type": "object",
                    "properties": [
                        {"name": "id", "$ref": "FrameId"},
                        {"name": "parentId", "$ref": "FrameId", "optional": True},
                        {"name": "loaderId", "$ref": "Network.LoaderId"},
                        {"name": "url", "type": "string"},
                    ],
                },
                {
                    "id": "FrameTree",
                    "type": "object",
                    "properties": [
                        {"name": "frame", "$ref": "Frame"},
                        {
                            "name": "childFrames",
                            "type": "array",
                            "items": {"$ref": "FrameTree"},
                            "optional": True,
                        },
                    ],
                },
                {"id": "ScriptIdentifier", "type": "string", "experimental": True},
            ],
            "commands": [
                {
                    "name": "navigate",
                    "description": "Navigates current page to the given URL.",
                    "parameters": [
                        {
                            "name": "url",
                            "type": "string",
                            "description": "URL to navigate the page to.",
                        }
                    ],
                    "returns": [
                        {
                            "name": "frameId",
                            "$ref": "FrameId",
                            "description": "Frame id that has navigated (or failed to navigate)",
                        }
                    ],
                },
                {
                    "name": "reload",
                    "parameters": [
                        {"name": "ignoreCache", "type": "boolean", "optional": True}
                    ],
                },
                {
                    "name": "getFrameTree",
                    "returns": [{"name": "frameTree", "$ref": "FrameTree"}],
                },
            ],
        },
        {
            "domain": "DOM",
            "experimental": True,
            "types": [
                {"id": "NodeId", "type": "integer"},
                {"id": "Quad", "type": "array", "items": {"type": "number"}},
            ],
            "commands": [
                {"name": "getDocument", "returns": [{"name": "root", "type": "object"}]},
            ],
        },
    ],
}

NAVIGATE_PROTOCOL: dict[str, Any] = {
    "domains": [
        {
            "domain": "Page",
            "commands": [
                {
                    "name": "navigate",
                    "parameters": [{"name": "url", "type": "string"}],
                }
            ],
        }
    ]
}


@pytest.fixture
def sample_protocol() -> dict[str, Any]:
    """A fresh copy of the sample protocol document."""
    return copy.deepcopy(SAMPLE_PROTOCOL)


@pytest.fixture
def navigate_protocol() -> dict[str, Any]:
    """A one-domain, one-command protocol document."""
    return copy.deepcopy(NAVIGATE_PROTOCOL)


def write_protocol(
    protocol_dir: Path, document: Any, version: str = "tot"
) -> Path:
    """Write ``document`` as ``{protocol_dir}/{version}/protocol.json``."""
    path = protocol_dir / version / "protocol.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def protocol_writer() -> Callable[..., Path]:
    """The write_protocol helper, for tests that need other layouts."""
    return write_protocol


@pytest.fixture
def protocol_dir(tmp_path: Path, sample_protocol: dict[str, Any]) -> Path:
    """A protocol directory with the sample document under tot/."""
    root = tmp_path / "priv"
    write_protocol(root, sample_protocol)
    return root


@pytest.fixture
def import_generated(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Callable[[dict[str, str], str, str], ModuleType]]:
    """Write generated files as a package under tmp_path and import from it.

    An empty module name imports the package itself.

    Imported modules are removed from sys.modules afterwards.
    """
    root = tmp_path / "generated_src"
    root.mkdir()
    monkeypatch.syspath_prepend(str(root))
    packages: list[str] = []

    def _import(files: dict[str, str], package: str, module: str) -> ModuleType:
        package_dir = root / package
        package_dir.mkdir(exist_ok=True)
        for filename, content in files.items():
            (package_dir / filename).write_text(content, encoding="utf-8")
        packages.append(package)
        importlib.invalidate_caches()
        return importlib.import_module(f"{package}.{module}" if module else package)

    yield _import

    for name in list(sys.modules):
        if any(name == p or name.startswith(f"{p}.") for p in packages):
            del sys.modules[name]


class RecordingSession:
    """A CommandSession that records every call and returns a fixed result."""

    def __init__(self, result: CommandResult | None = None) -> None:
        self.result = result if result is not None else CommandOk({"frameId": "F1"})
        self.calls: list[tuple[str, Any, Any]] = []

    def execute_command(
        self, method: str, parameters: Any, options: Any
    ) -> CommandResult:
        self.calls.append((method, parameters, options))
        return self.result


@pytest.fixture
def recording_session() -> RecordingSession:
    """A fresh RecordingSession returning CommandOk."""
    return RecordingSession()
