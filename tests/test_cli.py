"""Tests for the cri command-line interface."""

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from chrome_remote_interface.__main__ import cli
from chrome_remote_interface.ingestion.loader import PROTOCOL_ENV_KEY
from chrome_remote_interface.manifest import MANIFEST_FILENAME

CONFIG = """\
protocol_dir: priv
output: gen/rpc
"""


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """A CliRunner with the protocol version env var cleared."""
    monkeypatch.delenv(PROTOCOL_ENV_KEY, raising=False)
    return CliRunner()


def _write_project(
    root: Path, protocol: dict[str, Any], config: str = CONFIG, version: str = "tot"
) -> None:
    (root / "cri.yml").write_text(config)
    protocol_path = root / "priv" / version / "protocol.json"
    protocol_path.parent.mkdir(parents=True)
    protocol_path.write_text(json.dumps(protocol))


class TestCLIGroup:
    """Tests for the top-level command group."""

    def test_help(self, runner: CliRunner) -> None:
        """Test --help lists every command."""
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for command in ("generate", "validate", "versions"):
            assert command in result.output

    def test_generate_help(self, runner: CliRunner) -> None:
        """Test generate --help shows its options."""
        result = runner.invoke(cli, ["generate", "--help"])

        assert result.exit_code == 0
        assert "--protocol-version" in result.output
        assert "--dry-run" in result.output


class TestGenerateCommand:
    """Tests for cri generate."""

    def test_generate(self, runner: CliRunner, sample_protocol: dict[str, Any]) -> None:
        """Test generating writes the package next to the config file."""
        with runner.isolated_filesystem():
            root = Path.cwd()
            _write_project(root, sample_protocol)

            result = runner.invoke(cli, ["generate"])

            assert result.exit_code == 0, result.output
            assert "Generated 5 files" in result.output
            output = root / "gen" / "rpc"
            assert sorted(p.name for p in output.iterdir()) == [
                MANIFEST_FILENAME,
                "DOM.py",
                "Network.py",
                "Page.py",
                "__init__.py",
            ]

    def test_dry_run_writes_nothing(
        self, runner: CliRunner, sample_protocol: dict[str, Any]
    ) -> None:
        """Test --dry-run reports files without creating them."""
        with runner.isolated_filesystem():
            root = Path.cwd()
            _write_project(root, sample_protocol)

            result = runner.invoke(cli, ["generate", "--dry-run"])

            assert result.exit_code == 0, result.output
            assert "Would generate 4 files" in result.output
            assert "Page.py" in result.output
            assert not (root / "gen").exists()

    def test_domain_filter(
        self, runner: CliRunner, sample_protocol: dict[str, Any]
    ) -> None:
        """Test the domains allow-list limits output and warns about unknowns."""
        with runner.isolated_filesystem():
            root = Path.cwd()
            _write_project(root, sample_protocol, CONFIG + "domains: [Page, Audits]\n")

            result = runner.invoke(cli, ["generate"])

            assert result.exit_code == 0, result.output
            assert "Audits" in result.output
            assert (root / "gen" / "rpc" / "Page.py").exists()
            assert not (root / "gen" / "rpc" / "DOM.py").exists()

    def test_protocol_version_option(
        self, runner: CliRunner, navigate_protocol: dict[str, Any]
    ) -> None:
        """Test --protocol-version selects the versioned protocol file."""
        with runner.isolated_filesystem():
            root = Path.cwd()
            _write_project(root, navigate_protocol, version="1-3")

            result = runner.invoke(cli, ["generate", "--protocol-version", "1-3"])

            assert result.exit_code == 0, result.output
            init = (root / "gen" / "rpc" / "__init__.py").read_text()
            assert 'PROTOCOL_VERSION = "1-3"' in init

    def test_version_from_env(
        self,
        runner: CliRunner,
        navigate_protocol: dict[str, Any],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test CRI_PROTOCOL_VERSION selects the version when config has none."""
        monkeypatch.setenv(PROTOCOL_ENV_KEY, "1-2")
        with runner.isolated_filesystem():
            root = Path.cwd()
            _write_project(root, navigate_protocol, version="1-2")

            result = runner.invoke(cli, ["generate"])

            assert result.exit_code == 0, result.output
            assert "'1-2'" in result.output

    def test_missing_protocol(self, runner: CliRunner) -> None:
        """Test a missing protocol file is reported and fails."""
        with runner.isolated_filesystem():
            Path("cri.yml").write_text(CONFIG)

            result = runner.invoke(cli, ["generate"])

            assert result.exit_code == 1
            assert "Protocol schema not found" in result.output

    def test_malformed_protocol(self, runner: CliRunner) -> None:
        """Test an invalid protocol document fails with its location."""
        with runner.isolated_filesystem():
            root = Path.cwd()
            _write_project(root, {"domains": [{"domain": "Page", "commands": [{}]}]})

            result = runner.invoke(cli, ["generate"])

            assert result.exit_code == 1
            assert "Malformed protocol schema" in result.output
            assert "Missing required field 'name'" in result.output

    def test_missing_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test running without cri.yml explains how to create one."""
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["generate"])

            assert result.exit_code == 1
            assert "No cri.yml found" in result.output

    def test_invalid_config(self, runner: CliRunner) -> None:
        """Test config validation errors fail the command."""
        with runner.isolated_filesystem():
            Path("cri.yml").write_text("protocol_dir: priv\n")

            result = runner.invoke(cli, ["generate"])

            assert result.exit_code == 1
            assert "Config validation error" in result.output

    def test_debug_prints_traceback(self, runner: CliRunner) -> None:
        """Test --debug includes the traceback."""
        with runner.isolated_filesystem():
            Path("cri.yml").write_text(CONFIG)

            result = runner.invoke(cli, ["generate", "--debug"])

            assert result.exit_code == 1
            assert "Traceback" in result.output


class TestValidateCommand:
    """Tests for cri validate."""

    def test_validate(self, runner: CliRunner, sample_protocol: dict[str, Any]) -> None:
        """Test a valid project passes without writing anything."""
        with runner.isolated_filesystem():
            root = Path.cwd()
            _write_project(root, sample_protocol)

            result = runner.invoke(cli, ["validate"])

            assert result.exit_code == 0, result.output
            assert "3 domains" in result.output
            assert "All validations passed" in result.output
            assert not (root / "gen").exists()

    def test_validate_bad_reference(self, runner: CliRunner) -> None:
        """Test an unparseable $ref fails validation."""
        protocol = {
            "domains": [
                {
                    "domain": "Page",
                    "commands": [
                        {"name": "navigate", "returns": [{"name": "f", "$ref": "A.B.C"}]}
                    ],
                }
            ]
        }
        with runner.isolated_filesystem():
            _write_project(Path.cwd(), protocol)

            result = runner.invoke(cli, ["validate"])

            assert result.exit_code == 1
            assert "Unresolved reference" in result.output
            assert "Page.navigate" in result.output


class TestVersionsCommand:
    """Tests for cri versions."""

    def test_versions(self, runner: CliRunner) -> None:
        """Test every supported version is listed."""
        result = runner.invoke(cli, ["versions"])

        assert result.exit_code == 0
        for version in ("1-2", "1-3", "tot"):
            assert version in result.output
        assert "CRI_PROTOCOL_VERSION is not set" in result.output

    def test_versions_unknown_env(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test an unknown env value is flagged."""
        monkeypatch.setenv(PROTOCOL_ENV_KEY, "latest")

        result = runner.invoke(cli, ["versions"])

        assert result.exit_code == 0
        assert "not a known version" in result.output


class TestChangeReport:
    """Tests for reporting changes against the previous run."""

    def test_verbose_reports_changes(
        self, runner: CliRunner, sample_protocol: dict[str, Any]
    ) -> None:
        """Test a rerun lists modified and removed modules."""
        with runner.isolated_filesystem():
            root = Path.cwd()
            _write_project(root, sample_protocol)
            assert runner.invoke(cli, ["generate"]).exit_code == 0

            sample_protocol["domains"] = sample_protocol["domains"][:2]
            sample_protocol["domains"][1]["commands"].append({"name": "stopLoading"})
            protocol_path = root / "priv" / "tot" / "protocol.json"
            protocol_path.write_text(json.dumps(sample_protocol))

            result = runner.invoke(cli, ["generate", "--verbose"])

            assert result.exit_code == 0, result.output
            assert "Changed: Page.py, __init__.py" in result.output
            assert "Removed: DOM.py" in result.output
            assert not (root / "gen" / "rpc" / "DOM.py").exists()

    def test_unchanged_rerun_reports_nothing(
        self, runner: CliRunner, sample_protocol: dict[str, Any]
    ) -> None:
        """Test an identical rerun reports no changes."""
        with runner.isolated_filesystem():
            _write_project(Path.cwd(), sample_protocol)
            runner.invoke(cli, ["generate"])

            result = runner.invoke(cli, ["generate", "--verbose"])

            assert result.exit_code == 0, result.output
            assert "Changed:" not in result.output
            assert "Removed:" not in result.output


class TestVersionsProtocolDir:
    """Tests for cri versions --protocol-dir."""

    def test_marks_missing_versions(
        self, runner: CliRunner, protocol_dir: Path
    ) -> None:
        """Test versions without a protocol file are flagged."""
        result = runner.invoke(cli, ["versions", "--protocol-dir", str(protocol_dir)])

        assert result.exit_code == 0, result.output
        lines = {line.split()[0]: line for line in result.output.splitlines() if line.strip()}
        assert "(missing)" in lines["1-2"]
        assert "(missing)" in lines["1-3"]
        assert "(missing)" not in lines["tot"]
