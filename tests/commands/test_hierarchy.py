"""Tests for parent, root, walk, add-subdomain and is-subdomain."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from domainctl.cli import cli


class TestParent:
    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parent", "mail.example.com"])
        assert result.exit_code == 0
        assert result.stdout == "example.com\n"

    def test_tld(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parent", "com"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["parent"] is None

    def test_literal_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parent", "[192.168.1.1]"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Failed to convert from transport to parent domain" in result.stderr


class TestRoot:
    def test_root(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "root", "a.b.example.com"])
        assert result.stdout.strip() == "example.com"

    def test_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["root", "a.b.example.com"])
        assert result.exit_code == 0
        assert "root: example.com" in result.stdout


class TestWalk:
    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "walk", "api.v1.example.com"])
        assert result.stdout.splitlines() == [
            "api.v1.example.com",
            "v1.example.com",
            "example.com",
            "com",
        ]

    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["walk", "123.example.com"])
        assert result.exit_code == 0
        assert "permissive" in result.stdout
        assert "strict" in result.stdout


class TestAddSubdomain:
    def test_multiple_labels(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "add-subdomain", "example.com", "api", "v1"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "api.v1.example.com"

    def test_strict_rejects_numeric(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add-subdomain", "example.com", "123"])
        assert result.exit_code == 1
        assert "Cannot create subdomain" in result.stderr

    def test_allow_downgrade_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "add-subdomain", "--allow-downgrade", "example.com", "123"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "123.example.com"
        assert "WARNING" in result.stderr

    def test_allow_downgrade_from_config(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "domainctl.toml").write_text("[hierarchy]\nallow_downgrade = true\n")
        result = cli_runner.invoke(cli, ["--json", "add-subdomain", "example.com", "123"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["tier"] == "permissive"
        assert len(data["warnings"]) == 1

    def test_requires_labels(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["add-subdomain", "example.com"])
        assert result.exit_code == 2

    def test_literal(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "add-subdomain", "[10.0.0.1]", "www"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "CANNOT_CREATE_SUBDOMAIN"


class TestIsSubdomain:
    def test_true(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "is-subdomain", "mail.example.com", "example.com"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "true"

    def test_false_is_still_success(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "is-subdomain", "example.com", "mail.example.com"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "false"
