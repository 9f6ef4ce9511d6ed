"""Tests for the root surisign CLI."""

import pytest
from click.testing import CliRunner

from surisign import __version__
from surisign.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "surisign" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_config")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/surisign-test.toml", "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("command", ["sign", "derive", "validate"])
def test_commands_registered(command: str) -> None:
    assert command in cli.commands


def test_root_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "surisign sign" in result.output


@pytest.mark.usefixtures("_isolated_config")
def test_missing_config_file_is_reported(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "missing.toml", "validate", "0x" + "ab" * 32])
    assert result.exit_code == 1
    assert "missing.toml" in result.output
    assert "does not exist" in result.output


@pytest.mark.usefixtures("_isolated_config")
def test_invalid_config_is_reported(cli_runner: CliRunner) -> None:
    with open("surisign.toml", "w", encoding="utf-8") as fh:
        fh.write('[signing]\nmnemonic_language = "klingon"\n')
    result = cli_runner.invoke(cli, ["validate", "0x" + "ab" * 32])
    assert result.exit_code == 1
    assert "Unknown mnemonic language" in result.output
