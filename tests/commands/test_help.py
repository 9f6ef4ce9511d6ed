"""Parametrized help and --examples tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from surisign.cli import cli

HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["sign", "--help"], ["SURI", "ed25519|sr25519", "PAYLOAD"]),
    (["derive", "--help"], ["SURI", "ed25519|sr25519"]),
    (["validate", "--help"], ["SURI", "--payload"]),
]

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["sign", "--examples"], ["surisign sign", "sr25519 0x1234"]),
    (["derive", "--examples"], ["surisign derive"]),
    (["validate", "--examples"], ["--payload 0xdeadbeef"]),
]


@pytest.mark.usefixtures("_isolated_config")
@pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.usefixtures("_isolated_config")
@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output
