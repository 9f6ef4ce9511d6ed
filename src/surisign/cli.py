"""Root CLI group for surisign with global flags and command registration."""

from __future__ import annotations

import click

from surisign import __version__
from surisign.commands import register_commands
from surisign.commands._base import SurisignGroup
from surisign.commands._context import AppContext
from surisign.config.settings import SurisignSettings


@click.group(
    cls=SurisignGroup,
    invoke_without_command=True,
    examples="""\
  surisign sign "<mnemonic>" sr25519 0x1234
  surisign derive "<mnemonic>//Alice" ed25519
  surisign validate "<mnemonic>///password" --payload 0xdeadbeef""",
)
@click.version_option(version=__version__, prog_name="surisign")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the bare result value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing spans.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """surisign - derive a key from a secret URI and sign a hex payload."""
    settings = SurisignSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
