"""Command: check a suri (and optionally a payload) without signing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from surisign.commands._base import SurisignCommand

if TYPE_CHECKING:
    from surisign.commands._context import AppContext


@click.command(
    cls=SurisignCommand,
    examples="""\
  surisign validate "<mnemonic>//hard/soft///password"
  surisign validate 0x<64 hex chars> --payload 0xdeadbeef
  surisign --json validate 0x<64 hex chars>""",
)
@click.argument("suri")
@click.option("--payload", default=None, help="Hex payload to check as well.")
@click.pass_obj
def validate(app: AppContext, suri: str, payload: str | None) -> None:
    """Classify SURI as hex seed or mnemonic and report its structure."""
    app.emit(app.signing_service().validate(suri, payload))
