"""Command: sign a hex payload with a key derived from a suri."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from surisign.commands._base import CURVE_CHOICE, SurisignCommand

if TYPE_CHECKING:
    from surisign.commands._context import AppContext


@click.command(
    cls=SurisignCommand,
    examples="""\
  surisign sign "bottom drive obey lake curtain smoke basket hold race lonely fit walk//Alice" sr25519 0x1234
  surisign sign 0x<64 hex chars>//hard/soft ed25519 deadbeef
  surisign -q sign "<mnemonic>///password" sr25519 0xabcdef
  surisign --json sign "<mnemonic>" ed25519 0x00""",
)
@click.argument("suri")
@click.argument("curve", type=CURVE_CHOICE)
@click.argument("payload")
@click.pass_obj
def sign(app: AppContext, suri: str, curve: str, payload: str) -> None:
    """Sign hex PAYLOAD with the CURVE key derived from SURI.

    SURI is a hex seed or mnemonic, optionally followed by //hard and /soft
    junctions and a ///password.
    """
    from surisign.domain.types import Curve

    app.emit(app.signing_service().execute(suri, Curve(curve.lower()), payload))
