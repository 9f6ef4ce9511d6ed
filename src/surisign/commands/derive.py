"""Command: print the public key a suri derives to."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from surisign.commands._base import CURVE_CHOICE, SurisignCommand

if TYPE_CHECKING:
    from surisign.commands._context import AppContext


@click.command(
    cls=SurisignCommand,
    examples="""\
  surisign derive "<mnemonic>//Alice" sr25519
  surisign -q derive 0x<64 hex chars> ed25519""",
)
@click.argument("suri")
@click.argument("curve", type=CURVE_CHOICE)
@click.pass_obj
def derive(app: AppContext, suri: str, curve: str) -> None:
    """Derive the CURVE keypair for SURI and print its public key."""
    from surisign.domain.types import Curve

    app.emit(app.signing_service().derive(suri, Curve(curve.lower())))
