"""Subcommand modules for surisign.

Provides register_commands() which uses deferred imports so ``--help`` and
``--version`` never load the crypto bindings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from surisign.commands.derive import derive
    from surisign.commands.sign import sign
    from surisign.commands.validate import validate

    cli.add_command(sign)
    cli.add_command(derive)
    cli.add_command(validate)
