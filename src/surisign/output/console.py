"""Rich Console factory and theme for surisign output.

Consoles render to a StringIO buffer, preserving the ``format_result() -> str``
contract. In non-TTY environments (tests, pipes) Rich disables color codes.
Soft wrapping keeps long hex values on a single line.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SURISIGN_THEME = Theme(
    {
        "suri.ok": "bold green",
        "suri.error": "bold red",
        "suri.op": "bold cyan",
        "suri.key": "dim",
        "suri.hex": "bold",
        "suri.curve.ed25519": "magenta",
        "suri.curve.sr25519": "blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SURISIGN_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_curve(curve: str) -> str:
    """Return the Rich style name for a curve."""
    return f"suri.curve.{curve}" if curve in ("ed25519", "sr25519") else ""
