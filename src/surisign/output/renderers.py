"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op``; unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from surisign.output.console import create_console, get_output, style_for_curve

if TYPE_CHECKING:
    from rich.console import Console

    from surisign.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


_QUIET_KEYS: dict[str, str] = {
    "sign": "signature",
    "derive": "public_key",
    "validate": "kind",
}


def render_quiet(result: ServiceResult) -> str:
    """Render the bare primary value for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    key = _QUIET_KEYS.get(result.op)
    if key and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="suri.key")
    if key == "curve":
        v = Text(str(value), style=style_for_curve(str(value)))
    elif isinstance(value, str) and value.startswith("0x"):
        v = Text(value, style="suri.hex")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {span_data.get('name', '?')}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)
    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR: ", style="suri.error"),
        Text(result.op, style="suri.op"),
        Text(f" - {msg}"),
        sep="",
    )
    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"  {k}: {v}", style="dim"))


def _render_sign(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("Signature: "), Text(result.data["signature"], style="suri.hex"), sep="")
    if verbose:
        for key in ("curve", "public_key", "payload_bytes"):
            if key in result.data:
                _field(console, key, result.data[key])
        _render_meta(console, result)


def _render_derive(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("Public key: "), Text(result.data["public_key"], style="suri.hex"), sep="")
    _field(console, "curve", result.data["curve"])
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    console.print(Text("OK", style="suri.ok"), Text(f"  {result.op}", style="suri.op"), sep="")
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "sign": _render_sign,
    "derive": _render_derive,
    "validate": _render_generic,
}
