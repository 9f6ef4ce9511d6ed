"""Hex string <-> bytes conversion.

Hex strings are accepted with or without a ``0x`` prefix and in either case.
Encoding always produces lowercase with the ``0x`` prefix.
"""

from __future__ import annotations

import re

HEX_PREFIX = "0x"

_HEX_BODY = re.compile(r"[0-9a-fA-F]*")


def strip_prefix(value: str) -> str:
    """Remove a leading ``0x`` if present."""
    if value.startswith(HEX_PREFIX):
        return value[len(HEX_PREFIX) :]
    return value


def is_hex(value: str, *, bit_length: int | None = None, require_prefix: bool = False) -> bool:
    """Check whether *value* is an even-length hex string.

    Args:
        value: Candidate string.
        bit_length: When given, the decoded value must be exactly this many bits.
        require_prefix: Reject strings without the ``0x`` prefix.

    Examples:
        >>> is_hex("deadbeef")
        True
        >>> is_hex("0xabc")
        False
        >>> is_hex("0x" + "00" * 32, bit_length=256)
        True
    """
    if require_prefix and not value.startswith(HEX_PREFIX):
        return False
    body = strip_prefix(value)
    if len(body) % 2 != 0 or _HEX_BODY.fullmatch(body) is None:
        return False
    if bit_length is not None and len(body) * 4 != bit_length:
        return False
    return True


def hex_bit_length(value: str) -> int:
    """Number of bits encoded by a hex string (prefix ignored)."""
    return len(strip_prefix(value)) * 4


def hex_to_bytes(value: str) -> bytes:
    """Decode a hex string; raises ``ValueError`` on malformed input."""
    if not is_hex(value):
        msg = f"Not a hex string: {value!r}"
        raise ValueError(msg)
    return bytes.fromhex(strip_prefix(value))


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as lowercase ``0x``-prefixed hex."""
    return f"{HEX_PREFIX}{data.hex()}"
