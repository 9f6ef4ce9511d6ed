"""Secret URI parsing.

A suri has the shape ``<phrase>[//hard|/soft]*[///password]``. The phrase is
either a hex seed or a mnemonic; junctions select a child key; the password
salts mnemonic seed recovery.

Pure functions, no crypto dependencies beyond hashlib. Chain codes are
computed on demand so that parsing never fails on junction contents.
"""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass

from surisign.domain.hexcodec import is_hex, strip_prefix
from surisign.domain.types import SeedKind

JUNCTION_ID_LEN = 32

_SURI_PATTERN = re.compile(
    r"(?P<phrase>[^/]*)(?P<path>(?://?[^/]+)*)(?:///(?P<password>.*))?",
    re.DOTALL,
)
_JUNCTION_PATTERN = re.compile(r"/(/?)([^/]+)")
_NUMERIC = re.compile(r"^\d+$")


class SuriParseError(ValueError):
    """Raised when a string does not have the shape of a secret URI."""


def compact_length_prefix(length: int) -> bytes:
    """SCALE compact encoding of a length, as used ahead of byte strings."""
    if length < 1 << 6:
        return bytes([length << 2])
    if length < 1 << 14:
        return ((length << 2) | 0b01).to_bytes(2, "little")
    if length < 1 << 30:
        return ((length << 2) | 0b10).to_bytes(4, "little")
    raw = length.to_bytes((length.bit_length() + 7) // 8, "little")
    return bytes([((len(raw) - 4) << 2) | 0b11]) + raw


@dataclass(frozen=True)
class DeriveJunction:
    """One ``/soft`` or ``//hard`` path segment."""

    text: str
    is_hard: bool

    @property
    def chain_code(self) -> bytes:
        """32-byte chain code for this junction.

        Raises:
            ValueError: A numeric junction does not fit in 256 bits.
        """
        if _NUMERIC.match(self.text):
            index = int(self.text)
            if index.bit_length() > JUNCTION_ID_LEN * 8:
                msg = f"Junction index {self.text} is out of range"
                raise ValueError(msg)
            raw = index.to_bytes(JUNCTION_ID_LEN, "little")
        elif self.text.startswith("0x") and is_hex(self.text):
            raw = bytes.fromhex(strip_prefix(self.text))
        else:
            encoded = self.text.encode("utf-8")
            raw = compact_length_prefix(len(encoded)) + encoded

        if len(raw) > JUNCTION_ID_LEN:
            return hashlib.blake2b(raw, digest_size=JUNCTION_ID_LEN).digest()
        return raw.ljust(JUNCTION_ID_LEN, b"\x00")

    def __str__(self) -> str:
        return f"{'//' if self.is_hard else '/'}{self.text}"


@dataclass(frozen=True)
class SecretUri:
    """A parsed suri. ``password`` is None when no ``///`` section exists."""

    phrase: str
    junctions: tuple[DeriveJunction, ...] = ()
    password: str | None = None

    @property
    def path(self) -> str:
        return "".join(str(j) for j in self.junctions)


def parse_path(path: str) -> tuple[DeriveJunction, ...]:
    """Split a derivation path into junctions.

    Examples:
        >>> [str(j) for j in parse_path("//polkadot/0")]
        ['//polkadot', '/0']
    """
    junctions = tuple(
        DeriveJunction(text=match.group(2), is_hard=match.group(1) == "/")
        for match in _JUNCTION_PATTERN.finditer(path)
    )
    if "".join(str(j) for j in junctions) != path:
        msg = f"Derivation path {path!r} is malformed"
        raise SuriParseError(msg)
    return junctions


def parse_suri(suri: str) -> SecretUri:
    """Parse a suri into phrase, junctions and password.

    Raises:
        SuriParseError: The string is not a well-formed suri (for example a
            dangling ``//`` or a path segment without text).
    """
    match = _SURI_PATTERN.fullmatch(suri)
    if match is None:
        msg = "Unable to match provided value to a secret URI"
        raise SuriParseError(msg)
    return SecretUri(
        phrase=match.group("phrase"),
        junctions=parse_path(match.group("path")),
        password=match.group("password"),
    )


def classify_phrase(phrase: str, *, require_hex_prefix: bool = False) -> SeedKind:
    """Decide whether *phrase* is a hex seed or a mnemonic.

    Any non-empty hex string counts as a hex seed, whatever its length; the
    length is checked by the caller.
    """
    if phrase and is_hex(phrase, require_prefix=require_hex_prefix):
        return SeedKind.HEX
    return SeedKind.MNEMONIC
