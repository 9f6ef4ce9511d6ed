"""Curve selection and error classification enums."""

from __future__ import annotations

from enum import StrEnum


class Curve(StrEnum):
    """Signature schemes a keypair can be derived for."""

    ED25519 = "ed25519"
    SR25519 = "sr25519"

    @property
    def type_tag(self) -> int:
        """Leading byte of a typed signature produced with this curve."""
        return _TYPE_TAGS[self]


_TYPE_TAGS: dict[Curve, int] = {
    Curve.ED25519: 0x00,
    Curve.SR25519: 0x01,
}


class SeedKind(StrEnum):
    """How the secret part of a suri is encoded."""

    HEX = "hex"
    MNEMONIC = "mnemonic"


class ErrorKind(StrEnum):
    """Error codes carried by ``ServiceError.code``."""

    INVALID_SURI = "INVALID_SURI"
    INVALID_SEED_LENGTH = "INVALID_SEED_LENGTH"
    INVALID_MNEMONIC_LENGTH = "INVALID_MNEMONIC_LENGTH"
    INVALID_MNEMONIC_CHECKSUM = "INVALID_MNEMONIC_CHECKSUM"
    EMPTY_PAYLOAD = "EMPTY_PAYLOAD"
    NOT_HEX_ENCODED = "NOT_HEX_ENCODED"
    KEY_DERIVATION_FAILED = "KEY_DERIVATION_FAILED"
    BACKEND_UNAVAILABLE = "BACKEND_UNAVAILABLE"


MNEMONIC_WORD_COUNTS: tuple[int, ...] = (12, 15, 18, 21, 24)
