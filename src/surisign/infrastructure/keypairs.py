"""Keypair construction, HDKD junction derivation and typed signing.

Ed25519 goes through PyNaCl, Sr25519 through py-sr25519-bindings (schnorrkel).
Derivation follows the Substrate conventions so that a given suri yields the
same public key as other Substrate tooling:

- mnemonic seeds are ``PBKDF2-HMAC-SHA512(entropy, "mnemonic" + password)``
  truncated to 32 bytes;
- Ed25519 hard junctions hash ``"Ed25519HDKD" || seed || chain_code`` with
  BLAKE2b-256 into a new seed; soft junctions do not exist for Ed25519;
- Sr25519 junctions use the schnorrkel hard/soft derivation primitives.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Sequence

import sr25519
from mnemonic import Mnemonic
from nacl.signing import SigningKey

from surisign.domain.keys import Keypair, Signature
from surisign.domain.suri import DeriveJunction, compact_length_prefix
from surisign.domain.types import Curve

logger = logging.getLogger(__name__)

SEED_LENGTH = 32
PBKDF2_ROUNDS = 2048
_ED25519_HDKD = b"Ed25519HDKD"


class KeyDerivationError(Exception):
    """Raised when a keypair cannot be derived from otherwise valid input."""


def mini_secret_from_mnemonic(phrase: str, password: str = "", *, language: str = "english") -> bytes:
    """Recover the 32-byte mini secret for a BIP-39 phrase.

    Uses the phrase entropy rather than the BIP-39 seed, matching Substrate.
    """
    try:
        entropy = bytes(Mnemonic(language).to_entropy(" ".join(phrase.split())))
    except (ValueError, LookupError, OSError) as exc:
        raise KeyDerivationError(f"Cannot recover mnemonic entropy: {exc}") from exc
    salt = f"mnemonic{password}".encode()
    return hashlib.pbkdf2_hmac("sha512", entropy, salt, PBKDF2_ROUNDS)[:SEED_LENGTH]


def _chain_code(junction: DeriveJunction) -> bytes:
    try:
        return junction.chain_code
    except ValueError as exc:
        raise KeyDerivationError(str(exc)) from exc


def _ed25519_from_seed(seed: bytes) -> Keypair:
    signing_key = SigningKey(seed)
    return Keypair(
        curve=Curve.ED25519,
        public_key=bytes(signing_key.verify_key),
        secret_key=seed,
    )


def _derive_ed25519(seed: bytes, junctions: Sequence[DeriveJunction]) -> Keypair:
    for junction in junctions:
        if not junction.is_hard:
            msg = f"Soft junction {junction} is not supported for ed25519"
            raise KeyDerivationError(msg)
        prefix = compact_length_prefix(len(_ED25519_HDKD)) + _ED25519_HDKD
        seed = hashlib.blake2b(
            prefix + seed + _chain_code(junction),
            digest_size=SEED_LENGTH,
        ).digest()
    return _ed25519_from_seed(seed)


def _derive_sr25519(seed: bytes, junctions: Sequence[DeriveJunction]) -> Keypair:
    try:
        public, secret = sr25519.pair_from_seed(seed)
        for junction in junctions:
            derive = sr25519.hard_derive_keypair if junction.is_hard else sr25519.derive_keypair
            _, public, secret = derive((_chain_code(junction), public, secret), b"")
    except KeyDerivationError:
        raise
    except Exception as exc:
        raise KeyDerivationError(f"sr25519 derivation failed: {exc}") from exc
    return Keypair(curve=Curve.SR25519, public_key=bytes(public), secret_key=bytes(secret))


def derive_keypair(seed: bytes, junctions: Sequence[DeriveJunction], curve: Curve) -> Keypair:
    """Build the keypair for *seed* and walk *junctions* down to the child key.

    Raises:
        KeyDerivationError: Wrong seed size, unsupported or out-of-range junction,
            or a failure inside the native bindings.
    """
    if len(seed) != SEED_LENGTH:
        msg = f"Seed must be {SEED_LENGTH} bytes, got {len(seed)}"
        raise KeyDerivationError(msg)
    if curve is Curve.ED25519:
        return _derive_ed25519(seed, junctions)
    return _derive_sr25519(seed, junctions)


def sign_typed(keypair: Keypair, message: bytes) -> Signature:
    """Sign *message* and prefix the curve's type tag."""
    if keypair.curve is Curve.ED25519:
        raw = SigningKey(keypair.secret_key).sign(message).signature
    else:
        raw = sr25519.sign((keypair.public_key, keypair.secret_key), message)
    return Signature(curve=keypair.curve, data=bytes([keypair.curve.type_tag]) + bytes(raw))
