"""KeyDeriver: validated suri + curve -> Keypair.

The curve arithmetic lives in :mod:`surisign.infrastructure.keypairs`; this
service only reconstructs the seed from the suri and turns any primitive
failure into a ``KEY_DERIVATION_FAILED`` result.

INVARIANT: callers pass a suri that SeedValidator accepted.
"""

from __future__ import annotations

import logging

from surisign.domain.hexcodec import hex_to_bytes
from surisign.domain.suri import SecretUri, SuriParseError, classify_phrase, parse_suri
from surisign.domain.types import Curve, ErrorKind, SeedKind
from surisign.infrastructure.keypairs import (
    KeyDerivationError,
    derive_keypair,
    mini_secret_from_mnemonic,
)
from surisign.services.base import BaseService
from surisign.services.result import ServiceResult
from surisign.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class KeyDeriver(BaseService):
    """Deterministically rebuilds the keypair a suri describes."""

    def _seed(self, parsed: SecretUri) -> bytes:
        kind = classify_phrase(parsed.phrase, require_hex_prefix=self._config.require_hex_prefix)
        if kind is SeedKind.HEX:
            return hex_to_bytes(parsed.phrase)
        return mini_secret_from_mnemonic(
            parsed.phrase,
            parsed.password or "",
            language=self._config.mnemonic_language,
        )

    @traced
    def derive(self, suri: str, curve: Curve) -> ServiceResult:
        op = "derive_keypair"

        try:
            parsed = parse_suri(suri)
            with trace_span("seed"):
                seed = self._seed(parsed)
            with trace_span("junctions") as span:
                keypair = derive_keypair(seed, parsed.junctions, curve)
                if span:
                    span.annotate("count", len(parsed.junctions))
        except (SuriParseError, KeyDerivationError, ValueError) as exc:
            return ServiceResult.failure(
                op,
                ErrorKind.KEY_DERIVATION_FAILED,
                f"Unable to derive {curve} keypair: {exc}",
                curve=curve.value,
            )

        logger.debug("Derived %s keypair %s", curve, keypair.public_hex)
        return ServiceResult.success(
            op,
            curve=curve.value,
            public_key=keypair.public_hex,
            keypair=keypair,
        )
