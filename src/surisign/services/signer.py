"""Signer: typed signatures over validated payload bytes."""

from __future__ import annotations

import logging

from surisign.domain.keys import Keypair, Signature
from surisign.infrastructure.keypairs import sign_typed

logger = logging.getLogger(__name__)


class Signer:
    """Signs with the curve tag prefixed, so verifiers can pick the scheme.

    Signing arbitrary bytes cannot fail once a keypair exists.
    """

    def sign(self, keypair: Keypair, payload: bytes) -> Signature:
        signature = sign_typed(keypair, payload)
        logger.debug("Signed %d byte(s) with %s", len(payload), keypair.curve)
        return signature
