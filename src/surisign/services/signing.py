"""SigningService: the single externally callable signing operation.

Pipeline: VALIDATE SEED -> READY BACKEND -> DERIVE -> TRIM + VALIDATE PAYLOAD
-> SIGN -> ENCODE. Each step returns a ServiceResult; the first failure is
returned as-is and nothing after it runs, so a failed call never produces a
signature.

Only the payload is trimmed. The suri reaches derivation untouched.
"""

from __future__ import annotations

import logging

from surisign.config.models import SigningConfig
from surisign.domain.hexcodec import hex_to_bytes
from surisign.domain.keys import Keypair
from surisign.domain.types import Curve, ErrorKind
from surisign.infrastructure.backend import (
    BackendUnavailableError,
    CryptoBackend,
    get_backend,
)
from surisign.services.base import BaseService
from surisign.services.derive import KeyDeriver
from surisign.services.payload import PayloadValidator
from surisign.services.result import ServiceResult
from surisign.services.seed import SeedValidator
from surisign.services.signer import Signer
from surisign.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class SigningService(BaseService):
    """Sequences validation, derivation and signing for one invocation.

    No keypair is kept on the instance: every call derives its own.
    """

    def __init__(
        self,
        config: SigningConfig | None = None,
        *,
        backend: CryptoBackend | None = None,
    ) -> None:
        super().__init__(config)
        self._backend = backend or get_backend()
        self._seeds = SeedValidator(self._config)
        self._payloads = PayloadValidator(self._config)
        self._deriver = KeyDeriver(self._config)
        self._signer = Signer()

    def _initialize(self, op: str) -> ServiceResult | None:
        """Await backend readiness; returns a failure result or None."""
        with trace_span("initialize"):
            try:
                self._backend.initialize()
            except BackendUnavailableError as exc:
                return ServiceResult.failure(op, ErrorKind.BACKEND_UNAVAILABLE, str(exc))
        return None

    def _prepare_keypair(self, op: str, suri: str, curve: Curve) -> ServiceResult:
        """validate_seed -> initialize -> derive, relabelled under *op* on failure."""
        seed = self._seeds.validate_seed(suri)
        if not seed.ok:
            return _relabel(seed, op)

        failure = self._initialize(op)
        if failure is not None:
            return failure

        derived = self._deriver.derive(suri, curve)
        if not derived.ok:
            return _relabel(derived, op)
        return derived

    @traced
    def execute(self, suri: str, curve: Curve, payload: str) -> ServiceResult:
        """Sign the hex *payload* with the key *suri* describes under *curve*.

        On success ``data`` holds ``signature`` (``0x``-prefixed, type tagged),
        ``curve``, ``public_key`` and ``payload_bytes``.
        """
        op = "sign"
        curve = Curve(curve)

        derived = self._prepare_keypair(op, suri, curve)
        if not derived.ok:
            return derived
        keypair: Keypair = derived.data["keypair"]

        payload = payload.strip()
        checked = self._payloads.validate_payload(payload)
        if not checked.ok:
            return _relabel(checked, op)

        message = hex_to_bytes(payload)
        with trace_span("sign"):
            signature = self._signer.sign(keypair, message)

        logger.info("Produced %s signature over %d byte(s)", curve, len(message))
        return ServiceResult.success(
            op,
            signature=signature.hex,
            curve=curve.value,
            public_key=keypair.public_hex,
            payload_bytes=len(message),
        )

    @traced
    def derive(self, suri: str, curve: Curve) -> ServiceResult:
        """Validate *suri* and report the public key it derives to."""
        op = "derive"
        curve = Curve(curve)

        derived = self._prepare_keypair(op, suri, curve)
        if not derived.ok:
            return derived
        return ServiceResult.success(
            op,
            curve=curve.value,
            public_key=derived.data["public_key"],
        )

    @traced
    def validate(self, suri: str, payload: str | None = None) -> ServiceResult:
        """Run the seed check and, when given, the trimmed payload check."""
        op = "validate"

        seed = self._seeds.validate_seed(suri)
        if not seed.ok:
            return _relabel(seed, op)
        data = dict(seed.data)

        if payload is not None:
            checked = self._payloads.validate_payload(payload.strip())
            if not checked.ok:
                return _relabel(checked, op)
            data["payload_bytes"] = checked.data["bytes"]

        return ServiceResult(ok=True, op=op, data=data)


def _relabel(result: ServiceResult, op: str) -> ServiceResult:
    """Report a step failure under the operation the caller invoked."""
    detail = {**(result.error.detail if result.error else {}), "step": result.op}
    error = result.error.model_copy(update={"detail": detail}) if result.error else None
    return result.model_copy(update={"op": op, "error": error})
