"""PayloadValidator: the hex payload must be non-empty and hex encoded."""

from __future__ import annotations

from surisign.domain.hexcodec import hex_bit_length, is_hex
from surisign.domain.types import ErrorKind
from surisign.services.base import BaseService
from surisign.services.result import ServiceResult
from surisign.services.telemetry import traced


class PayloadValidator(BaseService):
    """Checks a payload string that the caller has already trimmed."""

    @traced
    def validate_payload(self, payload: str) -> ServiceResult:
        op = "validate_payload"

        # Emptiness first: it gets its own, more specific error.
        if len(payload) == 0:
            return ServiceResult.failure(
                op,
                ErrorKind.EMPTY_PAYLOAD,
                "Cannot sign empty payload. Please check your input and try again.",
            )
        if not is_hex(payload, require_prefix=self._config.require_hex_prefix):
            return ServiceResult.failure(
                op,
                ErrorKind.NOT_HEX_ENCODED,
                "Payload must be supplied as a hex string. Please check your input and try again.",
            )
        return ServiceResult.success(op, bytes=hex_bit_length(payload) // 8)
