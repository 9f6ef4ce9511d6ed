"""SeedValidator: classify the secret of a suri as hex seed or mnemonic.

Pipeline: PARSE -> CLASSIFY -> LENGTH -> CHECKSUM. Pure validation, no key
material is derived here and nothing secret is logged or returned.
"""

from __future__ import annotations

import logging
from functools import cached_property

from mnemonic import Mnemonic

from surisign.domain.hexcodec import hex_bit_length
from surisign.domain.suri import SuriParseError, classify_phrase, parse_suri
from surisign.domain.types import MNEMONIC_WORD_COUNTS, ErrorKind, SeedKind
from surisign.services.base import BaseService
from surisign.services.result import ServiceResult
from surisign.services.telemetry import traced

logger = logging.getLogger(__name__)

HEX_SEED_BITS = 256


class SeedValidator(BaseService):
    """Validates ``<phrase>[//hard/soft][///password]`` strings."""

    @cached_property
    def _wordlist(self) -> Mnemonic:
        return Mnemonic(self._config.mnemonic_language)

    def is_valid_mnemonic(self, words: list[str]) -> bool:
        """Word-list and checksum check for an already split phrase."""
        return self._wordlist.check(" ".join(words))

    @traced
    def validate_seed(self, suri: str) -> ServiceResult:
        op = "validate_seed"

        try:
            parsed = parse_suri(suri)
        except SuriParseError as exc:
            return ServiceResult.failure(op, ErrorKind.INVALID_SURI, str(exc))

        data = {
            "junctions": len(parsed.junctions),
            "hard_junctions": sum(1 for j in parsed.junctions if j.is_hard),
            "has_password": parsed.password is not None,
        }

        phrase = parsed.phrase
        kind = classify_phrase(phrase, require_hex_prefix=self._config.require_hex_prefix)
        if kind is SeedKind.HEX:
            if hex_bit_length(phrase) != HEX_SEED_BITS:
                return ServiceResult.failure(
                    op,
                    ErrorKind.INVALID_SEED_LENGTH,
                    "Hex seed needs to be 256-bits",
                    bits=hex_bit_length(phrase),
                )
            logger.debug("Validated hex seed with %d junction(s)", data["junctions"])
            return ServiceResult.success(op, kind=SeedKind.HEX.value, **data)

        words = phrase.split()
        if len(words) not in MNEMONIC_WORD_COUNTS:
            counts = ", ".join(str(n) for n in MNEMONIC_WORD_COUNTS)
            return ServiceResult.failure(
                op,
                ErrorKind.INVALID_MNEMONIC_LENGTH,
                f"Mnemonic needs to contain {counts} words",
                words=len(words),
            )
        if not self.is_valid_mnemonic(words):
            return ServiceResult.failure(
                op,
                ErrorKind.INVALID_MNEMONIC_CHECKSUM,
                "Not a valid mnemonic seed",
            )

        logger.debug("Validated %d-word mnemonic with %d junction(s)", len(words), data["junctions"])
        return ServiceResult.success(op, kind=SeedKind.MNEMONIC.value, words=len(words), **data)
