"""Tests for PayloadValidator."""

import pytest

from surisign.config.models import SigningConfig
from surisign.services.payload import PayloadValidator


@pytest.fixture
def validator() -> PayloadValidator:
    return PayloadValidator()


def test_empty_payload(validator: PayloadValidator) -> None:
    result = validator.validate_payload("")
    assert result.error_code == "EMPTY_PAYLOAD"
    assert result.error is not None
    assert result.error.message.startswith("Cannot sign empty payload")


def test_not_hex(validator: PayloadValidator) -> None:
    result = validator.validate_payload("zz")
    assert result.error_code == "NOT_HEX_ENCODED"
    assert result.error is not None
    assert result.error.message.startswith("Payload must be supplied as a hex string")


@pytest.mark.parametrize("payload", ["0x123", "12 34", "0xgg", " deadbeef"])
def test_malformed_hex(validator: PayloadValidator, payload: str) -> None:
    assert validator.validate_payload(payload).error_code == "NOT_HEX_ENCODED"


@pytest.mark.parametrize(
    ("payload", "size"),
    [("deadbeef", 4), ("0xdeadbeef", 4), ("0xDEADBEEF", 4), ("0x1234", 2), ("0x", 0)],
)
def test_valid(validator: PayloadValidator, payload: str, size: int) -> None:
    result = validator.validate_payload(payload)
    assert result.ok
    assert result.data == {"bytes": size}


def test_prefix_required() -> None:
    strict = PayloadValidator(SigningConfig(require_hex_prefix=True))
    assert strict.validate_payload("deadbeef").error_code == "NOT_HEX_ENCODED"
    assert strict.validate_payload("0xdeadbeef").ok
    assert strict.validate_payload("").error_code == "EMPTY_PAYLOAD"
