"""Tests for the format_result dispatcher and OutputSettings."""

import json

from surisign.output.formatters import OutputSettings, format_result
from surisign.services.result import ServiceError, ServiceResult

SIGNATURE = "0x01" + "ab" * 64


def _signed() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="sign",
        data={
            "signature": SIGNATURE,
            "curve": "sr25519",
            "public_key": "0x" + "cd" * 32,
            "payload_bytes": 2,
        },
    )


def _err(op: str = "sign", msg: str = "Cannot sign empty payload.") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="EMPTY_PAYLOAD", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestJson:
    def test_success(self) -> None:
        data = json.loads(format_result(_signed(), settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["data"]["signature"] == SIGNATURE

    def test_error(self) -> None:
        data = json.loads(format_result(_err(), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["code"] == "EMPTY_PAYLOAD"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_signed(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "sign"


class TestQuiet:
    def test_bare_signature(self) -> None:
        assert format_result(_signed(), settings=OutputSettings(quiet=True)) == SIGNATURE

    def test_bare_public_key(self) -> None:
        result = ServiceResult(ok=True, op="derive", data={"public_key": "0xab", "curve": "ed25519"})
        assert format_result(result, settings=OutputSettings(quiet=True)) == "0xab"

    def test_error(self) -> None:
        output = format_result(_err(), settings=OutputSettings(quiet=True))
        assert output == "ERROR: sign - Cannot sign empty payload."


class TestHuman:
    def test_default_settings(self) -> None:
        assert format_result(_signed()) == f"Signature: {SIGNATURE}"

    def test_error(self) -> None:
        assert format_result(_err()) == "ERROR: sign - Cannot sign empty payload."
