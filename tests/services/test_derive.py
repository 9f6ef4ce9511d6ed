"""Tests for KeyDeriver."""

from __future__ import annotations

import pytest

from surisign.domain.keys import Keypair
from surisign.domain.types import Curve
from surisign.services.derive import KeyDeriver
from tests.conftest import ALICE_ED25519, ALICE_SR25519, DEV_PHRASE, HEX_SEED, MNEMONIC_24


@pytest.fixture
def deriver() -> KeyDeriver:
    return KeyDeriver()


class TestDerive:
    def test_alice_sr25519(self, deriver: KeyDeriver) -> None:
        result = deriver.derive(f"{DEV_PHRASE}//Alice", Curve.SR25519)
        assert result.ok, result.error
        assert result.data["public_key"] == ALICE_SR25519
        assert result.data["curve"] == "sr25519"
        assert isinstance(result.data["keypair"], Keypair)

    def test_alice_ed25519(self, deriver: KeyDeriver) -> None:
        result = deriver.derive(f"{DEV_PHRASE}//Alice", Curve.ED25519)
        assert result.data["public_key"] == ALICE_ED25519

    @pytest.mark.parametrize("curve", list(Curve))
    @pytest.mark.parametrize("suri", [HEX_SEED, MNEMONIC_24, f"{MNEMONIC_24}//x///pw"])
    def test_deterministic(self, deriver: KeyDeriver, suri: str, curve: Curve) -> None:
        first = deriver.derive(suri, curve)
        second = deriver.derive(suri, curve)
        assert first.ok and second.ok
        assert first.data["public_key"] == second.data["public_key"]

    @pytest.mark.parametrize("curve", list(Curve))
    def test_password_changes_mnemonic_key(self, deriver: KeyDeriver, curve: Curve) -> None:
        plain = deriver.derive(MNEMONIC_24, curve)
        salted = deriver.derive(f"{MNEMONIC_24}///secret", curve)
        assert plain.data["public_key"] != salted.data["public_key"]

    @pytest.mark.parametrize("curve", list(Curve))
    def test_password_ignored_for_hex_seed(self, deriver: KeyDeriver, curve: Curve) -> None:
        plain = deriver.derive(HEX_SEED, curve)
        salted = deriver.derive(f"{HEX_SEED}///secret", curve)
        assert plain.data["public_key"] == salted.data["public_key"]

    def test_curves_give_different_keys(self, deriver: KeyDeriver) -> None:
        ed = deriver.derive(HEX_SEED, Curve.ED25519)
        sr = deriver.derive(HEX_SEED, Curve.SR25519)
        assert ed.data["public_key"] != sr.data["public_key"]


class TestDeriveFailures:
    def test_ed25519_soft_junction(self, deriver: KeyDeriver) -> None:
        result = deriver.derive(f"{HEX_SEED}/soft", Curve.ED25519)
        assert result.error_code == "KEY_DERIVATION_FAILED"
        assert result.error is not None
        assert "Soft junction /soft" in result.error.message

    @pytest.mark.parametrize("curve", list(Curve))
    def test_out_of_range_junction(self, deriver: KeyDeriver, curve: Curve) -> None:
        result = deriver.derive(f"{HEX_SEED}//{2**256}", curve)
        assert result.error_code == "KEY_DERIVATION_FAILED"
        assert result.error is not None
        assert result.error.detail == {"curve": curve.value}

    def test_unparseable_suri(self, deriver: KeyDeriver) -> None:
        assert deriver.derive(f"{HEX_SEED}//", Curve.SR25519).error_code == "KEY_DERIVATION_FAILED"

    def test_undecodable_seed(self, deriver: KeyDeriver, monkeypatch: pytest.MonkeyPatch) -> None:
        def _reject(value: str) -> bytes:
            raise ValueError(f"Not a hex string: {value!r}")

        monkeypatch.setattr("surisign.services.derive.hex_to_bytes", _reject)
        result = deriver.derive(HEX_SEED, Curve.ED25519)
        assert result.error_code == "KEY_DERIVATION_FAILED"
        assert result.error is not None
        assert "Not a hex string" in result.error.message
