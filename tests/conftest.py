"""Shared pytest fixtures and test vectors for surisign tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from mnemonic import Mnemonic

from surisign.services.telemetry import disable_telemetry

# Substrate development phrase and its well-known //Alice public keys.
DEV_PHRASE = "bottom drive obey lake curtain smoke basket hold race lonely fit walk"
ALICE_SR25519 = "0xd43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d"
ALICE_ED25519 = "0x88dc3417d5058ec4b4503e0c12ea1a0a89be200fe98922423d4334014fa6b0ee"
BOB_SR25519 = "0x8eaf04151687736326c9fea17e25fc5287613693c912909cb226aa4794f26a48"

# 24 words encoding 32 zero bytes of entropy.
MNEMONIC_24 = " ".join(["abandon"] * 23 + ["art"])
# Right length, wrong checksum.
BAD_CHECKSUM_24 = " ".join(["abandon"] * 24)

HEX_SEED = "0x" + "ab" * 32


def mnemonic_of(word_count: int) -> str:
    """A checksum-valid english mnemonic with *word_count* words."""
    return Mnemonic("english").to_mnemonic(bytes(word_count * 4 // 3))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no surisign.toml or env override applies."""
    monkeypatch.delenv("SURISIGN_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging handlers and telemetry flags installed by CLI runs."""
    surisign_logger = logging.getLogger("surisign")
    surisign_handlers = surisign_logger.handlers[:]
    surisign_level = surisign_logger.level
    surisign_propagate = surisign_logger.propagate
    yield
    surisign_logger.handlers = surisign_handlers
    surisign_logger.setLevel(surisign_level)
    surisign_logger.propagate = surisign_propagate
    disable_telemetry()
