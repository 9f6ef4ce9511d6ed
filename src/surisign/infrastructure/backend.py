"""CryptoBackend: one-time readiness gate for the native signing bindings.

Lifecycle: UNINITIALIZED -> INITIALIZING -> READY. The first caller imports
the bindings and runs a sign/verify self-test under a lock; concurrent callers
block on the lock until it finishes. Once READY, ``initialize()`` is a no-op.
"""

from __future__ import annotations

import logging
import threading
from enum import StrEnum

logger = logging.getLogger(__name__)

_SELF_TEST_SEED = bytes(32)
_SELF_TEST_MESSAGE = b"surisign self-test"


class BackendState(StrEnum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


class BackendUnavailableError(RuntimeError):
    """Raised when the native bindings cannot be loaded or fail the self-test."""


class CryptoBackend:
    """Process-wide readiness state for PyNaCl and py-sr25519-bindings."""

    def __init__(self) -> None:
        self._state = BackendState.UNINITIALIZED
        self._lock = threading.Lock()

    @property
    def state(self) -> BackendState:
        return self._state

    @property
    def ready(self) -> bool:
        return self._state is BackendState.READY

    def initialize(self) -> None:
        """Bring the backend to READY. Idempotent.

        Raises:
            BackendUnavailableError: The bindings are missing or misbehave.
        """
        if self._state is BackendState.READY:
            return
        with self._lock:
            if self._state is BackendState.READY:
                return
            self._state = BackendState.INITIALIZING
            try:
                self._self_test()
            except Exception as exc:
                self._state = BackendState.UNINITIALIZED
                msg = f"Crypto backend failed to initialize: {exc}"
                raise BackendUnavailableError(msg) from exc
            self._state = BackendState.READY
            logger.debug("Crypto backend ready")

    def reset(self) -> None:
        """Return to UNINITIALIZED (used by tests)."""
        with self._lock:
            self._state = BackendState.UNINITIALIZED

    def _self_test(self) -> None:
        import sr25519
        from nacl.signing import SigningKey

        signing_key = SigningKey(_SELF_TEST_SEED)
        signed = signing_key.sign(_SELF_TEST_MESSAGE)
        signing_key.verify_key.verify(_SELF_TEST_MESSAGE, signed.signature)

        public, secret = sr25519.pair_from_seed(_SELF_TEST_SEED)
        signature = sr25519.sign((public, secret), _SELF_TEST_MESSAGE)
        if not sr25519.verify(signature, _SELF_TEST_MESSAGE, public):
            msg = "sr25519 self-test signature did not verify"
            raise RuntimeError(msg)


_backend = CryptoBackend()


def get_backend() -> CryptoBackend:
    """The process-wide backend instance."""
    return _backend
