"""BaseService: shared foundation for the signing pipeline services.

Every service receives the ``[signing]`` config section at construction
time; it decides how strictly hex is parsed and which BIP-39 word list is
used.
"""

from __future__ import annotations

from surisign.config.models import SigningConfig


class BaseService:
    """Base for service-layer classes.

    Usage::

        class SeedValidator(BaseService):
            def validate_seed(self, suri: str) -> ServiceResult:
                if self._config.require_hex_prefix:
                    ...
    """

    def __init__(self, config: SigningConfig | None = None) -> None:
        self._config = config or SigningConfig()

    @property
    def config(self) -> SigningConfig:
        return self._config
