"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, surisign.toml only contains overrides.
"""

from __future__ import annotations

from mnemonic import Mnemonic
from pydantic import BaseModel, field_validator


class SigningConfig(BaseModel):
    """[signing] section."""

    model_config = {"frozen": True}

    require_hex_prefix: bool = False
    mnemonic_language: str = "english"

    @field_validator("mnemonic_language")
    @classmethod
    def _known_language(cls, value: str) -> str:
        languages = Mnemonic.list_languages()
        if value not in languages:
            msg = f"Unknown mnemonic language {value!r}; expected one of {', '.join(sorted(languages))}"
            raise ValueError(msg)
        return value
