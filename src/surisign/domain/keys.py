"""Keypair and typed signature value objects.

INVARIANT: secret key bytes never appear in ``repr`` or serialized output.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from surisign.domain.hexcodec import bytes_to_hex
from surisign.domain.types import Curve


class Keypair(BaseModel):
    """A derived keypair, owned by a single signing invocation."""

    model_config = {"frozen": True}

    curve: Curve
    public_key: bytes
    secret_key: bytes = Field(repr=False, exclude=True)

    @property
    def public_hex(self) -> str:
        return bytes_to_hex(self.public_key)


class Signature(BaseModel):
    """A signature prefixed with the type tag of the curve that produced it."""

    model_config = {"frozen": True}

    curve: Curve
    data: bytes

    @property
    def raw(self) -> bytes:
        """The signature without its leading type tag."""
        return self.data[1:]

    @property
    def hex(self) -> str:
        return bytes_to_hex(self.data)
