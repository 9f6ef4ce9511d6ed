"""surisign: derive a keypair from a secret URI and sign a hex payload."""

__version__ = "0.1.0"
