"""Domain layer: curves, error kinds, secret URI parsing and hex codec.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
