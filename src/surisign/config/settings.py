"""Settings for one surisign invocation.

Precedence, highest first: CLI flags, ``SURISIGN_*`` env vars (nested with
``__``, e.g. ``SURISIGN_SIGNING__REQUIRE_HEX_PREFIX``), the ``[signing]``
table of surisign.toml, then the model defaults. Every config problem
surfaces as a ``click.ClickException`` so the CLI reports it without a
traceback.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    SettingsError,
    TomlConfigSettingsSource,
)

from surisign.config.discovery import ConfigNotFoundError, find_config
from surisign.config.models import SigningConfig

# TOML file for the settings object currently being built.
_toml_file: ContextVar[Path | None] = ContextVar("_toml_file", default=None)


class SurisignSettings(BaseSettings):
    """Frozen settings; held by ``AppContext`` for the whole command."""

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="SURISIGN_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    signing: SigningConfig = Field(default_factory=SigningConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_file = _toml_file.get()
        if toml_file is None:
            return init_settings, env_settings
        return init_settings, env_settings, TomlConfigSettingsSource(settings_cls, toml_file=toml_file)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> SurisignSettings:
        """Build settings for a CLI run.

        Unset boolean flags are dropped so they do not mask env vars.
        """
        try:
            toml_file = find_config(config_path, start)
        except ConfigNotFoundError as exc:
            raise click.ClickException(str(exc)) from exc

        flags = {name: value for name, value in cli_flags.items() if value}
        token = _toml_file.set(toml_file)
        try:
            return cls(config_path=toml_file, **flags)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_file}: {exc}"
            raise click.ClickException(msg) from exc
        except (SettingsError, ValidationError) as exc:
            source = toml_file or "environment"
            msg = f"Invalid configuration ({source}): {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _toml_file.reset(token)
