"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — explicit overrides passed by the caller
  2. Env vars     — ``ZONERESOLVE_*`` prefix, ``__`` for nested fields
  3. TOML file    — explicit path or ``ZONERESOLVE_CONFIG``
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource`; the
file is located by :func:`zoneresolve.config.discovery.resolve_config_path`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from zoneresolve.config.discovery import resolve_config_path
from zoneresolve.config.models import ResolverConfig
from zoneresolve.errors import ConfigError
from zoneresolve.resolvers.base import ZoneResolver


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``zoneresolve.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {toml_path}: {exc}", path=str(toml_path)) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ZoneResolveSettings(BaseSettings):
    """Settings for choosing and observing the active resolver.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: Enable DEBUG logging for the ``zoneresolve`` logger.
        log_json: Emit JSON log lines instead of console output.
        resolver: Gap and overlap policy names.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ZONERESOLVE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    verbose: bool = False
    log_json: bool = False

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_file(
        cls,
        config_path: str | Path | None = None,
        **overrides: Any,
    ) -> ZoneResolveSettings:
        """Construct settings, reading *config_path* or ``$ZONERESOLVE_CONFIG``.

        With neither set, only env vars and code defaults apply. A named file
        that does not exist raises :class:`~zoneresolve.errors.ConfigError`.
        """
        toml_path = resolve_config_path(config_path)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

    def build_resolver(self) -> ZoneResolver:
        """Return the resolver configured by the ``[resolver]`` section."""
        return self.resolver.build()
