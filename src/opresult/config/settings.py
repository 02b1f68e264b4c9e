"""OpresultSettings: one frozen object for CLI flags, env vars and TOML.

Sources, highest priority first:
  1. keyword arguments (flags the user actually passed on the command line)
  2. ``OPRESULT_*`` environment variables; sections use ``__``, e.g.
     ``OPRESULT_LOGGING__INCLUDE_EXCEPTION=true``
  3. the resolved ``opresult.toml``
  4. defaults on the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from opresult.config.discovery import resolve_config
from opresult.config.models import LoggingConfig, PagingConfig


def read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the top-level tables of an ``opresult.toml`` to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = read_toml(toml_path) if toml_path is not None else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        fields = self.settings_cls.model_fields
        return {name: value for name, value in self._data.items() if name in fields}


# settings_customise_sources is a classmethod, so the file chosen by
# from_cli travels through thread-local state.
_pending = threading.local()


class OpresultSettings(BaseSettings):
    """Resolved configuration for the CLI and the result logger.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        json_output: Render envelopes as JSON.
        verbose: DEBUG-level logging.
        log_json: JSON log lines on stderr.
        paging: ``[paging]`` section.
        logging: ``[logging]`` section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "OPRESULT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
    paging: PagingConfig = Field(default_factory=PagingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None))
        return (init_settings, env_settings, toml)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> OpresultSettings:
        """Build settings for one invocation.

        *overrides* take precedence over every other source, so callers
        pass only the flags the user set.
        """
        toml_path = resolve_config(config_path, start)
        _pending.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _pending.toml_path = None
