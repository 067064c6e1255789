from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import ConfigError, read_config, resolve_config_path
from .logging import setup_logging

__all__ = [
    "GramkitSettings",
    "configure",
    "load_settings",
    "load_settings_if_exists",
    "settings_from_mapping",
]


class GramkitSettings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="GRAMKIT__",
        env_nested_delimiter="__",
    )

    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"
    log_format: Literal["console", "json"] = "console"

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def _normalize(cls, value: Any, info) -> Any:
        if not isinstance(value, str):
            raise ValueError(f"{info.field_name} must be a string")
        cleaned = value.strip().lower()
        if not cleaned:
            raise ValueError(f"{info.field_name} must be a non-empty string")
        return cleaned


def settings_from_mapping(
    data: dict[str, Any], *, source: str | Path = "<mapping>"
) -> GramkitSettings:
    """Build settings from ``data``; keys it omits fall back to ``GRAMKIT__*``."""
    try:
        return GramkitSettings(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {source}: {exc}") from exc


def load_settings(path: str | Path | None = None) -> tuple[GramkitSettings, Path]:
    cfg_path = resolve_config_path(path)
    return settings_from_mapping(read_config(cfg_path), source=cfg_path), cfg_path


def load_settings_if_exists(
    path: str | Path | None = None,
) -> tuple[GramkitSettings, Path] | None:
    cfg_path = resolve_config_path(path)
    if not cfg_path.exists():
        return None
    return load_settings(cfg_path)


def configure(settings: GramkitSettings | None = None) -> GramkitSettings:
    """Apply ``settings`` (or defaults plus environment) to process logging."""
    if settings is None:
        settings = GramkitSettings()
    setup_logging(level=settings.log_level, fmt=settings.log_format)
    return settings
