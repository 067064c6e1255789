from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

HOME_CONFIG_PATH = Path.home() / ".gramkit" / "gramkit.toml"


class ConfigError(RuntimeError):
    pass


def resolve_config_path(path: str | Path | None) -> Path:
    return Path(path).expanduser() if path else HOME_CONFIG_PATH


def read_config(path: str | Path) -> dict[str, Any]:
    """Parse a gramkit TOML file.

    Settings may sit at the top level or under a ``[gramkit]`` table, so the
    file can be shared with the application that embeds the library.
    """
    cfg_path = Path(path)
    if not cfg_path.is_file():
        if cfg_path.exists():
            raise ConfigError(f"Config path {cfg_path} exists but is not a file.")
        raise ConfigError(f"Missing config file {cfg_path}.")
    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {cfg_path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Malformed TOML in {cfg_path}: {exc}") from None
    section = data.get("gramkit", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Invalid `gramkit` in {cfg_path}; expected a table.")
    return section
