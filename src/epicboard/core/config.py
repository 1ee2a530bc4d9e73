"""Epicboard configuration: Pydantic model, load, and save."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from epicboard.core.constants import (
    CONFIG_FILENAME,
    DB_FILENAME,
    EPICBOARD_DIR_NAME,
    LOG_FILENAME,
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
)
from epicboard.core.exceptions import ConfigError, ConfigNotFoundError


def epicboard_dir() -> Path:
    """Return the Epicboard data directory (~/.epicboard), creating it if needed."""
    d = Path.home() / EPICBOARD_DIR_NAME
    d.mkdir(mode=0o700, parents=True, exist_ok=True)
    return d


# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "text"  # "text" | "json"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v.lower() not in ("text", "json"):
            raise ValueError("Log format must be 'text' or 'json'")
        return v.lower()


class DatabaseConfig(BaseModel):
    path: str = ""  # empty → use default


class UIConfig(BaseModel):
    max_name_length: int = Field(default=MAX_NAME_LENGTH, ge=8)
    max_description_length: int = Field(default=MAX_DESCRIPTION_LENGTH, ge=16)
    clear_screen: bool = True


# ---------------------------------------------------------------------------
# Root config
# ---------------------------------------------------------------------------


class EpicboardConfig(BaseModel):
    """Root Epicboard configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    # Computed paths (not stored in config file)
    _config_path: Path | None = None

    @property
    def db_path(self) -> Path:
        if self.database.path:
            return Path(self.database.path).expanduser()
        return epicboard_dir() / DB_FILENAME

    @property
    def log_path(self) -> Path:
        return epicboard_dir() / LOG_FILENAME

    @property
    def config_path(self) -> Path | None:
        return self._config_path


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------


def _config_file_path() -> Path:
    if env_path := os.environ.get("EPICBOARD_CONFIG"):
        return Path(env_path)
    return epicboard_dir() / CONFIG_FILENAME


def load_config(path: Path | None = None) -> EpicboardConfig:
    """
    Load EpicboardConfig from a TOML file, overlaid with environment variables.

    Priority (highest to lowest):
      1. Environment variables (EPICBOARD_*)
      2. Config file (~/.epicboard/config.toml)
      3. Built-in defaults

    A missing default config file is not an error. A file requested
    explicitly (argument or $EPICBOARD_CONFIG) must exist.
    """
    import tomllib

    explicit = path is not None or "EPICBOARD_CONFIG" in os.environ
    cfg_path = path or _config_file_path()

    data: dict[str, Any] = {}
    if cfg_path.exists():
        try:
            with open(cfg_path, "rb") as f:
                data = tomllib.load(f)
        except Exception as exc:
            raise ConfigError(f"Cannot read config file {cfg_path}: {exc}") from exc
    elif explicit:
        raise ConfigNotFoundError(
            f"Config file not found: {cfg_path}\nRun 'epicboard config init' to create one."
        )

    # Apply environment variable overrides
    _apply_env_overrides(data)

    try:
        config = EpicboardConfig.model_validate(data)
    except Exception as exc:
        raise ConfigError(f"Invalid config at {cfg_path}: {exc}") from exc

    config._config_path = cfg_path
    return config


def _apply_env_overrides(data: dict[str, Any]) -> None:
    """Overlay EPICBOARD_* environment variables onto the parsed TOML data."""
    if db := os.environ.get("EPICBOARD_DB_PATH"):
        data.setdefault("database", {})["path"] = db
    if level := os.environ.get("EPICBOARD_LOG_LEVEL"):
        data.setdefault("logging", {})["level"] = level


def default_config_data() -> dict[str, Any]:
    """The config written by ``epicboard config init``."""
    return EpicboardConfig().model_dump()


def save_config(config_data: dict[str, Any], path: Path | None = None) -> Path:
    """Write config dict to TOML file with secure permissions (0600)."""
    import tomli_w

    cfg_path = path or _config_file_path()
    cfg_path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)

    # Write atomically
    tmp_path = cfg_path.with_suffix(".tmp")
    try:
        with open(tmp_path, "wb") as f:
            tomli_w.dump(config_data, f)
        tmp_path.rename(cfg_path)
    except Exception as exc:
        tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Cannot write config to {cfg_path}: {exc}") from exc

    cfg_path.chmod(0o600)
    return cfg_path
