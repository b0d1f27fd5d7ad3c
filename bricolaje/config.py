"""Bricolaje configuration management.

Configuration sources (in priority order):
1. Environment variables (BRICOLAJE_ prefix)
2. Config file (config.yaml)
3. Defaults
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000


class DatabaseConfig(BaseModel):
    """Database configuration."""

    # Any async SQLAlchemy URL works, e.g. postgresql+asyncpg://
    url: str = "sqlite+aiosqlite:///./bricolaje.db"
    echo: bool = False


class CargoConfig(BaseModel):
    """Cargo catalogue rules."""

    # Longest description the storage column accepts
    descripcion_max_length: int = Field(default=100, ge=1)


class Settings(BaseSettings):
    """Bricolaje application settings."""

    model_config = SettingsConfigDict(
        env_prefix="BRICOLAJE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    cargo: CargoConfig = Field(default_factory=CargoConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Init kwargs carry the YAML file values; environment takes precedence
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def _load_config_file() -> dict:
    """Load configuration from YAML file if exists.

    Looks for config file in order:
    1. BRICOLAJE_CONFIG_FILE environment variable
    2. ./config.yaml
    3. /etc/bricolaje/config.yaml
    """
    config_paths = [
        os.environ.get("BRICOLAJE_CONFIG_FILE"),
        Path("config.yaml"),
        Path("/etc/bricolaje/config.yaml"),
    ]

    for path in config_paths:
        if path is None:
            continue
        path = Path(path)
        if path.exists():
            with open(path) as f:
                return yaml.safe_load(f) or {}

    return {}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Configuration is loaded from:
    1. YAML config file (if exists)
    2. Environment variables (override)
    3. Defaults
    """
    file_config = _load_config_file()

    # Environment variables override file values (see settings_customise_sources)
    return Settings(**file_config)
