"""Unit tests for settings loading (defaults, YAML file, environment)."""

from __future__ import annotations

from pathlib import Path

import pytest

from bricolaje.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Run each test from an empty directory with a fresh settings cache."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BRICOLAJE_CONFIG_FILE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings()

    assert settings.server.port == 8000
    assert settings.database.url == "sqlite+aiosqlite:///./bricolaje.db"
    assert settings.cargo.descripcion_max_length == 100


def test_yaml_file_in_working_directory(tmp_path: Path):
    (tmp_path / "config.yaml").write_text(
        "database:\n  url: sqlite+aiosqlite:///./cargos.db\ncargo:\n  descripcion_max_length: 40\n"
    )

    settings = get_settings()

    assert settings.database.url == "sqlite+aiosqlite:///./cargos.db"
    assert settings.cargo.descripcion_max_length == 40


def test_config_file_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    config_file = tmp_path / "custom.yaml"
    config_file.write_text("server:\n  port: 9100\n")
    monkeypatch.setenv("BRICOLAJE_CONFIG_FILE", str(config_file))

    assert get_settings().server.port == 9100


def test_env_overrides_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BRICOLAJE_SERVER__PORT", "9200")
    monkeypatch.setenv("BRICOLAJE_DATABASE__ECHO", "true")

    settings = get_settings()

    assert settings.server.port == 9200
    assert settings.database.echo is True


def test_empty_yaml_file_uses_defaults(tmp_path: Path):
    (tmp_path / "config.yaml").write_text("")

    assert get_settings() == Settings()


def test_env_overrides_yaml_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / "config.yaml").write_text("server:\n  host: 127.0.0.1\n  port: 9100\n")
    monkeypatch.setenv("BRICOLAJE_SERVER__PORT", "9300")

    settings = get_settings()

    assert settings.server.port == 9300
    assert settings.server.host == "127.0.0.1"
