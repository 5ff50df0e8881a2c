"""Tests for configuration loading."""

from src.config.loader import (
    DEFAULT_PROVIDERS,
    Settings,
    get_enabled_providers,
    get_settings,
    load_tools_config,
)


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.server_name == "embedded-mcp-server"
    assert settings.server_version == "1.0.0"
    assert settings.protocol_version == "2024-11-05"
    assert settings.log_format == "json"


def test_settings_from_environment(monkeypatch):
    """Test that environment variables override defaults case-insensitively."""
    monkeypatch.setenv("SERVER_NAME", "from-env")
    monkeypatch.setenv("log_level", "debug")
    settings = Settings(_env_file=None)
    assert settings.server_name == "from-env"
    assert settings.log_level == "debug"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_load_tools_config_from_yaml(tmp_path):
    path = tmp_path / "tools.yaml"
    path.write_text("enabled_providers:\n  - clock\n", encoding="utf-8")

    config = load_tools_config(path)
    assert get_enabled_providers(config) == ["clock"]


def test_load_tools_config_missing_file(tmp_path):
    """Test that a missing file falls back to the built-in providers."""
    config = load_tools_config(tmp_path / "absent.yaml")
    assert get_enabled_providers(config) == DEFAULT_PROVIDERS


def test_load_tools_config_empty_file(tmp_path):
    path = tmp_path / "tools.yaml"
    path.write_text("", encoding="utf-8")

    assert get_enabled_providers(load_tools_config(path)) == DEFAULT_PROVIDERS


def test_shipped_config_enables_builtins():
    """Test the repository's config/tools.yaml."""
    assert set(get_enabled_providers(load_tools_config())) == set(DEFAULT_PROVIDERS)
