"""Tests for configuration module."""

import pytest

from prompt_gallery.config import AppConfig, CacheConfig, Settings, SourceConfig, _env, load_settings


def test_env_returns_value(monkeypatch):
    monkeypatch.setenv("TEST_KEY", "hello")
    assert _env("TEST_KEY") == "hello"


def test_env_returns_default_when_missing(monkeypatch):
    monkeypatch.delenv("TEST_KEY", raising=False)
    assert _env("TEST_KEY", "fallback") == "fallback"


def test_env_returns_empty_string_default(monkeypatch):
    monkeypatch.delenv("TEST_KEY", raising=False)
    assert _env("TEST_KEY") == ""


def test_app_config_is_development_true():
    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "env", "development")
    assert config.is_development is True


def test_app_config_is_development_false():
    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "env", "production")
    assert config.is_development is False


def test_source_config_defaults(monkeypatch):
    for key in [
        "PROMPTS_BASE_URL",
        "PROMPTS_ASSET_PATH",
        "PROMPTS_CSV_URL",
        "PROMPTS_CSV_PATH",
        "PROMPTS_MARKDOWN_DIR",
        "PROMPTS_TRIM_TAGS",
    ]:
        monkeypatch.delenv(key, raising=False)
    config = SourceConfig()
    assert config.csv_location == "http://localhost:8000/prompts.csv"
    assert config.csv_path == ""
    assert config.markdown_dir == ""
    assert config.trim_tags is False


def test_source_config_joins_base_url_and_asset_path(monkeypatch):
    monkeypatch.delenv("PROMPTS_CSV_URL", raising=False)
    monkeypatch.setenv("PROMPTS_BASE_URL", "https://promptllm.xyz/app/")
    monkeypatch.setenv("PROMPTS_ASSET_PATH", "/data/prompts.csv")
    assert SourceConfig().csv_location == "https://promptllm.xyz/app/data/prompts.csv"


def test_source_config_csv_url_overrides(monkeypatch):
    monkeypatch.setenv("PROMPTS_CSV_URL", "https://cdn.example.com/p.csv")
    assert SourceConfig().csv_location == "https://cdn.example.com/p.csv"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("1", True), ("YES", True), ("false", False), ("0", False)],
)
def test_trim_tags_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("PROMPTS_TRIM_TAGS", raw)
    assert SourceConfig().trim_tags is expected


def test_trim_tags_rejects_garbage(monkeypatch):
    monkeypatch.setenv("PROMPTS_TRIM_TAGS", "maybe")
    with pytest.raises(ValueError, match="PROMPTS_TRIM_TAGS"):
        SourceConfig()


def test_cache_config_default_ttl(monkeypatch):
    monkeypatch.delenv("PROMPTS_CACHE_TTL", raising=False)
    assert CacheConfig().ttl_seconds == 300.0


def test_cache_config_custom_ttl(monkeypatch):
    monkeypatch.setenv("PROMPTS_CACHE_TTL", "0")
    assert CacheConfig().ttl_seconds == 0.0


@pytest.mark.parametrize("raw", ["soon", "-5"])
def test_cache_config_rejects_invalid_ttl(monkeypatch, raw):
    monkeypatch.setenv("PROMPTS_CACHE_TTL", raw)
    with pytest.raises(ValueError, match="PROMPTS_CACHE_TTL"):
        CacheConfig()


def test_settings_creates_all_sub_configs(monkeypatch):
    monkeypatch.delenv("PROMPTS_CACHE_TTL", raising=False)
    monkeypatch.delenv("PROMPTS_TRIM_TAGS", raising=False)
    settings = load_settings()
    assert isinstance(settings, Settings)
    assert isinstance(settings.source, SourceConfig)
    assert isinstance(settings.cache, CacheConfig)
    assert isinstance(settings.app, AppConfig)
