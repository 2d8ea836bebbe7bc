"""Environment-driven configuration for the prompt gallery."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from urllib.parse import urljoin

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _env_bool(key: str, default: bool = False) -> bool:
    raw = _env(key, "true" if default else "false").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ValueError(f"{key} must be a boolean, got {raw!r}")


def _env_float(key: str, default: float) -> float:
    raw = _env(key, str(default)).strip()
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{key} must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class SourceConfig:
    """Where the raw prompt collection is read from."""

    base_url: str = field(default_factory=lambda: _env("PROMPTS_BASE_URL", "http://localhost:8000"))
    asset_path: str = field(default_factory=lambda: _env("PROMPTS_ASSET_PATH", "/prompts.csv"))
    csv_url: str = field(default_factory=lambda: _env("PROMPTS_CSV_URL"))
    csv_path: str = field(default_factory=lambda: _env("PROMPTS_CSV_PATH"))
    markdown_dir: str = field(default_factory=lambda: _env("PROMPTS_MARKDOWN_DIR"))
    trim_tags: bool = field(default_factory=lambda: _env_bool("PROMPTS_TRIM_TAGS"))

    @property
    def csv_location(self) -> str:
        """Absolute URL of the CSV asset."""
        if self.csv_url:
            return self.csv_url
        return urljoin(self.base_url.rstrip("/") + "/", self.asset_path.lstrip("/"))


@dataclass(frozen=True)
class CacheConfig:
    ttl_seconds: float = field(default_factory=lambda: _env_float("PROMPTS_CACHE_TTL", 300.0))


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    site_url: str = field(default_factory=lambda: _env("SITE_URL"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    """Top-level settings composed of all sub-configs."""

    source: SourceConfig = field(default_factory=SourceConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Build settings from the current process environment."""
    return Settings()
