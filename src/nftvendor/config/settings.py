"""TOML config loading and profiles."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

# Default config search path (project root or cwd)
_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent.parent / "config"
_CWD_CONFIG = Path.cwd() / "config"


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base. Override values take precedence."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _find_config_dir() -> Path:
    if _CWD_CONFIG.exists():
        return _CWD_CONFIG
    return _CONFIG_DIR


def load_config(profile: str | None = None, config_dir: Path | None = None) -> dict[str, Any]:
    """Load merged config from default.toml and optional profile overlay."""
    config_dir = config_dir or _find_config_dir()
    default_path = config_dir / "default.toml"
    if not default_path.exists():
        return {}
    base = _load_toml(default_path)
    if profile:
        profile_path = config_dir / f"{profile}.toml"
        if profile_path.exists():
            overlay = _load_toml(profile_path)
            base = _deep_merge(base, overlay)
    return base


def get_settings(profile: str | None = None, config_dir: Path | None = None) -> Settings:
    """Return Settings instance from merged config."""
    raw = load_config(profile, config_dir)
    return Settings.from_dict(raw)


class Settings:
    """Application settings from TOML config."""

    def __init__(
        self,
        *,
        super_rare: dict[str, Any] | None = None,
        pricing: dict[str, Any] | None = None,
        exchange_rate: dict[str, Any] | None = None,
        logging: dict[str, Any] | None = None,
    ):
        self.super_rare = super_rare or {}
        self.pricing = pricing or {}
        self.exchange_rate = exchange_rate or {}
        self.logging = logging or {}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Settings:
        return cls(
            super_rare=raw.get("super_rare"),
            pricing=raw.get("pricing"),
            exchange_rate=raw.get("exchange_rate"),
            logging=raw.get("logging"),
        )

    # Convenience accessors with defaults
    @property
    def super_rare_api_base(self) -> str:
        return self.super_rare.get("api_base", "https://superrare.co/sr-json/v0")

    @property
    def super_rare_timeout_sec(self) -> float:
        return float(self.super_rare.get("timeout_sec", 30.0))

    @property
    def super_rare_transfer_types(self) -> dict[str, str]:
        return dict(self.super_rare.get("transfer_types") or {})

    @property
    def fee_per_million(self) -> int:
        return int(self.pricing.get("fee_per_million", 25_000))

    @property
    def exchange_rate_url(self) -> str:
        return self.exchange_rate.get("url", "http://127.0.0.1:5000/rate")

    @property
    def exchange_rate_ttl_sec(self) -> float:
        return float(self.exchange_rate.get("ttl_sec", 60.0))

    @property
    def exchange_rate_timeout_sec(self) -> float:
        return float(self.exchange_rate.get("timeout_sec", 10.0))

    @property
    def logging_level(self) -> str:
        return self.logging.get("level", "INFO").upper()

    @property
    def logging_format(self) -> str:
        return self.logging.get("format", "console")

    @property
    def logging_level_num(self) -> int:
        return getattr(logging, self.logging_level, logging.INFO)


def configure_logging(settings: Settings) -> None:
    """Configure structlog with settings. Call once at application entry."""
    import structlog

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.logging_format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.logging_level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
