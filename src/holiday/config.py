"""Configuration helpers for the holiday calendar."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, MutableMapping

from .calendar import DEFAULT_LANGUAGE, DEFAULT_LOCALE, HolidayCalendar
from .engine import HolidayEngine


class HolidayConfigError(ValueError):
    """Raised when configuration values are missing or invalid."""


def _get_env(source: Mapping[str, str] | None) -> Mapping[str, str]:
    if source is None:
        return os.environ
    return source


def _get_str(source: Mapping[str, str], key: str, default: str) -> str:
    raw = source.get(key)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _get_int(source: Mapping[str, str], key: str, default: int) -> int:
    raw = source.get(key)
    if raw is None:
        return default
    stripped = raw.strip()
    if not stripped:
        return default
    try:
        value = int(stripped)
    except ValueError as exc:
        raise HolidayConfigError(f"{key} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise HolidayConfigError(f"{key} must be positive, got {value}")
    return value


def _get_bool(source: Mapping[str, str], key: str, default: bool) -> bool:
    raw = source.get(key)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if not lowered:
        return default
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    raise HolidayConfigError(f"{key} must be a boolean string, got {raw!r}")


@dataclass(frozen=True)
class HolidayConfig:
    """Country, language and observability settings for a calendar."""

    country_code: str = "US"
    language: str = DEFAULT_LANGUAGE
    locale: str = DEFAULT_LOCALE
    metrics_enabled: bool = False
    metrics_port: int = 9464
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "HolidayConfig":
        env_map = _get_env(env)
        return cls(
            country_code=_get_str(env_map, "HOLIDAY_COUNTRY", "US").upper(),
            language=_get_str(env_map, "HOLIDAY_LANGUAGE", DEFAULT_LANGUAGE),
            locale=_get_str(env_map, "HOLIDAY_LOCALE", DEFAULT_LOCALE),
            metrics_enabled=_get_bool(env_map, "HOLIDAY_METRICS", False),
            metrics_port=_get_int(env_map, "METRICS_PORT", 9464),
            log_level=_get_str(env_map, "LOG_LEVEL", "INFO").upper(),
        )

    def as_dict(self) -> MutableMapping[str, str | int | bool]:
        """Expose configuration for debugging/log serialization."""

        return {
            "country_code": self.country_code,
            "language": self.language,
            "locale": self.locale,
            "metrics_enabled": self.metrics_enabled,
            "metrics_port": self.metrics_port,
            "log_level": self.log_level,
        }


def build_calendar(
    config: HolidayConfig | None = None,
    *,
    country_code: str | None = None,
    engine: HolidayEngine | None = None,
) -> HolidayCalendar:
    """Wire a :class:`HolidayCalendar` from configuration."""

    config = config or HolidayConfig.from_env()
    metric_sink = None
    if config.metrics_enabled:
        from infra.metrics import PrometheusMetricSink, ensure_metrics_server

        ensure_metrics_server(config.metrics_port)
        metric_sink = PrometheusMetricSink()
    return HolidayCalendar(
        country_code or config.country_code,
        engine=engine,
        language=config.language,
        locale=config.locale,
        metric_sink=metric_sink,
    )


__all__ = ["HolidayConfig", "HolidayConfigError", "build_calendar"]
