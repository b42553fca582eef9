"""Prometheus metric sink helpers."""

from __future__ import annotations

from typing import Mapping

from prometheus_client import Counter, Gauge, start_http_server

_PROVIDER_CACHE = Counter(
    "holiday_provider_cache_total",
    "Holiday provider cache lookups",
    ["country", "result"],
)
_PROVIDER_ERRORS = Counter(
    "holiday_provider_errors_total",
    "Holiday provider construction failures",
    ["country"],
)
_GENERIC_GAUGES: dict[str, Gauge] = {}
_SERVER_STARTED = False


class PrometheusMetricSink:
    """Callable sink compatible with HolidayCalendar that forwards to Prometheus."""

    def __call__(self, name: str, value: float, tags: Mapping[str, object] | None = None) -> None:
        tags = tags or {}
        country = str(tags.get("country", "unknown"))
        if name == "provider_cache":
            result = str(tags.get("result", "unknown"))
            _PROVIDER_CACHE.labels(country=country, result=result).inc(value)
            return
        if name == "provider_error":
            _PROVIDER_ERRORS.labels(country=country).inc(value)
            return
        gauge = _GENERIC_GAUGES.get(name)
        if gauge is None:
            gauge = Gauge(f"holiday_{name}", f"Holiday metric {name}", ["country"])
            _GENERIC_GAUGES[name] = gauge
        gauge.labels(country=country).set(value)


def ensure_metrics_server(port: int = 9464) -> None:
    """Start the Prometheus scrape endpoint if it is not already running."""

    global _SERVER_STARTED
    if _SERVER_STARTED:
        return
    start_http_server(port)
    _SERVER_STARTED = True


__all__ = ["PrometheusMetricSink", "ensure_metrics_server"]
