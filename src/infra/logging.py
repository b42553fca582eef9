"""Logging setup shared by the holiday calendar entry points."""

from __future__ import annotations

import logging
import logging.config
import os
from pathlib import Path
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

_CONFIGURED = False


class CalendarJsonFormatter(jsonlogger.JsonFormatter):
    """Stamps each JSON line with the run and the country being resolved."""

    def __init__(self, run_id: str | None, country: str | None) -> None:
        super().__init__()
        self._run_id = run_id
        self._country = country

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("run_id", self._run_id)
        log_record.setdefault("country", self._country)
        log_record.setdefault("logger", record.name)
        log_record.setdefault("level", record.levelname)


def _handlers(level: str, log_path: Path) -> Dict[str, Any]:
    return {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "console",
        },
        "file": {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "level": level,
            "when": "midnight",
            "backupCount": int(os.environ.get("LOG_RETENTION_DAYS", "7")),
            "filename": str(log_path),
            "encoding": "utf-8",
            "formatter": "json",
        },
    }


def configure_logging(
    *,
    run_id: str | None = None,
    country: str | None = None,
    level: str | None = None,
) -> None:
    """Send ``holidaycal`` logs to the console and a rotating JSON file.

    Only the first call has an effect. ``level`` overrides ``LOG_LEVEL``.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    resolved_level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    log_dir = Path(os.environ.get("LOG_DIR", "storage/logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": CalendarJsonFormatter,
                    "run_id": run_id,
                    "country": country,
                },
                "console": {
                    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": _handlers(resolved_level, log_dir / "holidaycal.log"),
            "loggers": {
                "holidaycal": {
                    "level": resolved_level,
                    "handlers": ["console", "file"],
                    "propagate": False,
                },
            },
        }
    )
    _CONFIGURED = True


__all__ = ["CalendarJsonFormatter", "configure_logging"]
