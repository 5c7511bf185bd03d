"""Log formatter and dictConfig builder for the library's loggers."""

from __future__ import annotations

import json
import logging
import os
import time
import traceback
from collections.abc import Mapping
from logging.config import dictConfig
from typing import Any


def _level(env_var: str, default: str) -> str:
    return os.getenv(env_var, default).upper()


def _should_emit_json_payload() -> bool:
    return os.getenv("DYNAMIC_JSON_LOG_JSON", "").strip().lower() in {"1", "true", "yes", "on"}


def _compact_json(value: Any, *, limit: int = 512) -> str:
    encoded = json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)
    if len(encoded) <= limit:
        return encoded
    return encoded[:limit] + "... (truncated)"


def _structured_payload(record: logging.LogRecord) -> dict[str, Any]:
    record_data = record.__dict__.get("data")

    payload: dict[str, Any] = {
        "message": record.getMessage(),
        "severity": record.levelname,
        "logger": record.name,
        "timestamp": (
            f"{time.strftime('%Y-%m-%dT%H:%M:%S', time.gmtime(record.created))}"
            f".{int(record.msecs):03d}Z"
        ),
    }
    if record.exc_info:
        payload["exception"] = "".join(traceback.format_exception(*record.exc_info)).rstrip("\n")
    if record_data:
        payload["data"] = record_data
    return payload


class ExtrasFormatter(logging.Formatter):
    """Append structured `data` payloads when present."""

    def format(self, record: logging.LogRecord) -> str:
        record_data = record.__dict__.get("data")

        if _should_emit_json_payload():
            return json.dumps(
                _structured_payload(record),
                sort_keys=True,
                separators=(",", ":"),
                default=str,
            )

        formatted = super().format(record)
        if record_data:
            return f"{formatted} | data={_compact_json(record_data)}"
        return formatted


def build_log_config(
    *,
    root_level_env: str = "DYNAMIC_JSON_LOG_LEVEL",
    root_default: str = "INFO",
    extra_loggers: Mapping[str, dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return a dictConfig-compatible logging configuration."""
    loggers: dict[str, dict[str, Any]] = {
        "dynamic_json.matches": {
            "level": _level("DYNAMIC_JSON_MATCH_LOG_LEVEL", "WARNING"),
            "handlers": ["console"],
            "propagate": False,
        },
    }
    if extra_loggers:
        loggers.update(extra_loggers)
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "()": ExtrasFormatter,
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stderr",
            }
        },
        "root": {
            "level": _level(root_level_env, root_default),
            "handlers": ["console"],
        },
        "loggers": loggers,
    }


def configure_logging(
    *,
    root_level_env: str = "DYNAMIC_JSON_LOG_LEVEL",
    root_default: str = "INFO",
    extra_loggers: Mapping[str, dict[str, Any]] | None = None,
) -> None:
    """Apply the logging config; never called by the library itself."""
    config = build_log_config(
        root_level_env=root_level_env,
        root_default=root_default,
        extra_loggers=extra_loggers,
    )
    dictConfig(config)


__all__ = ["ExtrasFormatter", "build_log_config", "configure_logging"]
