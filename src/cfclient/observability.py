"""Observability: structured request logs (method, path, status, latency_ms, query)."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("cfclient.http")


def get_logger() -> logging.Logger:
    return _LOGGER


def log_request(
    method: str,
    path: str,
    status_code: int | None,
    latency_ms: float,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit one structured record per HTTP request."""
    payload: dict[str, Any] = {
        "method": method,
        "path": path,
        "status_code": status_code,
        "latency_ms": round(latency_ms, 2),
    }
    if error:
        payload["error"] = error
    if extra:
        payload.update(extra)
    if error:
        _LOGGER.warning("http_request", extra=payload)
    else:
        _LOGGER.info("http_request", extra=payload)
