"""Composition root: the single place where the client is wired.

Call ``build_client()`` to get a CloudFoundryClient with the real httpx
transport. Tests pass an ``httpx.MockTransport`` through ``http_transport``.
"""

from __future__ import annotations

import httpx

from .adapters.httpx_transport import HttpxTransport
from .client import CloudFoundryClient
from .config.runtime import ClientSettings, get_settings
from .observability import get_logger


def build_client(
    settings: ClientSettings | None = None,
    http_transport: httpx.BaseTransport | None = None,
) -> CloudFoundryClient:
    """Construct a CloudFoundryClient with real adapters."""
    settings = settings or get_settings()
    return CloudFoundryClient(
        transport=HttpxTransport(settings, http_transport=http_transport),
        logger=get_logger(),
    )
