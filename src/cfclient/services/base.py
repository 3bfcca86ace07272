"""Shared plumbing for the per-resource services."""

from __future__ import annotations

from typing import Any

from ..models.list_options import ListOptions
from ..ports.transport import Transport, TransportResponse


def job_guid(response: TransportResponse) -> str:
    """Return the job GUID from an async endpoint's Location header, or ''."""
    if not response.location:
        return ""
    return response.location.rstrip("/").rsplit("/", 1)[-1]


class ResourceService:
    """One request per call against a single ``/v3/<collection>`` endpoint."""

    collection: str = ""

    def __init__(self, transport: Transport, logger: Any = None) -> None:
        self._transport = transport
        self._logger = logger

    def _path(self, *parts: str) -> str:
        return "/".join(["/v3", self.collection, *parts])

    def _list(self, opts: ListOptions) -> dict[str, Any]:
        query = opts.to_query_values()
        if self._logger:
            self._logger.info(
                "list_start",
                extra={"resource": self.collection, "query": query.encode()},
            )
        return self._transport.request("GET", self._path(), params=query).body

    def _get(self, guid: str) -> dict[str, Any]:
        return self._transport.request("GET", self._path(guid)).body
