"""Port: HTTP transport used by the resource services."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from ..domain.query_values import QueryValues


class TransportResponse(BaseModel):
    """Decoded response; ``location`` is set for async (202) endpoints."""

    status_code: int
    body: dict[str, Any] = Field(default_factory=dict)
    location: str | None = None


@runtime_checkable
class Transport(Protocol):
    """Issue one request and return the decoded response."""

    def request(
        self,
        method: str,
        path: str,
        *,
        params: QueryValues | None = None,
        json: dict[str, Any] | None = None,
    ) -> TransportResponse: ...
