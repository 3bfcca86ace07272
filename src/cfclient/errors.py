"""Errors raised by the HTTP layer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ApiErrorDetail(BaseModel):
    """One entry of a v3 error document's ``errors`` list."""

    code: int = 0
    title: str = ""
    detail: str = ""


class CloudFoundryError(Exception):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, errors: list[ApiErrorDetail] | None = None) -> None:
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(self._message())

    def _message(self) -> str:
        if not self.errors:
            return f"unexpected status {self.status_code}"
        first = self.errors[0]
        return f"{first.title}: {first.detail} (status {self.status_code})"

    @classmethod
    def from_body(cls, status_code: int, body: Any) -> CloudFoundryError:
        """Parse ``{"errors": [...]}``; anything else yields an error without details."""
        errors: list[ApiErrorDetail] = []
        if isinstance(body, dict):
            for item in body.get("errors") or []:
                if isinstance(item, dict):
                    errors.append(ApiErrorDetail.model_validate(item))
        return cls(status_code, errors)

    def has_code(self, code: int) -> bool:
        return any(e.code == code for e in self.errors)


class TransportError(Exception):
    """The request never produced a response (connect failure, timeout, ...)."""
