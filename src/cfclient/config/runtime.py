"""Pydantic-based client settings.

Loads from CF_-prefixed environment variables (with optional .env file).
Invalid values fail fast when settings are first built.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .. import __version__


class ClientSettings(BaseSettings):
    """All configuration for talking to a v3 API endpoint."""

    model_config = {"env_prefix": "CF_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # --- Endpoint ---
    api_url: str = Field(default="http://localhost:8080", description="Base URL of the v3 API")
    access_token: str | None = Field(default=None, description="Bearer token sent on every request")
    skip_tls_verification: bool = Field(default=False, description="Disable TLS certificate checks")
    user_agent: str = Field(default=f"cfclient-python/{__version__}", description="User-Agent header")

    # --- Limits ---
    request_timeout_seconds: float = Field(default=30.0, gt=0, description="Per-request timeout")
    default_per_page: int = Field(default=50, ge=1, le=5000, description="per_page used by the CLI")

    @field_validator("api_url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"api_url must be an http(s) URL, got {v!r}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> ClientSettings:
    """Return the singleton ClientSettings (cached after first call)."""
    return ClientSettings()
