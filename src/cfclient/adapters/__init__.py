"""Adapters: concrete implementations of the ports."""

from .httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
