"""Ports: interfaces the services depend on."""

from .transport import Transport, TransportResponse

__all__ = ["Transport", "TransportResponse"]
