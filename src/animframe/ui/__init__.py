"""UI package: the transport toolbar."""

from .transport import TransportBar

__all__ = ["TransportBar"]
