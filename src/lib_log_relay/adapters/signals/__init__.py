"""Signal transport adapters."""

from __future__ import annotations

from .memory import DeliveredSignal, InMemorySignalTransport

__all__ = ["DeliveredSignal", "InMemorySignalTransport"]
