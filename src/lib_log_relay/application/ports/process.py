"""Port for the process-terminating timer started on fatal errors."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ShutdownTimerPort(Protocol):
    """Start-once timer that ends the process; it cannot be cancelled."""

    @property
    def started(self) -> bool: ...

    def start(self) -> bool:
        """Start the timer; return ``False`` if it was already started."""


__all__ = ["ShutdownTimerPort"]
