"""Port describing the point-to-point signalling transport (e.g. a message bus)."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class SignalTransportPort(Protocol):
    """Deliver named signals to individual recipients.

    Connection handling, name resolution and credential lookups belong to the
    transport; callers only resolve addresses and send.
    """

    def resolve_address(self, service_name: str) -> str:
        """Return the unique recipient address owning ``service_name``."""

    def send(self, recipient: str, signal_name: str, payload: Mapping[str, Any]) -> bool:
        """Send ``payload`` as ``signal_name`` to ``recipient``.

        Returns ``False`` (or raises) when delivery fails.
        """


__all__ = ["SignalTransportPort"]
