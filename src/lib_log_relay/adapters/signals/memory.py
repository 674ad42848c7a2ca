"""In-process signal transport recording every delivery.

Used by the CLI ``signals`` demo and by tests in place of a real message bus.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from lib_log_relay.application.ports.transport import SignalTransportPort


@dataclass(frozen=True)
class DeliveredSignal:
    recipient: str
    signal_name: str
    payload: Mapping[str, Any] = field(default_factory=dict)


class InMemorySignalTransport(SignalTransportPort):
    """Resolve service names to ``:1.<n>`` style addresses and record sends.

    Parameters
    ----------
    addresses:
        Optional fixed service-name to address mapping; unknown names get a
        fresh address on first resolution.
    failing_recipients:
        Recipients for which :meth:`send` reports failure.

    Examples
    --------
    >>> transport = InMemorySignalTransport()
    >>> address = transport.resolve_address("org.example.log")
    >>> transport.send(address, "Log", {"message": "hi"})
    True
    >>> transport.delivered[0].signal_name
    'Log'
    """

    def __init__(
        self,
        addresses: Mapping[str, str] | None = None,
        *,
        failing_recipients: Sequence[str] = (),
    ) -> None:
        self._addresses = dict(addresses or {})
        self._failing = set(failing_recipients)
        self._lock = threading.Lock()
        self._delivered: list[DeliveredSignal] = []

    def resolve_address(self, service_name: str) -> str:
        with self._lock:
            if service_name not in self._addresses:
                self._addresses[service_name] = f":1.{len(self._addresses) + 1}"
            return self._addresses[service_name]

    def send(self, recipient: str, signal_name: str, payload: Mapping[str, Any]) -> bool:
        if recipient in self._failing:
            return False
        with self._lock:
            self._delivered.append(DeliveredSignal(recipient, signal_name, MappingProxyType(dict(payload))))
        return True

    def fail_for(self, recipient: str) -> None:
        self._failing.add(recipient)

    @property
    def delivered(self) -> list[DeliveredSignal]:
        """Point-in-time copy of all recorded deliveries."""
        with self._lock:
            return list(self._delivered)

    def delivered_to(self, recipient: str) -> list[DeliveredSignal]:
        return [item for item in self.delivered if item.recipient == recipient]

    def clear(self) -> None:
        with self._lock:
            self._delivered.clear()


__all__ = ["DeliveredSignal", "InMemorySignalTransport"]
