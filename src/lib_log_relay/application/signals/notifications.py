"""Concrete signals: log lines, status changes, attention and registration requests."""

from __future__ import annotations

from lib_log_relay.domain.attention import AttentionEvent
from lib_log_relay.domain.events import LogEvent
from lib_log_relay.domain.status import StatusEvent

from ._base import Signal, SignalKind


class LogSignal(Signal):
    kind = SignalKind.LOG

    def send(self, event: LogEvent) -> bool:
        return self.emit(event.to_payload())


class StatusChangeSignal(Signal):
    """Status transition signal that remembers the last event sent."""

    kind = SignalKind.STATUS_CHANGE
    _last: StatusEvent | None = None

    def send(self, event: StatusEvent) -> bool:
        # Retained even when delivery fails so queries report the current status.
        self._last = event
        return self.emit(event.to_payload())

    @property
    def last(self) -> StatusEvent | None:
        return self._last


class AttentionRequiredSignal(Signal):
    kind = SignalKind.ATTENTION_REQUIRED

    def send(self, event: AttentionEvent) -> bool:
        return self.emit(event.to_payload())


class RegistrationRequestSignal(Signal):
    """Announce a freshly started backend to the session manager."""

    kind = SignalKind.REGISTRATION_REQUEST

    def send(self, address: str, token: str, pid: int) -> bool:
        return self.emit({"busname": address, "token": token, "pid": int(pid)})


__all__ = [
    "AttentionRequiredSignal",
    "LogSignal",
    "RegistrationRequestSignal",
    "StatusChangeSignal",
]
