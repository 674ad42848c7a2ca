"""Protocols the application layer depends on."""

from __future__ import annotations

from .process import ShutdownTimerPort
from .time import ClockPort
from .transport import SignalTransportPort
from .writer import WriterPort

__all__ = ["ClockPort", "ShutdownTimerPort", "SignalTransportPort", "WriterPort"]
