"""Adapter implementations for the writer, transport and clock ports."""

from __future__ import annotations

from .clock import SystemClock
from .shutdown import DEFAULT_GRACE_SECONDS, DelayedShutdown
from .signals import DeliveredSignal, InMemorySignalTransport
from .writers import (
    ColourMode,
    ColourPolicy,
    ColourStreamWriter,
    JournaldWriter,
    LogWriter,
    StreamWriter,
    SyslogWriter,
    syslog_priority,
)

__all__ = [
    "ColourMode",
    "ColourPolicy",
    "ColourStreamWriter",
    "DEFAULT_GRACE_SECONDS",
    "DelayedShutdown",
    "DeliveredSignal",
    "InMemorySignalTransport",
    "JournaldWriter",
    "LogWriter",
    "StreamWriter",
    "SyslogWriter",
    "SystemClock",
    "syslog_priority",
]
