"""Public package surface for structured event logging and signal notification.

The writers render events to a stream, colour terminal, syslog or journald;
:class:`EventSender` fans the same events (plus status, attention and
registration notifications) out to remote subscribers through a signal
transport.
"""

from __future__ import annotations

from .adapters import (
    ColourMode,
    ColourPolicy,
    ColourStreamWriter,
    DelayedShutdown,
    InMemorySignalTransport,
    JournaldWriter,
    LogWriter,
    StreamWriter,
    SyslogWriter,
)
from .application.ports import SignalTransportPort, WriterPort
from .application.signals import RecipientSets, SignalKind
from .application.use_cases import EventSender
from .domain import (
    AttentionEvent,
    AttentionGroup,
    AttentionType,
    LogCategory,
    LogEvent,
    LogGroup,
    LogTag,
    MetadataSet,
    MetadataValue,
    StatusEvent,
    StatusMajor,
    StatusMinor,
)
from .runtime import RuntimeSettings, build_runtime_settings, create_event_sender, create_writer

__all__ = [
    "AttentionEvent",
    "AttentionGroup",
    "AttentionType",
    "ColourMode",
    "ColourPolicy",
    "ColourStreamWriter",
    "DelayedShutdown",
    "EventSender",
    "InMemorySignalTransport",
    "JournaldWriter",
    "LogCategory",
    "LogEvent",
    "LogGroup",
    "LogTag",
    "LogWriter",
    "MetadataSet",
    "MetadataValue",
    "RecipientSets",
    "RuntimeSettings",
    "SignalKind",
    "SignalTransportPort",
    "StatusEvent",
    "StatusMajor",
    "StatusMinor",
    "StreamWriter",
    "SyslogWriter",
    "WriterPort",
    "build_runtime_settings",
    "create_event_sender",
    "create_writer",
]
