"""Output backends implementing :class:`lib_log_relay.application.ports.WriterPort`."""

from __future__ import annotations

from .base import LogWriter
from .colour import ColourMode, ColourPolicy, ColourStreamWriter
from .journald import JournaldWriter
from .stream import StreamWriter
from .syslog import SyslogWriter, syslog_priority

__all__ = [
    "ColourMode",
    "ColourPolicy",
    "ColourStreamWriter",
    "JournaldWriter",
    "LogWriter",
    "StreamWriter",
    "SyslogWriter",
    "syslog_priority",
]
