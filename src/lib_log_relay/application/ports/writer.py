"""Writer port describing how a log event reaches its destination.

Purpose
-------
Define the capability every output backend (stream, colour terminal, syslog,
journald) offers, so the event sender only depends on this narrow protocol.

Contents
--------
* :class:`WriterPort` - runtime-checkable protocol mirroring the writer API.

System Role
-----------
Concrete implementations live in :mod:`lib_log_relay.adapters.writers`; the
shared state and default composition rules are provided by
:class:`lib_log_relay.adapters.writers.base.LogWriter`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_relay.domain.events import LogEvent
from lib_log_relay.domain.levels import LogCategory, LogGroup
from lib_log_relay.domain.tags import TagPort


@runtime_checkable
class WriterPort(Protocol):
    """Render log events to one destination."""

    @property
    def timestamp_enabled(self) -> bool: ...

    def enable_timestamp(self, enabled: bool) -> None: ...

    def enable_metadata(self, enabled: bool) -> None: ...

    def enable_message_prepend(self, enabled: bool) -> None: ...

    def add_meta(self, label: str, value: str | TagPort, skip: bool = False) -> None:
        """Attach a value to the next write."""

    def set_prepend_meta(self, label: str, also_on_meta_line: bool = False) -> None:
        """Surface the metadata value ``label`` before the next message body."""

    def write(self, data: str, colour_start: str = "", colour_end: str = "") -> None: ...

    def write_categorised(
        self,
        group: LogGroup,
        category: LogCategory,
        data: str,
        colour_start: str = "",
        colour_end: str = "",
    ) -> None: ...

    def write_event(self, event: LogEvent) -> None: ...


__all__ = ["WriterPort"]
