from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO
from typing import Any, Callable

import pytest

from lib_log_relay.adapters.signals import InMemorySignalTransport
from lib_log_relay.domain.events import LogEvent
from lib_log_relay.domain.levels import LogCategory, LogGroup

FIXED_NOW = datetime(2024, 5, 17, 9, 30, 15, tzinfo=timezone.utc)


class FixedClock:
    def __init__(self, moment: datetime = FIXED_NOW) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


class RecordingWriter:
    """Writer double capturing every call made through the writer API."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.events: list[LogEvent] = []
        self.timestamp_enabled = True

    def enable_timestamp(self, enabled: bool) -> None:
        self.timestamp_enabled = enabled

    def enable_metadata(self, enabled: bool) -> None:
        self.calls.append(("enable_metadata", (enabled,)))

    def enable_message_prepend(self, enabled: bool) -> None:
        self.calls.append(("enable_message_prepend", (enabled,)))

    def add_meta(self, label: str, value: Any, skip: bool = False) -> None:
        self.calls.append(("add_meta", (label, value, skip)))

    def set_prepend_meta(self, label: str, also_on_meta_line: bool = False) -> None:
        self.calls.append(("set_prepend_meta", (label, also_on_meta_line)))

    def write(self, data: str, colour_start: str = "", colour_end: str = "") -> None:
        self.calls.append(("write", (data, colour_start, colour_end)))

    def write_categorised(self, group, category, data, colour_start="", colour_end="") -> None:
        self.calls.append(("write_categorised", (group, category, data)))

    def write_event(self, event: LogEvent) -> None:
        self.events.append(event)


class RecordingShutdown:
    """Termination timer double counting start requests."""

    def __init__(self) -> None:
        self.start_calls = 0
        self.started = False

    def start(self) -> bool:
        self.start_calls += 1
        if self.started:
            return False
        self.started = True
        return True


class SyslogBackendStub:
    def __init__(self) -> None:
        self.opened: list[tuple[str, int, int]] = []
        self.messages: list[tuple[int, str]] = []
        self.closed = 0

    def openlog(self, ident: str, logoption: int, facility: int) -> None:
        self.opened.append((ident, logoption, facility))

    def syslog(self, priority: int, message: str) -> None:
        self.messages.append((priority, message))

    def closelog(self) -> None:
        self.closed += 1


@pytest.fixture
def event_factory() -> Callable[..., LogEvent]:
    def _factory(
        message: str = "hello",
        *,
        group: LogGroup = LogGroup.CLIENT,
        category: LogCategory = LogCategory.INFO,
        session_token: str = "",
    ) -> LogEvent:
        return LogEvent(group, category, message, session_token)

    return _factory


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def transport() -> InMemorySignalTransport:
    return InMemorySignalTransport()


@pytest.fixture
def recording_writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def recording_shutdown() -> RecordingShutdown:
    return RecordingShutdown()


@pytest.fixture
def syslog_backend() -> SyslogBackendStub:
    return SyslogBackendStub()
