"""Factories turning :class:`RuntimeSettings` into writers and event senders."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from lib_log_relay.adapters.writers import (
    ColourPolicy,
    ColourStreamWriter,
    JournaldWriter,
    LogWriter,
    StreamWriter,
    SyslogWriter,
)
from lib_log_relay.adapters.writers.journald import Sender
from lib_log_relay.application.ports.process import ShutdownTimerPort
from lib_log_relay.application.ports.transport import SignalTransportPort
from lib_log_relay.application.use_cases.event_sender import EventSender
from lib_log_relay.domain.levels import LogGroup

from ._settings import RuntimeSettings


def create_writer(
    settings: RuntimeSettings,
    *,
    stream: TextIO | None = None,
    syslog_backend: Any | None = None,
    journald_sender: Sender | None = None,
) -> LogWriter:
    """Build the writer selected by ``settings.writer`` with its feature flags applied."""

    writer: LogWriter
    if settings.writer == "stream":
        writer = StreamWriter(stream or sys.stderr)
    elif settings.writer == "colour":
        writer = ColourStreamWriter(stream or sys.stderr, ColourPolicy(settings.colour_mode))
    elif settings.writer == "syslog":
        writer = SyslogWriter(settings.syslog_ident, backend=syslog_backend)
    else:
        writer = JournaldWriter(sender=journald_sender, field_prefix=settings.journald_prefix)
    writer.enable_timestamp(settings.timestamp)
    writer.enable_metadata(settings.metadata)
    writer.enable_message_prepend(settings.message_prepend)
    return writer


def create_event_sender(
    settings: RuntimeSettings,
    transport: SignalTransportPort,
    log_group: LogGroup,
    session_token: str,
    writer: LogWriter | None = None,
    *,
    shutdown: ShutdownTimerPort | None = None,
) -> EventSender:
    return EventSender.create(
        transport,
        log_group,
        session_token,
        writer,
        log_level=settings.log_level,
        fatal_grace_seconds=settings.fatal_grace_seconds,
        shutdown=shutdown,
    )


__all__ = ["create_event_sender", "create_writer"]
