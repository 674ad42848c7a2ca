from __future__ import annotations

from io import StringIO

import pytest

from lib_log_relay.adapters.signals import InMemorySignalTransport
from lib_log_relay.adapters.writers import (
    ColourMode,
    ColourStreamWriter,
    JournaldWriter,
    StreamWriter,
    SyslogWriter,
)
from lib_log_relay.domain.levels import LogCategory, LogGroup
from lib_log_relay.runtime import RuntimeSettings, build_runtime_settings, create_event_sender, create_writer
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_defaults_without_environment() -> None:
    settings = build_runtime_settings(environ={})

    assert settings == RuntimeSettings()
    assert settings.writer == "stream"
    assert settings.log_level == 6
    assert settings.colour_mode is ColourMode.BY_CATEGORY


def test_environment_overrides_arguments() -> None:
    settings = build_runtime_settings(
        writer="stream",
        log_level=6,
        environ={
            "LOG_RELAY_WRITER": "Colour",
            "LOG_RELAY_TIMESTAMP": "off",
            "LOG_RELAY_METADATA": "no",
            "LOG_RELAY_MESSAGE_PREPEND": "0",
            "LOG_RELAY_COLOUR_MODE": "group",
            "LOG_RELAY_LOG_LEVEL": "2",
            "LOG_RELAY_FATAL_GRACE": "0.5",
            "LOG_RELAY_SYSLOG_IDENT": "relayd",
            "LOG_RELAY_JOURNALD_PREFIX": "RELAY_",
        },
    )

    assert settings == RuntimeSettings(
        writer="colour",
        timestamp=False,
        metadata=False,
        message_prepend=False,
        colour_mode=ColourMode.BY_GROUP,
        log_level=2,
        fatal_grace_seconds=0.5,
        syslog_ident="relayd",
        journald_prefix="RELAY_",
    )


def test_arguments_apply_when_environment_is_silent() -> None:
    settings = build_runtime_settings(writer="syslog", colour_mode="none", timestamp=False, environ={})

    assert settings.writer == "syslog"
    assert settings.colour_mode is ColourMode.NONE
    assert settings.timestamp is False


@pytest.mark.parametrize(
    "environ, message",
    [
        ({"LOG_RELAY_WRITER": "carrier-pigeon"}, "writer must be one of"),
        ({"LOG_RELAY_TIMESTAMP": "maybe"}, "LOG_RELAY_TIMESTAMP must be a boolean"),
        ({"LOG_RELAY_LOG_LEVEL": "9"}, "log_level must be between"),
        ({"LOG_RELAY_FATAL_GRACE": "-1"}, "fatal_grace_seconds"),
        ({"LOG_RELAY_COLOUR_MODE": "rainbow"}, "Unknown colour mode"),
    ],
)
def test_invalid_values_are_rejected(environ: dict[str, str], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        build_runtime_settings(environ=environ)


def test_reads_process_environment_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_RELAY_WRITER", "journald")

    assert build_runtime_settings().writer == "journald"


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("stream", StreamWriter),
        ("colour", ColourStreamWriter),
        ("syslog", SyslogWriter),
        ("journald", JournaldWriter),
    ],
)
def test_create_writer_builds_selected_backend(kind: str, expected: type, syslog_backend) -> None:
    writer = create_writer(
        RuntimeSettings(writer=kind),
        stream=StringIO(),
        syslog_backend=syslog_backend,
        journald_sender=lambda *records: None,
    )

    assert type(writer) is expected


def test_create_writer_applies_feature_flags() -> None:
    buffer = StringIO()
    writer = create_writer(RuntimeSettings(timestamp=False, metadata=False, message_prepend=False), stream=buffer)
    writer.add_meta("user", "alice")
    writer.set_prepend_meta("user")
    writer.write("x")

    assert buffer.getvalue() == "x\n"


def test_create_writer_passes_colour_mode() -> None:
    writer = create_writer(RuntimeSettings(writer="colour", colour_mode=ColourMode.BY_GROUP), stream=StringIO())

    assert isinstance(writer, ColourStreamWriter)
    assert writer.policy.mode is ColourMode.BY_GROUP


def test_create_writer_passes_backend_naming(syslog_backend) -> None:
    records: list[tuple[str, ...]] = []
    create_writer(RuntimeSettings(writer="syslog", syslog_ident="relayd"), syslog_backend=syslog_backend)
    journald = create_writer(
        RuntimeSettings(writer="journald", journald_prefix="RELAY_"),
        journald_sender=lambda *fields: records.append(fields),
    )
    journald.write_categorised(LogGroup.CLIENT, LogCategory.INFO, "x")

    assert syslog_backend.opened[0][0] == "relayd"
    assert records[0][0] == "RELAY_LOG_GROUP=CLIENT"


def test_create_event_sender_applies_log_level(recording_writer, recording_shutdown) -> None:
    transport = InMemorySignalTransport()
    sender = create_event_sender(
        RuntimeSettings(log_level=1),
        transport,
        LogGroup.SESSIONMGR,
        "tok",
        recording_writer,
        shutdown=recording_shutdown,
    )
    sender.warn("filtered")
    sender.error("kept")

    assert sender.log_level == 1
    assert [event.message for event in recording_writer.events] == ["kept"]
