from __future__ import annotations

import gc

import pytest

from lib_log_relay.adapters.writers.syslog import (
    LOG_DAEMON,
    LOG_INFO,
    LOG_NDELAY,
    LOG_PID,
    SyslogWriter,
    syslog_priority,
)
from lib_log_relay.domain.events import LogEvent
from lib_log_relay.domain.levels import LogCategory, LogGroup
from tests.os_markers import LINUX_ONLY, OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


@pytest.mark.parametrize(
    "category, priority",
    [
        (LogCategory.DEBUG, 7),
        (LogCategory.VERB2, 7),
        (LogCategory.VERB1, 6),
        (LogCategory.INFO, 6),
        (LogCategory.WARN, 4),
        (LogCategory.ERROR, 3),
        (LogCategory.CRIT, 2),
        (LogCategory.FATAL, 1),
    ],
)
def test_priority_table(category: LogCategory, priority: int) -> None:
    assert syslog_priority(category) == priority


def test_unmapped_category_is_rejected() -> None:
    with pytest.raises(ValueError, match="No syslog priority"):
        syslog_priority(99)  # type: ignore[arg-type]


def test_writer_opens_log_with_ident_and_facility(syslog_backend) -> None:
    SyslogWriter("relay-test", backend=syslog_backend)

    assert syslog_backend.opened == [("relay-test", LOG_NDELAY | LOG_PID, LOG_DAEMON)]


def test_plain_write_uses_info_priority(syslog_backend) -> None:
    writer = SyslogWriter(backend=syslog_backend)
    writer.write("hello", "\x1b[31m", "\x1b[0m")

    assert syslog_backend.messages == [(LOG_INFO, "hello")]


def test_categorised_write_maps_priority_and_keeps_group_only(syslog_backend) -> None:
    writer = SyslogWriter(backend=syslog_backend)
    writer.write_event(LogEvent(LogGroup.CLIENT, LogCategory.ERROR, "boom"))

    assert syslog_backend.messages == [(3, "Client: boom")]


def test_undefined_group_sends_bare_message(syslog_backend) -> None:
    writer = SyslogWriter(backend=syslog_backend)
    writer.write_categorised(LogGroup.UNDEFINED, LogCategory.WARN, "slow")

    assert syslog_backend.messages == [(4, "slow")]


def test_metadata_goes_out_as_separate_message(syslog_backend) -> None:
    writer = SyslogWriter(backend=syslog_backend)
    writer.add_meta("user", "alice")
    writer.add_meta("ip", "10.0.0.1", skip=True)
    writer.set_prepend_meta("ip", also_on_meta_line=True)
    writer.write_categorised(LogGroup.LOGGER, LogCategory.INFO, "ready")
    writer.write("after")

    assert syslog_backend.messages == [
        (6, "10.0.0.1 user=alice"),
        (6, "10.0.0.1 Logger: ready"),
        (LOG_INFO, "after"),
    ]


def test_timestamp_cannot_be_disabled(syslog_backend) -> None:
    writer = SyslogWriter(backend=syslog_backend)
    writer.enable_timestamp(False)

    assert writer.timestamp_enabled is True


def test_close_releases_the_log(syslog_backend) -> None:
    writer = SyslogWriter(backend=syslog_backend)
    writer.close()

    assert syslog_backend.closed == 1


def test_close_is_idempotent(syslog_backend) -> None:
    writer = SyslogWriter(backend=syslog_backend)
    writer.close()
    writer.close()
    del writer
    gc.collect()

    assert syslog_backend.closed == 1


def test_context_manager_closes_the_log(syslog_backend) -> None:
    with SyslogWriter(backend=syslog_backend) as writer:
        writer.write("inside")

    assert syslog_backend.messages == [(LOG_INFO, "inside")]
    assert syslog_backend.closed == 1


def test_unclosed_writer_closes_log_when_collected(syslog_backend) -> None:
    writer = SyslogWriter(backend=syslog_backend)
    writer.write("x")
    del writer
    gc.collect()

    assert syslog_backend.closed == 1


@LINUX_ONLY
def test_default_backend_is_stdlib_syslog() -> None:
    import syslog

    from lib_log_relay.adapters.writers.syslog import _default_backend

    assert _default_backend() is syslog
