from __future__ import annotations

import dataclasses

import pytest

from lib_log_relay.domain.attention import AttentionEvent, AttentionGroup, AttentionType
from lib_log_relay.domain.events import LogEvent
from lib_log_relay.domain.levels import LogCategory, LogGroup
from lib_log_relay.domain.status import StatusEvent, StatusMajor, StatusMinor
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_events_order_by_category_only() -> None:
    warn = LogEvent(LogGroup.CLIENT, LogCategory.WARN, "a")
    error = LogEvent(LogGroup.UNDEFINED, LogCategory.ERROR, "b")

    assert warn < error
    assert error > warn
    assert warn <= LogEvent(LogGroup.LOGGER, LogCategory.WARN, "c")
    assert max([error, warn]) is error


def test_equality_considers_every_field() -> None:
    first = LogEvent(LogGroup.CLIENT, LogCategory.INFO, "same")

    assert first == LogEvent(LogGroup.CLIENT, LogCategory.INFO, "same")
    assert first != first.with_session_token("tok")


def test_event_is_immutable() -> None:
    event = LogEvent(LogGroup.CLIENT, LogCategory.INFO, "x")

    with pytest.raises(dataclasses.FrozenInstanceError):
        event.message = "y"  # type: ignore[misc]


def test_integer_fields_are_coerced_to_enums() -> None:
    event = LogEvent(7, 5, "coerced")  # type: ignore[arg-type]

    assert event.group is LogGroup.CLIENT
    assert event.category is LogCategory.WARN


def test_unknown_category_is_rejected() -> None:
    with pytest.raises(ValueError):
        LogEvent(LogGroup.CLIENT, 42, "bad")  # type: ignore[arg-type]


def test_log_payload_carries_numeric_codes_and_token() -> None:
    event = LogEvent(LogGroup.BACKENDPROC, LogCategory.ERROR, "boom", "tok-1")

    assert event.to_payload() == {"group": 6, "level": 6, "session_token": "tok-1", "message": "boom"}


def test_str_uses_labels() -> None:
    assert str(LogEvent(LogGroup.CLIENT, LogCategory.WARN, "slow")) == "Client Warning: slow"


def test_status_payload_and_text() -> None:
    event = StatusEvent(StatusMajor.CONNECTION, StatusMinor.CONN_FAILED, "timeout")

    assert event.to_payload() == {"code_major": 2, "code_minor": 10, "message": "timeout"}
    assert str(event) == "CONNECTION, CONN_FAILED: timeout"
    assert str(StatusEvent(StatusMajor.PROCESS, StatusMinor.PROC_STARTED)) == "PROCESS, PROC_STARTED"


def test_attention_payload() -> None:
    event = AttentionEvent(AttentionType.CREDENTIALS, AttentionGroup.USER_PASSWORD, "password please")

    assert event.to_payload() == {"type": 1, "group": 1, "message": "password please"}
