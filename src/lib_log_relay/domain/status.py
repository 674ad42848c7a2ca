"""Status transition events sent through the ``StatusChange`` signal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class StatusMajor(IntEnum):
    UNSET = 0
    CFG_ERROR = 1
    CONNECTION = 2
    SESSION = 3
    PKCS11 = 4
    PROCESS = 5


class StatusMinor(IntEnum):
    UNSET = 0
    CFG_ERROR = 1
    CFG_OK = 2
    CFG_INLINE_MISSING = 3
    CFG_REQUIRE_USER = 4
    CONN_INIT = 5
    CONN_CONNECTING = 6
    CONN_CONNECTED = 7
    CONN_DISCONNECTING = 8
    CONN_DISCONNECTED = 9
    CONN_FAILED = 10
    CONN_AUTH_FAILED = 11
    CONN_RECONNECTING = 12
    CONN_PAUSING = 13
    CONN_PAUSED = 14
    CONN_RESUMING = 15
    CONN_DONE = 16
    SESS_NEW = 17
    SESS_BACKEND_COMPLETED = 18
    SESS_REMOVED = 19
    SESS_AUTH_USERPASS = 20
    SESS_AUTH_CHALLENGE = 21
    SESS_AUTH_URL = 22
    PKCS11_SIGN = 23
    PKCS11_ENCRYPT = 24
    PKCS11_DECRYPT = 25
    PKCS11_VERIFY = 26
    PROC_STARTED = 27
    PROC_STOPPED = 28
    PROC_KILLED = 29


@dataclass(slots=True, frozen=True)
class StatusEvent:
    """Major/minor status transition with optional free-text detail.

    Examples
    --------
    >>> StatusEvent(StatusMajor.CONNECTION, StatusMinor.CONN_CONNECTED).to_payload()
    {'code_major': 2, 'code_minor': 7, 'message': ''}
    """

    major: StatusMajor
    minor: StatusMinor
    message: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "major", StatusMajor(self.major))
        object.__setattr__(self, "minor", StatusMinor(self.minor))

    def to_payload(self) -> dict[str, Any]:
        return {
            "code_major": int(self.major),
            "code_minor": int(self.minor),
            "message": self.message,
        }

    def __str__(self) -> str:
        text = f"{self.major.name}, {self.minor.name}"
        return f"{text}: {self.message}" if self.message else text


__all__ = ["StatusEvent", "StatusMajor", "StatusMinor"]
