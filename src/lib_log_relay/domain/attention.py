"""Events telling front-ends that a backend needs input or feedback."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class AttentionType(IntEnum):
    UNSET = 0
    CREDENTIALS = 1
    PKCS11 = 2
    ACCESS_PERM = 3


class AttentionGroup(IntEnum):
    UNSET = 0
    USER_PASSWORD = 1
    HTTP_PROXY_CREDS = 2
    PK_PASSPHRASE = 3
    CHALLENGE_STATIC = 4
    CHALLENGE_DYNAMIC = 5
    CHALLENGE_AUTH_PENDING = 6
    PKCS11_SIGN = 7
    PKCS11_DECRYPT = 8
    OPEN_URL = 9


@dataclass(slots=True, frozen=True)
class AttentionEvent:
    type: AttentionType
    group: AttentionGroup
    message: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", AttentionType(self.type))
        object.__setattr__(self, "group", AttentionGroup(self.group))

    def to_payload(self) -> dict[str, Any]:
        return {"type": int(self.type), "group": int(self.group), "message": self.message}


__all__ = ["AttentionEvent", "AttentionGroup", "AttentionType"]
