"""Log event value object handed to writers and the log signal.

Purpose
-------
Provide an immutable representation of "something happened": the subsystem
group, severity category, message and the session token used to demultiplex
events coming from several sessions.

System Role
-----------
Produced by callers of :class:`lib_log_relay.application.use_cases.event_sender.EventSender`
and consumed by every writer and by the ``Log`` signal payload.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .levels import LogCategory, LogGroup


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event.

    Events compare by :attr:`category` with ``<``/``>``, so callers can ask
    whether one event is more severe than another; equality still considers
    every field.

    Examples
    --------
    >>> info = LogEvent(LogGroup.CLIENT, LogCategory.INFO, "up")
    >>> err = LogEvent(LogGroup.CLIENT, LogCategory.ERROR, "down")
    >>> err > info
    True
    """

    group: LogGroup
    category: LogCategory
    message: str
    session_token: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "group", LogGroup(self.group))
        object.__setattr__(self, "category", LogCategory(self.category))

    def __lt__(self, other: "LogEvent") -> bool:
        return self.category < other.category

    def __le__(self, other: "LogEvent") -> bool:
        return self.category <= other.category

    def __gt__(self, other: "LogEvent") -> bool:
        return self.category > other.category

    def __ge__(self, other: "LogEvent") -> bool:
        return self.category >= other.category

    @property
    def group_name(self) -> str:
        return self.group.name

    @property
    def category_name(self) -> str:
        return self.category.name

    def with_session_token(self, token: str) -> "LogEvent":
        """Return a copy tagged with ``token``."""

        return replace(self, session_token=token)

    def replace(self, **changes: Any) -> "LogEvent":
        return replace(self, **changes)

    def to_payload(self) -> dict[str, Any]:
        """Serialize into the ``Log`` signal payload."""

        return {
            "group": int(self.group),
            "level": int(self.category),
            "session_token": self.session_token,
            "message": self.message,
        }

    def __str__(self) -> str:
        return f"{self.group.label} {self.category.label}: {self.message}"


__all__ = ["LogEvent"]
