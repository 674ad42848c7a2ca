"""Severity categories and subsystem groups attached to every log event.

Purpose
-------
Offer a closed, totally ordered set of severity categories together with the
subsystem groups that tag where an event originated, plus the textual prefix
human-readable writers place before a message.

Contents
--------
* :class:`LogCategory` - ordered severity categories with display labels.
* :class:`LogGroup` - subsystem identifiers independent of severity.
* :func:`log_prefix` - ``"<Group> <Category>: "`` rendering helper.

System Role
-----------
Shared by every writer (prefixing, colour, syslog priority) and by the event
sender (log-level filtering, signal payloads).
"""

from __future__ import annotations

from enum import IntEnum


class LogCategory(IntEnum):
    """Severity categories ordered from least to most important."""

    DEBUG = 1
    VERB2 = 2
    VERB1 = 3
    INFO = 4
    WARN = 5
    ERROR = 6
    CRIT = 7
    FATAL = 8

    @property
    def label(self) -> str:
        """Return the text used when prefixing human-readable log lines."""

        return _CATEGORY_LABELS[self]

    @property
    def min_log_level(self) -> int:
        """Return the lowest log level (0-6) at which this category passes a filter."""

        return _CATEGORY_MIN_LOG_LEVEL[self]

    @classmethod
    def from_name(cls, name: str) -> "LogCategory":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log category: {name!r}") from exc


class LogGroup(IntEnum):
    """Subsystem a log event belongs to."""

    UNDEFINED = 0
    MASTERPROC = 1
    CONFIGMGR = 2
    SESSIONMGR = 3
    BACKENDSTART = 4
    LOGGER = 5
    BACKENDPROC = 6
    CLIENT = 7
    EXTSERVICE = 8

    @property
    def label(self) -> str:
        """Return the human readable subsystem name."""

        return _GROUP_LABELS[self]

    @classmethod
    def from_name(cls, name: str) -> "LogGroup":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log group: {name!r}") from exc


_CATEGORY_LABELS = {
    LogCategory.DEBUG: "DEBUG",
    LogCategory.VERB2: "VERB2",
    LogCategory.VERB1: "VERB1",
    LogCategory.INFO: "INFO",
    LogCategory.WARN: "Warning",
    LogCategory.ERROR: "-- ERROR --",
    LogCategory.CRIT: "!! CRITICAL !!",
    LogCategory.FATAL: "**!! FATAL !!**",
}

_CATEGORY_MIN_LOG_LEVEL = {
    LogCategory.DEBUG: 6,
    LogCategory.VERB2: 5,
    LogCategory.VERB1: 4,
    LogCategory.INFO: 3,
    LogCategory.WARN: 2,
    LogCategory.ERROR: 1,
    LogCategory.CRIT: 0,
    LogCategory.FATAL: 0,
}
# CRIT and FATAL are never filtered out.

_GROUP_LABELS = {
    LogGroup.UNDEFINED: "[[UNDEFINED]]",
    LogGroup.MASTERPROC: "Master Process",
    LogGroup.CONFIGMGR: "Config Manager",
    LogGroup.SESSIONMGR: "Session Manager",
    LogGroup.BACKENDSTART: "Backend Starter",
    LogGroup.LOGGER: "Logger",
    LogGroup.BACKENDPROC: "Backend VPN Process",
    LogGroup.CLIENT: "Client",
    LogGroup.EXTSERVICE: "External Service",
}


def log_prefix(group: LogGroup, category: LogCategory | None) -> str:
    """Return the ``"<Group> <Category>: "`` prefix for a log line.

    The group part is left out for :attr:`LogGroup.UNDEFINED`, the category part
    when ``category`` is ``None``.

    Examples
    --------
    >>> log_prefix(LogGroup.CLIENT, LogCategory.WARN)
    'Client Warning: '
    >>> log_prefix(LogGroup.UNDEFINED, LogCategory.INFO)
    'INFO: '
    >>> log_prefix(LogGroup.LOGGER, None)
    'Logger: '
    """

    parts = []
    if group is not LogGroup.UNDEFINED:
        parts.append(group.label)
    if category is not None:
        parts.append(category.label)
    if not parts:
        return ""
    return " ".join(parts) + ": "


__all__ = ["LogCategory", "LogGroup", "log_prefix"]
