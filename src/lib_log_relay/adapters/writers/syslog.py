"""Writer forwarding log lines to the host syslog daemon.

Purpose
-------
Hand each event to :mod:`syslog` with a priority derived from its category.
The daemon adds its own timestamps and colours would corrupt log files, so
both are ignored.

Contents
--------
* :data:`_PRIORITY_MAP` - fixed category to syslog priority table.
* :func:`syslog_priority` - total lookup over :class:`LogCategory`.
* :class:`SyslogWriter` - concrete :class:`LogWriter`.
"""

from __future__ import annotations

from contextlib import suppress
from types import ModuleType, TracebackType
from typing import Any

from lib_log_relay.domain.levels import LogCategory, LogGroup, log_prefix

from .base import LogWriter

LOG_PID = 0x01
LOG_NDELAY = 0x08
LOG_DAEMON = 3 << 3
LOG_INFO = 6

_PRIORITY_MAP = {
    LogCategory.DEBUG: 7,
    LogCategory.VERB2: 7,
    LogCategory.VERB1: 6,
    LogCategory.INFO: 6,
    LogCategory.WARN: 4,
    LogCategory.ERROR: 3,
    LogCategory.CRIT: 2,
    LogCategory.FATAL: 1,
}
#: Map :class:`LogCategory` to syslog numeric priorities (LOG_DEBUG .. LOG_ALERT).


def syslog_priority(category: LogCategory) -> int:
    """Return the syslog priority for ``category``.

    Raises
    ------
    ValueError
        When ``category`` is not part of the table.

    Examples
    --------
    >>> syslog_priority(LogCategory.WARN)
    4
    """

    try:
        return _PRIORITY_MAP[category]
    except KeyError as exc:
        raise ValueError(f"No syslog priority for category: {category!r}") from exc


def _default_backend() -> Any:  # pragma: no cover - depends on the platform
    import syslog

    return syslog


class SyslogWriter(LogWriter):
    """Send log lines to syslog.

    Parameters
    ----------
    ident:
        Program name recorded by the daemon.
    facility:
        Syslog facility; defaults to ``LOG_DAEMON``.
    backend:
        Object exposing ``openlog``/``syslog``/``closelog``; defaults to the
        stdlib :mod:`syslog` module.
    """

    def __init__(
        self,
        ident: str = "lib_log_relay",
        facility: int = LOG_DAEMON,
        *,
        backend: ModuleType | Any | None = None,
    ) -> None:
        super().__init__()
        self._open = False
        self._backend = backend if backend is not None else _default_backend()
        self._backend.openlog(ident, LOG_NDELAY | LOG_PID, facility)
        self._open = True

    @property
    def timestamp_enabled(self) -> bool:
        return True

    def write(self, data: str, colour_start: str = "", colour_end: str = "") -> None:
        self._submit(LOG_INFO, data)

    def write_categorised(
        self,
        group: LogGroup,
        category: LogCategory,
        data: str,
        colour_start: str = "",
        colour_end: str = "",
    ) -> None:
        # The priority carries the category; only the group is spelled out.
        self._submit(syslog_priority(category), log_prefix(group, None) + data)

    def close(self) -> None:
        """Release the syslog connection; later calls are no-ops."""

        if not self._open:
            return
        self._open = False
        self._backend.closelog()

    def __enter__(self) -> "SyslogWriter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_open", False):
            with suppress(OSError):
                self.close()

    def _submit(self, priority: int, message: str) -> None:
        with self._consuming_metadata():
            meta_line = self._meta_line()
            if meta_line:
                self._backend.syslog(priority, self._meta_line_prefix() + meta_line)
            self._backend.syslog(priority, self._message_prefix() + message)


__all__ = ["SyslogWriter", "syslog_priority"]
