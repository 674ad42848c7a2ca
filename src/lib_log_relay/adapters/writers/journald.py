"""Journald writer that submits one structured record per event.

Purpose
-------
Send events to systemd-journald as discrete ``KEY=value`` fields rather than
one formatted line, so metadata stays queryable.

Contents
--------
* :func:`_default_sender` - proxy to ``systemd.journal.sendv``.
* :func:`_record_buffer` - scoped record buffer, always released.
* :class:`JournaldWriter` - concrete :class:`LogWriter`.

System Role
-----------
Each record carries one field per visible metadata entry (namespaced with
``field_prefix``), the session token when set, group, category, ``PRIORITY``
and ``MESSAGE``. Submission failures are logged and never raised.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from lib_log_relay.domain.events import LogEvent
from lib_log_relay.domain.levels import LogCategory, LogGroup

from .base import LogWriter
from .syslog import syslog_priority

LOGGER = logging.getLogger(__name__)

Sender = Callable[..., None]


def _default_sender(*records: str) -> None:  # pragma: no cover - depends on systemd
    """Proxy to :func:`systemd.journal.sendv`, raising if unavailable."""
    try:
        from systemd import journal
    except ImportError as exc:  # pragma: no cover - executed only when systemd missing
        raise RuntimeError("systemd.journal is not available") from exc
    journal.sendv(*records)


@contextmanager
def _record_buffer() -> Iterator[list[str]]:
    records: list[str] = []
    try:
        yield records
    finally:
        records.clear()


class JournaldWriter(LogWriter):
    """Emit log events via ``systemd.journal.sendv``."""

    def __init__(self, *, sender: Sender | None = None, field_prefix: str = "EVT_") -> None:
        """Initialise the writer with an optional sender and metadata field prefix."""
        super().__init__()
        self._sender = sender or _default_sender
        self._field_prefix = field_prefix.upper()

    @property
    def timestamp_enabled(self) -> bool:
        return True

    def write(self, data: str, colour_start: str = "", colour_end: str = "") -> None:
        self.write_event(LogEvent(LogGroup.UNDEFINED, LogCategory.INFO, data))

    def write_categorised(
        self,
        group: LogGroup,
        category: LogCategory,
        data: str,
        colour_start: str = "",
        colour_end: str = "",
    ) -> None:
        self.write_event(LogEvent(group, category, data))

    def write_event(self, event: LogEvent) -> None:
        with self._consuming_metadata(), _record_buffer() as records:
            records.extend(self._build_records(event))
            try:
                self._sender(*records)
            except Exception as exc:
                LOGGER.error("journald submission failed (%d fields): %s", len(records), exc, exc_info=True)

    def _build_records(self, event: LogEvent) -> list[str]:
        """Return the ``KEY=value`` fields for ``event``.

        Examples
        --------
        >>> from lib_log_relay.domain.levels import LogCategory, LogGroup
        >>> writer = JournaldWriter(sender=lambda *records: None)
        >>> writer.add_meta("user", "alice")
        >>> writer._build_records(LogEvent(LogGroup.CLIENT, LogCategory.WARN, "slow"))
        ['EVT_USER=alice', 'EVT_LOG_GROUP=CLIENT', 'EVT_LOG_CATEGORY=WARN', 'PRIORITY=4', 'MESSAGE=slow']
        """
        prefix = self._field_prefix
        records = []
        if self.metadata_enabled:
            records.extend(prefix + record for record in self._metadata.render_all(upcase_labels=True, encapsulate_tag=False))
        if event.session_token:
            records.append(f"{prefix}SESSION_TOKEN={event.session_token}")
        records.append(f"{prefix}LOG_GROUP={event.group_name}")
        records.append(f"{prefix}LOG_CATEGORY={event.category_name}")
        records.append(f"PRIORITY={syslog_priority(event.category)}")
        records.append(f"MESSAGE={self._message_prefix()}{event.message}")
        return records


__all__ = ["JournaldWriter"]
