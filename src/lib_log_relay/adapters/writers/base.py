"""Shared state and default composition for every log writer.

Purpose
-------
Hold the pending metadata, the feature flags and the one-shot prepend state
each backend needs, and implement the default rules that reduce a grouped or
event write to the single-string :meth:`LogWriter.write`.

Contents
--------
* :class:`LogWriter` - abstract base implementing :class:`WriterPort`.

System Role
-----------
Concrete writers (:mod:`.stream`, :mod:`.colour`, :mod:`.syslog`,
:mod:`.journald`) override :meth:`LogWriter.write` and, where the destination
encodes severity natively, :meth:`LogWriter.write_categorised`.

Write contract
--------------
1. A metadata line is rendered first when metadata is enabled and a visible
   entry is pending.
2. The sticky prepend value (looked up by label) is placed right before the
   message body, and before the metadata line too when requested.
3. Prepend state and pending metadata are reset after every write, even when
   the destination raised.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator

from lib_log_relay.application.ports.writer import WriterPort
from lib_log_relay.domain.events import LogEvent
from lib_log_relay.domain.levels import LogCategory, LogGroup, log_prefix
from lib_log_relay.domain.metadata import MetadataSet
from lib_log_relay.domain.tags import TagPort


class LogWriter(WriterPort, ABC):
    """Base class for all output backends."""

    def __init__(self) -> None:
        self._timestamp = True
        self._metadata_enabled = True
        self._message_prepend = True
        self._metadata = MetadataSet()
        self._prepend_label = ""
        self._prepend_on_meta_line = False

    @property
    def timestamp_enabled(self) -> bool:
        return self._timestamp

    def enable_timestamp(self, enabled: bool) -> None:
        self._timestamp = enabled

    @property
    def metadata_enabled(self) -> bool:
        return self._metadata_enabled

    def enable_metadata(self, enabled: bool) -> None:
        self._metadata_enabled = enabled

    @property
    def message_prepend_enabled(self) -> bool:
        return self._message_prepend

    def enable_message_prepend(self, enabled: bool) -> None:
        self._message_prepend = enabled

    @property
    def pending_metadata(self) -> MetadataSet:
        """Metadata waiting for the next write (read it, do not mutate it)."""

        return self._metadata

    def add_meta(self, label: str, value: str | TagPort, skip: bool = False) -> None:
        """Attach ``value`` under ``label`` to the next write.

        Entries are stored even while metadata rendering is disabled so the
        sticky prepend can still resolve them.
        """

        self._metadata.add(label, value, skip)

    def add_meta_copy(self, metadata: MetadataSet) -> None:
        """Replace the pending metadata with a copy of ``metadata``."""

        self._metadata = metadata.copy()

    def set_prepend_meta(self, label: str, also_on_meta_line: bool = False) -> None:
        """Surface the metadata value ``label`` before the next message body.

        Parameters
        ----------
        label:
            Metadata label to resolve at write time; a missing label resolves
            to an empty string.
        also_on_meta_line:
            Prepend the value to the metadata line as well. Reset on each write.
        """

        self._prepend_label = label
        self._prepend_on_meta_line = also_on_meta_line

    @abstractmethod
    def write(self, data: str, colour_start: str = "", colour_end: str = "") -> None:
        """Render ``data`` to the destination."""

    def write_categorised(
        self,
        group: LogGroup,
        category: LogCategory,
        data: str,
        colour_start: str = "",
        colour_end: str = "",
    ) -> None:
        """Render ``data`` prefixed with its group and category labels."""

        self.write(log_prefix(group, category) + data, colour_start, colour_end)

    def write_event(self, event: LogEvent) -> None:
        self.write_categorised(event.group, event.category, event.message)

    def _meta_line(self) -> str:
        """Return the visible metadata line, or ``""`` when none should be written."""

        if not self._metadata_enabled or not self._metadata:
            return ""
        return self._metadata.to_display_string()

    def _message_prefix(self, encapsulate_tag: bool = True) -> str:
        if not self._message_prepend or not self._prepend_label:
            return ""
        return self._metadata.lookup(self._prepend_label, encapsulate_tag, postfix=" ")

    def _meta_line_prefix(self) -> str:
        if not self._prepend_on_meta_line or not self._prepend_label:
            return ""
        return self._metadata.lookup(self._prepend_label, postfix=" ")

    def _reset_pending(self) -> None:
        self._prepend_label = ""
        self._prepend_on_meta_line = False
        self._metadata.clear()

    @contextmanager
    def _consuming_metadata(self) -> Iterator[MetadataSet]:
        """Yield the pending metadata and reset it once the write finishes."""

        try:
            yield self._metadata
        finally:
            self._reset_pending()


__all__ = ["LogWriter"]
