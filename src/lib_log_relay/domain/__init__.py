"""Domain entities and value objects used by the logging and signal layers."""

from __future__ import annotations

from .attention import AttentionEvent, AttentionGroup, AttentionType
from .events import LogEvent
from .levels import LogCategory, LogGroup, log_prefix
from .metadata import MetadataKind, MetadataSet, MetadataValue
from .status import StatusEvent, StatusMajor, StatusMinor
from .tags import LogTag, TagPort

__all__ = [
    "AttentionEvent",
    "AttentionGroup",
    "AttentionType",
    "LogCategory",
    "LogEvent",
    "LogGroup",
    "LogTag",
    "MetadataKind",
    "MetadataSet",
    "MetadataValue",
    "StatusEvent",
    "StatusMajor",
    "StatusMinor",
    "TagPort",
    "log_prefix",
]
