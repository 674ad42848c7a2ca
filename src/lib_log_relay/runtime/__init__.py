"""Composition helpers: settings resolution and writer/sender factories.

Host services call :func:`build_runtime_settings` once at startup, then
:func:`create_writer` and :func:`create_event_sender` per backend session.
"""

from __future__ import annotations

from ._factories import create_event_sender, create_writer
from ._settings import WRITER_KINDS, RuntimeSettings, build_runtime_settings

__all__ = [
    "RuntimeSettings",
    "WRITER_KINDS",
    "build_runtime_settings",
    "create_event_sender",
    "create_writer",
]
