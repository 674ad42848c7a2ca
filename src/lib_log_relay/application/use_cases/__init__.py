"""Application use cases."""

from __future__ import annotations

from .event_sender import DEFAULT_LOG_LEVEL, LOG_SERVICE, SESSION_MANAGER_SERVICE, EventSender

__all__ = ["DEFAULT_LOG_LEVEL", "EventSender", "LOG_SERVICE", "SESSION_MANAGER_SERVICE"]
