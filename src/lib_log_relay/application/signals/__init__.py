"""Signal helpers used by the event sender."""

from __future__ import annotations

from ._base import RecipientSets, Signal, SignalKind
from .notifications import AttentionRequiredSignal, LogSignal, RegistrationRequestSignal, StatusChangeSignal

__all__ = [
    "AttentionRequiredSignal",
    "LogSignal",
    "RecipientSets",
    "RegistrationRequestSignal",
    "Signal",
    "SignalKind",
    "StatusChangeSignal",
]
