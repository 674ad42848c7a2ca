"""Shared identifiers referenced by metadata instead of being copied as text."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from functools import cached_property
from typing import Protocol, runtime_checkable


@runtime_checkable
class TagPort(Protocol):
    """Anything that can render itself for a metadata entry."""

    def render(self, encapsulated: bool = True) -> str:
        """Return the textual form, bracketed when ``encapsulated`` is true."""


@dataclass(frozen=True)
class LogTag:
    """Identifier for a sender/interface pair whose hash is computed on demand.

    Instances are read-only and meant to be shared by reference between many
    metadata entries; the logging layer never mutates them.

    Examples
    --------
    >>> tag = LogTag("session-1", "backends")
    >>> tag.render(True) == "{tag:" + tag.render(False) + "}"
    True
    """

    sender: str
    interface: str

    @property
    def tag(self) -> str:
        return f"{self.sender}/{self.interface}"

    @cached_property
    def hash(self) -> int:
        """Stable 63-bit digest of :attr:`tag`."""

        digest = hashlib.blake2b(self.tag.encode("utf-8"), digest_size=8).digest()
        return int.from_bytes(digest, "big") >> 1

    def render(self, encapsulated: bool = True) -> str:
        if encapsulated:
            return f"{{tag:{self.hash}}}"
        return str(self.hash)

    def __str__(self) -> str:
        return self.render(True)


__all__ = ["LogTag", "TagPort"]
