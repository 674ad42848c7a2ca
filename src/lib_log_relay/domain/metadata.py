"""Metadata attached to the next log event a writer renders.

Purpose
-------
Model the labelled context values a producer attaches before a write, and the
ordered set holding them until the write consumes it.

Contents
--------
* :class:`MetadataKind` - literal text or tag reference.
* :class:`MetadataValue` - one labelled value.
* :class:`MetadataSet` - insertion-ordered collection with lookup and rendering.

System Role
-----------
Human-readable writers render the set as a single ``label=value`` line while
structured writers (journald) ask for discrete records. Entries flagged with
``skip`` stay available for :meth:`MetadataSet.lookup` but are never rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .tags import TagPort


class MetadataKind(Enum):
    LITERAL = "literal"
    TAG = "tag"


@dataclass(slots=True, frozen=True)
class MetadataValue:
    """A single labelled piece of context data.

    Attributes
    ----------
    label:
        Name of the value; expected to be unique within a pending set.
    kind:
        :class:`MetadataKind` deciding whether :attr:`value` or :attr:`tag`
        carries the data.
    value:
        Literal text when ``kind`` is :attr:`MetadataKind.LITERAL`.
    tag:
        Shared tag reference when ``kind`` is :attr:`MetadataKind.TAG`.
    skip:
        Hide the entry from rendered output while keeping it searchable.
    """

    label: str
    kind: MetadataKind
    value: str = ""
    tag: TagPort | None = None
    skip: bool = False

    def __post_init__(self) -> None:
        if self.kind is MetadataKind.TAG and self.tag is None:
            raise ValueError("tag metadata requires a tag reference")

    @classmethod
    def create(cls, label: str, value: str | TagPort, skip: bool = False) -> "MetadataValue":
        """Build a literal or tag entry depending on the type of ``value``.

        Examples
        --------
        >>> MetadataValue.create("user", "alice").kind is MetadataKind.LITERAL
        True
        """

        if isinstance(value, str):
            return cls(label=label, kind=MetadataKind.LITERAL, value=value, skip=skip)
        if isinstance(value, TagPort):
            return cls(label=label, kind=MetadataKind.TAG, tag=value, skip=skip)
        raise ValueError(f"Unsupported metadata value for {label!r}: {type(value).__name__}")

    def rendered_value(self, encapsulate_tag: bool = True) -> str:
        """Return the text for this entry; ``encapsulate_tag`` only affects tags."""

        if self.kind is MetadataKind.TAG:
            assert self.tag is not None
            return self.tag.render(encapsulate_tag)
        return self.value

    def __str__(self) -> str:
        if self.skip:
            return ""
        return f"{self.label}={self.rendered_value()}"


class MetadataSet:
    """Ordered metadata pending for the next write.

    Examples
    --------
    >>> meta = MetadataSet()
    >>> meta.add("user", "alice")
    >>> meta.add("ip", "10.0.0.1", skip=True)
    >>> meta.to_display_string()
    'user=alice'
    >>> meta.lookup("ip", postfix=" ")
    '10.0.0.1 '
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: list[MetadataValue] = []

    def add(self, label: str, value: str | TagPort, skip: bool = False) -> None:
        self._values.append(MetadataValue.create(label, value, skip))

    def lookup(self, label: str, encapsulate_tag: bool = True, postfix: str = "") -> str:
        """Return the first entry named ``label`` plus ``postfix``, or ``""``."""

        for entry in self._values:
            if entry.label == label:
                return entry.rendered_value(encapsulate_tag) + postfix
        return ""

    def render_all(self, upcase_labels: bool = False, encapsulate_tag: bool = True) -> list[str]:
        """Return one ``LABEL=value`` record per visible entry, in insertion order."""

        records = []
        for entry in self._values:
            if entry.skip:
                continue
            label = entry.label.upper() if upcase_labels else entry.label
            records.append(f"{label}={entry.rendered_value(encapsulate_tag)}")
        return records

    def to_display_string(self) -> str:
        return ", ".join(str(entry) for entry in self._values if not entry.skip)

    def copy(self) -> "MetadataSet":
        clone = MetadataSet()
        clone._values = list(self._values)
        return clone

    def clear(self) -> None:
        self._values.clear()

    def __iter__(self) -> Iterator[MetadataValue]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __str__(self) -> str:
        return self.to_display_string()


__all__ = ["MetadataKind", "MetadataSet", "MetadataValue"]
