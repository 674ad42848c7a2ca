"""Colour policy and the colourising stream writer.

Purpose
-------
Wrap log lines in ANSI escape sequences chosen either from the severity
category or from the subsystem group.

Contents
--------
* :class:`ColourMode` - ``NONE``, ``BY_CATEGORY``, ``BY_GROUP``.
* :data:`CATEGORY_STYLES` / :data:`GROUP_STYLES` - default Rich style names.
* :class:`ColourPolicy` - resolves escape sequences through :mod:`rich.style`.
* :class:`ColourStreamWriter` - :class:`StreamWriter` plus a policy.

System Role
-----------
Interactive terminal backend. In group mode the category colour still wins
for anything more severe than :attr:`LogCategory.INFO` so warnings and errors
stand out.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Mapping, TextIO

from rich.color import ColorSystem
from rich.style import Style

from lib_log_relay.application.ports.time import ClockPort
from lib_log_relay.domain.levels import LogCategory, LogGroup

from .stream import StreamWriter

_SENTINEL = "\x00"


class ColourMode(Enum):
    NONE = "none"
    BY_CATEGORY = "category"
    BY_GROUP = "group"

    @classmethod
    def from_name(cls, name: str) -> "ColourMode":
        normalized = name.strip().lower()
        for mode in cls:
            if normalized in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(f"Unknown colour mode: {name!r}")


CATEGORY_STYLES: Mapping[LogCategory, str] = {
    LogCategory.DEBUG: "dim",
    LogCategory.VERB2: "dim cyan",
    LogCategory.VERB1: "blue",
    LogCategory.INFO: "cyan",
    LogCategory.WARN: "yellow",
    LogCategory.ERROR: "red",
    LogCategory.CRIT: "bold red",
    LogCategory.FATAL: "bold white on red",
}

GROUP_STYLES: Mapping[LogGroup, str] = {
    LogGroup.UNDEFINED: "white",
    LogGroup.MASTERPROC: "bright_magenta",
    LogGroup.CONFIGMGR: "magenta",
    LogGroup.SESSIONMGR: "bright_green",
    LogGroup.BACKENDSTART: "green",
    LogGroup.LOGGER: "bright_black",
    LogGroup.BACKENDPROC: "bright_blue",
    LogGroup.CLIENT: "bright_cyan",
    LogGroup.EXTSERVICE: "yellow",
}


@lru_cache(maxsize=None)
def escape_codes(style: str, color_system: ColorSystem = ColorSystem.STANDARD) -> tuple[str, str]:
    """Return the ``(start, reset)`` escape sequences Rich emits for ``style``.

    Examples
    --------
    >>> escape_codes("red")
    ('\\x1b[31m', '\\x1b[0m')
    """

    rendered = Style.parse(style).render(_SENTINEL, color_system=color_system)
    start, _, end = rendered.partition(_SENTINEL)
    return start, end


class ColourPolicy:
    """Select escape sequences for a log line.

    Parameters
    ----------
    mode:
        How colours are chosen.
    category_styles, group_styles:
        Optional Rich style overrides merged over the defaults.
    color_system:
        Terminal capability used when translating styles into escapes.
    """

    def __init__(
        self,
        mode: ColourMode = ColourMode.BY_CATEGORY,
        *,
        category_styles: Mapping[LogCategory, str] | None = None,
        group_styles: Mapping[LogGroup, str] | None = None,
        color_system: ColorSystem = ColorSystem.STANDARD,
    ) -> None:
        self.mode = mode
        self._category_styles = {**CATEGORY_STYLES, **(category_styles or {})}
        self._group_styles = {**GROUP_STYLES, **(group_styles or {})}
        self._color_system = color_system

    def by_category(self, category: LogCategory) -> str:
        return escape_codes(self._category_styles[category], self._color_system)[0]

    def by_group(self, group: LogGroup) -> str:
        return escape_codes(self._group_styles[group], self._color_system)[0]

    @property
    def reset(self) -> str:
        return escape_codes(self._category_styles[LogCategory.INFO], self._color_system)[1]


class ColourStreamWriter(StreamWriter):
    """Stream writer colouring grouped writes according to a :class:`ColourPolicy`."""

    def __init__(self, stream: TextIO, policy: ColourPolicy, *, clock: ClockPort | None = None) -> None:
        super().__init__(stream, clock=clock)
        self.policy = policy

    def write_categorised(
        self,
        group: LogGroup,
        category: LogCategory,
        data: str,
        colour_start: str = "",
        colour_end: str = "",
    ) -> None:
        mode = self.policy.mode
        if mode is ColourMode.BY_CATEGORY:
            super().write_categorised(group, category, data, self.policy.by_category(category), self.policy.reset)
        elif mode is ColourMode.BY_GROUP:
            group_colour = self.policy.by_group(group)
            line_colour = self.policy.by_category(category) if category > LogCategory.INFO else group_colour
            super().write_categorised(group, category, group_colour + data, line_colour, self.policy.reset)
        else:
            super().write_categorised(group, category, data, colour_start, colour_end)


__all__ = [
    "CATEGORY_STYLES",
    "ColourMode",
    "ColourPolicy",
    "ColourStreamWriter",
    "GROUP_STYLES",
    "escape_codes",
]
