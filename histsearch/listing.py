"""Printing lists of history entries, optionally through a format template."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, TextIO

from .duration import format_duration
from .entry import HistoryEntry

HUMAN_TEMPLATE = "{time} · {duration}\t{command}"
REGULAR_TEMPLATE = "{time}\t{command}\t{duration}"

ESCAPE_HINT = (
    "If your formatting string contains curly braces (eg: {var}) "
    "you need to escape them this way: {{var}."
)


class FormatError(ValueError):
    """A format template could not be parsed or names an unknown key."""


class ListMode(Enum):
    """How a list of history entries is printed."""

    HUMAN = "human"
    CMD_ONLY = "cmd_only"
    REGULAR = "regular"

    @staticmethod
    def from_flags(human: bool, cmd_only: bool) -> "ListMode":
        """Pick the mode from command-line flags; ``human`` wins over ``cmd_only``."""
        if human:
            return ListMode.HUMAN
        if cmd_only:
            return ListMode.CMD_ONLY
        return ListMode.REGULAR


@dataclass(frozen=True)
class _Field:
    key: str


_Segment = "str | _Field"


def _parse(template: str) -> list[str | _Field]:
    """Split a template into literal text and ``{key}`` fields."""
    segments: list[str | _Field] = []
    literal: list[str] = []
    i = 0
    n = len(template)
    while i < n:
        ch = template[i]
        if ch == "{":
            if template.startswith("{{", i):
                literal.append("{")
                i += 2
                continue
            close = template.find("}", i + 1)
            if close == -1:
                raise FormatError(f"unclosed '{{' at position {i}")
            key = template[i + 1 : close]
            if "{" in key:
                raise FormatError(f"unexpected '{{' inside field at position {i}")
            if literal:
                segments.append("".join(literal))
                literal = []
            segments.append(_Field(key))
            i = close + 1
        elif ch == "}":
            if template.startswith("}}", i):
                literal.append("}")
                i += 2
                continue
            raise FormatError(f"unmatched '}}' at position {i}")
        else:
            literal.append(ch)
            i += 1
    if literal:
        segments.append("".join(literal))
    return segments


def _field_value(entry: HistoryEntry, key: str) -> str:
    if key == "command":
        return entry.command.strip()
    if key == "directory":
        return entry.cwd.strip()
    if key == "duration":
        return format_duration(max(entry.duration, 0))
    if key == "time":
        return entry.timestamp.strftime("%Y-%m-%d %H:%M:%S")
    if key == "host":
        return entry.host()
    if key == "user":
        return entry.user()
    raise FormatError(f"unknown key: {key!r}")


def _apply(segments: Sequence[str | _Field], entry: HistoryEntry) -> str:
    return "".join(
        _field_value(entry, seg.key) if isinstance(seg, _Field) else seg
        for seg in segments
    )


def format_entry(entry: HistoryEntry, template: str) -> str:
    """Format one entry through a template such as ``"{time}\\t{command}"``."""
    return _apply(_parse(template), entry)


def render_list(
    entries: Iterable[HistoryEntry],
    mode: ListMode,
    template: str | None = None,
) -> list[str]:
    """Render entries as lines, oldest last in the input printed first.

    Entries are printed in reverse of the order given.
    """
    items = list(entries)
    if mode is ListMode.CMD_ONLY:
        return [entry.command.strip() for entry in reversed(items)]

    default = HUMAN_TEMPLATE if mode is ListMode.HUMAN else REGULAR_TEMPLATE
    fmt = (template if template is not None else default).replace("\\t", "\t")
    segments = _parse(fmt)
    return [_apply(segments, entry) for entry in reversed(items)]


def print_list(
    entries: Iterable[HistoryEntry],
    mode: ListMode,
    template: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write the rendered list to ``stream`` (standard output by default)."""
    out = stream if stream is not None else sys.stdout
    for line in render_list(entries, mode, template):
        out.write(line + "\n")
    out.flush()