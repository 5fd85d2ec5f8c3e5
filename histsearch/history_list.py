"""Layout of the scrolling list of search results."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Sequence

from .duration import format_duration
from .entry import HistoryEntry

PREFIX_LENGTH = len(" > 123ms 59s ago")

# Three-character slices of this string give " > ", " n " or "   ".
_SLICES = " > 1 2 3 4 5 6 7 8 9   "
_ASCII_WS = re.compile(r"[ \t\n\x0c\r]+")


@dataclass
class ListState:
    """Scroll position and selection of the result list."""

    offset: int = 0
    selected: int = 0
    max_entries: int = 0

    def select(self, index: int) -> None:
        self.selected = index


def get_items_bounds(
    length: int, selected: int, offset: int, height: int
) -> tuple[int, int]:
    """Return the ``(start, end)`` slice of entries visible in ``height`` rows."""
    offset = min(offset, max(length - 1, 0))
    max_scroll_space = min(height, 10)
    if offset + height < selected + max_scroll_space:
        end = selected + max_scroll_space
        return end - height, end
    if selected < offset:
        return selected, selected + height
    return offset, offset + height


def index_marker(row: int, offset: int, selected: int) -> str:
    """The three-character marker for a row: ``" > "``, ``" n "`` or blank."""
    distance = row + offset - selected
    slot = 10 if distance < 0 else min(distance, 10)
    i = slot * 2
    return _SLICES[i : i + 3]


class _Row:
    """One line of cells being drawn left to right."""

    def __init__(self, width: int) -> None:
        self.width = width
        self.cells = [" "] * width
        self.x = 0

    def draw(self, text: str) -> None:
        room = max(self.width - self.x, 0)
        written = text[:room]
        self.cells[self.x : self.x + len(written)] = list(written)
        self.x += len(written)

    def __str__(self) -> str:
        return "".join(self.cells)


def _draw_entry(row: _Row, entry: HistoryEntry, marker: str, now: datetime) -> None:
    row.draw(marker)
    row.draw(format_duration(max(entry.duration, 0)))

    since = format_duration(now - entry.timestamp)
    row.x = PREFIX_LENGTH - 4 - len(since)
    row.draw(since)
    row.draw(" ago")

    for section in filter(None, _ASCII_WS.split(entry.command)):
        row.x += 1
        if row.x > row.width:
            return
        row.draw(section)


def render_rows(
    entries: Sequence[HistoryEntry],
    state: ListState,
    width: int,
    height: int,
    now: datetime | None = None,
) -> list[str]:
    """Lay out entries into ``height`` lines of ``width`` characters.

    The first visible entry is drawn on the bottom line. Updates ``state``
    with the new scroll offset and the number of visible entries.
    """
    width = max(width, 0)
    height = max(height, 0)
    blank = [" " * width for _ in range(height)]
    if width < 1 or height < 1 or not entries:
        return blank

    now = now if now is not None else datetime.now(timezone.utc)
    start, end = get_items_bounds(len(entries), state.selected, state.offset, height)
    state.offset = start
    state.max_entries = end - start

    lines = blank
    for y, entry in enumerate(entries[start:end]):
        row = _Row(width)
        _draw_entry(row, entry, index_marker(y, state.offset, state.selected), now)
        lines[height - 1 - y] = str(row)
    return lines