"""Statistics over shell history: most used commands."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

_ASCII_WS = re.compile(r"[ \t\n\x0c\r]+")

_RED = "\x1b[38;5;9m"
_YELLOW = "\x1b[38;5;11m"
_GREEN = "\x1b[38;5;10m"
_GREY = "\x1b[38;5;7m"
_BOLD = "\x1b[1m"
_RESET = "\x1b[0m"

BAR = "▮"


@dataclass
class StatsResult:
    """Top command prefixes with counts, plus totals."""

    top: list[tuple[str, int]] = field(default_factory=list)
    total: int = 0
    unique: int = 0


def _first_word(command: str) -> str | None:
    words = [w for w in _ASCII_WS.split(command) if w]
    return words[0] if words else None


def compute_stats(commands: Iterable[str], count: int = 10) -> StatsResult:
    """Count first words of commands and keep the ``count`` most frequent.

    Raises ``ValueError`` when no command has a first word to count.
    """
    items = list(commands)
    prefixes: Counter[str] = Counter()
    for command in items:
        word = _first_word(command)
        if word is not None:
            prefixes[word] += 1

    top = sorted(prefixes.items(), key=lambda kv: kv[1], reverse=True)[:count]
    if not top:
        raise ValueError("No commands found")
    return StatsResult(top=top, total=len(items), unique=len(set(items)))


def render_stats(result: StatsResult) -> str:
    """Render the result as coloured bar lines followed by totals."""
    if not result.top:
        raise ValueError("No commands found")
    max_count = max(n for _, n in result.top)
    pad = len(str(max_count))

    lines = []
    for command, n in result.top:
        in_ten = 10 * n // max_count
        bar = [_RED]
        for i in range(in_ten):
            if i == 2:
                bar.append(_YELLOW)
            if i == 5:
                bar.append(_GREEN)
            bar.append(BAR)
        bar.append(" " * (10 - in_ten))
        lines.append(
            f"[{''.join(bar)}{_RESET}] {_GREY}{n:>{pad}}{_RESET} "
            f"{_BOLD}{command}{_RESET}"
        )
    lines.append(f"Total commands:   {result.total}")
    lines.append(f"Unique commands:  {result.unique}")
    return "\n".join(lines) + "\n"