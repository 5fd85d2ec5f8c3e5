"""Filtering search results by exit status and directory."""

from __future__ import annotations

import os
from typing import Iterable

from .entry import HistoryEntry


def filter_entries(
    entries: Iterable[HistoryEntry],
    exit: int | None = None,
    exclude_exit: int | None = None,
    cwd: str | None = None,
    exclude_cwd: str | None = None,
) -> list[HistoryEntry]:
    """Keep entries matching the given exit code and directory constraints.

    A ``cwd`` of ``"."`` means the current working directory.
    """
    directory = os.getcwd() if cwd == "." else cwd

    def keep(entry: HistoryEntry) -> bool:
        if exit is not None and entry.exit != exit:
            return False
        if exclude_exit is not None and entry.exit == exclude_exit:
            return False
        if exclude_cwd is not None and entry.cwd == exclude_cwd:
            return False
        if directory is not None and entry.cwd != directory:
            return False
        return True

    return [entry for entry in entries if keep(entry)]