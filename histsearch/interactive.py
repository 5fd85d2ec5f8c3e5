"""Input handling and text helpers for the interactive search screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Sequence

from .cursor import Cursor, WordJumpMode
from .entry import HistoryEntry
from .history_list import ListState

# Sentinel selections returned by key handling, far beyond any result index.
RETURN_ORIGINAL = 2**64 - 1
RETURN_QUERY = 2**64 - 2

DEFAULT_WORD_CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


class FilterMode(Enum):
    """Which part of the history a search covers, in the order Ctrl-R cycles."""

    GLOBAL = "global"
    HOST = "host"
    SESSION = "session"
    DIRECTORY = "directory"

    def next(self) -> "FilterMode":
        """The mode that follows this one, wrapping around."""
        modes = list(FilterMode)
        return modes[(modes.index(self) + 1) % len(modes)]


class ExitMode(Enum):
    """What Esc returns to the shell."""

    RETURN_ORIGINAL = "return-original"
    RETURN_QUERY = "return-query"


@dataclass(frozen=True)
class Key:
    """A key press: a single character, or one of the named keys below."""

    code: str
    ctrl: bool = False
    alt: bool = False

    ESC: ClassVar[str] = "Esc"
    ENTER: ClassVar[str] = "Enter"
    LEFT: ClassVar[str] = "Left"
    RIGHT: ClassVar[str] = "Right"
    UP: ClassVar[str] = "Up"
    DOWN: ClassVar[str] = "Down"
    HOME: ClassVar[str] = "Home"
    END: ClassVar[str] = "End"
    BACKSPACE: ClassVar[str] = "Backspace"
    DELETE: ClassVar[str] = "Delete"
    PAGE_UP: ClassVar[str] = "PageUp"
    PAGE_DOWN: ClassVar[str] = "PageDown"

    @property
    def char(self) -> str | None:
        """The typed character, or ``None`` for a named key."""
        return self.code if len(self.code) == 1 else None


class MouseScroll(Enum):
    """Direction of a mouse-wheel event."""

    UP = "up"
    DOWN = "down"


@dataclass
class SearchSettings:
    """Settings that affect how keys are handled."""

    exit_mode: ExitMode = ExitMode.RETURN_ORIGINAL
    word_chars: str = DEFAULT_WORD_CHARS
    word_jump_mode: WordJumpMode = WordJumpMode.EMACS
    scroll_context_lines: int = 1


@dataclass
class SearchState:
    """The query being edited, the filter mode and the selected result."""

    input: Cursor = field(default_factory=Cursor)
    filter_mode: FilterMode = FilterMode.GLOBAL
    results_state: ListState = field(default_factory=ListState)
    history_count: int = 0
    update_needed: str | None = None

    def _older(self, length: int, step: int = 1) -> None:
        selected = self.results_state.selected + step
        self.results_state.select(min(selected, max(length - 1, 0)))

    def _newer(self, step: int = 1) -> None:
        self.results_state.select(max(self.results_state.selected - step, 0))

    def _delete_word_back(self) -> None:
        while True:
            removed = self.input.back()
            if removed is None or not removed.isspace():
                break
        while self.input.left():
            current = self.input.char()
            if current is not None and current.isspace():
                self.input.right()
                break
            self.input.remove()

    def handle_mouse(self, scroll: MouseScroll, length: int) -> None:
        """Move the selection for a mouse-wheel event."""
        if scroll is MouseScroll.DOWN:
            self._newer()
        else:
            self._older(length)

    def handle_key(
        self, key: Key, length: int, settings: SearchSettings | None = None
    ) -> int | None:
        """Apply a key press; return the chosen index when the search ends.

        The index may be ``RETURN_ORIGINAL`` or ``RETURN_QUERY``.
        """
        settings = settings if settings is not None else SearchSettings()
        code, ctrl, alt = key.code, key.ctrl, key.alt
        char = key.char
        words = (settings.word_chars, settings.word_jump_mode)
        selected = self.results_state.selected

        if ctrl and char in ("c", "d", "g"):
            return RETURN_ORIGINAL
        if code == Key.ESC:
            if settings.exit_mode is ExitMode.RETURN_ORIGINAL:
                return RETURN_ORIGINAL
            return RETURN_QUERY
        if code == Key.ENTER:
            return selected
        if alt and char is not None and "1" <= char <= "9":
            return selected + int(char)

        if code == Key.LEFT:
            if ctrl:
                self.input.prev_word(*words)
            else:
                self.input.left()
        elif ctrl and char == "h":
            self.input.left()
        elif code == Key.RIGHT:
            if ctrl:
                self.input.next_word(*words)
            else:
                self.input.right()
        elif ctrl and char == "l":
            self.input.right()
        elif (ctrl and char == "a") or code == Key.HOME:
            self.input.start()
        elif (ctrl and char == "e") or code == Key.END:
            self.input.end()
        elif code == Key.BACKSPACE:
            if ctrl:
                self.input.remove_prev_word(*words)
            else:
                self.input.back()
        elif code == Key.DELETE:
            if ctrl:
                self.input.remove_next_word(*words)
            else:
                self.input.remove()
        elif ctrl and char == "w":
            self._delete_word_back()
        elif ctrl and char == "u":
            self.input.clear()
        elif ctrl and char == "r":
            self.filter_mode = self.filter_mode.next()
        elif code == Key.DOWN:
            if selected == 0:
                return RETURN_ORIGINAL
            self._newer()
        elif ctrl and char in ("n", "j"):
            self._newer()
        elif code == Key.UP or (ctrl and char in ("p", "k")):
            self._older(length)
        elif char is not None:
            self.input.insert(char)
        elif code in (Key.PAGE_DOWN, Key.PAGE_UP):
            scroll = max(
                self.results_state.max_entries - settings.scroll_context_lines, 0
            )
            if code == Key.PAGE_DOWN:
                self._newer(scroll)
            else:
                self._older(length, scroll)
        return None


def split_preview(command: str, width: int) -> str:
    """Break a command into lines of at most ``width`` characters."""
    if width < 1:
        raise ValueError("preview width must be at least 1")
    return "\n".join(command[i : i + width] for i in range(0, len(command), width))


def resolve_selection(
    index: int, results: Sequence[HistoryEntry], query: str
) -> str:
    """Turn the index that ended a search into the text handed back to the shell."""
    if 0 <= index < len(results):
        return results[index].command
    if index == RETURN_ORIGINAL:
        return ""
    return query