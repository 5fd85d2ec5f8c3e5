"""An editable line of text with a cursor and word-wise movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WordJumpMode(Enum):
    """How word-wise cursor movement decides where words start and end."""

    EMACS = "emacs"
    SUBL = "subl"


@dataclass(frozen=True)
class WordJumper:
    """Finds word positions in a string for a given mode and set of word characters."""

    word_chars: str
    mode: WordJumpMode

    def is_word_boundary(self, c: str, next_c: str) -> bool:
        """Whether the step from ``c`` to ``next_c`` crosses a word boundary."""
        if c.isspace() != next_c.isspace():
            return True
        return (c in self.word_chars) != (next_c in self.word_chars)

    def _emacs_next(self, source: str, index: int) -> int:
        n = len(source)
        stop = max(n - 1, 0)
        start = next(
            (i for i in range(index + 1, stop) if source[i] in self.word_chars), n
        )
        return next(
            (i for i in range(start + 1, stop) if source[i] not in self.word_chars), n
        )

    def _emacs_prev(self, source: str, index: int) -> int:
        start = next(
            (i for i in range(index - 1, 0, -1) if source[i] in self.word_chars), 0
        )
        found = next(
            (i for i in range(start - 1, 0, -1) if source[i] not in self.word_chars),
            None,
        )
        return 0 if found is None else found + 1

    def _subl_next(self, source: str, index: int) -> int:
        n = len(source)
        boundary = next(
            (
                i
                for i in range(index, max(n - 1, 0))
                if self.is_word_boundary(source[i], source[i + 1])
            ),
            None,
        )
        if boundary is None:
            return n
        return next(
            (i for i in range(boundary + 1, n) if not source[i].isspace()), n
        )

    def _subl_prev(self, source: str, index: int) -> int:
        start = next(
            (i for i in range(index - 1, 0, -1) if not source[i].isspace()), None
        )
        if start is None:
            return 0
        return next(
            (
                i
                for i in range(start - 1, 0, -1)
                if self.is_word_boundary(source[i - 1], source[i])
            ),
            0,
        )

    def get_next_word_pos(self, source: str, index: int) -> int:
        """Position of the next word after ``index``."""
        if self.mode is WordJumpMode.EMACS:
            return self._emacs_next(source, index)
        return self._subl_next(source, index)

    def get_prev_word_pos(self, source: str, index: int) -> int:
        """Position of the previous word before ``index``."""
        if self.mode is WordJumpMode.EMACS:
            return self._emacs_prev(source, index)
        return self._subl_prev(source, index)


@dataclass
class Cursor:
    """A string being edited, with the cursor at character ``index``."""

    source: str = ""
    index: int = 0

    def __str__(self) -> str:
        return self.source

    def substring(self) -> str:
        """The text before the cursor."""
        return self.source[: self.index]

    def char(self) -> str | None:
        """The character under the cursor, or ``None`` at the end."""
        return self.source[self.index] if self.index < len(self.source) else None

    def right(self) -> None:
        if self.index < len(self.source):
            self.index += 1

    def left(self) -> bool:
        """Move one character left; return whether the cursor moved."""
        if self.index > 0:
            self.index -= 1
            return True
        return False

    def next_word(self, word_chars: str, mode: WordJumpMode) -> None:
        self.index = WordJumper(word_chars, mode).get_next_word_pos(
            self.source, self.index
        )

    def prev_word(self, word_chars: str, mode: WordJumpMode) -> None:
        self.index = WordJumper(word_chars, mode).get_prev_word_pos(
            self.source, self.index
        )

    def insert(self, c: str) -> None:
        """Insert text at the cursor and move past it."""
        self.source = self.source[: self.index] + c + self.source[self.index :]
        self.index += len(c)

    def remove(self) -> str | None:
        """Delete and return the character under the cursor."""
        if self.index < len(self.source):
            removed = self.source[self.index]
            self.source = self.source[: self.index] + self.source[self.index + 1 :]
            return removed
        return None

    def remove_next_word(self, word_chars: str, mode: WordJumpMode) -> None:
        end = WordJumper(word_chars, mode).get_next_word_pos(self.source, self.index)
        self.source = self.source[: self.index] + self.source[max(end, self.index) :]

    def remove_prev_word(self, word_chars: str, mode: WordJumpMode) -> None:
        start = WordJumper(word_chars, mode).get_prev_word_pos(self.source, self.index)
        start = min(start, self.index)
        self.source = self.source[:start] + self.source[self.index :]
        self.index = start

    def back(self) -> str | None:
        """Delete and return the character before the cursor."""
        if self.left():
            return self.remove()
        return None

    def clear(self) -> None:
        self.source = ""
        self.index = 0

    def end(self) -> None:
        self.index = len(self.source)

    def start(self) -> None:
        self.index = 0