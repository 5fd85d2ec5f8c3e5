"""A single recorded shell command."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _new_id() -> str:
    return uuid.uuid4().hex


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class HistoryEntry:
    """One command from the shell history.

    ``duration`` is in nanoseconds; ``-1`` means the command has not finished.
    ``hostname`` has the form ``host:user``.
    """

    command: str
    cwd: str = ""
    timestamp: datetime = field(default_factory=_utc_now)
    duration: int = -1
    exit: int = -1
    session: str = ""
    hostname: str = ""
    id: str = field(default_factory=_new_id)

    def success(self) -> bool:
        """Whether the command exited with status zero."""
        return self.exit == 0

    def host(self) -> str:
        """The host part of ``hostname``, or all of it when there is no user."""
        host, sep, _ = self.hostname.partition(":")
        return host if sep else self.hostname

    def user(self) -> str:
        """The user part of ``hostname``, or an empty string."""
        _, sep, user = self.hostname.partition(":")
        return user if sep else ""