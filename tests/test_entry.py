from datetime import datetime, timezone

from histsearch.entry import HistoryEntry


def test_host_and_user_split_on_first_colon():
    entry = HistoryEntry(command="ls", hostname="laptop:alice")
    assert entry.host() == "laptop"
    assert entry.user() == "alice"


def test_user_keeps_later_colons():
    entry = HistoryEntry(command="ls", hostname="a:b:c")
    assert entry.host() == "a"
    assert entry.user() == "b:c"


def test_hostname_without_user():
    entry = HistoryEntry(command="ls", hostname="server")
    assert entry.host() == "server"
    assert entry.user() == ""


def test_success_depends_on_exit_code():
    assert HistoryEntry(command="true", exit=0).success() is True
    assert HistoryEntry(command="false", exit=1).success() is False


def test_new_entry_is_unfinished_with_unique_id():
    first = HistoryEntry(command="echo")
    second = HistoryEntry(command="echo")
    assert first.duration == -1
    assert first.exit == -1
    assert first.id != second.id
    assert len(first.id) == 32


def test_explicit_timestamp_is_kept():
    stamp = datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    entry = HistoryEntry(command="ls", timestamp=stamp)
    assert entry.timestamp == stamp