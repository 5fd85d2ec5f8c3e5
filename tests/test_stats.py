import pytest

from histsearch.stats import BAR, StatsResult, compute_stats, render_stats


def test_counts_first_words():
    result = compute_stats(["git status", "git log", "ls -la", "git status"], 10)
    assert result.top[0] == ("git", 3)
    assert ("ls", 1) in result.top
    assert result.total == 4
    assert result.unique == 3


def test_sorted_descending():
    cmds = ["a"] * 1 + ["b x"] * 3 + ["c"] * 2
    result = compute_stats(cmds, 10)
    counts = [n for _, n in result.top]
    assert counts == sorted(counts, reverse=True)


def test_truncates_to_count():
    cmds = ["a", "b", "b", "c", "c", "c"]
    result = compute_stats(cmds, 2)
    assert [c for c, _ in result.top] == ["c", "b"]


def test_whitespace_only_commands_not_counted_as_prefix():
    result = compute_stats(["   ", "echo hi"], 10)
    assert result.top == [("echo", 1)]
    assert result.total == 2


def test_leading_whitespace_is_skipped():
    result = compute_stats(["\t  vim file"], 10)
    assert result.top == [("vim", 1)]


def test_empty_raises():
    with pytest.raises(ValueError, match="No commands found"):
        compute_stats([], 10)


def test_only_blank_raises():
    with pytest.raises(ValueError):
        compute_stats(["  ", ""], 10)


def test_zero_count_raises():
    with pytest.raises(ValueError):
        compute_stats(["ls"], 0)


def test_render_totals():
    text = render_stats(compute_stats(["ls", "ls", "cd /"], 10))
    lines = text.splitlines()
    assert lines[-2] == "Total commands:   3"
    assert lines[-1] == "Unique commands:  2"


def test_render_top_has_full_bar():
    text = render_stats(compute_stats(["ls", "ls", "cd /"], 10))
    first = text.splitlines()[0]
    assert first.count(BAR) == 10
    assert first.endswith("ls\x1b[0m")


def test_render_bar_lengths_scale():
    result = StatsResult(top=[("a", 10), ("b", 5)], total=15, unique=2)
    lines = render_stats(result).splitlines()
    assert lines[0].count(BAR) == 10
    assert lines[1].count(BAR) == 5


def test_render_empty_raises():
    with pytest.raises(ValueError):
        render_stats(StatsResult())