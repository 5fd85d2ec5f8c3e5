import pytest

from histsearch.cursor import Cursor
from histsearch.entry import HistoryEntry
from histsearch.interactive import (
    RETURN_ORIGINAL,
    RETURN_QUERY,
    ExitMode,
    FilterMode,
    Key,
    MouseScroll,
    SearchSettings,
    SearchState,
    resolve_selection,
    split_preview,
)


def _state(text="", selected=0, max_entries=0):
    state = SearchState(input=Cursor(text))
    state.input.end()
    state.results_state.select(selected)
    state.results_state.max_entries = max_entries
    return state


@pytest.mark.parametrize("letter", ["c", "d", "g"])
def test_ctrl_abort_returns_original(letter):
    assert _state("x").handle_key(Key(letter, ctrl=True), 5) == RETURN_ORIGINAL


def test_esc_follows_exit_mode():
    state = _state()
    assert state.handle_key(Key(Key.ESC), 3) == RETURN_ORIGINAL
    settings = SearchSettings(exit_mode=ExitMode.RETURN_QUERY)
    assert state.handle_key(Key(Key.ESC), 3, settings) == RETURN_QUERY


def test_enter_returns_selected():
    assert _state(selected=2).handle_key(Key(Key.ENTER), 5) == 2


def test_alt_digit_offsets_selection():
    assert _state(selected=1).handle_key(Key("4", alt=True), 10) == 5


def test_typing_inserts_characters():
    state = _state()
    for ch in "ls -la":
        assert state.handle_key(Key(ch), 0) is None
    assert state.input.source == "ls -la"
    assert state.input.index == len("ls -la")


def test_backspace_and_delete():
    state = _state("abc")
    state.handle_key(Key(Key.BACKSPACE), 0)
    assert state.input.source == "ab"
    state.handle_key(Key(Key.HOME), 0)
    state.handle_key(Key(Key.DELETE), 0)
    assert state.input.source == "b"
    assert state.input.index == 0


def test_home_end_and_ctrl_variants():
    state = _state("hello")
    state.handle_key(Key("a", ctrl=True), 0)
    assert state.input.index == 0
    state.handle_key(Key("e", ctrl=True), 0)
    assert state.input.index == len("hello")
    state.handle_key(Key("h", ctrl=True), 0)
    assert state.input.index == len("hello") - 1
    state.handle_key(Key("l", ctrl=True), 0)
    assert state.input.index == len("hello")


def test_ctrl_w_removes_last_word():
    state = _state("git commit  ")
    state.handle_key(Key("w", ctrl=True), 0)
    assert state.input.source == "git "
    assert state.input.substring() == state.input.source


def test_ctrl_u_clears():
    state = _state("something")
    state.handle_key(Key("u", ctrl=True), 0)
    assert state.input.source == ""
    assert state.input.index == 0


def test_ctrl_r_cycles_filter_modes():
    state = _state()
    seen = []
    for _ in range(len(FilterMode)):
        state.handle_key(Key("r", ctrl=True), 0)
        seen.append(state.filter_mode)
    assert seen[0] is FilterMode.HOST
    assert seen[-1] is FilterMode.GLOBAL
    assert set(seen) == set(FilterMode)


def test_down_at_first_returns_original():
    assert _state(selected=0).handle_key(Key(Key.DOWN), 5) == RETURN_ORIGINAL


def test_down_and_up_move_selection():
    state = _state(selected=2)
    state.handle_key(Key(Key.DOWN), 5)
    assert state.results_state.selected == 1
    state.handle_key(Key(Key.UP), 5)
    state.handle_key(Key("k", ctrl=True), 5)
    assert state.results_state.selected == 3
    state.handle_key(Key("j", ctrl=True), 5)
    assert state.results_state.selected == 2


def test_up_clamps_to_last_result():
    state = _state(selected=4)
    state.handle_key(Key(Key.UP), 5)
    assert state.results_state.selected == 4


def test_page_keys_respect_context_lines():
    settings = SearchSettings(scroll_context_lines=1)
    state = _state(selected=0, max_entries=6)
    state.handle_key(Key(Key.PAGE_UP), 100, settings)
    assert state.results_state.selected == 6 - 1
    state.handle_key(Key(Key.PAGE_DOWN), 100, settings)
    assert state.results_state.selected == 0


def test_mouse_scroll():
    state = _state(selected=1)
    state.handle_mouse(MouseScroll.UP, 3)
    state.handle_mouse(MouseScroll.UP, 3)
    assert state.results_state.selected == 2
    state.handle_mouse(MouseScroll.DOWN, 3)
    assert state.results_state.selected == 1


def test_split_preview_round_trip():
    command = "echo " + "x" * 23
    lines = split_preview(command, 7).split("\n")
    assert "".join(lines) == command
    assert all(len(line) <= 7 for line in lines)
    assert split_preview("", 7) == ""


def test_split_preview_rejects_zero_width():
    with pytest.raises(ValueError):
        split_preview("abc", 0)


def test_resolve_selection():
    results = [HistoryEntry("ls"), HistoryEntry("pwd")]
    assert resolve_selection(1, results, "q") == "pwd"
    assert resolve_selection(RETURN_ORIGINAL, results, "q") == ""
    assert resolve_selection(RETURN_QUERY, results, "q") == "q"
    assert resolve_selection(7, results, "query") == "query"