import pytest

from histsearch.initscript import Shell, bindings


def test_zsh_all_bindings():
    assert bindings(Shell.ZSH, environ={}) == (
        "bindkey '^r' _atuin_search_widget\n"
        "bindkey '^[[A' _atuin_up_search_widget\n"
        "bindkey '^[OA' _atuin_up_search_widget\n"
    )


def test_zsh_without_up_arrow():
    assert bindings(Shell.ZSH, disable_up_arrow=True, environ={}) == (
        "bindkey '^r' _atuin_search_widget\n"
    )


def test_bash_without_ctrl_r():
    out = bindings("bash", disable_ctrl_r=True, environ={})
    assert out.splitlines() == [
        r"""bind -x '"\e[A": __atuin_history --shell-up-key-binding'""",
        r"""bind -x '"\eOA": __atuin_history --shell-up-key-binding'""",
    ]


def test_bash_ctrl_r_only():
    out = bindings(Shell.BASH, disable_up_arrow=True, environ={})
    assert out == r"""bind -x '"\C-r": __atuin_history'""" + "\n"


def test_fish_both_disabled_keeps_insert_block():
    out = bindings(Shell.FISH, True, True, environ={})
    assert out == "if bind -M insert > /dev/null 2>&1\nend\n"


def test_fish_full():
    lines = bindings(Shell.FISH, environ={}).splitlines()
    assert lines[0] == r"bind \cr _atuin_search"
    assert lines[-1] == "end"
    assert r"bind -M insert \cr _atuin_search" in lines
    assert r"bind -M insert \e\[A _atuin_bind_up" in lines
    assert lines.index("if bind -M insert > /dev/null 2>&1") == 4


@pytest.mark.parametrize("shell", list(Shell))
def test_nobind_suppresses_everything(shell):
    assert bindings(shell, environ={"ATUIN_NOBIND": "1"}) == ""


def test_uses_process_environment(monkeypatch):
    monkeypatch.setenv("ATUIN_NOBIND", "yes")
    assert bindings(Shell.ZSH) == ""
    monkeypatch.delenv("ATUIN_NOBIND")
    assert bindings(Shell.ZSH).startswith("bindkey '^r'")


def test_unknown_shell():
    with pytest.raises(ValueError):
        bindings("tcsh", environ={})