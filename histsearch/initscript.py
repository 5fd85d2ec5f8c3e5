"""Key bindings emitted when setting up a shell."""

from __future__ import annotations

import os
from enum import Enum
from typing import Mapping

NOBIND_VAR = "ATUIN_NOBIND"


class Shell(Enum):
    """Shells that can be set up."""

    ZSH = "zsh"
    BASH = "bash"
    FISH = "fish"


_ZSH_CTRL_R = "bindkey '^r' _atuin_search_widget"
_ZSH_UP = "bindkey '^[[A' _atuin_up_search_widget\nbindkey '^[OA' _atuin_up_search_widget"

_BASH_CTRL_R = r"""bind -x '"\C-r": __atuin_history'"""
_BASH_UP = (
    r"""bind -x '"\e[A": __atuin_history --shell-up-key-binding'"""
    "\n"
    r"""bind -x '"\eOA": __atuin_history --shell-up-key-binding'"""
)

_FISH_CTRL_R = r"bind \cr _atuin_search"
_FISH_UP = "\n".join(
    [r"bind -k up _atuin_bind_up", r"bind \eOA _atuin_bind_up", r"bind \e\[A _atuin_bind_up"]
)
_FISH_CTRL_R_INS = r"bind -M insert \cr _atuin_search"
_FISH_UP_INS = "\n".join(
    [
        r"bind -M insert -k up _atuin_bind_up",
        r"bind -M insert \eOA _atuin_bind_up",
        r"bind -M insert \e\[A _atuin_bind_up",
    ]
)

_SIMPLE = {
    Shell.ZSH: (_ZSH_CTRL_R, _ZSH_UP),
    Shell.BASH: (_BASH_CTRL_R, _BASH_UP),
}


def bindings(
    shell: Shell | str,
    disable_ctrl_r: bool = False,
    disable_up_arrow: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the key-binding lines for ``shell``, each ending in a newline.

    Nothing is bound when the ``ATUIN_NOBIND`` variable is set.
    """
    shell = Shell(shell)
    env = os.environ if environ is None else environ
    if NOBIND_VAR in env:
        return ""

    lines: list[str] = []
    if shell is Shell.FISH:
        if not disable_ctrl_r:
            lines.append(_FISH_CTRL_R)
        if not disable_up_arrow:
            lines.append(_FISH_UP)
        lines.append("if bind -M insert > /dev/null 2>&1")
        if not disable_ctrl_r:
            lines.append(_FISH_CTRL_R_INS)
        if not disable_up_arrow:
            lines.append(_FISH_UP_INS)
        lines.append("end")
    else:
        ctrl_r, up = _SIMPLE[shell]
        if not disable_ctrl_r:
            lines.append(ctrl_r)
        if not disable_up_arrow:
            lines.append(up)
    return "".join(line + "\n" for line in lines)