"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
import uuid
from pathlib import Path
from typing import Sequence

from .initscript import Shell, bindings

PROG = "histsearch"
VERSION = "0.1.0"

COMPLETION_SHELLS = ("bash", "zsh", "fish")

# Subcommand name, help text, and the words it accepts after it.
_COMMANDS: dict[str, tuple[str, tuple[str, ...]]] = {
    "init": (
        "Output shell setup",
        tuple(s.value for s in Shell) + ("--disable-ctrl-r", "--disable-up-arrow"),
    ),
    "uuid": ("Generate a UUID", ()),
    "gen-completions": (
        "Generate shell completions",
        ("--shell", "-s", "--out-dir", "-o") + COMPLETION_SHELLS,
    ),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Magical shell history")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init", help=_COMMANDS["init"][0])
    init.add_argument("shell", choices=[s.value for s in Shell])
    init.add_argument(
        "--disable-ctrl-r",
        action="store_true",
        help="Disable the binding of CTRL-R",
    )
    init.add_argument(
        "--disable-up-arrow",
        action="store_true",
        help="Disable the binding of the Up Arrow key",
    )

    sub.add_parser("uuid", help=_COMMANDS["uuid"][0])

    gen = sub.add_parser("gen-completions", help=_COMMANDS["gen-completions"][0])
    gen.add_argument(
        "-s",
        "--shell",
        required=True,
        choices=COMPLETION_SHELLS,
        help="Set the shell for generating completions",
    )
    gen.add_argument("-o", "--out-dir", help="Set the output directory")
    return parser


def _expand_subcommand(argv: list[str]) -> list[str]:
    """Accept any unique prefix of a subcommand name."""
    if not argv or argv[0].startswith("-") or argv[0] in _COMMANDS:
        return argv
    matches = [name for name in _COMMANDS if name.startswith(argv[0])]
    if len(matches) == 1:
        return [matches[0], *argv[1:]]
    return argv


def _bash_completion() -> str:
    fn = f"_{PROG.replace('-', '_')}"
    top = " ".join([*_COMMANDS, "--help", "--version"])
    cases = "".join(
        f'        {name}) words="{" ".join((*words, "--help"))}" ;;\n'
        for name, (_, words) in _COMMANDS.items()
    )
    return (
        f"{fn}() {{\n"
        '    local cur="${COMP_WORDS[COMP_CWORD]}"\n'
        "    local words\n"
        '    if [ "$COMP_CWORD" -eq 1 ]; then\n'
        f'        words="{top}"\n'
        "    else\n"
        '        case "${COMP_WORDS[1]}" in\n'
        f"{cases}"
        '        *) words="" ;;\n'
        "        esac\n"
        "    fi\n"
        '    COMPREPLY=($(compgen -W "$words" -- "$cur"))\n'
        "}\n"
        f"complete -F {fn} {PROG}\n"
    )


def _zsh_completion() -> str:
    fn = f"_{PROG.replace('-', '_')}"
    cases = "".join(
        f"        {name}) compadd -- {' '.join((*words, '--help'))} ;;\n"
        for name, (_, words) in _COMMANDS.items()
    )
    return (
        f"#compdef {PROG}\n"
        f"{fn}() {{\n"
        "    if (( CURRENT == 2 )); then\n"
        f"        compadd -- {' '.join(_COMMANDS)} --help --version\n"
        "    else\n"
        "        case $words[2] in\n"
        f"{cases}"
        "        esac\n"
        "    fi\n"
        "}\n"
        f'{fn} "$@"\n'
    )


def _fish_completion() -> str:
    lines = [f"complete -c {PROG} -f"]
    for name, (help_text, words) in _COMMANDS.items():
        lines.append(
            f'complete -c {PROG} -n "__fish_use_subcommand" -a "{name}" -d "{help_text}"'
        )
        values = [w for w in words if not w.startswith("-")]
        longs = [w[2:] for w in words if w.startswith("--")]
        cond = f'"__fish_seen_subcommand_from {name}"'
        if values:
            lines.append(f'complete -c {PROG} -n {cond} -a "{" ".join(values)}"')
        lines.extend(f"complete -c {PROG} -n {cond} -l {opt}" for opt in longs)
    return "\n".join(lines) + "\n"


_GENERATORS = {
    "bash": (_bash_completion, f"{PROG}.bash"),
    "zsh": (_zsh_completion, f"_{PROG}"),
    "fish": (_fish_completion, f"{PROG}.fish"),
}


def completion_script(shell: str) -> str:
    """The completion script for ``shell``."""
    return _GENERATORS[shell][0]()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    args = _build_parser().parse_args(_expand_subcommand(args_list))

    if args.command == "init":
        sys.stdout.write(
            bindings(Shell(args.shell), args.disable_ctrl_r, args.disable_up_arrow)
        )
    elif args.command == "uuid":
        print(uuid.uuid4().hex)
    elif args.command == "gen-completions":
        script = completion_script(args.shell)
        if args.out_dir is None:
            sys.stdout.write(script)
        else:
            path = Path(args.out_dir) / _GENERATORS[args.shell][1]
            path.write_text(script, encoding="utf-8")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())