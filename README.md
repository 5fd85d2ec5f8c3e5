# histsearch

Helpers for working with shell history: printing entries through format
templates, counting your most used commands, filtering entries by exit
code or directory, emitting shell key bindings, and a keyboard-driven
search model with word-wise cursor movement.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `histsearch` command has three subcommands. Any unique prefix of a
subcommand name is accepted (for example `histsearch u` for `uuid`).

### `histsearch init SHELL`

Prints the key-binding lines for `zsh`, `bash` or `fish`:

```
histsearch init zsh
histsearch init bash --disable-up-arrow
histsearch init fish --disable-ctrl-r
```

By default both a Ctrl-R binding and Up-arrow bindings are printed;
`--disable-ctrl-r` and `--disable-up-arrow` leave each one out. For fish,
the same bindings are repeated for insert mode inside an
`if bind -M insert > /dev/null 2>&1 ... end` block. When the
`ATUIN_NOBIND` environment variable is set, nothing is printed.

The bindings call shell functions named `_atuin_search_widget`,
`_atuin_up_search_widget`, `__atuin_history`, `_atuin_search` and
`_atuin_bind_up`. The package does not provide these functions; only the
binding lines are printed.

### `histsearch uuid`

Prints a random UUID as 32 hexadecimal digits.

### `histsearch gen-completions --shell SHELL [--out-dir DIR]`

Prints a completion script for `bash`, `zsh` or `fish` (`-s` for short).
With `--out-dir` (`-o`), the script is written into that directory as
`histsearch.bash`, `_histsearch` or `histsearch.fish` instead.

`histsearch --version` prints the version.

## Library

### Entries

`histsearch.entry.HistoryEntry` is a dataclass for one command: `command`,
`cwd`, `timestamp`, `duration` (nanoseconds, `-1` while unfinished),
`exit`, `session`, `hostname` (in the form `host:user`) and `id`.
`success()` is true for exit status zero; `host()` and `user()` split
`hostname`.

### Durations

`histsearch.duration.format_duration` takes nanoseconds or a `timedelta`
and returns only the most significant unit:

```python
from histsearch.duration import format_duration

format_duration(90 * 10**9)   # "1m"
format_duration(0)            # "0s"
```

Units are `y` (365.25 days), `mo` (30.44 days), `d`, `h`, `m`, `s` and
`ms`. Negative durations count as zero.

### Listing

`histsearch.listing` renders entries in one of three modes,
`ListMode.HUMAN`, `ListMode.CMD_ONLY` and `ListMode.REGULAR`, picked by
`ListMode.from_flags(human, cmd_only)` (`human` wins).

- `format_entry(entry, template)` formats one entry.
- `render_list(entries, mode, template=None)` returns the lines, in
  reverse of the order given.
- `print_list(entries, mode, template=None, stream=None)` writes them to
  `stream`, standard output by default.

Templates may use `{command}`, `{directory}`, `{duration}`, `{user}`,
`{host}` and `{time}` (`YYYY-MM-DD HH:MM:SS`); `{{` and `}}` stand for
literal braces, and a literal `\t` in the template becomes a tab. The
defaults are `{time} · {duration}\t{command}` for human mode and
`{time}\t{command}\t{duration}` for regular mode. Command-only mode
prints each command, stripped. An unknown key or unbalanced braces raise
`FormatError`, a subclass of `ValueError`.

### Statistics

`histsearch.stats.compute_stats(commands, count=10)` counts the first
word of each command string and returns a `StatsResult` with the `count`
most frequent (`top`), the number of commands (`total`) and of distinct
commands (`unique`). It raises `ValueError` when there is nothing to
count. `render_stats(result)` draws each entry as a ten-step coloured bar
with its count, followed by the totals.

### Filtering

`histsearch.filtering.filter_entries(entries, exit=None, exclude_exit=None,
cwd=None, exclude_cwd=None)` keeps entries with the given exit code and
directory and drops those with the excluded exit code or directory. A
`cwd` of `"."` means the current working directory.

### Result list layout

`histsearch.history_list` lays out search results as text rows.
`render_rows(entries, state, width, height, now=None)` returns `height`
lines of `width` characters, with the first visible entry on the bottom
line; each row shows a selection marker (` > ` or a number 1–9 for nearby
entries), the run time, how long ago the command ran, and the command.
`ListState` holds the scroll `offset`, the `selected` index and the
number of visible entries (`max_entries`); `get_items_bounds` and
`index_marker` are the pieces it uses.

### Query editing

`histsearch.cursor.Cursor` is the editable query line: character moves
(`left`, `right`, `start`, `end`), editing (`insert`, `remove`, `back`,
`clear`) and word moves and deletes (`next_word`, `prev_word`,
`remove_next_word`, `remove_prev_word`). Word moves come in two styles,
`WordJumpMode.EMACS`, which jumps over runs of word characters, and
`WordJumpMode.SUBL`, which stops at every boundary between whitespace,
word characters and other text. `WordJumper` exposes the position
calculations directly.

### Search input handling

`histsearch.interactive.SearchState` applies key presses and mouse
scrolls to the query, the filter mode and the selection.
`handle_key(key, length, settings=None)` takes a `Key` (a character or a
named key such as `Key.ENTER`, with `ctrl` and `alt` flags) and returns
the chosen index when the search ends: the selected result on Enter, the
selection plus *n* on Alt-1…9, `RETURN_ORIGINAL` on Ctrl-C/D/G or Down at
the first result, and on Esc either `RETURN_ORIGINAL` or `RETURN_QUERY`
depending on `SearchSettings.exit_mode`. Ctrl-R cycles `FilterMode`
through global, host, session and directory. `handle_mouse` moves the
selection for a `MouseScroll`.

`split_preview(command, width)` breaks a command into lines of at most
`width` characters, and `resolve_selection(index, results, query)` turns
the final index into the text for the shell: the chosen command, an empty
string for `RETURN_ORIGINAL`, or otherwise the typed query.

## What this package does not do

It does not record, store or import shell history: there is no database,
and entries must be supplied by the caller. There is no full-screen
terminal search screen, no synchronisation with a server and no server.
The `init` command prints key bindings only, not the shell functions they
call.