# ttyutil

Small building blocks for programs that drive terminals on POSIX systems.
It has no dependencies beyond the standard library.

## Modules

- `ttyutil.pty_compat`
  - `WindowSize(rows=25, cols=80, xpixel=0, ypixel=0)`: a frozen record of
    terminal dimensions.
  - `forkpty(winsize=None)`: forks a child whose stdin, stdout and stderr are a
    new pseudo-terminal of the given size (25x80 if none is given). It returns
    `(pid, master_fd)` in the parent and `(0, -1)` in the child.
  - `cfmakeraw(attrs)`: takes a `termios.tcgetattr` list and returns a copy
    set for raw input (no echo, no canonical mode, no signals, 8-bit
    characters, reads satisfied by one byte with no timer).
  - `run_in_pty(argv)`: runs a command on an 80x24 pseudo-terminal, copies
    its output to standard output and returns its exit status, or the negated
    signal number if a signal killed it. The child's stderr stays the
    caller's. An empty `argv` raises `ValueError`.
- `ttyutil.locale_utils`
  - `LocaleVar(name, value)`: prints as `NAME=value`, or
    `[no charset variables]` when the name is empty.
  - `get_ctype()`: the first of `LC_ALL`, `LC_CTYPE` and `LANG` that is set.
  - `locale_charset()`: the current character set name, with
    `ANSI_X3.4-1968` reported as `US-ASCII`.
  - `is_utf8_locale()`: whether that name is `UTF-8` or `utf-8`.
  - `set_native_locale()`: adopts the environment's locale; if it is not
    available, explains on stderr which variable asked for it.
  - `clear_locale_variables()`: removes `LANG`, `LANGUAGE`, `LC_ALL` and
    every `LC_*` category variable from `os.environ`.
- `ttyutil.timestamp`
  - `freeze_timestamp()`: reads a monotonic clock and stores the reading in
    milliseconds.
  - `frozen_timestamp()`: returns the stored reading, taking one first if none
    has been stored. The value only changes when `freeze_timestamp()` is
    called again.
- `ttyutil.swrite`
  - `swrite(fd, data)`: writes every byte of `data` (text is encoded as UTF-8),
    retrying short writes; returns the number of bytes written and raises
    `OSError` if the descriptor stops accepting data.

## Installation

```
pip install .
```

## Commands

Run a command inside an 80x24 pseudo-terminal and relay its output. The exit
status is the child's; without a command it prints a usage line and exits 1;
if no pseudo-terminal can be set up it exits 77. If a signal kills the child,
`inpty` reports it and raises the same signal in itself.

```
inpty COMMAND [ARGS...]
```

Check whether the native locale uses UTF-8 (exit status 0 if it does; 1 with
`not a UTF-8 locale` on stderr otherwise):

```
is-utf8-locale
```

## Example

```python
import termios
from ttyutil.pty_compat import cfmakeraw
from ttyutil.timestamp import freeze_timestamp, frozen_timestamp

raw = cfmakeraw(termios.tcgetattr(0))
termios.tcsetattr(0, termios.TCSAFLUSH, raw)

freeze_timestamp()
started = frozen_timestamp()
```

## What it does not do

ttyutil does not wait on descriptors or signals for you: there is no event
loop or signal-aware wait here, so combine these helpers with `selectors` or
`signal` from the standard library. Nor does it offer assertion helpers.

## Tests

```
pip install .[test]
pytest
```