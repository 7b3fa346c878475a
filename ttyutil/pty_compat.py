"""Pseudo-terminal helpers: forking into a pty and raw terminal modes."""

from __future__ import annotations

import errno
import fcntl
import os
import signal
import struct
import sys
import termios
from dataclasses import dataclass

from .swrite import swrite

_WINSIZE_FORMAT = "HHHH"


@dataclass(frozen=True)
class WindowSize:
    """Terminal dimensions in character cells and pixels."""

    rows: int = 25
    cols: int = 80
    xpixel: int = 0
    ypixel: int = 0


class _PtyUnavailable(OSError):
    """No pseudo-terminal could be set up."""


def _child_fail(step: str, exc: OSError) -> None:
    os.write(2, f"{step}: {exc.strerror or exc}\n".encode())
    os._exit(1)


def forkpty(winsize: WindowSize | None = None) -> tuple[int, int]:
    """Fork a child whose stdin, stdout and stderr are a new pty.

    Returns ``(pid, master_fd)`` in the parent and ``(0, -1)`` in the child.
    The terminal gets ``winsize``, or 25 rows by 80 columns if none is given.
    """
    size = winsize if winsize is not None else WindowSize()
    master, slave = os.openpty()
    try:
        fcntl.ioctl(
            slave,
            termios.TIOCSWINSZ,
            struct.pack(_WINSIZE_FORMAT, size.rows, size.cols, size.xpixel, size.ypixel),
        )
        pid = os.fork()
    except BaseException:
        os.close(master)
        os.close(slave)
        raise

    if pid:
        os.close(slave)
        return pid, master

    try:
        os.setsid()
    except OSError as exc:
        os.write(2, f"setsid: {exc.strerror}\n".encode())
    try:
        if hasattr(termios, "TIOCSCTTY"):
            fcntl.ioctl(slave, termios.TIOCSCTTY, 0)
        else:
            os.close(os.open(os.ttyname(slave), os.O_RDWR))
    except OSError as exc:
        _child_fail("ioctl", exc)
    os.close(master)
    for target in (0, 1, 2):
        os.dup2(slave, target)
    if slave > 2:
        os.close(slave)
    return 0, -1


def cfmakeraw(attrs: list) -> list:
    """Return a copy of termios ``attrs`` set for raw, byte-at-a-time input."""
    iflag, oflag, cflag, lflag, ispeed, ospeed, cc = attrs
    iflag &= ~(
        termios.IGNBRK
        | termios.BRKINT
        | termios.PARMRK
        | termios.ISTRIP
        | termios.INLCR
        | termios.IGNCR
        | termios.ICRNL
        | termios.IXON
    )
    oflag &= ~termios.OPOST
    lflag &= ~(termios.ECHO | termios.ECHONL | termios.ICANON | termios.ISIG | termios.IEXTEN)
    cflag &= ~(termios.CSIZE | termios.PARENB)
    cflag |= termios.CS8
    cc = list(cc)
    cc[termios.VMIN] = 1  # a read is satisfied by one byte
    cc[termios.VTIME] = 0  # no timer
    return [iflag, oflag, cflag, lflag, ispeed, ospeed, cc]


def _exec_child(argv: list[str], saved_stderr: int) -> None:
    try:
        os.dup2(saved_stderr, 2)
    except OSError as exc:
        _child_fail("dup2", exc)
    try:
        os.close(saved_stderr)
    except OSError as exc:
        _child_fail("close", exc)
    try:
        os.execvp(argv[0], argv)
    except OSError as exc:
        _child_fail("execve", exc)
    finally:
        os._exit(1)


def _copy_to_stdout(master: int) -> None:
    while True:
        try:
            chunk = os.read(master, 1024)
        except OSError as exc:
            if exc.errno == errno.EIO:
                return
            raise
        if not chunk:
            return
        swrite(1, chunk)


def run_in_pty(argv: list[str]) -> int:
    """Run ``argv`` on an 80x24 pty, copying its output to stdout.

    The child's stderr stays the caller's. Returns the exit status, or the
    negated signal number if the child was killed by a signal.
    """
    if not argv:
        raise ValueError("no command given")
    saved_stderr = os.dup(2)
    try:
        pid, master = forkpty(WindowSize(rows=24, cols=80))
    except OSError as exc:
        os.close(saved_stderr)
        raise _PtyUnavailable(exc.errno, exc.strerror) from exc
    if pid == 0:
        _exec_child(list(argv), saved_stderr)

    os.close(saved_stderr)
    try:
        _copy_to_stdout(master)
    finally:
        os.close(master)
        _, status = os.waitpid(pid, 0)
    return os.waitstatus_to_exitcode(status)


def main(argv: list[str] | None = None) -> int:
    """Run a command inside a pty and exit with its status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("usage: inpty COMMAND [ARGS...]", file=sys.stderr)
        return 1
    try:
        status = run_in_pty(args)
    except _PtyUnavailable as exc:
        # Some build environments have no working pty; signal "skipped".
        print(f"forkpty: {exc.strerror}", file=sys.stderr)
        return 77
    except OSError as exc:
        print(f"inpty: {exc.strerror or exc}", file=sys.stderr)
        return 1
    if status < 0:
        signum = -status
        print(f"inpty: child exited with signal {signum}", file=sys.stderr)
        signal.raise_signal(signum)
        return -1
    return status