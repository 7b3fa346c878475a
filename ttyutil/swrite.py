"""Write a whole buffer to a file descriptor."""

from __future__ import annotations

import errno
import os


def swrite(fd: int, data: bytes | bytearray | memoryview | str) -> int:
    """Write all of ``data`` to ``fd``, retrying short writes.

    Text is encoded as UTF-8. Returns the number of bytes written and raises
    OSError if the descriptor stops accepting data.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    view = memoryview(data).cast("B")
    total = 0
    while total < len(view):
        written = os.write(fd, view[total:])
        if written <= 0:
            raise OSError(errno.EIO, "write made no progress")
        total += written
    return total