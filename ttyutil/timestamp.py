"""A process-wide millisecond clock that only moves when frozen anew."""

from __future__ import annotations

import sys
import time

_millis_cache: int | None = None


def _now_millis() -> int:
    # Monotonic clocks can step backwards across suspend on macOS; the raw
    # clock does not.
    if sys.platform == "darwin" and hasattr(time, "CLOCK_MONOTONIC_RAW"):
        try:
            return time.clock_gettime_ns(time.CLOCK_MONOTONIC_RAW) // 1_000_000
        except OSError:
            pass
    try:
        return time.monotonic_ns() // 1_000_000
    except OSError:
        # Not monotonic; a last resort.
        return time.time_ns() // 1_000_000


def freeze_timestamp() -> None:
    """Read the clock and remember the reading in milliseconds."""
    global _millis_cache
    _millis_cache = _now_millis()


def frozen_timestamp() -> int:
    """Return the last frozen reading, freezing one first if there is none."""
    if _millis_cache is None:
        freeze_timestamp()
    assert _millis_cache is not None
    return _millis_cache