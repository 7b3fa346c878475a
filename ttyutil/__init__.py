"""Terminal helpers: pseudo-terminals, raw mode, locale checks, full writes and timestamps."""

__version__ = "0.1.0"

__all__ = ["locale_utils", "pty_compat", "swrite", "timestamp"]