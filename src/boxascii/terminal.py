import os
import sys


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def stdout_encoding() -> str:
    return getattr(sys.stdout, "encoding", None) or "utf-8"


def can_encode(char: str, encoding: str | None = None) -> bool:
    """Check whether the terminal's encoding has a byte sequence for char."""
    try:
        char.encode(encoding or stdout_encoding())
    except UnicodeEncodeError:
        return False
    return True
