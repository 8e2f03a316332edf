"""Terminal geometry and escape-sequence helpers."""

import contextlib
import os

from rich.text import Text

DEFAULT_TERMINAL_WIDTH: int = 80


def get_terminal_width(fallback: int = DEFAULT_TERMINAL_WIDTH) -> int:
    """Get the current terminal column width.

    The prompt is rendered inside a command substitution, so stdout is a pipe.
    Stderr and stdin usually still point at the terminal; when neither does,
    the controlling tty is opened directly. ``COLUMNS`` is the last resort.

    Args:
        fallback: Width returned when no source is available.

    Returns:
        Terminal width in columns.
    """
    for fd in (2, 0):
        with contextlib.suppress(OSError, ValueError):
            return os.get_terminal_size(fd).columns

    with contextlib.suppress(OSError):
        fd = os.open("/dev/tty", os.O_RDONLY)
        try:
            return os.get_terminal_size(fd).columns
        finally:
            os.close(fd)

    columns = os.environ.get("COLUMNS", "")
    if columns.isdigit() and int(columns) > 0:
        return int(columns)
    return fallback


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return Text.from_ansi(text).plain


def visible_length(text: str) -> int:
    """Length of text as displayed, ignoring ANSI escape sequences."""
    return len(strip_ansi(text))
