"""Elapsed time since the previous prompt.

The previous render time is kept as Unix epoch seconds in a single file that
every render reads and then overwrites. Concurrent shells race on it; the
only consequence is a wrong elapsed reading.
"""

from pathlib import Path
from typing import TYPE_CHECKING

import pendulum

from gitprompt.utils import create_null_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def format_elapsed(seconds: int) -> str:
    """Format a duration as compact units, largest first.

    Zero-valued units are omitted, seconds are always shown.

    Example:
        >>> format_elapsed(65)
        '1m5s'
        >>> format_elapsed(3_600)
        '1h0s'
    """
    duration = pendulum.duration(seconds=max(seconds, 0))
    units = (("d", duration.days), ("h", duration.hours), ("m", duration.minutes))
    parts = [f"{count}{suffix}" for suffix, count in units if count]
    parts.append(f"{duration.remaining_seconds}s")
    return "".join(parts)


def read_timestamp(path: Path) -> pendulum.DateTime | None:
    """Read the previous render time, or None if missing or unreadable."""
    try:
        raw = path.read_text(encoding="utf-8").strip()
    except OSError:
        return None
    if not raw.isdigit():
        return None
    return pendulum.from_timestamp(int(raw))


def write_timestamp(path: Path, when: pendulum.DateTime) -> None:
    """Overwrite the timestamp file with when as epoch seconds."""
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(f"{int(when.timestamp())}\n", encoding="utf-8")


def elapsed_segment(
    path: Path,
    *,
    now: pendulum.DateTime | None = None,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> str:
    """Render ``[<elapsed>] `` and record the current time.

    Args:
        path: Timestamp file.
        now: Current time (defaults to pendulum.now("UTC")).
        logger: Logger for file errors.

    Returns:
        The segment, or the empty string on the first render.
    """
    log = logger or create_null_logger()
    current = now or pendulum.now("UTC")
    previous = read_timestamp(path)

    try:
        write_timestamp(path, current)
    except OSError as e:
        log.warning("timestamp_write_failed", path=str(path), error=str(e))

    if previous is None:
        return ""
    seconds = int(current.timestamp() - previous.timestamp())
    return f"[{format_elapsed(seconds)}] "
