"""Shared CLI utilities for commands.

This module provides common utilities used across CLI command implementations:
- Standardized exit codes
- Console utilities for error handling
"""

from enum import IntEnum
from typing import TYPE_CHECKING, Never

from rich.markup import escape

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "ExitCode",
    "exit_with_error",
    "get_error_console",
    "print_warning",
]


class ExitCode(IntEnum):
    """Standard exit codes for git-prompt CLI commands.

    Status 1 is left to argument parsing and to safe_load_config.
    """

    SUCCESS = 0
    NOT_FOUND = 3


def get_error_console() -> "Console":  # noqa: UP037
    """Get a Rich console configured for error output to stderr.

    Returns:
        Console instance writing to stderr.
    """
    from rich.console import Console

    return Console(stderr=True)


def print_warning(
    message: str,
    *,
    console: "Console | None" = None,  # noqa: UP037
) -> None:
    """Print a warning to stderr without interpreting markup in message."""
    if console is None:
        console = get_error_console()
    console.print(f"[yellow]Warning:[/yellow] {escape(message)}", highlight=False)


def exit_with_error(
    message: str,
    code: ExitCode,
    *,
    console: "Console | None" = None,  # noqa: UP037
) -> Never:
    """Print an error message and exit with the specified code.

    Args:
        message: The error message to display.
        code: The exit code to use.
        console: Optional Rich console for output. If not provided,
            a new stderr console will be created.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    raise SystemExit(code)
