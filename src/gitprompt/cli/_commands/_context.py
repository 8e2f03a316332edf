# pyright: reportUnusedCallResult=false
"""CLI context for global state management.

The CLIContext is set once by the meta app from the global options and
made available to all commands via contextvars.
"""

import contextvars
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gitprompt.config import Config

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_current_cli_context: contextvars.ContextVar["CLIContext | None"] = (
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with configuration and options.

    Attributes:
        config: Loaded configuration object.
        no_color: Disable colored output.
        width: Terminal width override, or None to query the terminal.
        config_error: Error message if config loading failed.
        logger: Structured logger for commands (writes to file only).
    """

    config: Config = field(repr=False)
    no_color: bool = False
    width: int | None = None
    config_error: str | None = None
    logger: "FilteringBoundLogger | None" = field(  # noqa: UP037
        default=None, repr=False
    )

    @classmethod
    def get_current(cls) -> "CLIContext":  # noqa: UP037
        """Get current active CLIContext, or create a default if not set."""
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx
        return cls(config=Config.from_dict({}))

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:  # noqa: UP037
        """Set the current active CLIContext."""
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to default context.

        This is primarily useful for testing to ensure a clean state between tests.
        """
        _current_cli_context.set(None)
