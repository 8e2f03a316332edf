"""git-prompt CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from ._config import config_command, format_config, format_sources
from ._context import CLIContext
from ._init import init_command
from ._prompt import prompt_command, status_command
from ._shared import ExitCode, exit_with_error, get_error_console, print_warning

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "config_command",
    "exit_with_error",
    "format_config",
    "format_sources",
    "get_error_console",
    "init_command",
    "print_warning",
    "prompt_command",
    "register_commands",
    "status_command",
]


def register_commands(app: "App") -> None:  # noqa: UP037
    app.default(prompt_command)
    app.command(status_command, name="status")
    app.command(init_command, name="init")
    app.command(config_command, name="config")
