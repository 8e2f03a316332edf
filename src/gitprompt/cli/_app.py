"""The command-line interface for git-prompt."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter, validators
from rich.console import Console

from gitprompt.config import Config, safe_load_config
from gitprompt.utils import create_null_logger, create_prompt_logger

from ._commands import register_commands
from ._commands._context import CLIContext
from ._commands._shared import ExitCode, exit_with_error

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

APP_HELP = "Git status summary for the shell prompt."
DEFAULT_COMMAND = "prompt"


def _command_name(tokens: tuple[str, ...]) -> str:
    if tokens and not tokens[0].startswith("-"):
        return tokens[0]
    return DEFAULT_COMMAND


def _create_command_logger(
    config: Config, command: str
) -> "FilteringBoundLogger":  # noqa: UP037
    # An unwritable log directory must not break the prompt
    try:
        return create_prompt_logger(
            level=config.logging.level.value,
            log_format=config.logging.format.value,  # type: ignore[arg-type]
            log_file=config.logging.file,
            command=command,
        )
    except OSError:
        return create_null_logger()


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="git-prompt",
        help=APP_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        no_color: Annotated[
            bool, Parameter(name="--no-color", help="Disable colored output")
        ] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
        width: Annotated[
            int | None,
            Parameter(
                name="--width",
                help="Terminal width (defaults to the current terminal)",
                validator=validators.Number(gt=0),
            ),
        ] = None,
        elapsed: Annotated[
            bool | None,
            Parameter(name="--elapsed", help="Show time since the previous prompt"),
        ] = None,
    ) -> None:
        """Launch git-prompt with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            no_color: Disable colored output.
            config: Explicit path to config file.
            width: Terminal width override.
            elapsed: Override prompt.show_elapsed.
        """
        if config is not None and not config.exists():
            exit_with_error(f"Config file not found: {config}", ExitCode.NOT_FOUND)

        cli_overrides: dict[str, object] | None = None
        if elapsed is not None:
            cli_overrides = {"prompt": {"show_elapsed": elapsed}}

        loaded_config, config_error = safe_load_config(
            config_path=config,
            cli_overrides=cli_overrides,
        )

        ctx = CLIContext(
            config=loaded_config,
            no_color=no_color,
            width=width,
            config_error=config_error,
            logger=_create_command_logger(loaded_config, _command_name(tokens)),
        )
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `git-prompt` CLI."""
    create_app().meta()


if __name__ == "__main__":
    main()
