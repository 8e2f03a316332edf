"""Command for viewing the effective configuration."""

from typing import Annotated

from cyclopts import Parameter

from gitprompt.cli._commands._context import CLIContext
from gitprompt.cli._commands._shared import ExitCode
from gitprompt.config import Config, ConfigSource


def format_sources(sources: tuple[ConfigSource, ...]) -> str:
    """Describe configuration sources as TOML comments, highest first."""
    lines: list[str] = []
    for source in reversed(sources):
        location = str(source.path) if source.path else "-"
        state = "" if source.exists else " (not found)"
        lines.append(f"# {source.name.value}: {location}{state}")
    return "\n".join(lines)


def format_config(config: Config, *, show_sources: bool = False) -> str:
    """Render the configuration as TOML, optionally preceded by its sources."""
    output = config.to_toml().rstrip()
    if show_sources and config.sources:
        output = f"{format_sources(config.sources)}\n\n{output}"
    return output


def config_command(
    *,
    show_sources: Annotated[
        bool,
        Parameter(
            name="--show-sources",
            help="List the sources that contributed to the configuration",
        ),
    ] = False,
) -> None:
    """Display the effective configuration

    Shows the configuration merged from defaults, the user config file,
    GITPROMPT_* environment variables and command-line flags, as TOML.

    Args:
        show_sources: Precede the output with the contributing sources.
    """
    ctx = CLIContext.get_current()
    if ctx.config_error:
        print(f"# Warning: {ctx.config_error}")  # noqa: T201

    print(format_config(ctx.config, show_sources=show_sources))  # noqa: T201
    raise SystemExit(ExitCode.SUCCESS)
