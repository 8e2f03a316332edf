# pyright: reportUnusedCallResult=false
"""Prompt rendering commands.

Both commands always exit successfully, printing an empty status segment
when the repository cannot be rendered.
"""

from gitprompt.cli._commands._context import CLIContext
from gitprompt.cli._commands._shared import print_warning
from gitprompt.prompt import (
    PromptEnvironment,
    PromptRender,
    render_prompt,
    render_status_segment,
)
from gitprompt.status import Unsafe


def _report_unsafe(render: PromptRender) -> None:
    if isinstance(render.state, Unsafe):
        print_warning(render.state.advisory)


def prompt_command() -> None:
    """Print the full shell prompt.

    Intended to be called from the shell's prompt variable, e.g.
    PS1='$(git-prompt)'.
    """
    ctx = CLIContext.get_current()
    env = PromptEnvironment.from_os(terminal_width=ctx.width)
    render = render_prompt(
        env,
        ctx.config,
        color=not ctx.no_color,
        logger=ctx.logger,
    )
    _report_unsafe(render)
    print(render.text, end="")  # noqa: T201


def status_command() -> None:
    """Print only the git status segment for the current directory."""
    ctx = CLIContext.get_current()
    env = PromptEnvironment.from_os(terminal_width=ctx.width)
    render = render_status_segment(
        env,
        ctx.config,
        color=not ctx.no_color,
        logger=ctx.logger,
    )
    _report_unsafe(render)
    if render.text:
        print(render.text)  # noqa: T201
