"""Shell integration command."""

from typing import Annotated

from cyclopts import Parameter

from gitprompt.prompt import Shell, get_shell_snippet


def init_command(
    shell: Annotated[Shell, Parameter(help="Shell to integrate with")] = Shell.BASH,
) -> None:
    """Print the shell snippet that installs the prompt

    Add ``eval "$(git-prompt init bash)"`` to ~/.bashrc, or the zsh
    equivalent to ~/.zshrc.

    Args:
        shell: Shell to print the snippet for.
    """
    print(get_shell_snippet(shell), end="")  # noqa: T201
