"""Shell integration snippets."""

from enum import StrEnum


class Shell(StrEnum):
    BASH = "bash"
    ZSH = "zsh"


_BASH_SNIPPET = """\
# git-prompt integration for bash. Add to ~/.bashrc:
#   eval "$(git-prompt init bash)"
# Readline counts the color escapes as visible columns, so long command
# lines may wrap early. Use PS1='$(git-prompt --no-color)' if they do.
PS1='$(git-prompt)'
"""

# zsh expands % sequences in PROMPT, so commit subjects are escaped.
_ZSH_SNIPPET = """\
# git-prompt integration for zsh. Add to ~/.zshrc:
#   eval "$(git-prompt init zsh)"
# ZLE counts the color escapes as visible columns, so long command lines
# may wrap early. Use git-prompt --no-color below if they do.
setopt PROMPT_SUBST
PROMPT='${$(git-prompt)//\\%/%%}'
"""

SHELL_SNIPPETS: dict[Shell, str] = {
    Shell.BASH: _BASH_SNIPPET,
    Shell.ZSH: _ZSH_SNIPPET,
}


def get_shell_snippet(shell: Shell | str) -> str:
    """Return the integration snippet for a shell.

    Raises:
        ValueError: If the shell is not supported.
    """
    return SHELL_SNIPPETS[Shell(shell)]
