"""Prompt rendering around the git status segment."""

from ._elapsed import (
    elapsed_segment,
    format_elapsed,
    read_timestamp,
    write_timestamp,
)
from ._environment import PromptEnvironment, detect_multiplexer
from ._render import (
    PromptRender,
    make_palette,
    render_head,
    render_prompt,
    render_status_segment,
)
from ._shell import SHELL_SNIPPETS, Shell, get_shell_snippet

__all__ = [
    "SHELL_SNIPPETS",
    "PromptEnvironment",
    "PromptRender",
    "Shell",
    "detect_multiplexer",
    "elapsed_segment",
    "format_elapsed",
    "get_shell_snippet",
    "make_palette",
    "read_timestamp",
    "render_head",
    "render_prompt",
    "render_status_segment",
    "write_timestamp",
]
