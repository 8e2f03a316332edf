"""Prompt appearance configuration models.

This module provides the Pydantic models for the prompt layout, the
ignored-directories list, status glyphs and the color palette.
"""

import os
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

ESC = "\033"
RESET = f"{ESC}[0m"

_BASE_COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

ANSI_COLORS: dict[str, str] = {
    "reset": RESET,
    "none": "",
    **{name: f"{ESC}[0;3{i}m" for i, name in enumerate(_BASE_COLORS)},
    **{f"bright-{name}": f"{ESC}[1;3{i}m" for i, name in enumerate(_BASE_COLORS)},
    "lime": f"{ESC}[1;32m",
}
"""Named ANSI SGR sequences accepted in the ``colors`` section."""


def resolve_color(value: str) -> str:
    """Resolve a color name or raw escape sequence to an escape sequence.

    Args:
        value: A key of ANSI_COLORS, or a string starting with ESC.

    Returns:
        The escape sequence.

    Raises:
        ValueError: If the value is neither a known name nor an escape sequence.
    """
    if value.startswith(ESC):
        return value
    try:
        return ANSI_COLORS[value.lower()]
    except KeyError:
        msg = f"unknown color {value!r}; expected one of {', '.join(ANSI_COLORS)}"
        raise ValueError(msg) from None


class PromptConfig(BaseModel):
    """Prompt layout section.

    Attributes:
        placeholder: Subject shown when the last commit message is empty.
        timestamp_len: Characters of the ISO author date that are shown.
        show_elapsed: Whether to show time elapsed since the previous prompt.
        timestamp_file: Path of the elapsed-time file (empty uses the default).
        prompt_char: Character ending the prompt for normal users.
        root_prompt_char: Character ending the prompt for the superuser.
        two_line: Whether the prompt character goes on its own line.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    placeholder: str = "(no message)"
    timestamp_len: int = Field(default=10, ge=1, le=25)
    show_elapsed: bool = False
    timestamp_file: str = ""
    prompt_char: str = "$"
    root_prompt_char: str = "#"
    two_line: bool = True


class IgnoreConfig(BaseModel):
    """Ignored-directories section.

    Attributes:
        file: Path of the ignore-list file (empty uses the default).
        dirs: Additional directory patterns. A string is split on the
            platform path separator so the list can come from one
            environment variable.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    file: str = ""
    dirs: tuple[str, ...] = ()

    @field_validator("dirs", mode="before")
    @classmethod
    def _split_dirs(cls, value: object) -> object:
        if isinstance(value, str):
            return tuple(part for part in value.split(os.pathsep) if part)
        return value


class GlyphsConfig(BaseModel):
    """Status glyph section.

    Attributes:
        dirty: Aggregate "any change" glyph. Reserved: the status segment
            shows the four individual glyphs instead.
        tracked: Unstaged changes to tracked files.
        untracked: Untracked files.
        staged: Staged changes.
        stashed: A stash exists.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    dirty: str = "*"
    tracked: str = "!"
    untracked: str = "?"
    staged: str = "+"
    stashed: str = "$"


class ColorsConfig(BaseModel):
    """Color palette section.

    Every value is a name from ANSI_COLORS or a raw escape sequence.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    clean: str = "green"
    dirty: str = "bright-yellow"
    uno: str = "lime"
    tracked: str = "bright-yellow"
    untracked: str = "bright-red"
    staged: str = "green"
    stashed: str = "lime"
    behind: str = "bright-red"
    ahead: str = "bright-yellow"
    even: str = "green"
    user: str = "bright-green"
    root: str = "bright-red"
    cwd: str = "bright-cyan"
    status: str = "green"

    @field_validator("*")
    @classmethod
    def _known_color(cls, value: str) -> str:
        _ = resolve_color(value)
        return value
