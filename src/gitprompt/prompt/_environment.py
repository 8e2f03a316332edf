"""Explicit prompt inputs gathered from the process environment."""

import contextlib
import getpass
import os
import socket
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Self

from gitprompt.utils import get_terminal_width

_MULTIPLEXERS = (("TMUX", "tmux"), ("STY", "screen"))


def detect_multiplexer(environ: Mapping[str, str]) -> str | None:
    """Name of the terminal multiplexer the shell runs in, if any."""
    for variable, name in _MULTIPLEXERS:
        if environ.get(variable):
            return name
    return None


def _logical_cwd(environ: Mapping[str, str]) -> Path:
    # PWD keeps the symlinked components the shell shows
    physical = Path.cwd()
    pwd = environ.get("PWD")
    if pwd:
        with contextlib.suppress(OSError):
            if os.path.samefile(pwd, physical):
                return Path(pwd)
    return physical


@dataclass(frozen=True, slots=True)
class PromptEnvironment:
    """Everything the prompt needs to know about its surroundings.

    Attributes:
        user: Login name.
        host: Host name.
        cwd: Directory the prompt is rendered for.
        terminal_width: Terminal width in columns.
        euid: Effective user id; 0 selects the privileged style.
        multiplexer: Terminal multiplexer name (tmux, screen) or None.
    """

    user: str
    host: str
    cwd: Path
    terminal_width: int
    euid: int = -1
    multiplexer: str | None = None

    @property
    def is_root(self) -> bool:
        return self.euid == 0

    @property
    def host_label(self) -> str:
        """Host name, tagged with the multiplexer when inside one."""
        if self.multiplexer:
            return f"{self.host}[{self.multiplexer}]"
        return self.host

    @classmethod
    def from_os(
        cls,
        *,
        cwd: Path | None = None,
        terminal_width: int | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Self:
        """Gather the environment of the current process.

        Args:
            cwd: Directory override (defaults to the shell's working directory).
            terminal_width: Width override (defaults to the terminal's width).
            environ: Environment mapping (defaults to os.environ).
        """
        env = os.environ if environ is None else environ
        user = env.get("USER") or getpass.getuser()
        return cls(
            user=user,
            host=socket.gethostname(),
            cwd=cwd if cwd is not None else _logical_cwd(env),
            terminal_width=(
                terminal_width if terminal_width is not None else get_terminal_width()
            ),
            euid=os.geteuid() if hasattr(os, "geteuid") else -1,
            multiplexer=detect_multiplexer(env),
        )
