"""Shared test fixtures for git-prompt tests."""

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from gitprompt.cli import create_app
from gitprompt.config import Config
from gitprompt.status import Palette


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user configuration, logs and GITPROMPT_* settings out of tests."""
    for key in list(os.environ):
        if key.startswith("GITPROMPT_"):
            monkeypatch.delenv(key)

    home = tmp_path / "home"
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(home / ".local" / "state"))
    for variable in ("TMUX", "STY"):
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture
def config() -> Config:
    """Configuration built from the defaults only."""
    return Config.from_dict({})


@pytest.fixture
def palette(config: Config) -> Palette:
    """Palette of the default colors."""
    return Palette.from_colors(config.colors)


@pytest.fixture
def plain() -> Palette:
    """Palette that emits no escape sequences."""
    return Palette.plain()


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@pytest.fixture
def git_prompt_cli(console: Console) -> Callable[..., int]:
    """Run the CLI through its meta app and return the exit code.

    SystemExit raised by cyclopts or by a command is converted to its code;
    a normal return counts as 0.
    """
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app.meta(list(args))
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
