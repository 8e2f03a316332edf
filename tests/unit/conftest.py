from pathlib import Path

import pytest

from gitprompt.git import FakeGit
from gitprompt.prompt import PromptEnvironment


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def fake_git() -> FakeGit:
    """Clean checkout of main without an upstream."""
    return FakeGit()


@pytest.fixture
def prompt_env() -> PromptEnvironment:
    """Environment of a regular user on an 80-column terminal."""
    return PromptEnvironment(
        user="alice",
        host="box",
        cwd=Path("/home/alice/src/project"),
        terminal_width=80,
        euid=1000,
    )
