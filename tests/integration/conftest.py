import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

GIT_DATE = "2024-03-01T12:00:00+00:00"

type RunGit = Callable[..., str]
type CommitFile = Callable[..., None]


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    skip_no_git = pytest.mark.skip(reason="git binary not available")
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)
            if shutil.which("git") is None:
                item.add_marker(skip_no_git)


@pytest.fixture(autouse=True)
def _deterministic_git(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore system config and pin identities and dates for every git call."""
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_AUTHOR_DATE", GIT_DATE)
    monkeypatch.setenv("GIT_COMMITTER_DATE", GIT_DATE)
    monkeypatch.setenv("GIT_EDITOR", "true")
    monkeypatch.delenv("GIT_DIR", raising=False)
    monkeypatch.delenv("GIT_WORK_TREE", raising=False)


def run_git_command(path: Path, *args: str, check: bool = True) -> str:
    """Run git in path and return its stripped stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=str(path),
        capture_output=True,
        check=check,
        text=True,
    )
    return result.stdout.strip()


def init_git_repo(path: Path, *, bare: bool = False) -> None:
    """Initialize a minimal git repository with ``main`` as its branch."""
    path.mkdir(parents=True, exist_ok=True)
    run_git_command(path, "init", *(["--bare"] if bare else []))
    run_git_command(path, "symbolic-ref", "HEAD", "refs/heads/main")
    run_git_command(path, "config", "user.email", "test@example.com")
    run_git_command(path, "config", "user.name", "Test User")
    run_git_command(path, "config", "commit.gpgsign", "false")


def write_and_commit(
    path: Path, name: str, content: str, message: str = "Update file"
) -> None:
    """Write a file and commit it."""
    (path / name).write_text(content)
    run_git_command(path, "add", name)
    run_git_command(path, "commit", "-m", message)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Working tree on main with a single commit."""
    path = tmp_path / "repo"
    init_git_repo(path)
    write_and_commit(path, "README.md", "hello\n", "Initial commit")
    return path


@pytest.fixture
def tracking_clone(tmp_path: Path) -> Path:
    """Clone whose main tracks origin/main, even with it."""
    origin = tmp_path / "origin"
    init_git_repo(origin)
    write_and_commit(origin, "README.md", "hello\n", "Initial commit")

    clone = tmp_path / "clone"
    run_git_command(tmp_path, "clone", "--quiet", str(origin), str(clone))
    run_git_command(clone, "config", "user.email", "test@example.com")
    run_git_command(clone, "config", "user.name", "Test User")
    run_git_command(clone, "config", "commit.gpgsign", "false")
    return clone


@pytest.fixture
def run_git() -> RunGit:
    """Return a function running git in a directory: ``run_git(path, *args)``."""
    return run_git_command


@pytest.fixture
def commit_file() -> CommitFile:
    """Return a function writing and committing a file in a repository."""
    return write_and_commit
