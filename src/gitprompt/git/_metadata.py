"""Structured repository metadata read through dulwich.

Merge and rebase operations leave plain-text state files in the repository's
control directory (MERGE_HEAD, MERGE_MSG, rebase-merge/, rebase-apply/).
Reading them directly is more reliable than pattern matching the output of
``git status``.
"""

from pathlib import Path

from dulwich.errors import NotGitRepository
from dulwich.repo import Repo

from gitprompt.git._models import RebaseInfo

_REBASE_DIRS = ("rebase-merge", "rebase-apply")


def decode_bytes(value: bytes | str) -> str:
    """Decode bytes to str if needed."""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def discover_repo(cwd: Path | str | None = None) -> Repo | None:
    """Discover git repository from the given directory.

    Args:
        cwd: Directory to start search from. If None, uses current directory.

    Returns:
        Repo instance if found, None otherwise.
    """
    try:
        if cwd is not None:
            return Repo.discover(str(cwd))
        return Repo.discover()
    except NotGitRepository:
        return None


def strip_refs_heads(branch: bytes | str | None) -> str | None:
    """Strip refs/heads/ prefix from a branch reference."""
    if branch is None:
        return None
    branch_str = decode_bytes(branch)
    if branch_str.startswith("refs/heads/"):
        return branch_str[11:]
    return branch_str


def _read_named_file(repo: Repo, name: str) -> str | None:
    """Read a control-dir file as text, or None if it does not exist."""
    f = repo.get_named_file(name)
    if f is None:
        return None
    with f:
        return decode_bytes(f.read())


def read_merge_message(repo: Repo) -> str | None:
    """Read the pending merge message if a merge is in progress.

    Args:
        repo: The repository instance.

    Returns:
        First line of MERGE_MSG (empty string when the file is missing or
        empty) while MERGE_HEAD exists, otherwise None.
    """
    if _read_named_file(repo, "MERGE_HEAD") is None:
        return None

    message = _read_named_file(repo, "MERGE_MSG") or ""
    lines = message.strip().splitlines()
    return lines[0].strip() if lines else ""


def read_rebase_info(repo: Repo) -> RebaseInfo | None:
    """Read the state of an in-progress rebase.

    A rebase-apply/ directory that contains an ``applying`` marker belongs
    to ``git am`` and is not reported as a rebase.

    Args:
        repo: The repository instance.

    Returns:
        RebaseInfo if a rebase is in progress, None otherwise.
    """
    controldir = Path(repo.controldir())

    for dirname in _REBASE_DIRS:
        state_dir = controldir / dirname
        if not state_dir.is_dir():
            continue
        if (state_dir / "applying").exists():
            continue

        head_name = _read_named_file(repo, f"{dirname}/head-name") or ""
        onto = _read_named_file(repo, f"{dirname}/onto") or ""
        return RebaseInfo(
            head_name=strip_refs_heads(head_name.strip()) or "",
            onto=onto.strip(),
        )

    return None
