"""Fake git backend for testing.

This module provides a FakeGit class that implements GitBackend for use in
tests without requiring a git binary or an actual repository.
"""

from dataclasses import dataclass, field

from gitprompt.exceptions import UnsafeRepositoryError
from gitprompt.git._models import RebaseInfo


@dataclass(slots=True)
class FakeGit:
    """Fake git backend for testing.

    Every query answers from a public field, so a test describes a
    repository by setting the fields it cares about. The defaults describe a
    clean checkout of ``main`` with no upstream.

    Every query appends its name to ``calls``, which lets tests assert that
    a short-circuited pipeline never reached a later probe.

    Example:
        >>> git = FakeGit(untracked=True, upstreams={"main": "origin/main"})
        >>> git.has_untracked_files()
        True
        >>> git.calls
        ['has_untracked_files']
    """

    inside_work_tree: bool = True
    bare: bool = False
    head_type: str | None = "commit"
    branch: str | None = "main"
    upstreams: dict[str, str | None] | None = None
    tracked: bool = False
    untracked: bool = False
    staged: bool = False
    stashed: bool = False
    left_right: list[str] | None = field(default_factory=list)
    date: str = "2024-03-01 12:34:56 +0100"
    subject: str = "Initial commit"
    oneline: str = "abc1234 Initial commit"
    merge_msg: str | None = None
    rebase: RebaseInfo | None = None
    unsafe_advisory: str | None = None
    calls: list[str] = field(default_factory=list)

    def _record(self, name: str) -> None:
        self.calls.append(name)

    def _check_unsafe(self) -> None:
        if self.unsafe_advisory is not None:
            raise UnsafeRepositoryError(self.unsafe_advisory)

    def is_inside_work_tree(self) -> bool:
        self._record("is_inside_work_tree")
        self._check_unsafe()
        return self.inside_work_tree and not self.bare

    def is_bare_repository(self) -> bool:
        self._record("is_bare_repository")
        self._check_unsafe()
        return self.bare

    def head_object_type(self) -> str | None:
        self._record("head_object_type")
        return self.head_type

    def current_branch(self) -> str | None:
        self._record("current_branch")
        return self.branch

    def branch_upstreams(self) -> dict[str, str | None]:
        self._record("branch_upstreams")
        if self.upstreams is not None:
            return dict(self.upstreams)
        # Without explicit upstreams the current branch exists untracked
        return {self.branch: None} if self.branch else {}

    def has_tracked_changes(self) -> bool:
        self._record("has_tracked_changes")
        return self.tracked

    def has_untracked_files(self) -> bool:
        self._record("has_untracked_files")
        return self.untracked

    def has_staged_changes(self) -> bool:
        self._record("has_staged_changes")
        return self.staged

    def has_stash(self) -> bool:
        self._record("has_stash")
        return self.stashed

    def rev_list_left_right(self, left: str, right: str) -> list[str] | None:
        self._record("rev_list_left_right")
        if self.left_right is None:
            return None
        return list(self.left_right)

    def last_commit_date(self) -> str:
        self._record("last_commit_date")
        return self.date

    def last_commit_subject(self) -> str:
        self._record("last_commit_subject")
        return self.subject

    def head_oneline(self) -> str:
        self._record("head_oneline")
        return self.oneline

    def merge_message(self) -> str | None:
        self._record("merge_message")
        return self.merge_msg

    def rebase_info(self) -> RebaseInfo | None:
        self._record("rebase_info")
        return self.rebase

    # =========================================================================
    # Test Helpers
    # =========================================================================

    def set_divergence(self, *, behind: int = 0, ahead: int = 0) -> None:
        """Set the range query result to the given counts.

        Args:
            behind: Commits only on the upstream side.
            ahead: Commits only on the local side.
        """
        self.left_right = [f"<{i:040x}" for i in range(ahead)] + [
            f">{i:040x}" for i in range(behind)
        ]

    def reset_calls(self) -> None:
        """Forget recorded queries."""
        self.calls.clear()
