"""Git backend protocol for type-safe dependency injection.

The status pipeline only talks to git through this protocol, so the probes
can be exercised against FakeGit without a real repository.
"""

from typing import Protocol, runtime_checkable

from gitprompt.git._models import RebaseInfo


@runtime_checkable
class GitBackend(Protocol):
    """Read-only git queries used to build the prompt.

    Every method issues its own query; nothing is cached between calls.
    Query failures read as False, None or the empty string. The only
    exception raised is UnsafeRepositoryError, from the access checks.
    """

    def is_inside_work_tree(self) -> bool:
        """Whether the directory is inside a working tree.

        Raises:
            UnsafeRepositoryError: If git refuses to open the repository.
        """
        ...

    def is_bare_repository(self) -> bool:
        """Whether the directory belongs to a bare repository.

        Raises:
            UnsafeRepositoryError: If git refuses to open the repository.
        """
        ...

    def head_object_type(self) -> str | None:
        """Object type HEAD resolves to ("commit"), or None if unborn."""
        ...

    def current_branch(self) -> str | None:
        """Short name of the checked-out branch, or None if detached."""
        ...

    def branch_upstreams(self) -> dict[str, str | None]:
        """Map every local branch to its upstream's short name, or None."""
        ...

    def has_tracked_changes(self) -> bool:
        """Whether tracked files differ from the index."""
        ...

    def has_untracked_files(self) -> bool:
        """Whether files exist that are neither tracked nor ignored."""
        ...

    def has_staged_changes(self) -> bool:
        """Whether the index differs from HEAD."""
        ...

    def has_stash(self) -> bool:
        """Whether at least one stash entry exists."""
        ...

    def rev_list_left_right(self, left: str, right: str) -> list[str] | None:
        """Marked commits of the symmetric difference ``left...right``.

        Returns:
            One entry per commit, prefixed with "<" (only in left) or ">"
            (only in right), or None if the query failed.
        """
        ...

    def last_commit_date(self) -> str:
        """ISO 8601 author date of the HEAD commit."""
        ...

    def last_commit_subject(self) -> str:
        """Subject line of the HEAD commit."""
        ...

    def head_oneline(self) -> str:
        """Abbreviated hash and subject of the HEAD commit."""
        ...

    def merge_message(self) -> str | None:
        """First line of the pending merge message, or None if not merging."""
        ...

    def rebase_info(self) -> RebaseInfo | None:
        """State of an in-progress rebase, or None if not rebasing."""
        ...
