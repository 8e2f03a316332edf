"""Git metadata dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RebaseInfo:
    """State recorded by an in-progress rebase.

    Attributes:
        head_name: Branch being rebased, without the refs/heads/ prefix, or
            "detached HEAD" when a detached HEAD is being rebased.
        onto: Full object name of the commit the branch is replayed onto.
    """

    head_name: str
    onto: str
