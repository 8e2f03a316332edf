"""Repository state classification.

The probe runs its checks in a fixed order and stops at the first match, so
later and more expensive queries never run for a directory that is not a
usable checkout.
"""

import re
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from gitprompt.exceptions import UnsafeRepositoryError
from gitprompt.git import GitBackend
from gitprompt.status._models import (
    BareRepo,
    Detached,
    IgnoredDir,
    Merging,
    NoCommits,
    Normal,
    NotARepo,
    Rebasing,
    RepoState,
    Unsafe,
)
from gitprompt.utils import create_null_logger, is_ignored_dir

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

# Merge (branch|tag|commit|remote-tracking branch) '<name>' [of <url>] [into <target>]
MERGE_SUBJECT_PATTERN = re.compile(
    r"^Merge (?:branch|tag|commit|remote-tracking branch) '(?P<name>[^']+)'"
    r"(?: of (?P<url>\S+))?"
    r"(?: into (?P<target>\S+))?\s*$"
)

ONTO_SHORT_LEN = 7


def parse_merge_subject(message: str) -> str:
    """Extract the merged name from a merge message's first line.

    Example:
        >>> parse_merge_subject("Merge branch 'feature' into main")
        'feature'
        >>> parse_merge_subject("Resolve conflicts")
        'Resolve conflicts'
    """
    line = message.strip()
    match = MERGE_SUBJECT_PATTERN.match(line)
    if match is None:
        return line
    return match.group("name")


def probe_repo_state(
    git: GitBackend,
    *,
    cwd: Path | str,
    ignore_patterns: Iterable[str] = (),
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> RepoState:
    """Classify the working directory.

    First match wins: not a repository, unsafe, bare, no commits, ignored
    directory, merging, rebasing, detached, normal.

    Args:
        git: Backend bound to cwd.
        cwd: Directory being rendered, matched against ignore_patterns.
        ignore_patterns: Normalized ignored-directory patterns.
        logger: Logger for the decision trace.

    Returns:
        Exactly one repository state.
    """
    log = logger or create_null_logger()
    state = _classify(git, cwd=cwd, ignore_patterns=ignore_patterns)
    log.debug("repo_state", cwd=str(cwd), state=type(state).__name__)
    return state


def _classify(
    git: GitBackend, *, cwd: Path | str, ignore_patterns: Iterable[str]
) -> RepoState:
    try:
        if not git.is_inside_work_tree():
            return BareRepo() if git.is_bare_repository() else NotARepo()
    except UnsafeRepositoryError as e:
        return Unsafe(advisory=e.advisory)

    if git.head_object_type() != "commit":
        return NoCommits()

    if is_ignored_dir(cwd, ignore_patterns):
        return IgnoredDir()

    merge_message = git.merge_message()
    if merge_message is not None:
        return Merging(message=parse_merge_subject(merge_message))

    rebase = git.rebase_info()
    if rebase is not None:
        return Rebasing(
            from_branch=rebase.head_name,
            onto_ref=rebase.onto,
            at_commit=git.head_oneline(),
        )

    branch = git.current_branch()
    if branch is None:
        return Detached()

    # Between git's internal steps HEAD can name a branch that does not exist
    upstreams = git.branch_upstreams()
    if branch not in upstreams:
        return NotARepo()
    return Normal(branch=branch, upstream=upstreams[branch])


def describe_state(state: RepoState) -> str:
    """Literal status text of a state that ends the pipeline.

    NotARepo and Unsafe render nothing. Normal is rendered by the
    assembler and has no literal.
    """
    match state:
        case BareRepo():
            return "(bare repo)"
        case NoCommits():
            return "(no commits)"
        case IgnoredDir():
            return "(heavy-git)"
        case Merging(message=message):
            return f"(merging {message})" if message else "(merging)"
        case Rebasing(from_branch=from_branch, onto_ref=onto, at_commit=at):
            return f"(rebasing {from_branch} onto {onto[:ONTO_SHORT_LEN]} - at {at})"
        case Detached():
            return "(detached)"
        case _:
            return ""
