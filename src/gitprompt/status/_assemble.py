"""Status segment assembly.

Layout of a normal checkout::

    (<branch><glyphs>[<behind><--><ahead>]) <date> <subject>

Glyphs appear in the order stashed, untracked, tracked, staged. Everything
up to the closing parenthesis is the status prefix. The date and subject
form the trailing segment, which is cut to fit the terminal width.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from gitprompt.config import Config
from gitprompt.git import GitBackend
from gitprompt.status._dirty import branch_color, collect_dirty_flags, render_glyphs
from gitprompt.status._divergence import compute_divergence, render_divergence
from gitprompt.status._models import (
    CommitSummary,
    DirtyFlags,
    Divergence,
    Normal,
    Palette,
    RepoState,
)
from gitprompt.status._probe import describe_state, probe_repo_state
from gitprompt.status._truncate import truncate_message
from gitprompt.utils import create_null_logger, visible_length

if TYPE_CHECKING:
    from collections.abc import Iterable

    from structlog.typing import FilteringBoundLogger


@dataclass(frozen=True, slots=True)
class StatusResult:
    """A rendered status segment and the state it was rendered from."""

    state: RepoState
    text: str


def read_commit_summary(git: GitBackend, *, placeholder: str) -> CommitSummary:
    """Read the HEAD commit's author date and subject.

    An empty subject is replaced with placeholder.
    """
    subject = git.last_commit_subject().strip()
    return CommitSummary(
        author_date=git.last_commit_date(),
        subject=subject or placeholder,
    )


def render_branch_status(
    branch: str,
    flags: DirtyFlags,
    divergence: Divergence | None,
    *,
    config: Config,
    palette: Palette,
) -> str:
    """Render the parenthesized branch status prefix."""
    role = branch_color(flags)
    return "".join(
        (
            palette.paint(role, "("),
            palette.paint(role, branch),
            render_glyphs(flags, config.glyphs, palette),
            render_divergence(divergence, palette, role),
            palette.paint(role, ")"),
        )
    )


def assemble_status(
    git: GitBackend,
    state: RepoState,
    *,
    config: Config,
    palette: Palette,
    prefix_length: int,
    terminal_width: int,
) -> str:
    """Build the status segment for a classified repository.

    Args:
        git: Backend bound to the rendered directory.
        state: Result of probe_repo_state().
        config: Effective configuration.
        palette: Colors to paint with.
        prefix_length: Visible length of the prompt text before the segment
            on the same line.
        terminal_width: Terminal width in columns.

    Returns:
        The segment text; empty for states that render nothing.
    """
    timestamp_len = config.prompt.timestamp_len
    min_length = timestamp_len + 1

    if not isinstance(state, Normal):
        return truncate_message(
            prefix_length,
            terminal_width,
            describe_state(state),
            min_length=min_length,
        )

    flags = collect_dirty_flags(git)
    divergence = compute_divergence(git, state.branch, state.upstream)
    summary = read_commit_summary(git, placeholder=config.prompt.placeholder)

    head = render_branch_status(
        state.branch, flags, divergence, config=config, palette=palette
    )
    trailing = f" {summary.author_date[:timestamp_len]} {summary.subject}"
    return head + truncate_message(
        prefix_length + visible_length(head),
        terminal_width,
        trailing,
        min_length=min_length,
    )


def render_status(
    git: GitBackend,
    *,
    cwd: Path | str,
    config: Config,
    palette: Palette,
    terminal_width: int,
    prefix_length: int = 0,
    ignore_patterns: "Iterable[str]" = (),  # noqa: UP037
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> StatusResult:
    """Probe the repository and assemble its status segment.

    Example:
        >>> from gitprompt.git import FakeGit
        >>> result = render_status(
        ...     FakeGit(bare=True),
        ...     cwd="/srv/repo.git",
        ...     config=Config(),
        ...     palette=Palette.plain(),
        ...     terminal_width=80,
        ... )
        >>> result.text
        '(bare repo)'
    """
    log = logger or create_null_logger()
    state = probe_repo_state(
        git, cwd=cwd, ignore_patterns=ignore_patterns, logger=log
    )
    text = assemble_status(
        git,
        state,
        config=config,
        palette=palette,
        prefix_length=prefix_length,
        terminal_width=terminal_width,
    )
    log.debug("status_rendered", state=type(state).__name__, length=len(text))
    return StatusResult(state=state, text=text)
