"""Git status segment pipeline.

probe_repo_state() classifies the directory; for a normal checkout the dirty
probes and the divergence calculation feed assemble_status(), which fits the
trailing commit summary to the terminal width with truncate_message().
render_status() runs the whole pipeline.
"""

from ._assemble import (
    StatusResult,
    assemble_status,
    read_commit_summary,
    render_branch_status,
    render_status,
)
from ._dirty import branch_color, collect_dirty_flags, render_glyphs
from ._divergence import compute_divergence, count_colors, render_divergence
from ._models import (
    BareRepo,
    CommitSummary,
    Detached,
    DirtyFlags,
    Divergence,
    IgnoredDir,
    Merging,
    NoCommits,
    Normal,
    NotARepo,
    Palette,
    Rebasing,
    RepoState,
    Unsafe,
)
from ._probe import (
    MERGE_SUBJECT_PATTERN,
    describe_state,
    parse_merge_subject,
    probe_repo_state,
)
from ._truncate import MIN_MESSAGE_LEN, TIMESTAMP_LEN, message_budget, truncate_message

__all__ = [
    "MERGE_SUBJECT_PATTERN",
    "MIN_MESSAGE_LEN",
    "TIMESTAMP_LEN",
    "BareRepo",
    "CommitSummary",
    "Detached",
    "DirtyFlags",
    "Divergence",
    "IgnoredDir",
    "Merging",
    "NoCommits",
    "Normal",
    "NotARepo",
    "Palette",
    "Rebasing",
    "RepoState",
    "StatusResult",
    "Unsafe",
    "assemble_status",
    "branch_color",
    "collect_dirty_flags",
    "compute_divergence",
    "count_colors",
    "describe_state",
    "message_budget",
    "parse_merge_subject",
    "probe_repo_state",
    "read_commit_summary",
    "render_branch_status",
    "render_divergence",
    "render_glyphs",
    "render_status",
    "truncate_message",
]
