"""Ahead/behind counts between a branch and its upstream."""

from gitprompt.git import GitBackend
from gitprompt.status._models import Divergence, Palette


def compute_divergence(
    git: GitBackend, branch: str, upstream: str | None
) -> Divergence | None:
    """Count commits on each side of ``branch...upstream``.

    Args:
        git: Backend to query.
        branch: Local branch name.
        upstream: Upstream short name, or None if none is configured.

    Returns:
        The counts, or None when there is no upstream or the range query
        fails (for example when the upstream ref was deleted).
    """
    if not upstream:
        return None

    marked = git.rev_list_left_right(branch, upstream)
    if marked is None:
        return None

    ahead = sum(1 for line in marked if line.startswith("<"))
    behind = sum(1 for line in marked if line.startswith(">"))
    return Divergence(behind=behind, ahead=ahead)


def count_colors(divergence: Divergence) -> tuple[str, str]:
    """Color roles of the behind and ahead counts, colored independently."""
    behind = "behind" if divergence.behind else "even"
    ahead = "ahead" if divergence.ahead else "even"
    return behind, ahead


def render_divergence(
    divergence: Divergence | None, palette: Palette, bracket_role: str
) -> str:
    """Render ``[<behind><-  -><ahead>]``, or nothing without a divergence."""
    if divergence is None:
        return ""

    behind_role, ahead_role = count_colors(divergence)
    return "".join(
        (
            palette.paint(bracket_role, "["),
            palette.paint(behind_role, f"{divergence.behind}<-"),
            palette.paint(ahead_role, f"->{divergence.ahead}"),
            palette.paint(bracket_role, "]"),
        )
    )
