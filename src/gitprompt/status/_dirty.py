"""Working-tree dirty-state probes and their rendering."""

from gitprompt.config import GlyphsConfig
from gitprompt.git import GitBackend
from gitprompt.status._models import DirtyFlags, Palette


def collect_dirty_flags(git: GitBackend) -> DirtyFlags:
    """Run the four independent dirty-state probes.

    Each probe is a separate git query; a failed query reads as False.
    """
    return DirtyFlags(
        tracked=git.has_tracked_changes(),
        untracked=git.has_untracked_files(),
        staged=git.has_staged_changes(),
        stashed=git.has_stash(),
    )


def branch_color(flags: DirtyFlags) -> str:
    """Color role of the branch name and its delimiters.

    Tracked changes win; any other change uses the attention color.
    """
    if flags.tracked:
        return "dirty"
    if flags.has_any:
        return "uno"
    return "clean"


def render_glyphs(flags: DirtyFlags, glyphs: GlyphsConfig, palette: Palette) -> str:
    """Concatenate the colored glyph of every set flag.

    The order is fixed: stashed, untracked, tracked, staged.
    """
    parts = (
        ("stashed", flags.stashed, glyphs.stashed),
        ("untracked", flags.untracked, glyphs.untracked),
        ("tracked", flags.tracked, glyphs.tracked),
        ("staged", flags.staged, glyphs.staged),
    )
    return "".join(
        palette.paint(role, glyph) for role, is_set, glyph in parts if is_set
    )
