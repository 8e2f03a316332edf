"""Status pipeline data models.

Repository states are small frozen dataclasses; exactly one of them
describes the working directory at render time. They are created and
discarded within a single render and never cached.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Self

from gitprompt.config import RESET, ColorsConfig, resolve_color


@dataclass(frozen=True, slots=True)
class NotARepo:
    """The directory is not inside a repository, or the probe aborted."""


@dataclass(frozen=True, slots=True)
class BareRepo:
    """The directory belongs to a repository without a working tree."""


@dataclass(frozen=True, slots=True)
class NoCommits:
    """HEAD does not resolve to a commit yet."""


@dataclass(frozen=True, slots=True)
class IgnoredDir:
    """The directory is listed in the ignored-directories patterns."""


@dataclass(frozen=True, slots=True)
class Unsafe:
    """Git refuses the repository until it is marked as safe."""

    advisory: str


@dataclass(frozen=True, slots=True)
class Merging:
    """A merge is in progress; message is the parsed merge subject."""

    message: str


@dataclass(frozen=True, slots=True)
class Rebasing:
    """A rebase is in progress."""

    from_branch: str
    onto_ref: str
    at_commit: str


@dataclass(frozen=True, slots=True)
class Detached:
    """HEAD is not a named branch."""


@dataclass(frozen=True, slots=True)
class Normal:
    """A named local branch is checked out.

    Attributes:
        branch: Short name of the branch.
        upstream: Short name of its upstream, or None if none is configured.
    """

    branch: str
    upstream: str | None = None


type RepoState = (
    NotARepo
    | BareRepo
    | NoCommits
    | IgnoredDir
    | Unsafe
    | Merging
    | Rebasing
    | Detached
    | Normal
)


@dataclass(frozen=True, slots=True)
class DirtyFlags:
    """Results of the four independent working-tree probes."""

    tracked: bool = False
    untracked: bool = False
    staged: bool = False
    stashed: bool = False

    @property
    def has_any(self) -> bool:
        """Whether any probe reported a change."""
        return self.tracked or self.untracked or self.staged or self.stashed


@dataclass(frozen=True, slots=True)
class Divergence:
    """Commit counts between a branch and its upstream."""

    behind: int
    ahead: int

    def __post_init__(self) -> None:
        if self.behind < 0 or self.ahead < 0:
            msg = f"divergence counts must be non-negative: {self.behind}, {self.ahead}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class CommitSummary:
    """Author date and subject of the HEAD commit."""

    author_date: str
    subject: str


@dataclass(frozen=True, slots=True)
class Palette:
    """Resolved escape sequences keyed by color role.

    Example:
        >>> palette = Palette.from_colors(ColorsConfig())
        >>> palette.paint("clean", "main")
        '\\x1b[0;32mmain\\x1b[0m'
    """

    codes: Mapping[str, str] = field(default_factory=dict)
    reset: str = RESET

    @classmethod
    def from_colors(cls, colors: ColorsConfig) -> Self:
        """Build a palette from the colors configuration section."""
        codes = {
            role: resolve_color(value)
            for role, value in colors.model_dump().items()
        }
        return cls(codes=codes, reset=RESET)

    @classmethod
    def plain(cls) -> Self:
        """Build a palette that emits no escape sequences."""
        return cls(codes={}, reset="")

    def code(self, role: str) -> str:
        """Escape sequence for a role, or the empty string if unknown."""
        return self.codes.get(role, "")

    def paint(self, role: str, text: str) -> str:
        """Wrap text in the role's color followed by the reset code.

        Empty text stays empty so absent glyphs add no escape sequences.
        """
        if not text:
            return ""
        code = self.code(role)
        if not code:
            return text
        return f"{code}{text}{self.reset}"
