"""Git access for git-prompt.

The status pipeline depends on the GitBackend protocol only. Git runs the
git binary; FakeGit answers from fields for tests.
"""

from ._fake import FakeGit
from ._git import DEFAULT_GIT_EXECUTABLE, CommandRunner, Git
from ._metadata import (
    decode_bytes,
    discover_repo,
    read_merge_message,
    read_rebase_info,
    strip_refs_heads,
)
from ._models import RebaseInfo
from ._protocol import GitBackend

__all__ = [
    "DEFAULT_GIT_EXECUTABLE",
    "CommandRunner",
    "FakeGit",
    "Git",
    "GitBackend",
    "RebaseInfo",
    "decode_bytes",
    "discover_repo",
    "read_merge_message",
    "read_rebase_info",
    "strip_refs_heads",
]
