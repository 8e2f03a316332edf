"""git-prompt exceptions."""

from pathlib import Path  # noqa: TC003 - Used at runtime in signatures
from typing import Any


class GitPromptError(Exception):
    """Base exception for git-prompt errors."""


class GitError(GitPromptError):
    """Base exception for git query errors."""


class UnsafeRepositoryError(GitError):
    """Raised when git refuses to operate on a repository it does not trust.

    Git blocks access to repositories owned by another user until the
    directory is listed in ``safe.directory``. The advisory text git prints
    tells the user how to unblock it, so it is carried verbatim.
    """

    def __init__(self, advisory: str) -> None:
        """Initialize with the advisory text reported by git."""
        super().__init__(advisory)
        self.advisory: str = advisory


class ConfigError(GitPromptError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source
