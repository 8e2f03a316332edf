"""Git backend that shells out to the git binary.

Each query runs one ``git`` subprocess in the working directory. Merge and
rebase state is read from the control directory through dulwich.
"""

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from gitprompt.exceptions import UnsafeRepositoryError
from gitprompt.git._metadata import (
    discover_repo,
    read_merge_message,
    read_rebase_info,
)
from gitprompt.git._models import RebaseInfo
from gitprompt.utils import (
    CommandConfig,
    CommandResult,
    create_null_logger,
    run_command,
)

if TYPE_CHECKING:
    from dulwich.repo import Repo
    from structlog.typing import FilteringBoundLogger

DEFAULT_GIT_EXECUTABLE = "git"

# Markers of git's "dubious ownership" refusal; the config key is not
# translated, so matching it works in every locale.
_UNSAFE_MARKERS = ("safe.directory", "dubious ownership")

# Prompt queries must never take the index lock.
_GIT_ENV = {"GIT_OPTIONAL_LOCKS": "0"}

type CommandRunner = Callable[[CommandConfig], CommandResult]


class Git:
    """GitBackend implementation backed by the git command line.

    Example:
        >>> git = Git(Path.cwd())
        >>> if git.is_inside_work_tree():
        ...     print(git.current_branch())
    """

    def __init__(
        self,
        cwd: Path | str,
        *,
        executable: str = DEFAULT_GIT_EXECUTABLE,
        runner: CommandRunner = run_command,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize the backend.

        Args:
            cwd: Working directory every query runs in.
            executable: Name or path of the git binary.
            runner: Function that executes a command; replaced in tests.
            logger: Logger for query tracing.
        """
        self.cwd: Path = Path(cwd)
        self.executable: str = executable
        self._runner: CommandRunner = runner
        self._logger: FilteringBoundLogger = logger or create_null_logger()

    def _run(self, *args: str) -> CommandResult:
        result = self._runner(
            CommandConfig(
                args=(self.executable, *args),
                cwd=self.cwd,
                env=_GIT_ENV,
            )
        )
        self._logger.debug(
            "git_query",
            args=list(args),
            exit_code=result.exit_code,
            error=result.error,
        )
        if result.command_not_found:
            self._logger.warning("git_not_found", executable=self.executable)
        return result

    def _check_unsafe(self, result: CommandResult) -> None:
        if result.ok:
            return
        if any(marker in result.stderr for marker in _UNSAFE_MARKERS):
            raise UnsafeRepositoryError(result.stderr.strip())

    def is_inside_work_tree(self) -> bool:
        result = self._run("rev-parse", "--is-inside-work-tree")
        self._check_unsafe(result)
        return result.ok and result.stdout.strip() == "true"

    def is_bare_repository(self) -> bool:
        result = self._run("rev-parse", "--is-bare-repository")
        self._check_unsafe(result)
        return result.ok and result.stdout.strip() == "true"

    def head_object_type(self) -> str | None:
        result = self._run("cat-file", "-t", "HEAD")
        if not result.ok:
            return None
        return result.stdout.strip() or None

    def current_branch(self) -> str | None:
        result = self._run("rev-parse", "--abbrev-ref", "HEAD")
        if not result.ok:
            return None
        branch = result.stdout.strip()
        # A detached HEAD abbreviates to the literal "HEAD"
        if not branch or branch == "HEAD":
            return None
        return branch

    def branch_upstreams(self) -> dict[str, str | None]:
        result = self._run(
            "for-each-ref",
            "--format=%(refname:short) %(upstream:short)",
            "refs/heads",
        )
        if not result.ok:
            return {}

        upstreams: dict[str, str | None] = {}
        for line in result.stdout.splitlines():
            name, _, upstream = line.strip().partition(" ")
            if name:
                upstreams[name] = upstream.strip() or None
        return upstreams

    def has_tracked_changes(self) -> bool:
        result = self._run("diff", "--no-ext-diff", "--quiet", "--exit-code")
        return result.success and result.exit_code == 1

    def has_untracked_files(self) -> bool:
        result = self._run(
            "ls-files",
            "--others",
            "--exclude-standard",
            "--directory",
            "--no-empty-directory",
            "--",
            ":/",
        )
        return result.ok and bool(result.stdout.strip())

    def has_staged_changes(self) -> bool:
        result = self._run("diff-index", "--cached", "--quiet", "HEAD", "--")
        return result.success and result.exit_code == 1

    def has_stash(self) -> bool:
        return self._run("rev-parse", "--verify", "--quiet", "refs/stash").ok

    def rev_list_left_right(self, left: str, right: str) -> list[str] | None:
        result = self._run("rev-list", "--left-right", f"{left}...{right}", "--")
        if not result.ok:
            return None
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def last_commit_date(self) -> str:
        result = self._run("log", "-n", "1", "--format=format:%ai")
        return result.stdout.strip() if result.ok else ""

    def last_commit_subject(self) -> str:
        result = self._run("log", "-n", "1", "--format=format:%s")
        return result.stdout.strip() if result.ok else ""

    def head_oneline(self) -> str:
        result = self._run("log", "-n", "1", "--format=format:%h %s")
        return result.stdout.strip() if result.ok else ""

    def _open_repo(self) -> "Repo | None":  # noqa: UP037
        try:
            return discover_repo(self.cwd)
        except Exception:  # noqa: BLE001 - dulwich rejects some repository formats
            self._logger.warning("repo_metadata_unreadable", cwd=str(self.cwd))
            return None

    def merge_message(self) -> str | None:
        repo = self._open_repo()
        if repo is None:
            return None
        try:
            return read_merge_message(repo)
        finally:
            repo.close()

    def rebase_info(self) -> RebaseInfo | None:
        repo = self._open_repo()
        if repo is None:
            return None
        try:
            return read_rebase_info(repo)
        finally:
            repo.close()
