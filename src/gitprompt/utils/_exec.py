"""Execution utilities for external commands.

This module runs commands synchronously with output capture. It never raises
for a non-zero exit status: callers inspect the returned result and decide
what a failure means for them.
"""

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CommandConfig:
    """Configuration for command execution.

    Attributes:
        args: Program and arguments to execute.
        cwd: Working directory for execution.
        env: Additional environment variables to set.
    """

    args: tuple[str, ...]
    cwd: str | Path | None = None
    env: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result from command execution.

    Attributes:
        success: Whether the process was started and ran to completion.
        exit_code: Process exit code, or None if execution failed.
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        error: Error message if execution failed (not found, etc.).
        command_not_found: Whether the program was not found.
    """

    success: bool
    exit_code: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str | None = None
    command_not_found: bool = False

    @property
    def ok(self) -> bool:
        """Whether the command ran and exited with status 0."""
        return self.success and self.exit_code == 0


def run_command(config: CommandConfig) -> CommandResult:
    """Execute a command and capture its output.

    No timeout is applied; a hung command blocks the caller.

    Args:
        config: Command configuration specifying args, env and cwd.

    Returns:
        CommandResult with execution outcome.
    """
    if not config.args:
        return CommandResult(success=False, error="No command specified")

    env = {**os.environ, **config.env}
    cwd = str(config.cwd) if config.cwd else None

    try:
        result = subprocess.run(  # noqa: S603
            list(config.args),
            env=env,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except FileNotFoundError as e:
        return CommandResult(success=False, error=str(e), command_not_found=True)
    except OSError as e:
        return CommandResult(success=False, error=str(e))

    return CommandResult(
        success=True,
        exit_code=result.returncode,
        stdout=result.stdout.decode("utf-8", errors="replace"),
        stderr=result.stderr.decode("utf-8", errors="replace"),
    )
