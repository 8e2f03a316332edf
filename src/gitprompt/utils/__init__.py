"""Utilities for git-prompt."""

from ._exec import CommandConfig, CommandResult, run_command
from ._ignore import (
    collect_ignore_patterns,
    is_ignored_dir,
    load_ignore_patterns,
    normalize_pattern,
)
from ._logging import create_null_logger, create_prompt_logger
from ._paths import (
    get_config_dir,
    get_ignore_file_path,
    get_log_dir,
    get_log_file,
    get_timestamp_file,
    get_user_config_path,
)
from ._terminal import (
    DEFAULT_TERMINAL_WIDTH,
    get_terminal_width,
    strip_ansi,
    visible_length,
)

__all__ = [
    "DEFAULT_TERMINAL_WIDTH",
    "CommandConfig",
    "CommandResult",
    "collect_ignore_patterns",
    "create_null_logger",
    "create_prompt_logger",
    "get_config_dir",
    "get_ignore_file_path",
    "get_log_dir",
    "get_log_file",
    "get_terminal_width",
    "get_timestamp_file",
    "get_user_config_path",
    "is_ignored_dir",
    "load_ignore_patterns",
    "normalize_pattern",
    "run_command",
    "strip_ansi",
    "visible_length",
]
