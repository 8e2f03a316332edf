"""Well-known file locations."""

from pathlib import Path

import platformdirs

APP_NAME = "git-prompt"


def get_config_dir() -> Path:
    """Get the user configuration directory (``~/.config/git-prompt`` on Linux)."""
    return platformdirs.user_config_path(APP_NAME)


def get_user_config_path() -> Path:
    """Get the path to the user's TOML configuration file.

    The path is returned regardless of whether the file exists.
    """
    return get_config_dir() / "config.toml"


def get_ignore_file_path() -> Path:
    """Get the default path of the ignored-directories list."""
    return get_config_dir() / "ignore-dirs"


def get_log_dir() -> Path:
    """Get the directory that holds git-prompt log files."""
    return platformdirs.user_log_path(APP_NAME)


def get_log_file() -> Path:
    """Get the path to the default log file."""
    return get_log_dir() / "git-prompt.log"


def get_timestamp_file() -> Path:
    """Get the default path of the elapsed-time timestamp file."""
    return Path.home() / ".git-prompt-timestamp"
