"""git-prompt configuration.

This module provides the public API for configuration management,
including loading, validation, and typed access to configuration values.

Example:
    >>> from gitprompt.config import Config
    >>> config = Config.load()
    >>> config.glyphs.stashed
    '$'
"""

from gitprompt.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._defaults import DEFAULT_CONFIG
from ._load import safe_load_config
from ._loader import (
    deep_merge,
    parse_env_value,
    parse_env_vars,
    read_toml_file,
    set_nested_key,
)
from ._models import (
    ANSI_COLORS,
    RESET,
    ColorsConfig,
    Config,
    ConfigSource,
    ConfigSourceName,
    GlyphsConfig,
    IgnoreConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    PromptConfig,
    resolve_color,
)

__all__ = [
    "ANSI_COLORS",
    "DEFAULT_CONFIG",
    "RESET",
    "ColorsConfig",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "GlyphsConfig",
    "IgnoreConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "PromptConfig",
    "deep_merge",
    "parse_env_value",
    "parse_env_vars",
    "read_toml_file",
    "resolve_color",
    "safe_load_config",
    "set_nested_key",
]
