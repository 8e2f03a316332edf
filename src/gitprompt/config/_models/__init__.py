"""Configuration models."""

from ._common import ConfigSource, ConfigSourceName, LogFormat, LogLevel
from ._config import Config
from ._logging import LoggingConfig
from ._prompt import (
    ANSI_COLORS,
    RESET,
    ColorsConfig,
    GlyphsConfig,
    IgnoreConfig,
    PromptConfig,
    resolve_color,
)

__all__ = [
    "ANSI_COLORS",
    "RESET",
    "ColorsConfig",
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "GlyphsConfig",
    "IgnoreConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "PromptConfig",
    "resolve_color",
]
