# pyright: reportExplicitAny=false, reportAny=false
"""Configuration container with typed access.

This module provides the main Config class that serves as the primary
interface for accessing git-prompt configuration values.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar, Self

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from gitprompt.config._defaults import DEFAULT_CONFIG
from gitprompt.config._loader import deep_merge, parse_env_vars, read_toml_file
from gitprompt.config._models._common import ConfigSource, ConfigSourceName
from gitprompt.config._models._logging import LoggingConfig
from gitprompt.config._models._prompt import (
    ColorsConfig,
    GlyphsConfig,
    IgnoreConfig,
    PromptConfig,
)
from gitprompt.exceptions import ConfigValidationError
from gitprompt.utils import (
    get_ignore_file_path,
    get_timestamp_file,
    get_user_config_path,
)


class Config(BaseModel):
    """Configuration container with typed access.

    Immutable once built. Use the factory methods rather than the
    constructor so that defaults are merged and errors are translated.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    prompt: PromptConfig = Field(default_factory=PromptConfig)
    ignore: IgnoreConfig = Field(default_factory=IgnoreConfig)
    glyphs: GlyphsConfig = Field(default_factory=GlyphsConfig)
    colors: ColorsConfig = Field(default_factory=ColorsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary merged over the defaults.

        Raises:
            ConfigValidationError: If a value fails validation.
        """
        merged = deep_merge(DEFAULT_CONFIG, data)
        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            error = e.errors()[0]
            key = ".".join(str(part) for part in error["loc"])
            msg = f"Invalid configuration value for {key}: {error['msg']}"
            raise ConfigValidationError(
                msg,
                key=key,
                value=error.get("input"),
                expected=error["msg"],
            ) from e

    @classmethod
    def load(
        cls,
        *,
        config_path: Path | None = None,
        include_env: bool = True,
        environ: Mapping[str, str] | None = None,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load configuration from all sources.

        Sources, lowest precedence first: defaults, the user TOML file,
        GITPROMPT_* environment variables, CLI overrides.

        Args:
            config_path: TOML file to use instead of the user config file.
            include_env: Whether to read environment variables.
            environ: Environment mapping (defaults to os.environ).
            cli_overrides: Values from command-line flags.

        Returns:
            The merged configuration.
        """
        sources: list[ConfigSource] = [
            ConfigSource(
                ConfigSourceName.DEFAULT, None, exists=True, values=DEFAULT_CONFIG
            )
        ]

        user_path = config_path if config_path is not None else get_user_config_path()
        user_values: dict[str, Any] = {}
        if user_path.is_file():
            user_values = read_toml_file(user_path)
        sources.append(
            ConfigSource(
                ConfigSourceName.USER,
                user_path,
                exists=user_path.is_file(),
                values=user_values,
            )
        )

        if include_env:
            env_values = parse_env_vars(environ)
            sources.append(
                ConfigSource(
                    ConfigSourceName.ENV,
                    None,
                    exists=bool(env_values),
                    values=env_values,
                )
            )

        if cli_overrides:
            sources.append(
                ConfigSource(
                    ConfigSourceName.CLI, None, exists=True, values=cli_overrides
                )
            )

        merged: dict[str, Any] = {}
        for source in sources:
            merged = deep_merge(merged, source.values)

        config = cls.from_dict(merged)
        config._sources = tuple(sources)
        return config

    @property
    def sources(self) -> tuple[ConfigSource, ...]:
        """Sources that contributed to this configuration, lowest first."""
        return self._sources

    @property
    def ignore_file(self) -> Path:
        """Resolved path of the ignore-list file."""
        if self.ignore.file:
            return Path(self.ignore.file).expanduser()
        return get_ignore_file_path()

    @property
    def timestamp_file(self) -> Path:
        """Resolved path of the elapsed-time timestamp file."""
        if self.prompt.timestamp_file:
            return Path(self.prompt.timestamp_file).expanduser()
        return get_timestamp_file()

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return self.model_dump(mode="json")

    def to_toml(self) -> str:
        """Return the configuration serialized as TOML."""
        return tomli_w.dumps(self.to_dict())
