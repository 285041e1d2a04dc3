# TODO: Remove this when we migrate to Python 3.14.
from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import ConfigDict, Field, model_validator

from geojson_core.utils.helpers import deep_update, lower_keys
from geojson_core.utils.models import CIBaseModel, CIStrEnum


class LogLevel(CIStrEnum):
    """Log levels accepted in configuration files."""

    DEBUG = 'debug'
    INFO = 'info'
    WARNING = 'warning'
    ERROR = 'error'

    @property
    def level(self) -> int:
        """Numeric level for the standard `logging` module."""
        return logging.getLevelNamesMapping()[self.value.upper()]


class PolygonConfig(CIBaseModel):
    """Configuration settings for polygon building."""

    model_config = ConfigDict(frozen=True)
    """Configuration is frozen after creation."""

    min_points: int = Field(default=4, ge=1)
    """Minimum number of boundary points accepted by the polygon builder. The
    default of 4 rejects a bare triangle even though three distinct vertices
    would be enough to close a ring."""


class LoggingConfig(CIBaseModel):
    """Configuration settings for package logging."""

    model_config = ConfigDict(frozen=True)
    """Configuration is frozen after creation."""

    level: LogLevel = LogLevel.WARNING
    """Level applied to the `geojson_core` logger by
    `Config.configure_logging`."""


class Config(CIBaseModel):
    """Global geojson_core configuration settings.

    This is a singleton class; only one instance can be created. Create it at
    the start of your program (probably using the `load` method), then
    anywhere else in the codebase access the settings by doing `from
    geojson_core.config import config`.

    Coordinate comparison tolerance is deliberately not configurable: position
    equality and hashing never depend on this global state."""

    model_config = ConfigDict(frozen=True)
    """Configuration is frozen after creation."""

    polygon: PolygonConfig = Field(default_factory=PolygonConfig)
    """Polygon building settings."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    """Logging settings."""

    @model_validator(mode='after')
    def register_singleton(self):
        """Initialize the global configuration singleton."""

        global _config
        if _config is not None:
            raise RuntimeError('Config has already been initialized.')
        _config = self
        return self

    def configure_logging(self) -> None:
        """Apply the configured log level to the package logger."""
        logging.getLogger('geojson_core').setLevel(self.logging.level.level)

    @classmethod
    def get(cls) -> Config:
        """Get the global configuration singleton.

        Raises an error if the configuration has not yet been initialized."""
        global _config
        if _config is None:
            raise ValueError('geojson_core configuration is not set')
        return _config

    @classmethod
    def load(cls, config_file: str | Path | None = None, **kwargs) -> Config:
        """Load configuration from TOML files.

        The `default_config.toml` file included with the package is loaded
        first, and then TOML data from any `config_file` provided is overlaid
        on top. Additional keyword arguments are finally applied on top of the
        resulting configuration data."""

        with open(Path(__file__).parent / 'data/default_config.toml', 'rb') as fp:
            default_data = tomllib.load(fp)

        # Keys are lower-cased before merging so that `[Polygon]` in a user
        # file overlays `[polygon]` in the defaults rather than replacing it.
        overlay_data = {}
        if config_file is not None:
            with open(config_file, 'rb') as fp:
                overlay_data = lower_keys(tomllib.load(fp))
        overlay_data = deep_update(overlay_data, lower_keys(kwargs))

        return cls.model_validate(deep_update(default_data, overlay_data))

    @staticmethod
    def reset():
        """Reset the global configuration singleton.

        This is mostly intended for testing purposes, where it can be useful to
        modify the configuration between or within tests."""
        global _config
        _config = None


# Module property-like access to configuration via a proxy to allow late
# initialization.

_config: Config | None = None


class ConfigProxy:
    def __getattr__(self, name):
        return getattr(Config.get(), name)

    def __setattr__(self, name, value):
        return setattr(Config.get(), name, value)


config = ConfigProxy()
