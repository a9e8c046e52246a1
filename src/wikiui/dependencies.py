"""Lazily-loaded configuration shared by the test suite."""

from __future__ import annotations

import os
from pathlib import Path

from .config import Config
from .constants import CONFIG_PATH

__all__ = ["ConfigDependency", "config_dependency"]


class ConfigDependency:
    """Provides the configuration to fixtures.

    A local run defaults to one configuration path, but the path can be
    overridden by the environment or by the test suite. The configuration is
    loaded when it's first requested and reloaded whenever the configuration
    path is changed.
    """

    def __init__(self) -> None:
        config_path = os.getenv("WIKIUI_CONFIG_PATH", CONFIG_PATH)
        self._config_path = Path(config_path)
        self._config: Config | None = None

    @property
    def config_path(self) -> Path:
        """Path to the configuration file."""
        return self._config_path

    def config(self) -> Config:
        """Load the configuration if necessary and return it."""
        if not self._config:
            self._config = Config.from_file(self._config_path)
            self._config.configure_logging()
        return self._config

    def set_config_path(self, path: Path) -> None:
        """Change the configuration path and reload the config.

        Parameters
        ----------
        path
            The new configuration path.
        """
        self._config_path = path
        self._config = None
        self.config()


config_dependency = ConfigDependency()
"""The dependency that will return the current configuration."""
