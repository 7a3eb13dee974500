"""Configuration management for mini-git.

Settings are read from an INI file in the user's home directory and can
be overridden per process with environment variables. The repository
layout itself is fixed and not configurable.
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Optional


class Config:
    """
    Reads mini-git configuration.

    Configuration is stored in INI format:
    - Global config: ~/.minigitconfig

    Environment variables (MINIGIT_<SECTION>_<KEY>) take precedence.

    Known keys:
    - core.loglevel: logging level name (default WARNING)
    - color.ui: auto, always or never (default auto)
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.minigitconfig'

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize Config.

        Args:
            config_path: INI file to read instead of the global one
        """
        self.config_path = config_path or self.GLOBAL_CONFIG_PATH
        self._config = None

    @property
    def config(self) -> configparser.ConfigParser:
        """Load and return the parsed configuration."""
        if self._config is None:
            self._config = configparser.ConfigParser()
            if self.config_path.exists():
                self._config.read(self.config_path)
        return self._config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (MINIGIT_<SECTION>_<KEY>)
        2. Config file
        3. Fallback value

        Args:
            section: Config section (e.g., 'core', 'color')
            key: Config key (e.g., 'loglevel', 'ui')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"MINIGIT_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.config.has_option(section, key):
            return self.config.get(section, key)

        return fallback

    def log_level(self) -> int:
        """Logging level from core.loglevel, WARNING if unset or unknown."""
        name = (self.get('core', 'loglevel') or 'WARNING').upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.WARNING

    def color_mode(self) -> str:
        """Value of color.ui, normalised to auto, always or never."""
        mode = (self.get('color', 'ui') or 'auto').lower()
        if mode in ('true', 'always'):
            return 'always'
        if mode in ('false', 'never'):
            return 'never'
        return 'auto'


def get_config(config_path: Optional[Path] = None) -> Config:
    """
    Get a Config instance.

    Args:
        config_path: Optional INI file overriding ~/.minigitconfig

    Returns:
        Config instance
    """
    return Config(config_path)
