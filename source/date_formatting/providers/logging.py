"""This module sets up the centralized logging system for the date formatting tools.

It provides a `LoggingProvider` singleton that configures and dispenses the
``date_formatting`` logger. Conversions that fail are reported through this
logger instead of being printed, so callers can route or silence them.
"""

from __future__ import annotations

import sys
from logging import Formatter, Logger, StreamHandler, _nameToLevel, getLogger

from date_formatting.providers.config import ConfigProvider

LOGGER_NAME = "date_formatting"


class LoggingProvider:
    """Provides a configured logger instance for the application.

    This class uses a Singleton pattern to ensure that there is only one
    instance of the logger throughout the application's lifecycle, configured
    once based on settings from the config provider.
    """

    _instance: LoggingProvider | None = None
    _logger: Logger | None = None
    _is_configured: bool = False

    def __new__(cls) -> LoggingProvider:
        """Implements the Singleton pattern.

        If an instance does not exist, it creates one. Otherwise, it returns
        the existing instance.

        Returns:
            The singleton instance of the LoggingProvider.
        """
        if not cls._instance:  # pragma: no cover
            cls._instance = super().__new__(cls)
        return cls._instance

    @staticmethod
    def _resolve_level(level_name: str) -> int:
        """Translates a level name into its numeric value, defaulting to INFO."""
        return _nameToLevel.get(level_name.upper(), _nameToLevel["INFO"])

    def _configure_logger(self, level_override: str | None = None) -> Logger:
        """Private method to configure the logger. This is called only once.

        Args:
            level_override: A level name that takes precedence over LOG_LEVEL.

        Returns:
            The configured logger instance.
        """
        logger = getLogger(LOGGER_NAME)

        if self._is_configured:  # pragma: no cover
            return logger

        log_level_str = level_override or ConfigProvider.get_config().LOG_LEVEL
        logger.setLevel(self._resolve_level(log_level_str))

        if not logger.handlers:
            handler = StreamHandler(sys.stderr)
            formatter = Formatter(
                "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        self._is_configured = True
        logger.debug(f"Logger configured with level: {log_level_str}")
        return logger

    def get_logger(self, level_override: str | None = None) -> Logger:
        """Returns the configured logger instance.

        If the logger has not been configured yet, this method will trigger
        the configuration. This lazy initialization ensures that the logger is
        only set up when it's first needed, preventing issues in test setups
        or module imports. A level override given after configuration still
        adjusts the level of the existing logger.

        Args:
            level_override: An optional level name, e.g. from the CLI.

        Returns:
            The configured logger instance.
        """
        if not self._logger:
            self._logger = self._configure_logger(level_override)
        elif level_override:
            self._logger.setLevel(self._resolve_level(level_override))
        return self._logger
