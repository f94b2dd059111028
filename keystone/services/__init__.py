"""
This module serves as the entry point for the `keystone.services` package.

It defines the `BaseService` class, which provides common attributes (logger,
settings, directory configuration) intended to be inherited by all other
service classes within this package.
"""

from logging import Logger

from keystone.core.config import get_app_dirs, get_app_settings
from keystone.core.root_logger import get_logger
from keystone.core.settings import AppDirectories, AppSettings


class BaseService:
    """
    A base class for all service layer classes in the Keystone application.

    Services inheriting from `BaseService` get lazily initialised access to the
    application logger, settings and directories.
    """

    _logger: Logger | None = None
    _settings: AppSettings | None = None
    _directories: AppDirectories | None = None

    @property
    def logger(self) -> Logger:
        """
        Provides access to the Keystone application logger.

        Initializes the logger on first access.
        """
        if not self._logger:
            self._logger = get_logger()
        return self._logger

    @property
    def settings(self) -> AppSettings:
        """
        Provides access to the Keystone application settings.

        Initializes settings on first access.
        """
        if not self._settings:
            self._settings = get_app_settings()
        return self._settings

    @property
    def directories(self) -> AppDirectories:
        """
        Provides access to the Keystone application directories.

        Initializes directories on first access.
        """
        if not self._directories:
            self._directories = get_app_dirs()
        return self._directories
