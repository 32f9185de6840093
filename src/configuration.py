"""Configuration loader."""

import logging
import os
from typing import Any, Optional

import yaml

import constants
from cache.cache import InsightsCache
from cache.cache_factory import CacheFactory
from models.config import (
    Configuration,
    GeminiConfiguration,
    InsightsCacheConfiguration,
    ServiceConfiguration,
)

logger = logging.getLogger(__name__)


class LogicError(Exception):
    """Error in application logic."""


class MisconfiguredError(Exception):
    """Service is missing a mandatory setting needed to handle requests."""


class AppConfig:
    """Singleton class to load and store the configuration."""

    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "AppConfig":
        """Create a new instance of the class."""
        if not isinstance(cls._instance, cls):
            cls._instance = super().__new__(cls, *args, **kwargs)
        return cls._instance

    def __init__(self) -> None:
        """Initialize the class instance."""
        self._configuration: Optional[Configuration] = None
        self._insights_cache: Optional[InsightsCache] = None

    def load_configuration(self, filename: str) -> None:
        """Load configuration from YAML file."""
        with open(filename, encoding="utf-8") as fin:
            config_dict = yaml.safe_load(fin) or {}
            self.init_from_dict(config_dict)
            logger.info("Loaded configuration from %s", filename)

    def init_from_dict(self, config_dict: dict[Any, Any]) -> None:
        """Initialize configuration from a dictionary."""
        self._configuration = Configuration(**config_dict)
        # cache is bound to the configuration it was created from
        self._insights_cache = None

    def is_loaded(self) -> bool:
        """Check whether the configuration has been loaded."""
        return self._configuration is not None

    @property
    def configuration(self) -> Configuration:
        """Return the whole configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration

    @property
    def service_configuration(self) -> ServiceConfiguration:
        """Return service configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.service

    @property
    def gemini_configuration(self) -> GeminiConfiguration:
        """Return generative language model configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.gemini

    @property
    def insights_cache_configuration(self) -> InsightsCacheConfiguration:
        """Return travel insights cache configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.insights_cache

    @property
    def insights_cache(self) -> InsightsCache:
        """Return the travel insights cache, creating it on first access."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        if self._insights_cache is None:
            self._insights_cache = CacheFactory.insights_cache(
                self._configuration.insights_cache
            )
        return self._insights_cache

    @property
    def gemini_api_key(self) -> str:
        """Return the credential used to call the model.

        The value from the configuration file takes precedence over the
        GEMINI_API_KEY environment variable.

        Raises:
            MisconfiguredError: If the credential is not set anywhere.
        """
        api_key = self.gemini_configuration.api_key
        if api_key is not None and api_key.get_secret_value():
            return api_key.get_secret_value()
        value = os.environ.get(constants.GEMINI_API_KEY_ENV_VAR)
        if not value:
            raise MisconfiguredError(constants.API_KEY_NOT_CONFIGURED)
        return value


configuration: AppConfig = AppConfig()
