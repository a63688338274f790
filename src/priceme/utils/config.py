"""
Configuration management for the PriceMe pricing application.

This module handles:
- Environment-specific configuration (development vs. production)
- Logging level for the service layer
- Inventory thresholds read from the environment
"""

import logging
import os
from typing import Optional

from .constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_STOCK_WARNING_RATIO,
)


ENV_VAR_ENVIRONMENT = "PRICEME_ENV"
ENV_VAR_LOG_LEVEL = "PRICEME_LOG_LEVEL"
ENV_VAR_STOCK_WARNING_RATIO = "PRICEME_STOCK_WARNING_RATIO"


class Config:
    """
    Application configuration manager.

    Handles environment settings, logging level and inventory thresholds.
    Values not passed explicitly are read from the environment.
    """

    def __init__(
        self,
        environment: str = "production",
        log_level: Optional[str] = None,
        stock_warning_ratio: Optional[float] = None,
    ):
        """
        Initialize configuration.

        Args:
            environment: Environment mode - 'production' or 'development'
            log_level: Logging level name. If None, uses PRICEME_LOG_LEVEL,
                       falling back to DEBUG in development and WARNING otherwise.
            stock_warning_ratio: Multiple of the reorder point below which stock
                       is flagged. If None, uses PRICEME_STOCK_WARNING_RATIO.
        """
        self.environment = environment
        self._app_name = APP_NAME
        self._app_version = APP_VERSION

        if log_level is None:
            default_level = "DEBUG" if environment == "development" else "WARNING"
            log_level = os.environ.get(ENV_VAR_LOG_LEVEL, default_level)
        self._log_level = log_level.upper()

        if stock_warning_ratio is None:
            stock_warning_ratio = self._read_ratio_from_env()
        self._stock_warning_ratio = stock_warning_ratio

    def _read_ratio_from_env(self) -> float:
        """
        Read the stock warning ratio from the environment.

        Returns:
            Ratio from PRICEME_STOCK_WARNING_RATIO, or the default when the
            variable is unset or not a positive number
        """
        raw = os.environ.get(ENV_VAR_STOCK_WARNING_RATIO)
        if raw is None:
            return DEFAULT_STOCK_WARNING_RATIO
        try:
            ratio = float(raw)
        except ValueError:
            logging.getLogger(__name__).warning(
                f"Ignoring {ENV_VAR_STOCK_WARNING_RATIO}={raw!r}: not a number"
            )
            return DEFAULT_STOCK_WARNING_RATIO
        if ratio <= 0:
            return DEFAULT_STOCK_WARNING_RATIO
        return ratio

    @property
    def app_name(self) -> str:
        """Application name."""
        return self._app_name

    @property
    def app_version(self) -> str:
        """Application version."""
        return self._app_version

    @property
    def log_level(self) -> str:
        """Logging level name (e.g. 'INFO')."""
        return self._log_level

    @property
    def stock_warning_ratio(self) -> float:
        """Multiple of the reorder point below which stock is a warning."""
        return self._stock_warning_ratio

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"Config(environment='{self.environment}', " f"log_level='{self._log_level}')"
        )


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config(environment: Optional[str] = None) -> Config:
    """
    Get the global configuration instance.

    Once created, the singleton's environment cannot be changed by passing
    a different environment argument.

    Args:
        environment: Optional environment for initial creation. If None, uses
                    PRICEME_ENV or defaults to production. Ignored if
                    singleton already exists.

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        if environment is None:
            environment = os.environ.get(ENV_VAR_ENVIRONMENT, "production")
        _config_instance = Config(environment)
    elif environment is not None and environment != _config_instance.environment:
        logger = logging.getLogger(__name__)
        logger.warning(
            f"get_config() called with environment='{environment}' but singleton "
            f"already exists with environment='{_config_instance.environment}'. "
            f"Returning existing singleton."
        )

    return _config_instance


def reset_config():
    """
    Reset the global configuration instance.

    Useful for testing.
    """
    global _config_instance
    _config_instance = None


def configure_logging(config: Optional[Config] = None) -> logging.Logger:
    """
    Attach a console handler to the 'priceme' logger tree.

    Calling this more than once does not add duplicate handlers.

    Args:
        config: Configuration to read the level from (default: get_config())

    Returns:
        The configured 'priceme' root logger
    """
    if config is None:
        config = get_config()

    logger = logging.getLogger("priceme")
    logger.setLevel(getattr(logging, config.log_level, logging.WARNING))

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
