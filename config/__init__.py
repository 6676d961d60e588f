"""
Configuration package for the content core.

This package provides configuration classes for the development, testing and
production environments and helpers for picking one.
"""

import logging
import os
from functools import lru_cache
from typing import Optional, Type

# Initialize logger
logger = logging.getLogger(__name__)

from .config_constants import (
    ENVIRONMENT_DEVELOPMENT,
    ENVIRONMENT_TESTING,
    ENVIRONMENT_PRODUCTION,
    ALLOWED_ENVIRONMENTS,
)

# Import configuration classes
from .base import Config
from .development import DevelopmentConfig
from .testing import TestingConfig
from .production import ProductionConfig

# Configuration registry mapping environment names to config classes
CONFIG_REGISTRY = {
    ENVIRONMENT_DEVELOPMENT: DevelopmentConfig,
    ENVIRONMENT_TESTING: TestingConfig,
    ENVIRONMENT_PRODUCTION: ProductionConfig,
}


@lru_cache(maxsize=8)
def get_config(env_name: Optional[str] = None) -> Type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env_name: Environment name (development, testing, production).
                 If None, the environment is detected from the process
                 environment

    Returns:
        Config class appropriate for the specified environment
    """
    env_name = (env_name or detect_environment()).lower().replace('-', '_')

    config_class = CONFIG_REGISTRY.get(env_name)
    if not config_class:
        # Fallback to development config if an unknown environment is specified
        logger.warning("Unknown environment name: %s, using development config", env_name)
        config_class = DevelopmentConfig

    return config_class


def detect_environment() -> str:
    """
    Detect the current environment from environment variables.

    Returns:
        String containing the environment name, development when unset
    """
    environment = os.environ.get('ENVIRONMENT') or os.environ.get('FLASK_ENV')

    if environment not in ALLOWED_ENVIRONMENTS:
        if environment:
            logger.warning("Unknown environment '%s', falling back to %s",
                           environment, ENVIRONMENT_DEVELOPMENT)
        environment = ENVIRONMENT_DEVELOPMENT

    return environment


__all__ = [
    'Config',
    'DevelopmentConfig',
    'TestingConfig',
    'ProductionConfig',
    'CONFIG_REGISTRY',
    'get_config',
    'detect_environment',
]
