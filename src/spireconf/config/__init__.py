"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, optional_float_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .registry import (
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT_SECONDS,
    RegistryConfig,
    get_registry_config,
)

__all__ = [
    "DEFAULT_ENDPOINT",
    "DEFAULT_TIMEOUT_SECONDS",
    "ConfigurationError",
    "RegistryConfig",
    "configure_logging",
    "get_registry_config",
    "optional_env_var",
    "optional_float_env_var",
]
