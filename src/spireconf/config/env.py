"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def optional_env_var(name: str, default: str) -> str:
    """Return ``name`` from the environment, or ``default`` when unset/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def optional_float_env_var(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if value < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {raw!r}")
    return value
