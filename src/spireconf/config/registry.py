"""SPIRE server registry connection settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import optional_env_var, optional_float_env_var
from .errors import ConfigurationError

DEFAULT_ENDPOINT: Final[str] = "unix:/tmp/spire-server/private/api.sock"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 10.0

ENDPOINT_ENV_VAR: Final[str] = "SPIRE_SERVER_ENDPOINT"
TIMEOUT_ENV_VAR: Final[str] = "SPIRE_REGISTRY_TIMEOUT"


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Where the registry lives and how long a single call may take.

    ``timeout_seconds`` of ``0`` disables the per-call deadline.
    """

    endpoint: str = DEFAULT_ENDPOINT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.endpoint.strip():
            raise ConfigurationError("Registry endpoint must not be blank")
        if self.timeout_seconds < 0:
            raise ConfigurationError("Registry timeout must be non-negative")

    @property
    def timeout(self) -> float | None:
        return self.timeout_seconds or None


def get_registry_config(
    *,
    endpoint: str | None = None,
    timeout_seconds: float | None = None,
) -> RegistryConfig:
    """Build the registry config; explicit arguments win over the environment."""

    return RegistryConfig(
        endpoint=endpoint or optional_env_var(ENDPOINT_ENV_VAR, DEFAULT_ENDPOINT),
        timeout_seconds=(
            timeout_seconds
            if timeout_seconds is not None
            else optional_float_env_var(TIMEOUT_ENV_VAR, DEFAULT_TIMEOUT_SECONDS)
        ),
    )
