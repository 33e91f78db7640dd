"""Configuration for parameter collections.

A process-wide default configuration is created lazily from environment
variables. Collections snapshot it when they are built; passing an explicit
``ParameterCollectionConfig`` overrides it for a single collection.

Environment Variables Supported:
- BQPROVIDER_PARAMETER_NAME_PREFIX: Prefix for auto-assigned parameter names (string)
- BQPROVIDER_VALIDATE_ITEMS: Run per-parameter validation (true/false)
"""

import os
import threading
from dataclasses import dataclass, replace
from typing import Any, Final, Optional

from bqprovider.exceptions import ImproperConfigurationError

__all__ = (
    "DEFAULT_NAME_PREFIX",
    "ParameterCollectionConfig",
    "get_global_config",
    "load_config_from_env",
    "reset_global_config",
    "set_global_config",
)

DEFAULT_NAME_PREFIX: Final[str] = "Parameters"

_TRUTHY: Final = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class ParameterCollectionConfig:
    """Settings shared by parameter collections."""

    default_name_prefix: str = DEFAULT_NAME_PREFIX
    validate_items: bool = True

    def __post_init__(self) -> None:
        if not self.default_name_prefix:
            msg = "default_name_prefix must be a non-empty string"
            raise ImproperConfigurationError(msg)

    def replace(self, **kwargs: Any) -> "ParameterCollectionConfig":
        """Create a copy with the given fields changed."""
        return replace(self, **kwargs)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def load_config_from_env() -> ParameterCollectionConfig:
    """Load configuration from environment variables.

    Returns:
        ParameterCollectionConfig built from the environment, with defaults for unset variables.
    """
    return ParameterCollectionConfig(
        default_name_prefix=os.getenv("BQPROVIDER_PARAMETER_NAME_PREFIX", DEFAULT_NAME_PREFIX),
        validate_items=_env_bool("BQPROVIDER_VALIDATE_ITEMS", True),
    )


_global_config: Optional[ParameterCollectionConfig] = None
_config_lock = threading.Lock()


def get_global_config() -> ParameterCollectionConfig:
    """Get the process-wide configuration, loading it from the environment on first use."""
    global _global_config
    if _global_config is None:
        with _config_lock:
            if _global_config is None:
                _global_config = load_config_from_env()
    return _global_config


def set_global_config(config: ParameterCollectionConfig) -> None:
    """Set the process-wide configuration.

    Args:
        config: New configuration to set globally
    """
    global _global_config
    with _config_lock:
        _global_config = config


def reset_global_config() -> None:
    """Discard the process-wide configuration so the next access reloads it from the environment."""
    global _global_config
    with _config_lock:
        _global_config = None
