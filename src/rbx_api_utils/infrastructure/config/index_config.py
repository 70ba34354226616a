#!/usr/bin/env python3

"""Runtime options for the API index and property accessor."""

import os
from typing import Any

ENV_PREFIX = "API_INDEX_"

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    # Reject enums with duplicate item names/values or non-integer values
    "STRICT_ENUM_VALIDATION": True,

    # Log rejected values at DEBUG level in the type checker
    "LOG_TYPE_CHECK_FAILURES": True,
}


def get_config() -> dict[str, Any]:
    """Get configuration with environment variable overrides.

    Each key can be overridden with ``API_INDEX_<KEY>``; values that cannot be
    converted to the default's type are ignored.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"{ENV_PREFIX}{key}")
        if env_value is not None:
            if isinstance(config[key], bool):
                config[key] = env_value.lower() in ("true", "1", "yes", "on")
            elif isinstance(config[key], int):
                try:
                    config[key] = int(env_value)
                except ValueError:
                    pass
            elif isinstance(config[key], float):
                try:
                    config[key] = float(env_value)
                except ValueError:
                    pass
            else:
                config[key] = env_value

    return config
