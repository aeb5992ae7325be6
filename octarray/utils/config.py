"""Global configuration settings."""

import copy
from typing import Dict, Any


_DEFAULTS: Dict[str, Any] = {
    # Index resolution
    "indexing": {
        "out_of_range": "raise",  # "raise" or "clip"
    },
    # Random fill
    "random": {
        "seed": None,  # None draws fresh OS entropy per array
    },
    # Logging
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "datefmt": "%H:%M:%S",
    },
}


class Config:
    """
    Global configuration for octarray.

    Values are addressed with dotted keys, e.g. ``Config.get("random.seed")``.
    """

    _config: Dict[str, Any] = copy.deepcopy(_DEFAULTS)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        keys = key.split(".")
        value = cls._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k, default)
            else:
                return default
        return value

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        """Set configuration value."""
        keys = key.split(".")
        config = cls._config
        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]
        config[keys[-1]] = value

    @classmethod
    def reset(cls) -> None:
        """Reset to default configuration."""
        cls._config = copy.deepcopy(_DEFAULTS)
