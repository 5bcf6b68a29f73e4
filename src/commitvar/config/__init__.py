"""Configuration loading, schema, and defaults."""

from commitvar.config.loader import ConfigError, load_config
from commitvar.config.schema import CommitVarConfig

__all__ = [
    "CommitVarConfig",
    "ConfigError",
    "load_config",
]
