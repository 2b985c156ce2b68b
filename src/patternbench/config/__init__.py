"""Harness configuration."""

from .harness_config import HarnessConfig, get_config_paths, load_config

__all__ = [
    "HarnessConfig",
    "get_config_paths",
    "load_config",
]
