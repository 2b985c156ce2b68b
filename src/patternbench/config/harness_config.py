"""Harness configuration management."""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "PATTERNBENCH_"
CONFIG_SECTION = "harness"


class HarnessConfig(BaseModel):
    """Harness configuration model."""

    # Execution settings
    time_budget_seconds: Optional[float] = Field(
        default=5.0,
        gt=0,
        description="Soft per-example time budget (None disables it)",
    )

    # Output settings
    output_format: Literal["text", "json", "markdown"] = Field(
        default="text",
        description="Default report format for `run`",
    )
    log_level: str = Field(default="WARNING", description="Logging level")

    class Config:
        """Pydantic configuration."""

        extra = "ignore"


def get_config_paths() -> list[Path]:
    """
    Get configuration file paths in priority order.

    Returns:
        List of paths, highest priority last
    """
    return [
        Path.home() / ".patternbench" / "config.yaml",
        Path.cwd() / ".patternbench" / "config.yaml",
    ]


def load_config(config_path: Optional[str] = None) -> HarnessConfig:
    """
    Load harness configuration.

    Configuration is merged in this order (later overrides earlier):
    1. Default values
    2. Global config (~/.patternbench/config.yaml)
    3. Project config (./.patternbench/config.yaml)
    4. Explicit config_path if provided
    5. Environment variables (PATTERNBENCH_*)

    Args:
        config_path: Optional explicit config file path

    Returns:
        Merged HarnessConfig instance
    """
    merged_config: Dict[str, Any] = {}

    config_paths = get_config_paths()
    if config_path:
        config_paths.append(Path(config_path))

    for path in config_paths:
        if path.exists():
            try:
                with open(path) as f:
                    file_config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {path}: {e}")
                continue

            if not isinstance(file_config, dict):
                logger.warning(f"Ignoring config {path}: expected a mapping")
                continue

            # Only merge the 'harness' section if present, otherwise the whole file
            merged_config.update(file_config.get(CONFIG_SECTION, file_config))
            logger.debug(f"Loaded config from {path}")

    merged_config.update(_get_env_overrides())

    return HarnessConfig(**merged_config)


def _get_env_overrides() -> Dict[str, Any]:
    """
    Get configuration overrides from environment variables.

    PATTERNBENCH_TIME_BUDGET_SECONDS=2 sets ``time_budget_seconds``.
    "none" clears a value; numbers are converted automatically.

    Returns:
        Dictionary of overrides
    """
    overrides: Dict[str, Any] = {}

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue

        config_key = key[len(ENV_PREFIX):].lower()
        if value.lower() in ("none", "null"):
            overrides[config_key] = None
            continue

        try:
            overrides[config_key] = int(value)
        except ValueError:
            try:
                overrides[config_key] = float(value)
            except ValueError:
                overrides[config_key] = value

    return overrides
