"""
Configuration management for the lintface engine.

This module provides configuration loading with sensible defaults for rule
selection and logging.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging
import os

import yaml

logger = logging.getLogger(__name__)

CONFIG_NAMES = [".lintface.yml", ".lintface.yaml", "lintface.yml", "lintface.yaml"]


@dataclass
class EngineConfig:
    """Configuration for the lintface engine."""

    # Rule selection (fnmatch patterns on rule ids)
    enabled_rules: List[str] = field(default_factory=lambda: ["*"])
    disabled_rules: List[str] = field(default_factory=list)

    # Logging
    log_level: str = "WARNING"


def _defaults() -> Dict[str, Any]:
    return {
        "enabled_rules": ["*"],
        "disabled_rules": [],
        "log_level": "WARNING",
    }


def load_config(config_path: Optional[str] = None) -> EngineConfig:
    """
    Load configuration from file or use defaults.

    Unknown keys are ignored. A file that cannot be read or parsed is logged
    and the defaults are used instead.

    Args:
        config_path: Path to config file (YAML). If None, uses defaults.

    Returns:
        EngineConfig instance
    """
    merged = _defaults()

    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f) or {}
            if not isinstance(file_config, dict):
                raise ValueError("top-level YAML value must be a mapping")
        except (OSError, yaml.YAMLError, ValueError) as e:
            logger.warning("Failed to load config from %s: %s. Using default configuration.", config_path, e)
            return EngineConfig(**merged)

        for key in merged:
            if key in file_config:
                merged[key] = file_config[key]

        for key in ("enabled_rules", "disabled_rules"):
            if isinstance(merged[key], str):
                merged[key] = [merged[key]]
        merged["log_level"] = str(merged["log_level"]).upper()

    return EngineConfig(**merged)


def get_default_config() -> EngineConfig:
    """Get default configuration without loading from file."""
    return load_config(None)


def find_config_file(start_path: str = ".") -> Optional[str]:
    """
    Find configuration file by walking up the directory tree.

    Looks for files in this order:
    1. .lintface.yml
    2. .lintface.yaml
    3. lintface.yml
    4. lintface.yaml

    Args:
        start_path: Directory to start searching from

    Returns:
        Path to config file or None if not found
    """
    current_path = os.path.abspath(start_path)

    while True:
        for config_name in CONFIG_NAMES:
            config_path = os.path.join(current_path, config_name)
            if os.path.exists(config_path):
                return config_path

        parent_path = os.path.dirname(current_path)
        if parent_path == current_path:
            # Reached the root directory
            break
        current_path = parent_path

    return None
