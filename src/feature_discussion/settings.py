"""
Feature Discussion Configuration

Defaults, overridden by the packaged config/config.yaml, overridden by
FEATURE_DISCUSSION_<SECTION>_<KEY> environment variables.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger("feature-discussion-server")

CONFIG_PATH = Path(__file__).parent / "config" / "config.yaml"
ENV_PREFIX = "FEATURE_DISCUSSION"

DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "server": {
        "name": "feature-discussion",
        "log_level": "INFO",
    },
    "discussion": {
        "id_prefix": "f",
    },
}


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from config.yaml, with env var overrides."""
    config_path = config_path or CONFIG_PATH
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path.exists():
        try:
            with open(config_path, "r") as f:
                file_config = yaml.safe_load(f)
            if file_config:
                for section, values in file_config.items():
                    if section in config and isinstance(values, dict):
                        config[section].update(values)
                    else:
                        config[section] = values
            logger.info(f"Loaded config from {config_path}")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load {config_path}: {e}, using defaults")

    # e.g. FEATURE_DISCUSSION_SERVER_LOG_LEVEL=DEBUG
    for section, values in config.items():
        if not isinstance(values, dict):
            continue
        for key, default in values.items():
            env_key = f"{ENV_PREFIX}_{section.upper()}_{key.upper()}"
            env_val = os.getenv(env_key)
            if not env_val:
                continue
            try:
                if isinstance(default, bool):
                    config[section][key] = env_val.lower() in ("1", "true", "yes")
                elif isinstance(default, int):
                    config[section][key] = int(env_val)
                elif isinstance(default, float):
                    config[section][key] = float(env_val)
                else:
                    config[section][key] = env_val
                logger.info(f"Config override: {env_key}={env_val}")
            except ValueError:
                logger.warning(f"Ignoring {env_key}={env_val}: expected {type(default).__name__}")

    return config
