from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration and an optional JSON settings 
file stored in the user data directory. Values from the file are merged 
over the defaults; command line flags are merged over both by the CLI.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from smartcat.domain.constants import DEFAULT_ENCODING, DEFAULT_OUTPUT_NAME
from smartcat.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO
        "root_path": "",
        "output_name": DEFAULT_OUTPUT_NAME,
        "encoding": DEFAULT_ENCODING,

        # Diagnostics
        "log_file": "",
        "report_dropped": True,
    }


def get_config_file_path() -> str:
    """Absolute path of the optional user settings file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the settings file and merge it over the defaults.

    A missing file is not an error. A corrupted file is logged and ignored.

    Args:
        path: Explicit settings file; defaults to the user data directory.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    config_path = path or get_config_file_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    config.update(data)
    return config
