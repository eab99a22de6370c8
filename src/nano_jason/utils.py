import sys
import os
import json
import logging
from typing import Any, Dict, List
from loguru import logger

from .exceptions import ConfigurationError

CONFIG_SCHEMA = {
    "mode": str,
    "seed": (int, type(None)),
    "log_level": str,
    "output_dir": str,
    "indent": int,
}


def setup_logging(level="INFO"):
    logger.remove()
    logger.add(sys.stderr, level=level)
    # Pipeline modules log through the standard library
    logging.basicConfig(level=level, format='%(asctime)s | %(levelname)s | %(message)s')


def load_config(file_path: str) -> Dict[str, Any]:
    """
    Loads and validates a JSON configuration file.
    Only the keys in CONFIG_SCHEMA are accepted; every key is optional.
    """
    logger.info(f"Loading configuration from {file_path}")
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Failed to parse JSON config file: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read config file: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError("Invalid configuration file. Top level must be a JSON object.")

    unknown_keys = [key for key in config_data if key not in CONFIG_SCHEMA]
    if unknown_keys:
        raise ConfigurationError(f"Invalid configuration file. Unknown keys: {', '.join(unknown_keys)}", config_key=unknown_keys[0])

    for key, expected in CONFIG_SCHEMA.items():
        if key not in config_data:
            continue
        value = config_data[key]
        # bool is an int subclass; reject it for numeric keys
        if isinstance(value, bool) or not isinstance(value, expected):
            raise ConfigurationError(f"Invalid configuration file. '{key}' has the wrong type.", config_key=key)

    return config_data


def read_batch_file(file_path: str) -> List[str]:
    """One prompt per line; blank lines and lines starting with '#' are skipped."""
    if not file_path or not os.path.exists(file_path):
        raise ConfigurationError(f"Batch file not found: {file_path}", config_key="batch")

    with open(file_path, 'r', encoding='utf-8') as f:
        lines = [line.strip() for line in f]
    return [line for line in lines if line and not line.startswith('#')]
