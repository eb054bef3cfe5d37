# File: config/table_config.py
# Resolves the construction parameters of the hash table from config/hash_table.yaml,
# with optional overrides from environment variables or a config/.env file.

import logging  # Import logging to record where settings came from
import os  # Import os for accessing environment variables
from pathlib import Path  # Import Path for managing filesystem paths
from typing import Optional

from dotenv import dotenv_values  # Reads a .env file without touching os.environ
from pydantic import BaseModel, Field, ValidationError

from utils.config_utils import ConfigLoaderError, load_config, validate_config
from utils.data_structures.hash_table import (
    DEFAULT_CAPACITY,
    DEFAULT_LOAD_FACTOR_THRESHOLD,
    HashTable,
)

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent
DEFAULT_CONFIG_PATH = CONFIG_DIR / "hash_table.yaml"
DEFAULT_ENV_PATH = CONFIG_DIR / ".env"

# Environment variable -> settings field
ENV_OVERRIDES = {
    "HASH_TABLE_CAPACITY": "capacity",
    "HASH_TABLE_LOAD_FACTOR_THRESHOLD": "load_factor_threshold",
}

REQUIRED_KEYS = ["capacity", "load_factor_threshold"]


class TableSettings(BaseModel):
    """
    Pydantic model for validating hash table construction parameters.

    Attributes:
        capacity: Initial number of buckets.
        load_factor_threshold: Load factor at which the table grows.
    """
    capacity: int = Field(default=DEFAULT_CAPACITY, gt=0)
    load_factor_threshold: float = Field(default=DEFAULT_LOAD_FACTOR_THRESHOLD, gt=0, le=1)


def load_table_settings(config_path: Optional[str] = None,
                        env_path: Optional[str] = None) -> TableSettings:
    """
    Load table settings from YAML, then apply environment overrides.

    Environment variables take precedence over values from the .env file,
    which take precedence over the YAML file.

    Args:
        config_path: Path to a YAML settings file. Defaults to config/hash_table.yaml.
        env_path: Path to a .env file. Defaults to config/.env (ignored if missing).

    Returns:
        TableSettings: The validated settings.

    Raises:
        ConfigLoaderError: If the YAML file is invalid or a value fails validation.
    """
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    env_path = Path(env_path) if env_path else DEFAULT_ENV_PATH

    defaults = TableSettings().model_dump()
    config = load_config(str(config_path), default_config=defaults)
    validate_config(config, REQUIRED_KEYS)

    env_file_values = dotenv_values(env_path) if env_path.exists() else {}
    for variable, field in ENV_OVERRIDES.items():
        value = os.environ.get(variable, env_file_values.get(variable))
        if value is not None:
            logger.info(f"Overriding {field} from {variable}.")
            config[field] = value

    try:
        settings = TableSettings(**{key: config[key] for key in REQUIRED_KEYS})
    except ValidationError as e:
        logger.error(f"Invalid hash table settings: {e}")
        raise ConfigLoaderError(f"Invalid hash table settings: {e}") from e

    logger.info(f"Loaded table settings: capacity={settings.capacity}, "
                f"load_factor_threshold={settings.load_factor_threshold}")
    return settings


def create_table(settings: Optional[TableSettings] = None) -> HashTable:
    """
    Build an empty HashTable from settings, loading them if none are given.
    """
    if settings is None:
        settings = load_table_settings()
    return HashTable(settings.capacity, settings.load_factor_threshold)
