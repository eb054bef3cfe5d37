# File: utils/config_utils.py
# Description: Utility functions for loading and validating YAML configuration files.

import logging
import os  # Import OS for file handling

import yaml  # Import PyYAML for reading and parsing YAML files

logger = logging.getLogger(__name__)


class ConfigLoaderError(Exception):
    """
    Custom exception for errors encountered during configuration loading or validation.
    """
    pass


def load_config(config_file_path: str, default_config: dict = None) -> dict:
    """
    Load the configuration from a YAML file.

    Args:
        config_file_path (str): Path to the YAML configuration file.
        default_config (dict, optional): Default configuration to use if loading fails.

    Returns:
        dict: Parsed configuration dictionary.

    Raises:
        ConfigLoaderError: If the configuration file does not exist, fails to parse,
            or does not contain a mapping.
    """
    # Step 1: Check if the YAML file exists at the specified path
    if not os.path.exists(config_file_path):
        if default_config is not None:
            logger.warning(f"Config file '{config_file_path}' not found. Using default configuration.")
            return dict(default_config)
        raise ConfigLoaderError(f"Config file '{config_file_path}' not found.")

    # Step 2: Attempt to load the YAML file
    try:
        with open(config_file_path, "r") as config_file:
            config = yaml.safe_load(config_file)
    # Step 3: Catch YAML parsing errors and handle them
    except yaml.YAMLError as e:
        if default_config is not None:
            logger.warning(f"Error parsing YAML file '{config_file_path}': {e}. Using default configuration.")
            return dict(default_config)
        raise ConfigLoaderError(f"Error parsing YAML file '{config_file_path}': {e}")

    # An empty file parses to None
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigLoaderError(f"Config file '{config_file_path}' must contain a mapping.")
    return config


def validate_config(config: dict, required_keys: list) -> None:
    """
    Validate that required keys are present in the configuration dictionary.

    Args:
        config (dict): The configuration dictionary to validate.
        required_keys (list): A list of keys that must be present in the configuration.

    Raises:
        ConfigLoaderError: If any required keys are missing.
    """
    missing_keys = [key for key in required_keys if key not in config]
    if missing_keys:
        raise ConfigLoaderError(f"Missing required keys in configuration: {missing_keys}")
