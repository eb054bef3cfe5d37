# File: config/logger_config.py
# Centralized logging configuration for the book hash table project.
# Provides a function that configures a named logger with console and/or rotating file output.

import logging  # Provides logging functionality
import os  # For handling file system paths and directories
from logging.handlers import RotatingFileHandler  # For managing rotating log files
from typing import Optional  # For optional type hinting

# Log message format shared by every handler
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Timestamp format used inside LOG_FORMAT
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
# Default directory for log files, relative to the project root
DEFAULT_LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs")

VALID_OUTPUTS = {"file", "console", "both"}


def configure_logger(
    name: Optional[str] = None,  # The name of the logger; None defaults to the root logger
    log_dir: str = DEFAULT_LOG_DIR,  # Directory where log files will be stored
    log_file: str = "hash_table.log",  # Name of the log file
    level: int = logging.INFO,  # Logging level (e.g., DEBUG, INFO, WARNING, ERROR)
    max_bytes: int = 10 * 1024 * 1024,  # Maximum size of a log file before rotation (default: 10 MB)
    backup_count: int = 5,  # Number of backup files to keep during log rotation
    output: str = "both",  # Where to output logs: "file", "console", or "both"
) -> logging.Logger:
    """
    Configures and returns a logger instance.

    Args:
        name (Optional[str]): Name of the logger. If None, the root logger is used.
        log_dir (str): Directory to store log files.
        log_file (str): Name of the log file.
        level (int): Logging level (e.g., logging.INFO, logging.DEBUG).
        max_bytes (int): Maximum size of the log file before rotation.
        backup_count (int): Number of backup files to keep during rotation.
        output (str): Where to send logs: "file", "console", or "both".

    Returns:
        logging.Logger: Configured logger instance.

    Raises:
        ValueError: If output is not one of "file", "console" or "both".
        RuntimeError: If a handler or the log directory cannot be set up.
    """
    if output not in VALID_OUTPUTS:
        raise ValueError(f"Invalid logger output '{output}'. Expected one of {sorted(VALID_OUTPUTS)}.")

    try:
        # Create or retrieve the logger instance with the specified name
        logger = logging.getLogger(name)

        # Set the logging level for the logger
        logger.setLevel(level)

        # Check if the logger already has handlers to prevent duplicate logs
        if not logger.handlers:
            formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

            # If output includes file logging, configure a rotating file handler
            if output in {"file", "both"}:
                # Ensure the logs directory exists; create it if it does not
                os.makedirs(log_dir, exist_ok=True)
                log_path = os.path.join(log_dir, log_file)
                try:
                    file_handler = RotatingFileHandler(
                        log_path, maxBytes=max_bytes, backupCount=backup_count
                    )
                    file_handler.setLevel(level)
                    file_handler.setFormatter(formatter)
                    logger.addHandler(file_handler)
                except Exception as e:  # Catch unexpected errors during file handler setup
                    raise RuntimeError(
                        f"Failed to configure file handler for logger: {e}"
                    ) from e

            # If output includes console logging, configure a stream handler
            if output in {"console", "both"}:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(level)
                console_handler.setFormatter(formatter)
                logger.addHandler(console_handler)

        return logger

    except OSError as e:  # Handle issues with creating log directories or files
        raise RuntimeError(
            f"Failed to create or access log directory: {e}"
        ) from e
