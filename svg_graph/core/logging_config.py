"""Centralized logging configuration for svg_graph.

Configures structured JSON logging for machine consumption
and human-readable logging for CLI usage.
"""

import copy
import logging
import logging.config
from pathlib import Path
from typing import Any


# Default logging configuration
LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
        "console": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "console",
            "stream": "ext://sys.stderr",
        },
        "json_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "json",
            "filename": "logs/svg_graph.log",
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        },
    },
    "loggers": {
        "svg_graph": {
            "level": "DEBUG",
            "handlers": ["console", "json_file"],
            "propagate": False,
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def setup_logging(
    json_output: bool = False,
    log_level: str = "INFO",
    log_dir: Path | None = None,
) -> None:
    """Configure logging for the application.

    Args:
        json_output: If True, use JSON formatter for console output
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the rotating JSON log file (default: ./logs)
    """
    log_dir = log_dir or Path("logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    config = copy.deepcopy(LOGGING_CONFIG)
    config["handlers"]["json_file"]["filename"] = str(log_dir / "svg_graph.log")

    # Override console formatter if JSON output requested
    if json_output:
        config["handlers"]["console"]["formatter"] = "json"

    # Override log level if specified
    if log_level:
        config["handlers"]["console"]["level"] = log_level
        config["loggers"]["svg_graph"]["level"] = log_level

    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Rendered graph", extra={"variant": "pie", "fields": 3})
    """
    return logging.getLogger(name)
