"""
Logging configuration for the structured data pipeline registrar.

Sets up PEP 282-compliant logging with regular records on stdout and errors
on stderr, so the host process collects both streams.

Usage:
    Import this module at the entry point of your application (e.g., main.py)
    before any other imports that use logging.
"""

import logging
import logging.config
import os
import sys

# --- Log Level Setup ---
LOG_LEVEL = os.getenv("DM_STRUCTURED_DATA_LOG_LEVEL", "INFO").upper()


# --- Logging Configuration Dictionary ---
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "detailed": {
            "format": "%(asctime)s [%(levelname)s] [%(name)s:%(funcName)s:%(lineno)d] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "level": LOG_LEVEL,
            "class": "logging.StreamHandler",
            "stream": sys.stdout,
            "formatter": "standard",
        },
        "error_console": {
            "level": "ERROR",
            "class": "logging.StreamHandler",
            "stream": sys.stderr,
            "formatter": "detailed",
        },
    },
    "loggers": {
        "structured_data_pipeline": {
            "handlers": ["console", "error_console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "structured_data_pipeline.services": {
            "handlers": ["console", "error_console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "structured_data_pipeline.models": {
            "handlers": ["console", "error_console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        # Redis client - only surface problems
        "redis": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
    "root": {
        "handlers": ["console", "error_console"],
        "level": "INFO",
    },
}


# --- Apply Logging Configuration ---
logging.config.dictConfig(LOGGING_CONFIG)
