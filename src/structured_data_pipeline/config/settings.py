"""
Application settings and configuration.

This module provides centralized configuration to avoid circular imports.
Values come from the environment; the CLI loads ``.env`` before importing it.
"""

import os

# Module-level constants
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_SPEC_PATH = os.path.join(BASE_DIR, "config", "pipeline.yml")
SPEC_PATH = os.getenv("DM_STRUCTURED_DATA_PIPELINE_SPEC", DEFAULT_SPEC_PATH)

# Option names in the host's key-value settings store
PIPELINE_ID_OPTION = "dm_structured_data_pipeline_id"
FLOW_ID_OPTION = "dm_structured_data_flow_id"

# Option storage backend
REDIS_URL = os.getenv("DM_STRUCTURED_DATA_REDIS_URL")
OPTION_PREFIX = os.getenv("DM_STRUCTURED_DATA_OPTION_PREFIX", "wp_options:")
