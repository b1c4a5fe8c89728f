"""
Configuration model and loading.

This module provides the Pydantic model for a run's configuration, the
validating factory that reads it from action inputs and environment, and
.env layering for local runs.
"""

from .env import load_layered_env
from .loader import load_config, parse_repository
from .models import DEFAULT_API_URL, UpdaterConfig, parse_labels, redact_config

__all__ = [
    # Models
    "DEFAULT_API_URL",
    "UpdaterConfig",
    "parse_labels",
    "redact_config",
    # Loader functions
    "load_config",
    "load_layered_env",
    "parse_repository",
]
