# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Replica file loading and process-wide defaults
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Replica settings come from the replicas YAML file; listener timeouts and
the status query come from environment-backed defaults.
"""

from core.config.defaults import (
    DEFAULT_CONFIG_PATH,
    LAG_COLUMN,
    STATUS_QUERY,
    HealthcheckDefaults,
    get_defaults,
    reset_defaults,
)
from core.config.loader import load_config, parse_config

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "LAG_COLUMN",
    "STATUS_QUERY",
    "HealthcheckDefaults",
    "get_defaults",
    "reset_defaults",
    "load_config",
    "parse_config",
]
