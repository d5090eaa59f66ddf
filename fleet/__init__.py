# ============================================================================
# FLEET MODULE
# ============================================================================
# STATUS: Core - Multi-listener lifecycle
# PURPOSE: One HTTP listener per replica, started and stopped together
# CREATED: 19 OCT 2026
# ============================================================================
"""
Fleet Module

- ReplicaEndpoint: aiohttp listener serving one replica's health
- FleetManager: starts every endpoint, watches for signals or failures,
  and shuts the whole fleet down together

Usage:
    from fleet import FleetManager

    exit_code = await FleetManager(settings).run()
"""

from fleet.endpoint import ReplicaEndpoint
from fleet.manager import (
    EXIT_CONFIG_ERROR,
    EXIT_LISTENER_FAILED,
    EXIT_OK,
    FleetManager,
    validate_settings,
)

__all__ = [
    "ReplicaEndpoint",
    "FleetManager",
    "validate_settings",
    "EXIT_OK",
    "EXIT_LISTENER_FAILED",
    "EXIT_CONFIG_ERROR",
]
