# ============================================================================
# MODELS MODULE
# ============================================================================
# STATUS: Model exports
# PURPOSE: Central export point for replica and status models
# CREATED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point
"""

from core.models.replica import ReplicaSettings, DEFAULT_HEALTHCHECK_PATH, DEFAULT_MYSQL_PORT
from core.models.status import (
    ColumnValue,
    HealthVerdict,
    IntegerValue,
    StatusResult,
    StatusRow,
    TextValue,
)
from core.models.listener import ListenerState

__all__ = [
    # Replica
    "ReplicaSettings",
    "DEFAULT_HEALTHCHECK_PATH",
    "DEFAULT_MYSQL_PORT",
    # Status
    "ColumnValue",
    "IntegerValue",
    "TextValue",
    "StatusRow",
    "StatusResult",
    "HealthVerdict",
    # Listener
    "ListenerState",
]
