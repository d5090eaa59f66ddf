# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Export models, errors and configuration
# CREATED: 19 OCT 2026
# ============================================================================

from core.errors import (
    AgentError,
    ConfigError,
    ListenerFatalError,
    NoStatusError,
    ProbeError,
    QueryError,
)
from core.models import (
    HealthVerdict,
    IntegerValue,
    ListenerState,
    ReplicaSettings,
    StatusResult,
    StatusRow,
    TextValue,
)

__all__ = [
    # Errors
    "AgentError",
    "ConfigError",
    "ListenerFatalError",
    "NoStatusError",
    "ProbeError",
    "QueryError",
    # Models
    "HealthVerdict",
    "IntegerValue",
    "ListenerState",
    "ReplicaSettings",
    "StatusResult",
    "StatusRow",
    "TextValue",
]
