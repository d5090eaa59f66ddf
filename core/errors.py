# ============================================================================
# ERROR TAXONOMY
# ============================================================================
# STATUS: Foundation - Exceptions shared by all components
# PURPOSE: Separate process-scoped failures from request-scoped failures
# CREATED: 19 OCT 2026
# ============================================================================
"""
Agent Errors

Two scopes of failure:

Process-scoped (terminate the whole agent):
- ConfigError: configuration missing or invalid, raised before anything binds
- ListenerFatalError: a listener failed outside of a requested shutdown

Request-scoped (reported to one HTTP caller, never escape the endpoint):
- QueryError: the status query could not be executed
- NoStatusError: the status query returned no rows

An unhealthy verdict is not an exception; see core.models.status.HealthVerdict.
"""

from typing import Optional


class AgentError(Exception):
    """Base exception for the healthcheck agent."""
    pass


# ============================================================================
# PROCESS-SCOPED
# ============================================================================

class ConfigError(AgentError):
    """Raised when replica configuration is missing or invalid."""

    def __init__(self, message: str, replica: Optional[str] = None, field: Optional[str] = None):
        self.replica = replica
        self.field = field
        super().__init__(message)


class ListenerFatalError(AgentError):
    """Raised when a replica listener fails to bind or crashes."""

    def __init__(self, replica: str, cause: BaseException):
        self.replica = replica
        self.cause = cause
        super().__init__(f"server {replica} failed: {cause}")


# ============================================================================
# REQUEST-SCOPED
# ============================================================================

class ProbeError(AgentError):
    """Base exception for a probe that produced no verdict."""
    pass


class QueryError(ProbeError):
    """Raised when the replication status query fails."""
    pass


class NoStatusError(ProbeError):
    """Raised when the status query returns zero rows."""

    def __init__(self, replica: Optional[str] = None):
        self.replica = replica
        super().__init__("no replica status: replica is not running as a replica")


__all__ = [
    "AgentError",
    "ConfigError",
    "ListenerFatalError",
    "ProbeError",
    "QueryError",
    "NoStatusError",
]
