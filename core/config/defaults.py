# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Default configuration values
# PURPOSE: Listener timeouts, shutdown grace and status query defaults
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Process-wide defaults that are not part of any one replica's settings.
These can be overridden via environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_CONFIG_PATH = "/etc/mysql-replica-healthcheck-agent/replicas.yml"
STATUS_QUERY = "SHOW REPLICA STATUS"
LAG_COLUMN = "Seconds_Behind_Source"


@dataclass(frozen=True)
class HealthcheckDefaults:
    """
    Defaults shared by every replica listener.

    read_timeout_seconds bounds one request end to end, including the
    database round trip. shutdown_grace_seconds bounds how long a listener
    waits for in-flight requests once shutdown begins.
    """
    listen_host: str = "0.0.0.0"
    read_timeout_seconds: float = 10.0
    shutdown_grace_seconds: float = 5.0
    status_query: str = STATUS_QUERY
    config_path: str = DEFAULT_CONFIG_PATH

    @classmethod
    def from_env(cls) -> "HealthcheckDefaults":
        """Create from environment variables."""
        return cls(
            listen_host=os.getenv("HEALTHCHECK_LISTEN_HOST", "0.0.0.0"),
            read_timeout_seconds=float(os.getenv("HEALTHCHECK_READ_TIMEOUT", 10.0)),
            shutdown_grace_seconds=float(os.getenv("HEALTHCHECK_SHUTDOWN_GRACE", 5.0)),
            status_query=os.getenv("HEALTHCHECK_STATUS_QUERY", STATUS_QUERY),
            config_path=os.getenv("HEALTHCHECK_CONFIG", DEFAULT_CONFIG_PATH),
        )


_defaults: Optional[HealthcheckDefaults] = None


def get_defaults() -> HealthcheckDefaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = HealthcheckDefaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "STATUS_QUERY",
    "LAG_COLUMN",
    "HealthcheckDefaults",
    "get_defaults",
    "reset_defaults",
]
