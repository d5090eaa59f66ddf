# ============================================================================
# REPLICA SETTINGS MODEL
# ============================================================================
# STATUS: Core - Immutable per-replica settings
# PURPOSE: Connection, policy and listener settings for one replica
# CREATED: 19 OCT 2026
# ============================================================================
"""
Replica Settings Model

One ReplicaSettings per configured replica. Built by the config loader and
handed to exactly one endpoint; never mutated after load.
"""

from dataclasses import dataclass, field


DEFAULT_MYSQL_PORT = 3306
DEFAULT_HEALTHCHECK_PATH = "/"


@dataclass(frozen=True)
class ReplicaSettings:
    """
    Settings for a single replica.

    Attributes:
        name: Unique replica name, used as listener identity in logs
        host: MySQL host of the replica
        port: MySQL port of the replica
        user: MySQL user allowed to run SHOW REPLICA STATUS
        password: Password for user (hidden from repr)
        max_allowed_lag_seconds: Lag threshold, 0 disables the lag check
        fail_if_not_replicating: Fail when the lag column is missing or NULL
        healthcheck_port: Port the HTTP listener binds (must be > 0)
        healthcheck_path: Path served by the listener
    """
    name: str
    host: str = "127.0.0.1"
    port: int = DEFAULT_MYSQL_PORT
    user: str = ""
    password: str = field(default="", repr=False)
    max_allowed_lag_seconds: int = 0
    fail_if_not_replicating: bool = False
    healthcheck_port: int = 0
    healthcheck_path: str = DEFAULT_HEALTHCHECK_PATH

    @property
    def lag_check_enabled(self) -> bool:
        """True when a lag threshold is configured."""
        return self.max_allowed_lag_seconds > 0

    @property
    def address(self) -> str:
        """host:port of the replica, for log lines."""
        return f"{self.host}:{self.port}"
