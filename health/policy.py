# ============================================================================
# HEALTH POLICY EVALUATOR
# ============================================================================
# STATUS: Core - Replica health decision
# PURPOSE: Turn a normalized status row into a healthy/unhealthy verdict
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Policy Evaluator

Rules, first match wins:

1. Lag column missing or not an integer (NULL lag means the SQL thread is
   stopped):
   - fail_if_not_replicating -> unhealthy "replica is not running"
   - otherwise -> healthy
2. Lag threshold configured and lag above it -> unhealthy
   "replication lag is too high"
3. Otherwise -> healthy

A replica that returned no status row never reaches this module; the
prober raises NoStatusError first.
"""

from typing import Optional

from core.config.defaults import LAG_COLUMN
from core.models import HealthVerdict, IntegerValue, ReplicaSettings, StatusRow

REASON_NOT_RUNNING = "replica is not running"
REASON_LAG_TOO_HIGH = "replication lag is too high"


def extract_lag(row: StatusRow, column: str = LAG_COLUMN) -> Optional[int]:
    """Return the lag in seconds, or None when absent or non-numeric."""
    value = row.get(column)
    if isinstance(value, IntegerValue):
        return value.value
    return None


def evaluate(row: StatusRow, settings: ReplicaSettings) -> HealthVerdict:
    """
    Evaluate one status row against a replica's policy.

    Args:
        row: Normalized status row
        settings: Replica policy settings

    Returns:
        HealthVerdict carrying the row and, when unhealthy, the reason
    """
    lag = extract_lag(row)

    if lag is None:
        if settings.fail_if_not_replicating:
            return HealthVerdict.failed(REASON_NOT_RUNNING, row)
        return HealthVerdict.ok(row)

    if settings.lag_check_enabled and lag > settings.max_allowed_lag_seconds:
        return HealthVerdict.failed(REASON_LAG_TOO_HIGH, row)

    return HealthVerdict.ok(row)


__all__ = [
    "REASON_NOT_RUNNING",
    "REASON_LAG_TOO_HIGH",
    "extract_lag",
    "evaluate",
]
