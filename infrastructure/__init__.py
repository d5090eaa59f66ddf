# ============================================================================
# INFRASTRUCTURE MODULE
# ============================================================================
# STATUS: Infrastructure - Database connectivity
# PURPOSE: Status sources that run the replication status query
# CREATED: 19 OCT 2026
# ============================================================================
"""
Infrastructure module for the replica healthcheck agent.

Provides:
- StatusSource: Abstract database collaborator used by the prober
- MySQLStatusSource: PyMySQL implementation (fresh connection per probe)

Usage:
    from infrastructure import create_status_source

    source = create_status_source(settings, timeout_seconds=10.0)
    result = await source.fetch_status()
"""

from infrastructure.base import StatusSource
from infrastructure.mysql import MySQLStatusSource, create_status_source

__all__ = [
    "StatusSource",
    "MySQLStatusSource",
    "create_status_source",
]
