# ============================================================================
# STATUS SOURCE BASE
# ============================================================================
# STATUS: Infrastructure - Database collaborator interface
# PURPOSE: What a prober needs from a database: one status query
# CREATED: 19 OCT 2026
# ============================================================================
"""
Status Source Base

A StatusSource runs the replication status query against one replica and
returns the column names plus the first row of raw values. Implementations
raise QueryError for any failure to execute the query; they never judge
health.
"""

from abc import ABC, abstractmethod

from core.models import StatusResult


class StatusSource(ABC):
    """
    Abstract database collaborator for one replica.

    Subclasses implement fetch_status(). Each call is one fresh round trip;
    implementations must not cache results.
    """

    @abstractmethod
    async def fetch_status(self) -> StatusResult:
        """
        Execute the status query.

        Returns:
            StatusResult (row is None when the query returned no rows)

        Raises:
            QueryError: If the query could not be executed
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the source."""
        return None
