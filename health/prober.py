# ============================================================================
# REPLICA PROBER
# ============================================================================
# STATUS: Core - One on-demand replica status check
# PURPOSE: Query, normalize and evaluate a single replica
# CREATED: 19 OCT 2026
# ============================================================================
"""
Replica Prober

probe() performs exactly one status query per call:

    StatusSource.fetch_status()  ->  normalize()  ->  evaluate()

Outcomes:
- QueryError: the query itself failed (connectivity, auth, syntax) or the
  driver returned a row whose value count does not match its columns
- NoStatusError: zero rows, the server is not configured as a replica
- HealthVerdict: one row evaluated; may be unhealthy, which is a successful
  probe with a negative verdict

No caching and no retries. A failed probe changes no state.
"""

import logging

from core.errors import NoStatusError, ProbeError, QueryError
from core.models import HealthVerdict, ReplicaSettings
from health.normalizer import normalize
from health.policy import evaluate
from infrastructure.base import StatusSource

logger = logging.getLogger(__name__)


class ReplicaProber:
    """
    Runs probes for one replica.

    Owned by exactly one endpoint; the source is never shared between
    replicas.
    """

    def __init__(self, settings: ReplicaSettings, source: StatusSource):
        self.settings = settings
        self.source = source

    async def probe(self) -> HealthVerdict:
        """
        Probe the replica once.

        Returns:
            HealthVerdict for the single status row

        Raises:
            QueryError: If the status query failed or returned a malformed row
            NoStatusError: If the status query returned no rows
        """
        try:
            result = await self.source.fetch_status()
        except ProbeError:
            raise
        except Exception as e:
            raise QueryError(str(e) or type(e).__name__) from e

        if result.empty:
            raise NoStatusError(self.settings.name)

        if len(result.columns) != len(result.row):
            raise QueryError(
                f"malformed status row: {len(result.columns)} columns, "
                f"{len(result.row)} values"
            )

        row = normalize(result.columns, result.row)
        verdict = evaluate(row, self.settings)

        if not verdict.healthy:
            logger.debug(f"Replica {self.settings.name} unhealthy: {verdict.reason}")

        return verdict


__all__ = [
    "ReplicaProber",
]
