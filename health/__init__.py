# ============================================================================
# HEALTH MODULE
# ============================================================================
# STATUS: Core - Replica health evaluation engine
# PURPOSE: Normalize replication status and decide replica health
# CREATED: 19 OCT 2026
# ============================================================================
"""
Health Module

Replica health evaluation engine:
- normalize: raw status record -> typed StatusRow
- evaluate: StatusRow + ReplicaSettings -> HealthVerdict
- ReplicaProber: one status query per call, normalized and evaluated

Usage:
    from health import ReplicaProber

    prober = ReplicaProber(settings, source)
    verdict = await prober.probe()
"""

from health.normalizer import normalize, normalize_value, parse_int64
from health.policy import (
    REASON_LAG_TOO_HIGH,
    REASON_NOT_RUNNING,
    evaluate,
    extract_lag,
)
from health.prober import ReplicaProber

__all__ = [
    # Normalizer
    "normalize",
    "normalize_value",
    "parse_int64",
    # Policy
    "REASON_LAG_TOO_HIGH",
    "REASON_NOT_RUNNING",
    "evaluate",
    "extract_lag",
    # Prober
    "ReplicaProber",
]
