# ============================================================================
# SHARED TEST FIXTURES
# ============================================================================
# STATUS: Tests - Fakes shared across test modules
# PURPOSE: In-memory status source and replica settings factories
# CREATED: 19 OCT 2026
# ============================================================================

import asyncio
import socket
from typing import List, Optional, Sequence

import pytest

from core.config.defaults import HealthcheckDefaults
from core.models import ReplicaSettings, StatusResult
from infrastructure.base import StatusSource


class FakeStatusSource(StatusSource):
    """
    Status source returning a canned result.

    row=None simulates a query that returned zero rows.
    """

    def __init__(
        self,
        columns: Sequence[str] = ("Seconds_Behind_Source",),
        row: Optional[Sequence] = ("0",),
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ):
        self.columns = list(columns)
        self.row = None if row is None else list(row)
        self.error = error
        self.delay = delay
        self.calls = 0
        self.closed = False

    async def fetch_status(self) -> StatusResult:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return StatusResult(columns=list(self.columns), row=self.row)

    async def close(self) -> None:
        self.closed = True


def free_port() -> int:
    """Ask the OS for a currently unused TCP port on loopback."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def make_settings():
    """Factory for ReplicaSettings with test-friendly defaults."""
    def _make(
        name: str = "replica1",
        max_allowed_lag_seconds: int = 10,
        fail_if_not_replicating: bool = False,
        healthcheck_port: int = 8080,
        healthcheck_path: str = "/",
    ) -> ReplicaSettings:
        return ReplicaSettings(
            name=name,
            host="127.0.0.1",
            port=3306,
            user="healthcheck",
            password="secret",
            max_allowed_lag_seconds=max_allowed_lag_seconds,
            fail_if_not_replicating=fail_if_not_replicating,
            healthcheck_port=healthcheck_port,
            healthcheck_path=healthcheck_path,
        )
    return _make


@pytest.fixture
def local_defaults() -> HealthcheckDefaults:
    """Loopback-only listeners with short timeouts."""
    return HealthcheckDefaults(
        listen_host="127.0.0.1",
        read_timeout_seconds=2.0,
        shutdown_grace_seconds=1.0,
    )


@pytest.fixture
def ports() -> List[int]:
    """Two distinct free loopback ports."""
    first = free_port()
    second = free_port()
    while second == first:
        second = free_port()
    return [first, second]
