# ============================================================================
# MYSQL STATUS SOURCE
# ============================================================================
# STATUS: Infrastructure - MySQL replica connectivity
# PURPOSE: Run SHOW REPLICA STATUS against one replica
# CREATED: 19 OCT 2026
# ============================================================================
"""
MySQL Status Source

Runs the replication status query against a single MySQL replica:
- Fresh connection per probe (no pooling, no caching)
- Connect/read timeouts bounded by the listener read timeout
- Values returned as the server sent them (no driver-side type conversion)

PyMySQL is blocking, so fetch_status() runs it on a thread pool owned by
this source. Each replica gets its own pool: a replica that hangs on connect
can only exhaust its own workers, never another replica's.

Usage:
    source = MySQLStatusSource(settings)
    result = await source.fetch_status()
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Optional

import pymysql

from core.config.defaults import STATUS_QUERY
from core.errors import QueryError
from core.models import ReplicaSettings, StatusResult
from infrastructure.base import StatusSource

logger = logging.getLogger(__name__)

# Worker threads per replica; bounds concurrent connections to one server
DEFAULT_MAX_WORKERS = 4

# Empty converter map: PyMySQL hands back decoded text (or None for NULL)
_RAW_CONVERSIONS: dict = {}


class MySQLStatusSource(StatusSource):
    """
    Status source for one MySQL replica.

    Attributes:
        settings: Replica connection settings
        timeout_seconds: Connect and read timeout for each probe
        query: Status query to run
        max_workers: Size of this source's private thread pool
    """

    def __init__(
        self,
        settings: ReplicaSettings,
        timeout_seconds: float = 10.0,
        query: str = STATUS_QUERY,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        self.settings = settings
        self.timeout_seconds = timeout_seconds
        self.query = query
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=f"mysql-{settings.name}",
        )

    @contextmanager
    def get_connection(self):
        """
        Context manager for a replica connection.

        Yields:
            PyMySQL connection, closed on exit
        """
        conn = None
        try:
            logger.debug(f"Connecting to replica {self.settings.name} at {self.settings.address}")
            conn = pymysql.connect(
                host=self.settings.host,
                port=self.settings.port,
                user=self.settings.user,
                password=self.settings.password,
                connect_timeout=self.timeout_seconds,
                read_timeout=self.timeout_seconds,
                write_timeout=self.timeout_seconds,
                conv=_RAW_CONVERSIONS,
                autocommit=True,
            )
            yield conn
        finally:
            if conn:
                conn.close()

    def fetch_status_sync(self) -> StatusResult:
        """Blocking variant of fetch_status()."""
        try:
            with self.get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(self.query)
                    columns = [desc[0] for desc in (cur.description or ())]
                    row = cur.fetchone()
        except pymysql.MySQLError as e:
            logger.debug(f"Status query failed for {self.settings.name}: {e}")
            raise QueryError(_describe(e)) from e
        except OSError as e:
            raise QueryError(str(e)) from e

        return StatusResult(columns=columns, row=None if row is None else list(row))

    async def fetch_status(self) -> StatusResult:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self.fetch_status_sync)

    async def close(self) -> None:
        """
        Release the thread pool.

        Queued probes are cancelled. Threads stuck in a connect are not
        joined; they exit once the driver timeout fires.
        """
        self._executor.shutdown(wait=False, cancel_futures=True)


def _describe(error: pymysql.MySQLError) -> str:
    """Render a driver error as 'Error <code>: <message>' when it has a code."""
    args = getattr(error, "args", ())
    if len(args) >= 2 and isinstance(args[0], int):
        return f"Error {args[0]}: {args[1]}"
    return str(error) or type(error).__name__


def create_status_source(
    settings: ReplicaSettings,
    timeout_seconds: Optional[float] = None,
    query: Optional[str] = None,
) -> MySQLStatusSource:
    """Build the default status source for a replica."""
    kwargs = {}
    if timeout_seconds is not None:
        kwargs["timeout_seconds"] = timeout_seconds
    if query is not None:
        kwargs["query"] = query
    return MySQLStatusSource(settings, **kwargs)


__all__ = [
    "DEFAULT_MAX_WORKERS",
    "MySQLStatusSource",
    "create_status_source",
]
