# ============================================================================
# FLEET LIFECYCLE MANAGER
# ============================================================================
# STATUS: Core - Start and stop every replica listener as one unit
# PURPOSE: One listener task per replica joined on a shared cancellation event
# CREATED: 19 OCT 2026
# ============================================================================
"""
Fleet Lifecycle Manager

Runs one ReplicaEndpoint per configured replica inside a single event loop:

1. validate()  - every replica has a listen port (before anything binds)
2. start       - one listener task per replica, all started concurrently
3. serve       - until SIGINT/SIGTERM, request_shutdown(), or the first
                 listener failure (which brings down the whole fleet)
4. shutdown    - every listener drains and stops; all are awaited

Exit codes returned by run():
    0 - clean shutdown
    1 - a listener failed (first failure is reported)
    2 - configuration error, nothing was started
"""

import asyncio
import signal
from typing import Callable, List, Optional, Sequence

from core.config.defaults import HealthcheckDefaults, get_defaults
from core.errors import ConfigError, ListenerFatalError
from core.logging import ComponentType, get_logger
from core.models import ReplicaSettings
from fleet.endpoint import ReplicaEndpoint
from health.prober import ReplicaProber
from infrastructure.base import StatusSource
from infrastructure.mysql import create_status_source

logger = get_logger(__name__, ComponentType.FLEET)

EXIT_OK = 0
EXIT_LISTENER_FAILED = 1
EXIT_CONFIG_ERROR = 2

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)

SourceFactory = Callable[[ReplicaSettings, HealthcheckDefaults], StatusSource]


def default_source_factory(settings: ReplicaSettings, defaults: HealthcheckDefaults) -> StatusSource:
    """MySQL status source bounded by the listener read timeout."""
    return create_status_source(
        settings,
        timeout_seconds=defaults.read_timeout_seconds,
        query=defaults.status_query,
    )


def validate_settings(settings: Sequence[ReplicaSettings]) -> None:
    """
    Validate the fleet before binding anything.

    Raises:
        ConfigError: If no replicas are configured or one lacks a listen port
    """
    if not settings:
        raise ConfigError("no replicas configured")

    for replica in settings:
        if not replica.healthcheck_port or replica.healthcheck_port <= 0:
            raise ConfigError(
                f"port not specified for {replica.name}",
                replica=replica.name,
                field="healthcheck_config.port",
            )


class FleetManager:
    """
    Owns every replica endpoint for the lifetime of the process.

    The endpoint list is built once in run() and never changes afterwards.
    The only state shared between listener tasks is the cancellation event
    and the first fatal error.
    """

    def __init__(
        self,
        settings: Sequence[ReplicaSettings],
        defaults: Optional[HealthcheckDefaults] = None,
        source_factory: Optional[SourceFactory] = None,
    ):
        self.settings = list(settings)
        self.defaults = defaults or get_defaults()
        self.source_factory = source_factory or default_source_factory
        self.endpoints: List[ReplicaEndpoint] = []
        self.fatal_error: Optional[ListenerFatalError] = None
        self._cancel: Optional[asyncio.Event] = None
        self._started = 0
        self._all_started = asyncio.Event()

    # ========================================================================
    # STATE
    # ========================================================================

    @property
    def shutdown_requested(self) -> bool:
        return self._cancel is not None and self._cancel.is_set()

    @property
    def serving_count(self) -> int:
        return sum(1 for endpoint in self.endpoints if endpoint.is_serving)

    async def wait_serving(self) -> None:
        """
        Wait until every listener has bound or the fleet has failed.

        Check fatal_error afterwards to tell the two apart.
        """
        await self._all_started.wait()

    def request_shutdown(self) -> None:
        """Fire the shared cancellation event."""
        if self._cancel is not None and not self._cancel.is_set():
            logger.info("Shutting down all listeners...")
            self._cancel.set()

    def _record_failure(self, error: ListenerFatalError) -> None:
        if self.fatal_error is None:
            self.fatal_error = error
            logger.error(f"Listener failed, stopping fleet: {error}")
        else:
            logger.error(f"Additional listener failure: {error}")
        # Release wait_serving(); the fleet will never be fully up
        self._all_started.set()
        self.request_shutdown()

    # ========================================================================
    # SIGNALS
    # ========================================================================

    def _on_signal(self, sig: signal.Signals) -> None:
        logger.info(f"Shutdown signal received ({sig.name})")
        self.request_shutdown()

    def _install_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> List[signal.Signals]:
        installed = []
        for sig in SHUTDOWN_SIGNALS:
            try:
                loop.add_signal_handler(sig, self._on_signal, sig)
                installed.append(sig)
            except NotImplementedError:
                # Windows doesn't support add_signal_handler
                pass
        return installed

    # ========================================================================
    # LISTENERS
    # ========================================================================

    def _build_endpoint(self, settings: ReplicaSettings) -> ReplicaEndpoint:
        source = self.source_factory(settings, self.defaults)
        prober = ReplicaProber(settings, source)
        return ReplicaEndpoint(settings, prober, self.defaults)

    async def _run_listener(self, endpoint: ReplicaEndpoint) -> None:
        """Worker for one listener: bind, wait for cancellation, shut down."""
        try:
            await endpoint.start()
        except ListenerFatalError as e:
            self._record_failure(e)
            return
        except Exception as e:
            logger.exception(f"Listener {endpoint.name} crashed while starting")
            await endpoint.shutdown()
            self._record_failure(ListenerFatalError(endpoint.name, e))
            return

        self._started += 1
        if self._started == len(self.endpoints):
            logger.info(f"All {self._started} listener(s) serving")
            self._all_started.set()

        try:
            await self._cancel.wait()
        finally:
            await endpoint.shutdown()

    async def _close_sources(self) -> None:
        for endpoint in self.endpoints:
            try:
                await endpoint.prober.source.close()
            except Exception as e:
                logger.warning(f"Failed to close status source for {endpoint.name}: {e}")

    # ========================================================================
    # RUN
    # ========================================================================

    async def run(self) -> int:
        """
        Run the fleet until shutdown.

        Returns:
            Process exit code
        """
        try:
            validate_settings(self.settings)
        except ConfigError as e:
            logger.error(f"Invalid configuration: {e}")
            return EXIT_CONFIG_ERROR

        self._cancel = asyncio.Event()
        self.endpoints = [self._build_endpoint(s) for s in self.settings]

        loop = asyncio.get_running_loop()
        installed = self._install_signal_handlers(loop)

        logger.info(f"Starting {len(self.endpoints)} listener(s)")
        try:
            tasks = [
                asyncio.create_task(self._run_listener(endpoint), name=f"listener-{endpoint.name}")
                for endpoint in self.endpoints
            ]
            await asyncio.gather(*tasks)
        finally:
            for sig in installed:
                loop.remove_signal_handler(sig)
            await self._close_sources()

        if self.fatal_error is not None:
            logger.error(f"Fleet stopped after failure: {self.fatal_error}")
            return EXIT_LISTENER_FAILED

        logger.info("All listeners stopped")
        return EXIT_OK


__all__ = [
    "EXIT_OK",
    "EXIT_LISTENER_FAILED",
    "EXIT_CONFIG_ERROR",
    "FleetManager",
    "default_source_factory",
    "validate_settings",
]
