# ============================================================================
# PER-REPLICA HTTP ENDPOINT
# ============================================================================
# STATUS: Core - One HTTP listener per replica
# PURPOSE: Serve replica health on the replica's own port and path
# CREATED: 19 OCT 2026
# ============================================================================
"""
Per-Replica HTTP Endpoint

Each ReplicaEndpoint owns one aiohttp application, runner and TCP site.

Endpoint:
    GET <healthcheck_path> - Probe the replica once. A path ending in "/"
                             also serves every path below it, so the
                             default "/" answers any request path.
                             200 + JSON status row when healthy
                             500 + plain-text reason otherwise

Lifecycle (see core.models.ListenerState):
    STARTING -> SERVING        start() bound the socket
    STARTING -> STOPPED        bind failed (ListenerFatalError)
    SERVING -> SHUTTING_DOWN   shutdown() called
    SHUTTING_DOWN -> STOPPED   in-flight requests drained or grace elapsed
"""

import asyncio
from typing import Optional

from aiohttp import web

from core.config.defaults import HealthcheckDefaults, get_defaults
from core.errors import ListenerFatalError, ProbeError
from core.logging import ComponentType, get_logger, log_context
from core.models import ListenerState, ReplicaSettings
from health.prober import ReplicaProber

logger = get_logger(__name__, ComponentType.ENDPOINT)


class ReplicaEndpoint:
    """
    HTTP health endpoint for a single replica.

    Requests are handled concurrently by aiohttp; each request runs exactly
    one probe and shares no mutable state with other requests.
    """

    def __init__(
        self,
        settings: ReplicaSettings,
        prober: ReplicaProber,
        defaults: Optional[HealthcheckDefaults] = None,
    ):
        self.settings = settings
        self.prober = prober
        self.defaults = defaults or get_defaults()
        self._state = ListenerState.STARTING
        self._runner: Optional[web.AppRunner] = None

    @property
    def name(self) -> str:
        return self.settings.name

    @property
    def state(self) -> ListenerState:
        return self._state

    @property
    def is_serving(self) -> bool:
        return self._state is ListenerState.SERVING

    def _transition(self, target: ListenerState) -> None:
        if not self._state.can_transition_to(target):
            raise RuntimeError(
                f"listener {self.name}: invalid transition {self._state.value} -> {target.value}"
            )
        logger.debug(f"Listener {self.name}: {self._state.value} -> {target.value}")
        self._state = target

    # ========================================================================
    # REQUEST HANDLING
    # ========================================================================

    def build_app(self) -> web.Application:
        """Create the aiohttp application serving this replica's path."""
        path = self.settings.healthcheck_path
        app = web.Application()
        app.router.add_get(path, self.handle)
        if path.endswith("/"):
            app.router.add_get(path + "{tail:.*}", self.handle)
        return app

    async def handle(self, request: web.Request) -> web.Response:
        """Probe the replica and render the verdict."""
        with log_context(
            replica=self.name,
            listen_port=self.settings.healthcheck_port,
            method=request.method,
            path=request.path,
        ):
            timeout = self.defaults.read_timeout_seconds
            try:
                verdict = await asyncio.wait_for(self.prober.probe(), timeout=timeout)
            except asyncio.TimeoutError:
                return self._server_error(request, f"status query timed out after {timeout:g}s")
            except ProbeError as e:
                return self._server_error(request, str(e))

            if not verdict.healthy:
                return self._server_error(request, verdict.reason)

            logger.info(f"[{self.name}] {request.method} {request.path} 200")
            return web.json_response(verdict.row.to_dict())

    def _server_error(self, request: web.Request, message: str) -> web.Response:
        logger.warning(f"[{self.name}] {request.method} {request.path} 500 - Error: {message}")
        return web.Response(status=500, text=message)

    # ========================================================================
    # LIFECYCLE
    # ========================================================================

    async def start(self) -> None:
        """
        Bind the listener.

        Raises:
            ListenerFatalError: If the socket cannot be bound
        """
        host = self.defaults.listen_host
        port = self.settings.healthcheck_port

        with log_context(replica=self.name, listen_port=port):
            logger.info(f"Creating healthchecker for {self.name} on port {port}")

            self._runner = web.AppRunner(
                self.build_app(),
                access_log=None,
                shutdown_timeout=self.defaults.shutdown_grace_seconds,
            )
            try:
                await self._runner.setup()
                site = web.TCPSite(self._runner, host, port)
                await site.start()
            except OSError as e:
                await self._runner.cleanup()
                self._transition(ListenerState.STOPPED)
                raise ListenerFatalError(self.name, e) from e

            self._transition(ListenerState.SERVING)
            logger.info(f"Listener {self.name} serving {self.settings.healthcheck_path} on {host}:{port}")

    async def shutdown(self) -> None:
        """
        Stop accepting requests and drain in-flight ones.

        Bounded by the shutdown grace period. Safe to call more than once,
        and a no-op for a listener that never bound.
        """
        if self._state is ListenerState.STOPPED or self._state is ListenerState.SHUTTING_DOWN:
            return

        if self._state is ListenerState.STARTING:
            if self._runner is not None:
                await self._runner.cleanup()
            self._transition(ListenerState.STOPPED)
            return

        self._transition(ListenerState.SHUTTING_DOWN)
        with log_context(replica=self.name, listen_port=self.settings.healthcheck_port):
            try:
                await self._runner.cleanup()
            finally:
                self._transition(ListenerState.STOPPED)
                logger.info(f"Listener {self.name} stopped")


__all__ = [
    "ReplicaEndpoint",
]
