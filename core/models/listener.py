# ============================================================================
# LISTENER STATE MODEL
# ============================================================================
# STATUS: Core - Per-listener lifecycle states
# PURPOSE: State machine for one replica HTTP listener
# CREATED: 19 OCT 2026
# ============================================================================

from enum import Enum


class ListenerState(str, Enum):
    """
    Listener lifecycle states.

    State transitions:
        STARTING -> SERVING -> SHUTTING_DOWN -> STOPPED
                 -> STOPPED (bind failed)
    """
    STARTING = "starting"            # Runner set up, socket not yet bound
    SERVING = "serving"              # Bound and accepting requests
    SHUTTING_DOWN = "shutting_down"  # Draining in-flight requests
    STOPPED = "stopped"              # Socket closed

    def can_transition_to(self, target: "ListenerState") -> bool:
        return target in _TRANSITIONS[self]


_TRANSITIONS = {
    ListenerState.STARTING: {ListenerState.SERVING, ListenerState.STOPPED},
    ListenerState.SERVING: {ListenerState.SHUTTING_DOWN},
    ListenerState.SHUTTING_DOWN: {ListenerState.STOPPED},
    ListenerState.STOPPED: set(),
}
