"""Location permission state.

Transitions: UNKNOWN -> REQUESTED -> GRANTED | DENIED. A denied or granted
permission may be changed again by the platform (e.g. the user edits settings),
so GRANTED <-> DENIED is allowed as well.
"""

from typing import Callable

import structlog

from shared_types import PermissionState

logger = structlog.get_logger()

Listener = Callable[[PermissionState, PermissionState], None]

_ALLOWED = {
    PermissionState.UNKNOWN: {PermissionState.REQUESTED, PermissionState.GRANTED, PermissionState.DENIED},
    PermissionState.REQUESTED: {PermissionState.GRANTED, PermissionState.DENIED},
    PermissionState.GRANTED: {PermissionState.DENIED},
    PermissionState.DENIED: {PermissionState.GRANTED},
}


class LocationPermission:
    """Observable location permission state."""

    def __init__(self, state: PermissionState = PermissionState.UNKNOWN):
        self._state = PermissionState(state)
        self._listeners: list[Listener] = []

    @property
    def state(self) -> PermissionState:
        return self._state

    @property
    def granted(self) -> bool:
        return self._state == PermissionState.GRANTED

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with (old, new) on every transition.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def request(self) -> None:
        """Mark permission as requested. No-op unless the state is still unknown."""
        if self._state == PermissionState.UNKNOWN:
            self._transition(PermissionState.REQUESTED)

    def grant(self) -> None:
        self._transition(PermissionState.GRANTED)

    def deny(self) -> None:
        self._transition(PermissionState.DENIED)

    def _transition(self, new: PermissionState) -> None:
        old = self._state
        if new == old:
            return
        if new not in _ALLOWED[old]:
            raise ValueError(f"Invalid permission transition: {old} -> {new}")
        self._state = new
        logger.info("location_permission_changed", old=str(old), new=str(new))
        for listener in list(self._listeners):
            listener(old, new)
