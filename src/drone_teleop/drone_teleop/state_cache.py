import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class VehicleState:
    armed: bool = False
    mode: str = ""


class VehicleStateCache:
    """Last vehicle state reported on the state topic.

    Written from the executor thread by the subscription callback and read
    from the input loop, so access goes through a lock. Until the first
    notification arrives the cache holds the default (unarmed, empty mode)
    state and gating decisions compare against it.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._state = VehicleState()

    def current(self) -> VehicleState:
        with self._lock:
            return self._state

    def update(self, armed: bool, mode: str) -> VehicleState:
        state = VehicleState(armed=bool(armed), mode=str(mode))
        with self._lock:
            self._state = state
        return state

    def update_from_msg(self, msg) -> VehicleState:
        """Replace the cached state with a mavros_msgs/State message."""
        return self.update(msg.armed, msg.mode)
