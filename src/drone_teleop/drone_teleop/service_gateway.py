"""
Fire-and-forget access to the MAVROS command services.

Every call blocks until the service is reachable, polling at a fixed
interval, then submits the request asynchronously. The response is never
inspected: the returned future is handed back only so a caller *may* look
at it, the teleop loop drops it.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable


class ServiceUnavailableError(RuntimeError):
    """Raised when a bounded reachability wait runs out or the runtime stops."""

    def __init__(self, name: str, waited: float):
        super().__init__(f"{name} service not available after {waited:.1f}s")
        self.name = name
        self.waited = waited


@dataclass
class ServiceEndpoint:
    name: str                               # human readable, used in log lines
    client: Any                             # rclpy client (wait_for_service / call_async)
    make_request: Callable[..., Any]        # builds the request message from keyword fields


class ServiceGateway:
    def __init__(self, set_mode: ServiceEndpoint, arming: ServiceEndpoint,
                 takeoff: ServiceEndpoint, land: ServiceEndpoint, logger,
                 wait_interval: float = 2.0, wait_timeout: float = 0.0,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep,
                 ok: Callable[[], bool] = lambda: True):
        self.set_mode_endpoint = set_mode
        self.arming_endpoint = arming
        self.takeoff_endpoint = takeoff
        self.land_endpoint = land
        self.logger = logger
        self.wait_interval = wait_interval
        self.wait_timeout = wait_timeout
        self.clock = clock
        self.sleep = sleep
        self.ok = ok

    def wait_until_reachable(self, endpoint: ServiceEndpoint):
        """Block until the service answers; forever unless wait_timeout > 0.

        Stops with ServiceUnavailableError once the runtime is shut down.
        """
        start = self.clock()
        while True:
            poll_start = self.clock()
            if endpoint.client.wait_for_service(timeout_sec=self.wait_interval):
                return
            waited = self.clock() - start
            if not self.ok():
                raise ServiceUnavailableError(endpoint.name, waited)
            self.logger.warning(f"Waiting for {endpoint.name} service...")
            if self.wait_timeout > 0.0 and waited >= self.wait_timeout:
                raise ServiceUnavailableError(endpoint.name, waited)
            # a poll can return before the interval has passed
            remaining = self.wait_interval - (self.clock() - poll_start)
            if remaining > 0.0:
                self.sleep(remaining)

    def _submit(self, endpoint: ServiceEndpoint, message: str, **fields):
        request = endpoint.make_request(**fields)
        self.wait_until_reachable(endpoint)
        future = endpoint.client.call_async(request)
        self.logger.info(message)
        return future

    def set_mode(self, mode: str):
        return self._submit(self.set_mode_endpoint, f"Setting mode to {mode}...",
                            custom_mode=mode)

    def arm(self):
        return self._submit(self.arming_endpoint, "Arming drone...", value=True)

    def disarm(self):
        return self._submit(self.arming_endpoint, "Disarming drone...", value=False)

    def takeoff(self, altitude: float):
        return self._submit(self.takeoff_endpoint, f"Taking off to {altitude} meters...",
                            altitude=float(altitude))

    def land(self):
        return self._submit(self.land_endpoint, "Landing drone...")


def make_request_factory(srv_type) -> Callable[..., Any]:
    """Request builder for a ROS service type, setting fields by keyword."""
    def factory(**fields):
        request = srv_type.Request()
        for key, value in fields.items():
            setattr(request, key, value)
        return request
    return factory


def make_endpoint(node, srv_type, service_name: str, name: str) -> ServiceEndpoint:
    return ServiceEndpoint(name=name, client=node.create_client(srv_type, service_name),
                           make_request=make_request_factory(srv_type))
