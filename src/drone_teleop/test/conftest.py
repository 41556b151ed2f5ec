"""Shared fakes for the teleop tests."""

import dataclasses
from types import SimpleNamespace

import pytest

from drone_teleop.config import TeleopConfig
from drone_teleop.dispatcher import TeleopSession
from drone_teleop.service_gateway import (
    ServiceEndpoint,
    ServiceGateway,
    make_request_factory,
)
from drone_teleop.state_cache import VehicleStateCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.advance(seconds)


class FakeLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def debug(self, msg):
        self.records.append(("debug", msg))

    def info(self, msg):
        self.records.append(("info", msg))

    def warning(self, msg):
        self.records.append(("warning", msg))

    def error(self, msg):
        self.records.append(("error", msg))

    def messages(self, level: str) -> list[str]:
        return [msg for lvl, msg in self.records if lvl == level]


class FakeSrv:
    class Request:
        pass


class FakeClient:
    """Records submissions; becomes reachable after `ready_after` failed polls."""

    def __init__(self, name: str, clock: FakeClock, submissions: list, ready_after: int = 0):
        self.name = name
        self.clock = clock
        self.submissions = submissions
        self.ready_after = ready_after
        self.polls = 0

    def wait_for_service(self, timeout_sec=None):
        self.polls += 1
        if self.polls > self.ready_after:
            return True
        self.clock.advance(timeout_sec)
        return False

    def call_async(self, request):
        self.submissions.append(
            SimpleNamespace(service=self.name, fields=dict(vars(request)), at=self.clock.now)
        )
        return SimpleNamespace(done=lambda: False)


class Harness:
    def __init__(self, config: TeleopConfig = None) -> None:
        self.config = config or TeleopConfig()
        self.clock = FakeClock()
        self.logger = FakeLogger()
        self.submissions: list = []
        self.published: list = []
        self.running = True
        self.clients = {
            name: FakeClient(name, self.clock, self.submissions)
            for name in ("set_mode", "arming", "takeoff", "land")
        }
        self.state_cache = VehicleStateCache()
        self.gateway = ServiceGateway(
            set_mode=self.endpoint("SetMode", "set_mode"),
            arming=self.endpoint("Arming", "arming"),
            takeoff=self.endpoint("Takeoff", "takeoff"),
            land=self.endpoint("Land", "land"),
            logger=self.logger,
            wait_interval=self.config.service_wait_interval,
            wait_timeout=self.config.service_wait_timeout,
            clock=self.clock,
            sleep=self.clock.sleep,
            ok=lambda: self.running,
        )
        self.session = TeleopSession(
            gateway=self.gateway,
            state_cache=self.state_cache,
            publish=lambda cmd: self.published.append(dataclasses.replace(cmd)),
            logger=self.logger,
            config=self.config,
            sleep=self.clock.sleep,
        )

    def endpoint(self, name: str, key: str) -> ServiceEndpoint:
        return ServiceEndpoint(name=name, client=self.clients[key],
                               make_request=make_request_factory(FakeSrv))

    def services(self) -> list[str]:
        return [s.service for s in self.submissions]


@pytest.fixture
def harness() -> Harness:
    return Harness()
