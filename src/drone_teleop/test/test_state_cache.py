"""Tests for the vehicle state cache."""

from types import SimpleNamespace

from drone_teleop.state_cache import VehicleState, VehicleStateCache


def test_default_state_is_unarmed_without_mode():
    assert VehicleStateCache().current() == VehicleState(armed=False, mode="")


def test_update_replaces_whole_state():
    cache = VehicleStateCache()
    cache.update(armed=True, mode="GUIDED")
    cache.update(armed=False, mode="LAND")

    assert cache.current() == VehicleState(armed=False, mode="LAND")


def test_update_from_state_message():
    cache = VehicleStateCache()
    msg = SimpleNamespace(armed=True, mode="GUIDED", connected=True)

    state = cache.update_from_msg(msg)

    assert state == VehicleState(armed=True, mode="GUIDED")
    assert cache.current() is state
