import math

import pytest

from dealerchess.movement import Actor, ActorMovementComponent, Event, Vector


def _run(component, delta_time=0.01, limit=10000):
    ticks = 0
    while component.is_moving and ticks < limit:
        component.tick(delta_time)
        ticks += 1
    return ticks


def test_vector_size():
    assert Vector(3.0, 4.0, 0.0).size() == pytest.approx(5.0)


def test_vector_arithmetic_round_trip():
    a = Vector(1.5, -2.0, 7.0)
    b = Vector(-4.0, 3.25, 0.5)
    assert (a + b) - b == a
    assert a * 2 == 2 * a
    assert -a + a == Vector()


def test_safe_normal_has_unit_length():
    normal = Vector(12.0, -5.0, 3.0).safe_normal()
    assert normal.size() == pytest.approx(1.0)


def test_safe_normal_of_axis_vector():
    assert Vector(0.0, 0.0, 2.0).safe_normal() == Vector(0.0, 0.0, 1.0)


def test_safe_normal_of_zero_is_zero():
    assert Vector().safe_normal() == Vector()


def test_event_add_broadcast_remove_clear():
    received = []
    event = Event()

    def handler(*args):
        received.append(args)

    event.add(handler)
    event.add(handler)
    event.broadcast(1, "a")
    assert received == [(1, "a")]

    event.remove(handler)
    event.broadcast(2)
    assert received == [(1, "a")]

    event.add(handler)
    event.clear()
    event.broadcast(3)
    assert received == [(1, "a")]
    assert len(event) == 0


def test_event_handler_may_clear_during_broadcast():
    calls = []
    event = Event()

    def first():
        calls.append("first")
        event.clear()

    def second():
        calls.append("second")

    event.add(first)
    event.add(second)
    event.broadcast()
    assert calls == ["first", "second"]
    assert len(event) == 0


def test_move_reaches_target_and_fires_events_once():
    actor = Actor(location=Vector(0.0, 0.0, 0.0))
    component = ActorMovementComponent(actor)
    completed, approached, separated = [], [], []
    component.on_completed_move.add(lambda: completed.append(True))
    component.on_approach.add(lambda: approached.append(True))
    component.on_separation.add(lambda: separated.append(True))

    target = Vector(500.0, -300.0, 20.0)
    component.move_to_location(target)
    assert component.is_moving

    _run(component)

    assert not component.is_moving
    assert actor.location == target
    assert len(completed) == 1
    assert len(approached) == 1
    assert len(separated) == 1


def test_speed_never_exceeds_max_speed():
    actor = Actor()
    component = ActorMovementComponent(actor)
    component.control_speed_at_start = False
    component.move_to_location(Vector(5000.0, 0.0, 0.0))
    delta_time = 0.02
    previous = actor.location
    for _ in range(50):
        component.tick(delta_time)
        step = (actor.location - previous).size()
        assert step <= component.max_speed * delta_time + 1e-9
        previous = actor.location


def test_controlled_start_moves_slowly_first():
    slow_actor = Actor()
    slow = ActorMovementComponent(slow_actor)
    fast_actor = Actor()
    fast = ActorMovementComponent(fast_actor)
    fast.control_speed_at_start = False

    target = Vector(1000.0, 0.0, 0.0)
    slow.move_to_location(target)
    fast.move_to_location(target)
    slow.tick(0.01)
    fast.tick(0.01)

    assert slow_actor.location.size() < fast_actor.location.size()
    assert slow_actor.location.size() == pytest.approx(slow.min_step * 0.01)


def test_motion_stays_on_the_line_to_target():
    actor = Actor(location=Vector(10.0, 10.0, 0.0))
    component = ActorMovementComponent(actor)
    target = Vector(210.0, 10.0, 0.0)
    component.move_to_location(target)
    for _ in range(30):
        component.tick(0.01)
        assert actor.location.y == pytest.approx(10.0)
        assert 10.0 <= actor.location.x <= 210.0


def test_without_owner_nothing_moves():
    component = ActorMovementComponent(None)
    component.move_to_location(Vector(1.0, 2.0, 3.0))
    assert not component.is_moving
    component.tick(1.0)
    assert not component.is_moving


def test_target_within_min_step_snaps_immediately():
    actor = Actor(location=Vector(1.0, 1.0, 1.0))
    component = ActorMovementComponent(actor)
    completed = []
    component.on_completed_move.add(lambda: completed.append(True))
    target = Vector(1.0, 1.0, 1.0 + component.min_step / 2)
    component.move_to_location(target)
    component.tick(0.01)
    assert actor.location == target
    assert completed == [True]


def test_new_move_resets_approach_event():
    actor = Actor()
    component = ActorMovementComponent(actor)
    approached = []
    component.on_approach.add(lambda: approached.append(True))
    component.move_to_location(Vector(50.0, 0.0, 0.0))
    _run(component)
    component.move_to_location(Vector(0.0, 0.0, 0.0))
    _run(component)
    assert len(approached) == 2
    assert math.isclose(actor.location.x, 0.0)