"""Smooth turning of an actor's heading towards a point."""

from __future__ import annotations

import logging
import math
from typing import Optional

from dealerchess.movement import Actor, Event, Vector

logger = logging.getLogger(__name__)


def look_at_yaw(start: Vector, target: Vector) -> float:
    """Yaw in degrees of the direction from ``start`` to ``target``."""
    return math.degrees(math.atan2(target.y - start.y, target.x - start.x))


def _normalize_axis(angle: float) -> float:
    angle = math.fmod(angle, 360.0)
    if angle < 0.0:
        angle += 360.0
    if angle > 180.0:
        angle -= 360.0
    return angle


def _shortest_turn(angle: float) -> float:
    if int(angle / 180):
        angle -= 360 * (1 if angle > 0 else -1)
    return angle


class ActorRotationComponent:
    """Turns its owner's yaw towards a point, accelerating at the start and slowing near the end."""

    def __init__(self, owner: Optional[Actor] = None) -> None:
        self.owner = owner
        if owner is None:
            logger.error("rotation component has no owner")

        self.on_completed_rotate = Event()

        self.is_rotating = False
        self.max_speed = 100.0
        # Closer than this to the target yaw, the owner is set to it.
        self.min_step = 0.5
        self.control_speed_at_start = True
        self.acceleration_coefficient = 10.0
        self.deceleration_coefficient = 10.0

        self._start_rotation = 0.0
        self._end_rotation = 0.0

    @property
    def end_rotation(self) -> float:
        """Target yaw of the current or last turn."""
        return self._end_rotation

    def rotate_to_location(self, point: Vector) -> None:
        """Start turning the owner to face ``point``."""
        if self.owner is None:
            return
        self._start_rotation = self.owner.yaw
        self._end_rotation = look_at_yaw(self.owner.location, point)
        self.is_rotating = True

    def tick(self, delta_time: float) -> None:
        """Advance the turn by ``delta_time`` seconds."""
        if not self.is_rotating or self.owner is None:
            return

        current = self.owner.yaw
        if abs(current - self._end_rotation) < self.min_step:
            self.owner.yaw = self._end_rotation
            self.is_rotating = False
            self.on_completed_rotate.broadcast()
            return

        speed = _shortest_turn(self._end_rotation - current)
        direction = 1 if speed > 0 else -1

        if abs(speed * self.deceleration_coefficient) > self.max_speed:
            speed = self.max_speed * direction
        else:
            speed *= self.deceleration_coefficient

        if self.control_speed_at_start:
            travelled = _shortest_turn(current - self._start_rotation)
            limit = abs(travelled * self.acceleration_coefficient)
            if abs(speed) > limit:
                speed = (limit + self.min_step) * (1 if speed > 0 else -1)

        self.owner.yaw = _normalize_axis(current + speed * delta_time)