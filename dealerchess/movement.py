"""Smooth movement of an actor towards a target point."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)

_SMALL_NUMBER_SQUARED = 1e-8


@dataclass(frozen=True)
class Vector:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> "Vector":
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def size(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def safe_normal(self) -> "Vector":
        """Unit vector in the same direction, or the zero vector if too short."""
        squared = self.x * self.x + self.y * self.y + self.z * self.z
        if squared < _SMALL_NUMBER_SQUARED:
            return Vector()
        length = math.sqrt(squared)
        return Vector(self.x / length, self.y / length, self.z / length)


class Event:
    """A list of handlers called together on broadcast."""

    def __init__(self) -> None:
        self._handlers: List[Callable[..., Any]] = []

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers

    def add(self, handler: Callable[..., Any]) -> None:
        """Subscribe ``handler``; subscribing it twice has no further effect."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def remove(self, handler: Callable[..., Any]) -> None:
        """Unsubscribe ``handler`` if it is subscribed."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def clear(self) -> None:
        """Unsubscribe every handler."""
        self._handlers.clear()

    def broadcast(self, *args: Any) -> None:
        """Call every handler with ``args``, in subscription order."""
        for handler in list(self._handlers):
            handler(*args)


@dataclass
class Actor:
    """Something placed in the world with a location and a heading."""

    location: Vector = field(default_factory=Vector)
    yaw: float = 0.0


class ActorMovementComponent:
    """Moves its owner towards a point, accelerating at the start and slowing near the end."""

    def __init__(self, owner: Optional[Actor] = None) -> None:
        self.owner = owner
        if owner is None:
            logger.error("movement component has no owner")

        self.on_completed_move = Event()
        self.on_approach = Event()
        self.on_separation = Event()

        self.max_speed = 1000.0
        # Closer than this to the target, the owner is placed on it.
        self.min_step = 0.5
        self.control_speed_at_start = True
        self.acceleration_coefficient = 10.0
        self.deceleration_coefficient = 10.0
        self.approach_distance = 100.0
        self.separation_distance = 100.0

        self._moving = False
        self._start_location = Vector()
        self._end_location = Vector()
        self._approach_fired = False
        self._separation_fired = False

    @property
    def is_moving(self) -> bool:
        """True while a move is in progress."""
        return self._moving

    @property
    def end_location(self) -> Vector:
        """Target of the current or last move."""
        return self._end_location

    def move_to_location(self, point: Vector) -> None:
        """Start moving the owner towards ``point``."""
        if self.owner is None:
            return
        self._start_location = self.owner.location
        self._end_location = point
        self._moving = True
        self._approach_fired = False
        self._separation_fired = False

    def tick(self, delta_time: float) -> None:
        """Advance the move by ``delta_time`` seconds."""
        if not self._moving or self.owner is None:
            return

        current = self.owner.location
        if (current - self._end_location).size() < self.min_step:
            self.owner.location = self._end_location
            self._moving = False
            self.on_completed_move.broadcast()
            return

        velocity = self._end_location - current
        remaining = velocity.size()

        if not self._approach_fired and remaining <= self.approach_distance:
            self.on_approach.broadcast()
            self._approach_fired = True

        if remaining * self.deceleration_coefficient > self.max_speed:
            velocity = velocity.safe_normal() * self.max_speed
        else:
            velocity = velocity * self.deceleration_coefficient

        travelled = (current - self._start_location).size()

        if not self._separation_fired and travelled >= self.approach_distance:
            self.on_separation.broadcast()
            self._separation_fired = True

        if self.control_speed_at_start:
            limit = travelled * self.acceleration_coefficient
            if velocity.size() > limit:
                velocity = velocity.safe_normal() * (limit + self.min_step)

        self.owner.location = current + velocity * delta_time