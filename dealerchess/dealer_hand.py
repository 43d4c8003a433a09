"""The dealer's hand that carries pieces across the board."""

from __future__ import annotations

from typing import Optional

from dealerchess.movement import Actor, ActorMovementComponent, Event, Vector


class DealerHand(Actor):
    """A hand that flies to a point, grabs there, and returns to its base.

    ``base`` is the actor whose location the hand returns to.
    """

    def __init__(
        self,
        location: Optional[Vector] = None,
        base: Optional[Actor] = None,
    ) -> None:
        super().__init__(location if location is not None else Vector(), 0.0)
        self.base = base
        self.is_dragging = True

        self.on_ready_to_grab_with_hand = Event()
        self.on_grab_with_hand = Event()
        self.on_release_from_hand = Event()

        self.movement = ActorMovementComponent(self)
        self._original_control_speed_at_start = self.movement.control_speed_at_start

    def move_to_location(self, point: Vector) -> None:
        """Fly to ``point``; announce readiness on approach and grab on arrival."""
        if self._original_control_speed_at_start:
            self.movement.control_speed_at_start = False

        self.movement.on_approach.add(self._ready_to_grab)
        self.movement.on_completed_move.add(self._grab)
        self.movement.move_to_location(point)

    def move_to_base(self) -> None:
        """Release what is held and return to the base, levelling out on arrival."""
        if self.base is None:
            raise RuntimeError("dealer hand has no base to return to")

        self.on_release_from_hand.broadcast()

        if self._original_control_speed_at_start:
            self.movement.control_speed_at_start = True

        self.movement.on_completed_move.clear()
        self.movement.on_approach.clear()
        self.movement.move_to_location(self.base.location)

        self.movement.on_completed_move.add(self._reset_rotation)

    def tick(self, delta_time: float) -> None:
        """Advance the hand's movement by ``delta_time`` seconds."""
        self.movement.tick(delta_time)

    def _ready_to_grab(self) -> None:
        self.on_ready_to_grab_with_hand.broadcast()

    def _grab(self) -> None:
        self.on_grab_with_hand.broadcast()

    def _reset_rotation(self) -> None:
        self.yaw = 0.0
        self.movement.on_completed_move.clear()