"""Columns that count down the time left for a move."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from dealerchess.index2d import Index2D
from dealerchess.movement import Actor, Event, Vector

logger = logging.getLogger(__name__)


class TimeBeacon(Actor):
    """One column of the move timer; announces timer changes through events."""

    def __init__(self, location: Optional[Vector] = None, yaw: float = 0.0) -> None:
        super().__init__(location if location is not None else Vector(), yaw)
        self.timer_time = 0.0
        self.is_playing = False
        self.stage_num = 0

        self.on_set_time_for_timer = Event()
        self.on_play_timer = Event()
        self.on_stop_timer = Event()
        self.on_stage_changed = Event()

    def set_time_for_timer(self, time: float) -> None:
        """Set how long this column's timer runs."""
        self.timer_time = time
        self.on_set_time_for_timer.broadcast(time)

    def play_timer(self) -> None:
        """Start this column's timer."""
        self.is_playing = True
        self.on_play_timer.broadcast()

    def stop_timer(self) -> None:
        """Stop this column's timer."""
        self.is_playing = False
        self.on_stop_timer.broadcast()

    def on_next_stage(self, stage_num: int) -> None:
        """Tell this column that the game moved to stage ``stage_num``."""
        self.stage_num = stage_num
        self.on_stage_changed.broadcast(stage_num)


BeaconFactory = Callable[[Vector, float], TimeBeacon]


class TimeBeaconGenerator(Actor):
    """Places two rows of beacons along the board and lights them one pair at a time.

    Pairs are lit from the far end of the board towards the start, one pair
    every ``part_of_time`` seconds, as ``tick`` advances the clock.
    """

    def __init__(
        self,
        location: Optional[Vector] = None,
        beacon_type: Optional[BeaconFactory] = TimeBeacon,
        number_of_squares_along_axes: Optional[Index2D] = None,
        block_size: Optional[Vector] = None,
    ) -> None:
        super().__init__(location if location is not None else Vector(), 0.0)
        self.beacon_type = beacon_type
        self.number_of_squares_along_axes = (
            number_of_squares_along_axes
            if number_of_squares_along_axes is not None
            else Index2D(10, 10)
        )
        self.block_size = block_size if block_size is not None else Vector()

        self._beacons: List[TimeBeacon] = []
        self.part_of_time = 0.0
        self.counter = 0

        self._timer_active = False
        self._time_to_next = 0.0

    @property
    def beacons(self) -> Tuple[TimeBeacon, ...]:
        """All generated beacons, left to right, alternating sides."""
        return tuple(self._beacons)

    @property
    def is_timer_active(self) -> bool:
        """True while beacon pairs are still being lit."""
        return self._timer_active

    def regenerate(self) -> None:
        """Drop all beacons and place two per square along the X axis."""
        if self.beacon_type is None:
            logger.error("beacon type is not set")
            raise ValueError("beacon type is not set")
        self._beacons = [
            self.beacon_type(self.location_for_beacon(i), -180.0 if i % 2 else 0.0)
            for i in range(self.number_of_squares_along_axes.x * 2)
        ]

    def location_for_beacon(self, index: int) -> Vector:
        """World location of beacon ``index``: odd indices on one side, even on the other."""
        side = 1 if index % 2 else -1
        offset = Vector(
            self.block_size.x * (index // 2),
            (self.block_size.y * (self.number_of_squares_along_axes.y + 1) / 2) * side,
            0.0,
        )
        return offset + self.location

    def set_time_for_beacons(self, time: float) -> None:
        """Share ``time`` equally among the columns along the X axis."""
        self.stop()
        self.part_of_time = time / self.number_of_squares_along_axes.x
        for beacon in self._beacons:
            beacon.set_time_for_timer(self.part_of_time)

    def stop(self) -> None:
        """Stop and reset every beacon and the lighting timer."""
        self.counter = self.number_of_squares_along_axes.x
        for beacon in self._beacons:
            beacon.stop_timer()
        self._timer_active = False

    def play(self) -> None:
        """Start lighting pairs; the first pair lights on the next tick."""
        if self.part_of_time <= 0:
            self._timer_active = False
            return
        self._timer_active = True
        self._time_to_next = 0.0

    def update_stage(self, stage_num: int) -> None:
        """Tell every beacon about the new stage."""
        for beacon in self._beacons:
            beacon.on_next_stage(stage_num)

    def trigger_next_beacons(self) -> None:
        """Light the next pair of beacons, stopping the timer after the last one."""
        self.counter -= 1
        if self.counter >= 0:
            self._beacons[self.counter * 2].play_timer()
            self._beacons[self.counter * 2 + 1].play_timer()
        if self.counter == 0:
            self._timer_active = False

    def tick(self, delta_time: float) -> None:
        """Advance the lighting timer by ``delta_time`` seconds."""
        if not self._timer_active:
            return
        self._time_to_next -= delta_time
        while self._timer_active and self._time_to_next <= 0:
            self.trigger_next_beacons()
            self._time_to_next += self.part_of_time