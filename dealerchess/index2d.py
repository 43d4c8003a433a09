"""Integer 2D index of a block in a board-like matrix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

Vector3 = Tuple[float, float, float]


@dataclass(frozen=True)
class Index2D:
    """A pair of integer coordinates.

    ``Index2D()`` is ``(0, 0)``; ``Index2D(n)`` is ``(n, n)``.
    Ordering comparisons hold only when they hold on both axes.
    """

    x: int = 0
    y: Optional[int] = None

    def __post_init__(self) -> None:
        if self.y is None:
            object.__setattr__(self, "y", self.x)

    @staticmethod
    def _coerce(other: Union["Index2D", int]) -> Optional["Index2D"]:
        if isinstance(other, Index2D):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Index2D(other, other)
        return None

    def __add__(self, other: Union["Index2D", int]) -> "Index2D":
        second = self._coerce(other)
        if second is None:
            return NotImplemented
        return Index2D(self.x + second.x, self.y + second.y)

    __radd__ = __add__

    def __sub__(self, other: Union["Index2D", int]) -> "Index2D":
        second = self._coerce(other)
        if second is None:
            return NotImplemented
        return Index2D(self.x - second.x, self.y - second.y)

    def __gt__(self, other: "Index2D") -> bool:
        if not isinstance(other, Index2D):
            return NotImplemented
        return self.x > other.x and self.y > other.y

    def __ge__(self, other: "Index2D") -> bool:
        if not isinstance(other, Index2D):
            return NotImplemented
        return self.x >= other.x and self.y >= other.y

    def __lt__(self, other: "Index2D") -> bool:
        if not isinstance(other, Index2D):
            return NotImplemented
        return self.x < other.x and self.y < other.y

    def __le__(self, other: "Index2D") -> bool:
        if not isinstance(other, Index2D):
            return NotImplemented
        return self.x <= other.x and self.y <= other.y

    def within(self, other: "Index2D") -> bool:
        """True if this index is strictly greater than ``other`` on both axes."""
        return self.x > other.x and self.y > other.y

    def distance(self, other: "Index2D") -> "Index2D":
        """Per-axis absolute distance between two indices."""
        return Index2D(abs(self.x - other.x), abs(self.y - other.y))

    def scale_vector(self, vector: Vector3) -> Vector3:
        """Multiply the X and Y components of a 3D vector by this index."""
        vx, vy, vz = vector
        return (vx * self.x, vy * self.y, vz)