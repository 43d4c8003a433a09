"""Random value helpers."""

from __future__ import annotations

import random

_rng = random.SystemRandom()


def random_int(maximum: int, minimum: int = 0) -> int:
    """Return a uniformly distributed integer in ``[minimum, maximum]``."""
    if minimum > maximum:
        raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")
    return _rng.randint(minimum, maximum)


def random_bool(chance: float = 0.5) -> bool:
    """Return True with probability ``chance``."""
    if not 0.0 <= chance <= 1.0:
        raise ValueError(f"chance {chance} is outside [0, 1]")
    return _rng.random() < chance


def random_float(maximum: float = 1.0, minimum: float = 0.0) -> float:
    """Return a float in ``[minimum, maximum]`` quantised to steps of 1/256."""
    return random_int(int(maximum * 256), int(minimum * 256)) / 256.0