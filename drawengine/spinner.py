from __future__ import annotations

import random
from typing import Optional

DEFAULT_MIN_TURNS = 2.0
DEFAULT_MAX_TURNS = 5.0


def next_rotation(
    current_rotation: float,
    rng: Optional[random.Random] = None,
    min_turns: float = DEFAULT_MIN_TURNS,
    max_turns: float = DEFAULT_MAX_TURNS,
) -> float:
    """Return the resting angle of a wheel pushed from ``current_rotation``.

    Stands in for the wheel animation: the wheel turns clockwise by a random
    number of full turns in ``[min_turns, max_turns)`` and stops wherever that
    lands.
    """

    if min_turns < 0 or max_turns < min_turns:
        raise ValueError("Expected 0 <= min_turns <= max_turns")
    source = rng or random.SystemRandom()
    turns = min_turns + (max_turns - min_turns) * source.random()
    return current_rotation + turns * 360.0


__all__ = ["DEFAULT_MAX_TURNS", "DEFAULT_MIN_TURNS", "next_rotation"]
