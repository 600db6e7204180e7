"""Elimination draw on a spinning wheel.

Angle convention
----------------
All angles are degrees measured clockwise. Slice ``i`` of the unrotated wheel
spans ``[i * slice, (i + 1) * slice)`` clockwise from the top of the wheel
(screen angle -90°). Rotating the wheel by ``r`` moves every slice clockwise by
``r``. The pointer sits ``pointer_angle`` degrees clockwise from the top, so the
default ``0`` is a pointer fixed at the top. The slice under the pointer after a
rotation of ``r`` is therefore the one containing ``(pointer_angle - r) mod 360``.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Sequence

from .errors import InvalidAngle, InvalidState
from .types import DrawState, EngineState

DEFAULT_POINTER_ANGLE = 0.0


def normalize_angle(angle: float) -> float:
    """Map any real angle into ``[0, 360)``."""

    normalized = float(angle) % 360.0
    # -1e-20 % 360.0 rounds up to 360.0 in floating point.
    return 0.0 if normalized >= 360.0 else normalized


def _require_finite(*angles: float) -> None:
    for angle in angles:
        if not math.isfinite(angle):
            raise InvalidAngle(f"Angle must be finite, got {angle!r}")


def winner_index(
    count: int,
    final_angle: float,
    pointer_angle: float = DEFAULT_POINTER_ANGLE,
) -> int:
    """Return the index of the slice under the pointer once the wheel settles.

    Parameters
    ----------
    count : int
        Number of slices (remaining participants) on the wheel.
    final_angle : float
        Total rotation of the wheel when it came to rest. Full turns are
        irrelevant; negative values are accepted.
    pointer_angle : float, default: 0.0
        Pointer position, clockwise from the top of the wheel.

    Returns
    -------
    int
        Index into the remaining participants, in ``range(count)``.

    Raises
    ------
    InvalidAngle
        If ``final_angle`` or ``pointer_angle`` is NaN or infinite.
    """

    if count <= 0:
        raise ValueError("count must be positive")
    _require_finite(final_angle, pointer_angle)
    slice_angle = 360.0 / count
    relative = normalize_angle(360.0 - normalize_angle(final_angle) + pointer_angle)
    return int(math.floor(relative / slice_angle)) % count


class DrawEngine:
    """Owns the remaining/winner lists of one draw and guards their transitions.

    The engine never produces rotation values. A presentation collaborator
    animates the wheel and reports the resting angle through
    :meth:`resolve_spin`.
    """

    def __init__(
        self,
        participants: Iterable[str],
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._logger = logger or logging.getLogger("goldpool.engine")
        self._initial: List[str] = []
        self._remaining: List[str] = []
        self._winners: List[str] = []
        self._rotation = 0.0
        self._state = EngineState.IDLE
        self.initialize(participants)

    def initialize(self, participants: Iterable[str]) -> None:
        names = list(participants)
        if not names:
            raise InvalidState("A draw needs at least one participant")
        self._initial = names
        self._start()
        self._logger.debug("Draw initialised with %s participants", len(names))

    def _start(self) -> None:
        self._remaining = list(self._initial)
        self._winners = []
        self._rotation = 0.0
        self._state = EngineState.IDLE if len(self._remaining) > 1 else EngineState.AUTO_RESOLVED

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def remaining(self) -> List[str]:
        return list(self._remaining)

    @property
    def winners(self) -> List[str]:
        return list(self._winners)

    @property
    def current_rotation(self) -> float:
        return self._rotation

    @property
    def is_complete(self) -> bool:
        return self._state is EngineState.COMPLETE

    def snapshot(self) -> DrawState:
        return DrawState(
            remaining=tuple(self._remaining),
            winners=tuple(self._winners),
            current_rotation=self._rotation,
            drawing=self._state is EngineState.SPINNING,
            status=self._state,
        )

    def begin_spin(self) -> None:
        if self._state is not EngineState.IDLE or len(self._remaining) <= 1:
            raise InvalidState(
                f"Cannot start a spin in state {self._state.name} "
                f"with {len(self._remaining)} remaining"
            )
        self._state = EngineState.SPINNING

    def resolve_spin(
        self,
        final_angle: float,
        pointer_angle: float = DEFAULT_POINTER_ANGLE,
    ) -> str:
        """Declare the participant under the pointer the winner of this spin."""

        if self._state is not EngineState.SPINNING:
            raise InvalidState(f"No spin in progress (state {self._state.name})")

        index = winner_index(len(self._remaining), final_angle, pointer_angle)
        selected = self._remaining.pop(index)
        self._winners.append(selected)
        self._rotation = float(final_angle)
        self._state = EngineState.RESOLVED
        self._logger.info(
            "Spin settled at %.2f; winner #%s is %s", final_angle, len(self._winners), selected
        )

        self._state = EngineState.IDLE if len(self._remaining) > 1 else EngineState.AUTO_RESOLVED
        return selected

    def auto_resolve_last(self) -> str:
        """Declare the single remaining participant the final winner."""

        if self._state is EngineState.SPINNING or len(self._remaining) != 1:
            raise InvalidState(
                f"Auto-resolve needs exactly one remaining participant outside a spin "
                f"(state {self._state.name}, {len(self._remaining)} remaining)"
            )
        last = self._remaining.pop()
        self._winners.append(last)
        self._state = EngineState.COMPLETE
        self._logger.info("Last participant %s declared winner #%s", last, len(self._winners))
        return last

    def spin(
        self,
        final_angle: float,
        pointer_angle: float = DEFAULT_POINTER_ANGLE,
    ) -> List[str]:
        """Run one control-loop step and return the winners it produced.

        A spin that leaves a single participant behind also declares that
        participant, so a pool of two completes after one call.
        """

        # Checked before begin_spin so a bad angle cannot leave the wheel spinning.
        _require_finite(final_angle, pointer_angle)
        self.begin_spin()
        declared = [self.resolve_spin(final_angle, pointer_angle)]
        if self._state is EngineState.AUTO_RESOLVED:
            declared.append(self.auto_resolve_last())
        return declared

    def reset(self) -> None:
        self._start()
        self._logger.info("Draw reset with %s participants", len(self._initial))


def run_draw(
    participants: Sequence[str],
    angles: Iterable[float],
    pointer_angle: float = DEFAULT_POINTER_ANGLE,
) -> List[str]:
    """Drive a complete draw from a feed of resting angles.

    Raises
    ------
    InvalidState
        If ``angles`` runs out before the draw completes.
    """

    engine = DrawEngine(participants)
    if engine.state is EngineState.AUTO_RESOLVED:
        engine.auto_resolve_last()
    feed = iter(angles)
    while not engine.is_complete:
        try:
            angle = next(feed)
        except StopIteration:
            raise InvalidState(
                f"Angle feed exhausted with {len(engine.remaining)} participants left"
            ) from None
        engine.spin(angle, pointer_angle)
    return engine.winners


__all__ = [
    "DEFAULT_POINTER_ANGLE",
    "DrawEngine",
    "normalize_angle",
    "run_draw",
    "winner_index",
]
