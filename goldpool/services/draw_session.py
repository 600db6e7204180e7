from __future__ import annotations

import logging
import random
import threading
from typing import List, Optional, Tuple

from drawengine.assembler import ResultAssembler
from drawengine.engine import DrawEngine
from drawengine.errors import InvalidState
from drawengine.spinner import next_rotation
from drawengine.types import DrawResultRecord, DrawState, EngineState, PoolConfiguration

from ..config import WheelSettings


class DrawSession:
    """The single live draw of the application.

    Holds the engine built from the stored pool, plays the part of the wheel
    animation when a client does not report its own resting angle, and hands
    the finished winner order to the assembler.
    """

    def __init__(
        self,
        wheel: WheelSettings,
        language: str,
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._wheel = wheel
        self._assembler = ResultAssembler(language=language)
        self._rng = rng
        self._logger = logger or logging.getLogger("goldpool.session")
        self._config: Optional[PoolConfiguration] = None
        self._engine: Optional[DrawEngine] = None
        # Flask may serve requests on several threads; engine transitions are check-then-set.
        self._lock = threading.Lock()

    @property
    def config(self) -> Optional[PoolConfiguration]:
        return self._config

    @property
    def active(self) -> bool:
        return self._engine is not None

    def _require_engine(self) -> DrawEngine:
        if self._engine is None:
            raise InvalidState("No draw has been started")
        return self._engine

    def start(self, config: PoolConfiguration) -> DrawState:
        engine = DrawEngine(config.participant_names)
        if engine.state is EngineState.AUTO_RESOLVED:
            engine.auto_resolve_last()
        with self._lock:
            self._config = config
            self._engine = engine
        self._logger.info("Draw started for %s participants", config.participant_count)
        return engine.snapshot()

    def snapshot(self) -> DrawState:
        with self._lock:
            return self._require_engine().snapshot()

    def spin(self, final_angle: Optional[float] = None) -> Tuple[float, List[str]]:
        with self._lock:
            engine = self._require_engine()
            if engine.state is not EngineState.IDLE:
                raise InvalidState(f"Cannot spin in state {engine.state.name}")
            if final_angle is None:
                final_angle = next_rotation(
                    engine.current_rotation,
                    self._rng,
                    self._wheel.min_turns,
                    self._wheel.max_turns,
                )
            declared = engine.spin(final_angle, self._wheel.pointer_angle)
        return final_angle, declared

    def reset(self) -> DrawState:
        with self._lock:
            engine = self._require_engine()
            engine.reset()
            if engine.state is EngineState.AUTO_RESOLVED:
                engine.auto_resolve_last()
            return engine.snapshot()

    def results(self) -> List[DrawResultRecord]:
        with self._lock:
            engine = self._require_engine()
            if not engine.is_complete or self._config is None:
                raise InvalidState(
                    f"Draw is not complete yet ({len(engine.remaining)} participants remaining)"
                )
            state, config = engine.snapshot(), self._config
        return self._assembler.assemble(state, config)

    def discard(self) -> None:
        with self._lock:
            self._engine = None
            self._config = None
