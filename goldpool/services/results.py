from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from drawengine.types import DrawResultRecord

from ..db import session_scope
from ..models import DrawResultEntry


class DrawResultRepository:
    """SQL-backed result store; a new save replaces the previous draw."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger("goldpool.store")

    def save(self, records: Sequence[DrawResultRecord]) -> bool:
        try:
            with session_scope() as session:
                session.query(DrawResultEntry).delete()
                for position, record in enumerate(records):
                    session.add(DrawResultEntry.from_record(position, record))
        except SQLAlchemyError as exc:
            self._logger.exception("Saving %s draw results failed: %s", len(records), exc)
            return False
        self._logger.info("Saved %s draw results", len(records))
        return True

    def load(self) -> List[DrawResultRecord]:
        try:
            with session_scope() as session:
                entries = session.query(DrawResultEntry).order_by(DrawResultEntry.position).all()
                return [entry.to_record() for entry in entries]
        except SQLAlchemyError as exc:
            self._logger.exception("Loading draw results failed: %s", exc)
            return []

    def clear(self) -> bool:
        try:
            with session_scope() as session:
                removed = session.query(DrawResultEntry).delete()
        except SQLAlchemyError as exc:
            self._logger.exception("Clearing draw results failed: %s", exc)
            return False
        self._logger.info("Cleared %s draw results", removed)
        return True
