from __future__ import annotations

from typing import Optional

from drawengine.types import PoolConfiguration

from ..db import session_scope
from ..models import ParticipantEntry, Pool

POOL_ID = 1


class PoolRepository:
    def save_pool(self, config: PoolConfiguration) -> PoolConfiguration:
        """Replace the stored pool and its participants with ``config``."""

        with session_scope() as session:
            pool = session.get(Pool, POOL_ID)
            if pool is None:
                pool = Pool(id=POOL_ID)
                session.add(pool)
            pool.apply(config)

            session.query(ParticipantEntry).delete()
            for position, participant in enumerate(config.participants):
                session.add(
                    ParticipantEntry(id=participant.id, name=participant.name, position=position)
                )
            session.flush()
        return config

    def get_pool(self) -> Optional[PoolConfiguration]:
        with session_scope() as session:
            pool = session.get(Pool, POOL_ID)
            if pool is None:
                return None
            entries = session.query(ParticipantEntry).order_by(ParticipantEntry.position).all()
            return pool.to_config(entries)

    def delete_pool(self) -> bool:
        with session_scope() as session:
            pool = session.get(Pool, POOL_ID)
            session.query(ParticipantEntry).delete()
            if pool is None:
                return False
            session.delete(pool)
            return True
