from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Iterable

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

from drawengine.types import DrawResultRecord, ItemType, Participant, PoolConfiguration

Base = declarative_base()


class Pool(Base):
    __tablename__ = "pools"

    id = Column(Integer, primary_key=True, default=1)
    participant_count = Column(Integer, nullable=False)
    item_type = Column(String(32), nullable=False)
    specific_item = Column(String(64), nullable=False, default="")
    # Stored as text so amounts keep their exact decimal value on every backend.
    monthly_amount = Column(String(64), nullable=False)
    duration_months = Column(Integer, nullable=False)
    start_month = Column(Integer, nullable=False)
    start_year = Column(Integer, nullable=False)
    updated_at = Column(DateTime, default=dt.datetime.utcnow, onupdate=dt.datetime.utcnow, nullable=False)

    def apply(self, config: PoolConfiguration) -> None:
        self.participant_count = config.participant_count
        self.item_type = config.item_type.value
        self.specific_item = config.specific_item
        self.monthly_amount = str(config.monthly_amount)
        self.duration_months = config.duration_months
        self.start_month = config.start_month
        self.start_year = config.start_year

    def to_config(self, participants: Iterable["ParticipantEntry"]) -> PoolConfiguration:
        return PoolConfiguration(
            participant_count=self.participant_count,
            participants=tuple(entry.to_participant() for entry in participants),
            item_type=ItemType(self.item_type),
            specific_item=self.specific_item or "",
            monthly_amount=Decimal(self.monthly_amount),
            duration_months=self.duration_months,
            start_month=self.start_month,
            start_year=self.start_year,
        )


class ParticipantEntry(Base):
    __tablename__ = "participants"

    id = Column(String(36), primary_key=True)
    name = Column(String(128), nullable=False)
    position = Column(Integer, nullable=False)

    def to_participant(self) -> Participant:
        return Participant(id=self.id, name=self.name)


class DrawResultEntry(Base):
    __tablename__ = "draw_results"

    id = Column(Integer, primary_key=True, autoincrement=True)
    position = Column(Integer, nullable=False)
    participant_id = Column(String(36), nullable=False)
    participant_name = Column(String(128), nullable=False)
    month = Column(String(64), nullable=False)
    amount = Column(String(64), nullable=False)
    created_at = Column(DateTime, default=dt.datetime.utcnow, nullable=False)

    @classmethod
    def from_record(cls, position: int, record: DrawResultRecord) -> "DrawResultEntry":
        return cls(
            position=position,
            participant_id=record.participant_id,
            participant_name=record.participant_name,
            month=record.month,
            amount=record.amount,
        )

    def to_record(self) -> DrawResultRecord:
        return DrawResultRecord(
            participant_id=self.participant_id,
            participant_name=self.participant_name,
            month=self.month,
            amount=self.amount,
        )
