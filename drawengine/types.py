from __future__ import annotations

import secrets
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Any, Dict, Mapping, Sequence, Tuple


class ItemType(str, Enum):
    CASH = "CASH"
    FOREIGN_CURRENCY = "FOREIGN_CURRENCY"
    PRECIOUS_METAL = "PRECIOUS_METAL"

    @property
    def display_name(self) -> str:
        return _ITEM_TYPE_DISPLAY[self]

    @property
    def requires_specific_item(self) -> bool:
        return self is not ItemType.CASH


_ITEM_TYPE_DISPLAY = {
    ItemType.CASH: "TL",
    ItemType.FOREIGN_CURRENCY: "Döviz",
    ItemType.PRECIOUS_METAL: "Altın",
}


class EngineState(IntEnum):
    IDLE = 0
    SPINNING = 1
    RESOLVED = 2
    AUTO_RESOLVED = 3
    COMPLETE = 4


@dataclass(frozen=True)
class Participant:
    id: str
    name: str

    @classmethod
    def create(cls, name: str) -> "Participant":
        return cls(id=secrets.token_hex(8), name=name)

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class PoolConfiguration:
    """Settings of one savings pool, fixed for the lifetime of a draw.

    ``participants`` keeps the order in which members were entered; that order
    is also the initial slice order on the wheel.
    """

    participant_count: int
    participants: Tuple[Participant, ...]
    item_type: ItemType
    specific_item: str
    monthly_amount: Decimal
    duration_months: int
    start_month: int
    start_year: int

    def __post_init__(self) -> None:
        # Accept lists from callers while keeping the stored value immutable.
        if not isinstance(self.participants, tuple):
            object.__setattr__(self, "participants", tuple(self.participants))
        if not isinstance(self.monthly_amount, Decimal):
            object.__setattr__(self, "monthly_amount", Decimal(str(self.monthly_amount)))

    @property
    def participant_names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.participants)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "participant_count": self.participant_count,
            "participants": [p.to_dict() for p in self.participants],
            "item_type": self.item_type.value,
            "specific_item": self.specific_item,
            "monthly_amount": str(self.monthly_amount),
            "duration_months": self.duration_months,
            "start_month": self.start_month,
            "start_year": self.start_year,
        }


@dataclass(frozen=True)
class DrawState:
    """Read-only snapshot of a :class:`~drawengine.engine.DrawEngine`."""

    remaining: Tuple[str, ...]
    winners: Tuple[str, ...]
    current_rotation: float
    drawing: bool
    status: EngineState = EngineState.IDLE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "remaining": list(self.remaining),
            "winners": list(self.winners),
            "current_rotation": self.current_rotation,
            "drawing": self.drawing,
            "status": self.status.name,
        }


@dataclass(frozen=True)
class DrawResultRecord:
    participant_id: str
    participant_name: str
    month: str
    amount: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "participant_id": self.participant_id,
            "participant_name": self.participant_name,
            "month": self.month,
            "amount": self.amount,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "DrawResultRecord":
        try:
            return cls(
                participant_id=str(payload["participant_id"]),
                participant_name=str(payload["participant_name"]),
                month=str(payload["month"]),
                amount=str(payload["amount"]),
            )
        except KeyError as exc:
            raise ValueError(f"Missing draw result field: {exc.args[0]}") from exc


def records_to_dicts(records: Sequence[DrawResultRecord]) -> list:
    return [record.to_dict() for record in records]


__all__ = [
    "DrawResultRecord",
    "DrawState",
    "EngineState",
    "ItemType",
    "Participant",
    "PoolConfiguration",
    "records_to_dicts",
]
