from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from drawengine.types import ItemType, Participant, PoolConfiguration

MIN_PARTICIPANTS = 2


class PoolSetupRequest(BaseModel):
    participants: List[str] = Field(..., description="Participant names in wheel order.")
    participant_count: Optional[int] = Field(
        None, description="Expected number of participants; defaults to the list length."
    )
    item_type: ItemType
    specific_item: str = Field("", description="Currency or gold code; required unless CASH.")
    monthly_amount: Decimal = Field(..., gt=0)
    duration_months: int = Field(..., gt=0)
    start_month: int = Field(..., ge=1, le=12)
    start_year: int = Field(..., ge=1, le=9999)

    @field_validator("participants")
    @classmethod
    def validate_participants(cls, value: List[str]) -> List[str]:
        names = [name.strip() for name in value]
        if len(names) < MIN_PARTICIPANTS:
            raise ValueError(f"At least {MIN_PARTICIPANTS} participants are required.")
        if any(not name for name in names):
            raise ValueError("Participant names must not be blank.")
        seen = set()
        for name in names:
            key = name.casefold()
            if key in seen:
                raise ValueError(f"Participant names must be unique: {name!r} appears twice.")
            seen.add(key)
        return names

    @field_validator("specific_item")
    @classmethod
    def strip_specific_item(cls, value: str) -> str:
        return value.strip()

    @model_validator(mode="after")
    def validate_pool(self) -> "PoolSetupRequest":
        if self.participant_count is None:
            self.participant_count = len(self.participants)
        if self.participant_count <= 0:
            raise ValueError("Participant count must be positive.")
        if self.participant_count != len(self.participants):
            raise ValueError(
                f"Participant count {self.participant_count} does not match "
                f"the {len(self.participants)} names given."
            )
        if self.item_type.requires_specific_item and not self.specific_item:
            raise ValueError(f"A specific item must be selected for {self.item_type.value}.")
        return self

    def to_config(self) -> PoolConfiguration:
        return PoolConfiguration(
            participant_count=len(self.participants),
            participants=tuple(Participant.create(name) for name in self.participants),
            item_type=self.item_type,
            specific_item=self.specific_item,
            monthly_amount=self.monthly_amount,
            duration_months=self.duration_months,
            start_month=self.start_month,
            start_year=self.start_year,
        )


class SpinRequest(BaseModel):
    final_angle: Optional[float] = Field(
        None,
        allow_inf_nan=False,
        description="Resting angle of the wheel; generated server-side when omitted.",
    )


class DrawStateResponse(BaseModel):
    status: str
    remaining: List[str]
    winners: List[str]
    current_rotation: float
    drawing: bool


class SpinResponse(BaseModel):
    final_angle: float
    winners: List[str]
    complete: bool
    state: DrawStateResponse


class DrawResultResponse(BaseModel):
    position: int
    participant_id: str
    participant_name: str
    month: str
    amount: str


class ResultsResponse(BaseModel):
    item: Optional[str] = None
    results: List[DrawResultResponse]
