"""Draw allocation engine for gold-day savings pools."""

from .assembler import ResultAssembler
from .catalog import CURRENCY_CODE_TO_NAME, GOLD_CODE_TO_NAME, describe_item
from .engine import DrawEngine, normalize_angle, run_draw, winner_index
from .errors import (
    DrawEngineError,
    FormattingFailure,
    InvalidAngle,
    InvalidState,
    MissingParticipant,
)
from .months import month_positions, sequence_months
from .payout import compute_amount, format_amount
from .spinner import next_rotation
from .store import JsonResultStore, ResultStore
from .types import (
    DrawResultRecord,
    DrawState,
    EngineState,
    ItemType,
    Participant,
    PoolConfiguration,
)

__all__ = [
    "CURRENCY_CODE_TO_NAME",
    "DrawEngine",
    "DrawEngineError",
    "DrawResultRecord",
    "DrawState",
    "EngineState",
    "FormattingFailure",
    "GOLD_CODE_TO_NAME",
    "InvalidAngle",
    "InvalidState",
    "ItemType",
    "JsonResultStore",
    "MissingParticipant",
    "Participant",
    "PoolConfiguration",
    "ResultAssembler",
    "ResultStore",
    "compute_amount",
    "describe_item",
    "format_amount",
    "month_positions",
    "next_rotation",
    "normalize_angle",
    "run_draw",
    "sequence_months",
    "winner_index",
]
