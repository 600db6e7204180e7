from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, jsonify

from drawengine.catalog import CURRENCY_CODE_TO_NAME, GOLD_CODE_TO_NAME
from drawengine.types import ItemType

from ..config import load_settings

bp = Blueprint("config", __name__)


def _get_draw_metadata() -> Dict[str, Any]:
    settings = load_settings()
    return {
        "language": settings.language,
        "pointer_angle": settings.wheel.pointer_angle,
        "item_types": [
            {"value": item_type.value, "display_name": item_type.display_name}
            for item_type in ItemType
        ],
        "currencies": CURRENCY_CODE_TO_NAME,
        "gold": GOLD_CODE_TO_NAME,
    }


@bp.get("/config")
def get_config():
    return jsonify(_get_draw_metadata())
