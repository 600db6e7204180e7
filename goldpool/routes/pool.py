from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from ..schemas import PoolSetupRequest
from ..services.pools import PoolRepository

bp = Blueprint("pool", __name__)
pool_repo = PoolRepository()


@bp.get("")
def get_pool():
    config = pool_repo.get_pool()
    if config is None:
        return jsonify({"error": "no pool configured"}), 404
    return jsonify(config.to_dict())


@bp.post("")
def save_pool():
    payload = request.get_json(force=True, silent=True) or {}
    data = PoolSetupRequest(**payload)

    config = pool_repo.save_pool(data.to_config())
    current_app.logger.info(
        "Pool saved: %s participants, %s %s per month for %s months",
        config.participant_count,
        config.monthly_amount,
        config.item_type.value,
        config.duration_months,
    )
    return jsonify(config.to_dict()), 201
