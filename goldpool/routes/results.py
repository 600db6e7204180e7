from __future__ import annotations

from flask import Blueprint, jsonify

from drawengine.catalog import describe_item

from ..schemas import DrawResultResponse, ResultsResponse
from ..services.pools import PoolRepository
from ..services.results import DrawResultRepository

bp = Blueprint("results", __name__)
pool_repo = PoolRepository()
result_repo = DrawResultRepository()


@bp.get("")
def list_results():
    records = result_repo.load()
    config = pool_repo.get_pool()
    response = ResultsResponse(
        item=describe_item(config.item_type, config.specific_item) if config else None,
        results=[
            DrawResultResponse(position=position, **record.to_dict())
            for position, record in enumerate(records)
        ],
    )
    return jsonify(response.model_dump())
