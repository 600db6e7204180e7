from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from drawengine.types import DrawState, EngineState

from ..schemas import DrawResultResponse, DrawStateResponse, SpinRequest, SpinResponse
from ..services.draw_session import DrawSession
from ..services.pools import PoolRepository
from ..services.results import DrawResultRepository

SESSION_KEY = "goldpool.draw_session"

bp = Blueprint("draw", __name__)
pool_repo = PoolRepository()
result_repo = DrawResultRepository()


def get_draw_session() -> DrawSession:
    return current_app.extensions[SESSION_KEY]


def _state_response(state: DrawState) -> DrawStateResponse:
    return DrawStateResponse(**state.to_dict())


@bp.post("/start")
def start_draw():
    config = pool_repo.get_pool()
    if config is None:
        return jsonify({"error": "no pool configured"}), 404

    state = get_draw_session().start(config)
    return jsonify(_state_response(state).model_dump()), 201


@bp.get("")
def get_draw():
    state = get_draw_session().snapshot()
    return jsonify(_state_response(state).model_dump())


@bp.post("/spin")
def spin():
    payload = request.get_json(force=True, silent=True) or {}
    data = SpinRequest(**payload)

    session = get_draw_session()
    final_angle, declared = session.spin(data.final_angle)
    state = session.snapshot()
    response = SpinResponse(
        final_angle=final_angle,
        winners=declared,
        complete=state.status is EngineState.COMPLETE,
        state=_state_response(state),
    )
    return jsonify(response.model_dump())


@bp.post("/reset")
def reset_draw():
    state = get_draw_session().reset()
    return jsonify(_state_response(state).model_dump())


@bp.post("/results")
def save_results():
    records = get_draw_session().results()
    if not result_repo.save(records):
        return jsonify({"error": "failed to save draw results"}), 500

    response = [
        DrawResultResponse(position=position, **record.to_dict()).model_dump()
        for position, record in enumerate(records)
    ]
    return jsonify(response), 201
