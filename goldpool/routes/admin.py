from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from ..config import load_settings
from ..services.pools import PoolRepository
from ..services.results import DrawResultRepository
from .draw import get_draw_session

bp = Blueprint("admin", __name__)
pool_repo = PoolRepository()
result_repo = DrawResultRepository()


def _require_admin() -> bool:
    settings = load_settings()
    api_key = settings.admin_api_key
    if api_key:
        provided = request.headers.get("X-Admin-Token")
        if provided != api_key:
            return False
    return True


@bp.before_request
def verify_admin():
    if not _require_admin():
        return jsonify({"error": "unauthorized"}), 401
    return None


@bp.delete("/results")
def clear_results():
    if not result_repo.clear():
        return jsonify({"error": "failed to clear draw results"}), 500
    current_app.logger.info("Draw results cleared by admin")
    return jsonify({"cleared": True})


@bp.delete("/pool")
def delete_pool():
    removed = pool_repo.delete_pool()
    get_draw_session().discard()
    return jsonify({"deleted": removed})
