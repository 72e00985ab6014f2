# shopsurvey/routes/public.py
# -*- coding: utf-8 -*-
import logging
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request

from ..normalize import normalize_submission
from ..store import StoreError

logger = logging.getLogger(__name__)

bp = Blueprint("public", __name__)


def utc_now_iso() -> str:
    """2026-10-18T09:30:00.123Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@bp.get("/health")
def health():
    return jsonify({"ok": True, "time": utc_now_iso()})


@bp.post("/saveSurvey")
def save_survey():
    # 前端已经校验过必填项，这里只做类型归一，不因字段格式拒绝
    payload = {}
    if request.is_json:
        payload = request.get_json(silent=True)
        if payload is None and request.get_data():
            return jsonify({"error": "Invalid JSON"}), 400

    data = {"timestamp": utc_now_iso()}
    data.update(normalize_submission(payload))
    data["userAgent"] = request.headers.get("User-Agent") or None
    data["ip"] = request.remote_addr or ""

    store = current_app.extensions["survey_store"]
    try:
        new_id = store.insert(data)
    except StoreError:
        logger.exception("DB insert error")
        return jsonify({"error": "Database error"}), 500
    return jsonify({"ok": True, "id": new_id})
