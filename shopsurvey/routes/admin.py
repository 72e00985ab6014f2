# shopsurvey/routes/admin.py
# -*- coding: utf-8 -*-
import logging
import re
from typing import Optional

from flask import Blueprint, Response, current_app, jsonify, request

from ..auth import require_admin
from ..export import build_csv
from ..store import StoreError

logger = logging.getLogger(__name__)

bp = Blueprint("admin", __name__)

DEFAULT_LIMIT = 100
MAX_LIMIT = 1000
MIN_LIMIT = 0
# SQLite INTEGER 上限
MAX_OFFSET = 2 ** 63 - 1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int_prefix(v: Optional[str]) -> Optional[int]:
    """'20abc' -> 20, 'abc' -> None; only the leading integer counts."""
    if v is None:
        return None
    m = _LEADING_INT.match(v)
    return int(m.group(1)) if m else None


def page_params(args):
    limit = parse_int_prefix(args.get("limit"))
    if limit is None:
        limit = DEFAULT_LIMIT
    limit = max(MIN_LIMIT, min(limit, MAX_LIMIT))

    offset = parse_int_prefix(args.get("offset"))
    offset = min(max(offset or 0, 0), MAX_OFFSET)
    return limit, offset


@bp.get("/surveys")
@require_admin
def list_surveys():
    limit, offset = page_params(request.args)
    store = current_app.extensions["survey_store"]
    try:
        rows = store.list_page(limit, offset)
    except StoreError:
        logger.exception("DB query error")
        return jsonify({"error": "Database error"}), 500
    return jsonify({"rows": rows, "limit": limit, "offset": offset})


@bp.get("/export")
@require_admin
def export_csv():
    store = current_app.extensions["survey_store"]
    try:
        rows = store.list_all()
    except StoreError:
        logger.exception("Export error")
        return jsonify({"error": "Database error"}), 500
    return Response(
        build_csv(rows),
        content_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="surveys.csv"'},
    )
