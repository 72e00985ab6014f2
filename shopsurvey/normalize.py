# shopsurvey/normalize.py
# -*- coding: utf-8 -*-
"""
把前端提交的任意字段归一成固定结构。

规则很宽松：缺失 / null / 空串 / 非数字 一律变成 None，绝不抛异常，
公开提交接口不会因为某个字段格式不对而拒绝整份问卷。
"""
import math
import re
from typing import Optional

TEXT_FIELDS = ("storeName", "businessType")

INT_FIELDS = (
    "monthlyRevenue", "foodCost", "laborCost", "rentCost",
    "dailyCustomers", "seats", "onlineRevenue", "marketingCost",
    "repeatPurchases", "totalCustomers", "utilityCost",
    "badReviews", "totalReviews", "socialMediaMentions",
)

FLOAT_FIELDS = ("averageRating", "serviceBadReviewRate", "tasteBadReviewRate")

# SQLite INTEGER 是有符号 64 位
_INT_MIN, _INT_MAX = -(2 ** 63), 2 ** 63 - 1

_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_PREFIXED_RE = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _to_number(v: object) -> Optional[float]:
    """Parse like a browser's Number(); None when the result is not a finite number."""
    if v is None or v == "":
        return None
    if isinstance(v, bool):
        return 1.0 if v else 0.0
    try:
        if isinstance(v, (int, float)):
            n = float(v)
        elif isinstance(v, str):
            s = v.strip()
            if _DECIMAL_RE.fullmatch(s):
                n = float(s)
            elif _PREFIXED_RE.fullmatch(s):
                n = float(int(s, 0))
            else:
                return None
        else:
            return None
    except OverflowError:
        return None
    return n if math.isfinite(n) else None


def to_int_or_null(v: object) -> Optional[int]:
    if isinstance(v, int) and not isinstance(v, bool):
        return v if _INT_MIN <= v <= _INT_MAX else None
    n = _to_number(v)
    if n is None:
        return None
    # half-up, 2.5 -> 3, -2.5 -> -2
    r = math.floor(n + 0.5)
    return r if _INT_MIN <= r <= _INT_MAX else None


def to_float_or_null(v: object) -> Optional[float]:
    return _to_number(v)


def _as_text(v: object) -> str:
    """Stringify a JSON value the way the browser form's String() would."""
    if v is None:
        return ""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float):
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "Infinity" if v > 0 else "-Infinity"
        if v.is_integer():
            return str(int(v))
    if isinstance(v, (list, tuple)):
        return ",".join(_as_text(x) for x in v)
    if isinstance(v, dict):
        return "[object Object]"
    return str(v)


def to_text_or_null(v: object) -> Optional[str]:
    if v is None:
        return None
    s = _as_text(v).strip()
    return s or None


def normalize_submission(payload: object) -> dict:
    """Return exactly the client fields, each coerced on its own; unknown keys are dropped."""
    if not isinstance(payload, dict):
        payload = {}
    data = {}
    for k in TEXT_FIELDS:
        data[k] = to_text_or_null(payload.get(k))
    for k in INT_FIELDS:
        data[k] = to_int_or_null(payload.get(k))
    for k in FLOAT_FIELDS:
        data[k] = to_float_or_null(payload.get(k))
    return data
