# shopsurvey/export.py
# -*- coding: utf-8 -*-
import csv

import pandas as pd

# 导出列顺序固定，id 在最前
EXPORT_COLUMNS = [
    "id", "timestamp", "storeName", "businessType", "monthlyRevenue", "foodCost", "laborCost", "rentCost",
    "dailyCustomers", "seats", "onlineRevenue", "marketingCost", "repeatPurchases", "totalCustomers",
    "utilityCost", "averageRating", "badReviews", "totalReviews", "socialMediaMentions",
    "serviceBadReviewRate", "tasteBadReviewRate", "userAgent", "ip",
]


def _cell(v):
    # REAL 列里的 4.0 导出成 4
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return v


def build_csv(rows) -> str:
    """
    Serialize rows (dicts keyed by column name) into one CSV document.

    Header is the bare column list; every data field is double-quoted with
    embedded quotes doubled, None becomes "". Lines are joined with "\\n" and
    there is no trailing newline.
    """
    df = pd.DataFrame(
        [[_cell(r.get(c)) for c in EXPORT_COLUMNS] for r in rows],
        columns=EXPORT_COLUMNS,
        dtype=object,
    )
    lines = [",".join(EXPORT_COLUMNS)]
    if len(df):
        body = df.to_csv(header=False, index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
        lines.append(body[:-1] if body.endswith("\n") else body)
    return "\n".join(lines)
