# backend/modules/reports/routers/helpers.py

"""Shared dependencies for report endpoints"""

from typing import Optional

from fastapi import Query

from ..schemas.report_schemas import FilterSpec
from ..services.filter_builder import parse_filter


def get_report_filters(
    date_from: Optional[str] = Query(None, alias="from", description="Inclusive start date (YYYY-MM-DD)"),
    date_to: Optional[str] = Query(None, alias="to", description="Inclusive end date (YYYY-MM-DD)"),
    user_id: Optional[str] = Query(None, description="Only sales owned by this user"),
    product_id: Optional[str] = Query(None, description="Only sales of this product"),
) -> FilterSpec:
    """
    Parse report filter query parameters.

    Values arrive as raw strings so malformed input is reported as an
    INVALID_FILTER error rather than a generic request validation failure.
    """
    return parse_filter(date_from, date_to, user_id, product_id)
