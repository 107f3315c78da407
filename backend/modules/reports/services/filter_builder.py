"""
Filter predicate construction for reporting queries.

A request's optional ``from``/``to``/``user_id``/``product_id`` values are
validated into a ``FilterSpec`` and then turned into typed predicates. The
predicates carry values only; column resolution happens against a
whitelist in the reporting store, so nothing user-supplied is ever
formatted into SQL text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError

from core.error_handling import InvalidFilter
from ..constants import ERROR_MESSAGES
from ..schemas.report_schemas import FilterSpec


class FilterField(str, Enum):
    """Filterable fields (validated against the store's column whitelist)"""

    CREATED_DATE = "created_date"
    USER_ID = "user_id"
    PRODUCT_ID = "product_id"


class FilterOperator(str, Enum):
    GTE = ">="
    LTE = "<="
    EQ = "="


@dataclass(frozen=True)
class FilterPredicate:
    field: FilterField
    operator: FilterOperator
    value: Any


def build_predicates(filters: Optional[FilterSpec]) -> List[FilterPredicate]:
    """
    Build the ordered predicate list for a filter.

    Order is always from, to, user_id, product_id; absent fields produce
    no predicate.
    """
    if filters is None:
        return []

    predicates = []
    if filters.date_from is not None:
        predicates.append(
            FilterPredicate(FilterField.CREATED_DATE, FilterOperator.GTE, filters.date_from)
        )
    if filters.date_to is not None:
        predicates.append(
            FilterPredicate(FilterField.CREATED_DATE, FilterOperator.LTE, filters.date_to)
        )
    if filters.user_id is not None:
        predicates.append(
            FilterPredicate(FilterField.USER_ID, FilterOperator.EQ, filters.user_id)
        )
    if filters.product_id is not None:
        predicates.append(
            FilterPredicate(FilterField.PRODUCT_ID, FilterOperator.EQ, filters.product_id)
        )
    return predicates


def bound_values(predicates: List[FilterPredicate]) -> Tuple[Any, ...]:
    """Predicate values in binding order"""
    return tuple(predicate.value for predicate in predicates)


def parse_filter(
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    user_id: Optional[str] = None,
    product_id: Optional[str] = None,
) -> FilterSpec:
    """
    Validate raw request values into a FilterSpec.

    Blank values count as absent. Raises InvalidFilter for a malformed date
    or identifier before any query runs.
    """
    raw = {
        "from": _blank_to_none(date_from),
        "to": _blank_to_none(date_to),
        "user_id": _blank_to_none(user_id),
        "product_id": _blank_to_none(product_id),
    }

    try:
        return FilterSpec.model_validate(raw)
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error.get("loc") else "filter"
        template = (
            ERROR_MESSAGES["invalid_date"]
            if field in ("from", "to")
            else ERROR_MESSAGES["invalid_id"]
        )
        raise InvalidFilter(template.format(field=field, value=raw.get(field)), field=field)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None
