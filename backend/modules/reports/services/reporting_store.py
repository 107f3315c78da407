"""
Read access to the transaction store for reporting.

``ReportingStore`` resolves typed filter predicates against a fixed column
whitelist and scopes reads so that store failures surface as
``StoreUnavailable``.

Snapshot consistency: PostgreSQL sessions run each ``read_snapshot`` block
in a REPEATABLE READ transaction, so every statement in the block sees the
same data. Other backends (SQLite in tests and local development) only
guarantee per-statement consistency; a sale committed between two
statements of one block may be counted by the later statement only.

A block entered while the session already has a transaction open reuses
that transaction at its existing isolation level and logs this at debug
level; only blocks that open their own transaction get REPEATABLE READ.
"""

from contextlib import contextmanager
from typing import Iterator, List
import logging
import operator

from sqlalchemy import Date, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from core.error_handling import StoreUnavailable
from modules.sales.models.sales_models import Sale
from .filter_builder import FilterField, FilterOperator, FilterPredicate, bound_values

logger = logging.getLogger(__name__)

SNAPSHOT_DIALECTS = {"postgresql"}

COLUMN_WHITELIST = {
    FilterField.CREATED_DATE: lambda: func.date(Sale.created_at, type_=Date),
    FilterField.USER_ID: lambda: Sale.user_id,
    FilterField.PRODUCT_ID: lambda: Sale.product_id,
}

OPERATORS = {
    FilterOperator.GTE: operator.ge,
    FilterOperator.LTE: operator.le,
    FilterOperator.EQ: operator.eq,
}


def to_clause(predicate: FilterPredicate):
    """Translate one predicate into a bound SQLAlchemy expression"""
    if predicate.field not in COLUMN_WHITELIST:
        raise ValueError(f"Field '{predicate.field}' is not filterable")
    if predicate.operator not in OPERATORS:
        raise ValueError(f"Operator '{predicate.operator}' is not allowed")

    column = COLUMN_WHITELIST[predicate.field]()
    return OPERATORS[predicate.operator](column, predicate.value)


class ReportingStore:
    """Session wrapper used by every reporting service"""

    def __init__(self, db: Session):
        self.db = db

    @property
    def consistent_read(self) -> bool:
        """True when a read_snapshot block sees a single database snapshot"""
        bind = self.db.get_bind()
        return bind.dialect.name in SNAPSHOT_DIALECTS

    def apply(self, query: Query, predicates: List[FilterPredicate]) -> Query:
        if not predicates:
            return query
        logger.debug(
            f"Applying {len(predicates)} predicates: "
            f"{[p.field.value + ' ' + p.operator.value for p in predicates]} "
            f"values={bound_values(predicates)}"
        )
        return query.filter(*[to_clause(p) for p in predicates])

    @contextmanager
    def read_snapshot(self, operation: str) -> Iterator["ReportingStore"]:
        """
        Scope a group of reads.

        Any SQLAlchemy error inside the block aborts it with StoreUnavailable;
        no partial result escapes.
        """
        owns_transaction = False
        try:
            if not self.consistent_read:
                logger.debug(
                    f"{operation}: store has no snapshot reads, "
                    "results are consistent per statement only"
                )
            elif self.db.in_transaction():
                logger.debug(
                    f"{operation}: session transaction already open, "
                    "reads keep its isolation level"
                )
            else:
                self.db.connection(
                    execution_options={"isolation_level": "REPEATABLE READ"}
                )
                owns_transaction = True
            yield self
        except SQLAlchemyError as e:
            logger.error(f"Store failure during {operation}: {e}")
            self.db.rollback()
            owns_transaction = False
            raise StoreUnavailable(operation, str(e)) from e
        finally:
            if owns_transaction:
                # Read-only transaction; ending it releases the snapshot
                self.db.rollback()
