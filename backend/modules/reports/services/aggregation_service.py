# backend/modules/reports/services/aggregation_service.py

import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from modules.sales.models.sales_models import Product, Sale, User
from ..schemas.report_schemas import AggregateResult, FilterSpec, ProductTotal, UserTotal
from ..utils.query_monitor import monitor_query_performance
from .filter_builder import FilterPredicate, build_predicates
from .reporting_store import ReportingStore

logger = logging.getLogger(__name__)


class AggregationService:
    """Grand total and per-user / per-product rankings for a filter"""

    def __init__(self, db: Session, store: Optional[ReportingStore] = None):
        self.db = db
        self.store = store or ReportingStore(db)

    @monitor_query_performance("reports.summarize")
    def summarize(self, filters: Optional[FilterSpec] = None) -> AggregateResult:
        """
        Compute the grand total and both rankings over the same matched set.

        Rankings are ordered by total descending, then by id ascending.
        """
        predicates = build_predicates(filters)

        with self.store.read_snapshot("sales summary"):
            total = self._grand_total(predicates)
            by_user = self._totals_by_user(predicates)
            by_product = self._totals_by_product(predicates)

        logger.info(
            f"Summary computed: total={total} users={len(by_user)} "
            f"products={len(by_product)}"
        )
        return AggregateResult(total=total, by_user=by_user, by_product=by_product)

    @monitor_query_performance("reports.grand_total")
    def grand_total(self, filters: Optional[FilterSpec] = None) -> Decimal:
        predicates = build_predicates(filters)
        with self.store.read_snapshot("grand total"):
            return self._grand_total(predicates)

    # Private helper methods

    def _total_column(self):
        return func.coalesce(func.sum(Sale.amount), 0).label("total")

    def _grand_total(self, predicates: List[FilterPredicate]) -> Decimal:
        query = self.db.query(func.coalesce(func.sum(Sale.amount), 0)).select_from(Sale)
        query = self.store.apply(query, predicates)
        return Decimal(str(query.scalar() or 0))

    def _totals_by_user(self, predicates: List[FilterPredicate]) -> List[UserTotal]:
        total = self._total_column()
        query = (
            self.db.query(Sale.user_id, User.username, User.full_name, total)
            .select_from(Sale)
            .outerjoin(User, Sale.user_id == User.id)
        )
        query = self.store.apply(query, predicates)
        query = query.group_by(Sale.user_id, User.username, User.full_name).order_by(
            total.desc(), Sale.user_id.asc()
        )

        return [
            UserTotal(
                id=row.user_id,
                username=row.username,
                full_name=row.full_name,
                total=Decimal(str(row.total or 0)),
            )
            for row in query.all()
        ]

    def _totals_by_product(self, predicates: List[FilterPredicate]) -> List[ProductTotal]:
        total = self._total_column()
        query = (
            self.db.query(Sale.product_id, Product.name, total)
            .select_from(Sale)
            .outerjoin(Product, Sale.product_id == Product.id)
            .filter(Sale.product_id.isnot(None))
        )
        query = self.store.apply(query, predicates)
        query = query.group_by(Sale.product_id, Product.name).order_by(
            total.desc(), Sale.product_id.asc()
        )

        return [
            ProductTotal(
                id=row.product_id,
                name=row.name,
                total=Decimal(str(row.total or 0)),
            )
            for row in query.all()
        ]
