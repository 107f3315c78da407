# backend/modules/reports/services/projection_service.py

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from core.config import settings
from modules.sales.models.sales_models import Product, Sale, User
from ..schemas.report_schemas import FilterSpec, SaleRow
from ..utils.query_monitor import monitor_query_performance
from .filter_builder import build_predicates
from .reporting_store import ReportingStore

logger = logging.getLogger(__name__)


class ProjectionService:
    """Flat transaction listing joined with user and product labels"""

    def __init__(self, db: Session, store: Optional[ReportingStore] = None):
        self.db = db
        self.store = store or ReportingStore(db)

    @monitor_query_performance("reports.list_rows")
    def list_rows(
        self, filters: Optional[FilterSpec] = None, capped: bool = True
    ) -> List[SaleRow]:
        """
        Matching transactions, newest first (ties broken by id descending).

        Capped at the configured listing limit unless ``capped`` is False,
        which export uses.
        """
        limit = settings.max_list_rows if capped else None

        with self.store.read_snapshot("sales listing"):
            query = (
                self.db.query(
                    Sale.id,
                    Sale.created_at,
                    Sale.user_id,
                    User.username,
                    Sale.product_id,
                    Product.name.label("product_name"),
                    Sale.quantity,
                    Sale.amount,
                    Sale.notes,
                    Sale.photo_path,
                    Sale.gps_lat,
                    Sale.gps_lng,
                )
                .select_from(Sale)
                .outerjoin(User, Sale.user_id == User.id)
                .outerjoin(Product, Sale.product_id == Product.id)
            )
            query = self.store.apply(query, build_predicates(filters))
            query = query.order_by(Sale.created_at.desc(), Sale.id.desc())
            if limit is not None:
                query = query.limit(limit)
            rows = query.all()

        if limit is not None and len(rows) == limit:
            logger.info(f"Sales listing truncated at {limit} rows; narrow the filter")

        return [SaleRow(**row._asdict()) for row in rows]
