# backend/modules/reports/services/export_service.py

import csv
import io
import logging
from decimal import Decimal
from datetime import datetime
from typing import Any, Iterable, List, Optional

from fastapi.responses import Response
from sqlalchemy.orm import Session

from ..constants import EXPORT_COLUMNS, EXPORT_FILENAME, EXPORT_MEDIA_TYPE
from ..schemas.report_schemas import FilterSpec, SaleRow
from .projection_service import ProjectionService

logger = logging.getLogger(__name__)


class ExportService:
    """Service for exporting filtered sales as CSV"""

    def __init__(self, db: Session, projection: Optional[ProjectionService] = None):
        self.db = db
        self.projection = projection or ProjectionService(db)

    def export_filtered(self, filters: Optional[FilterSpec] = None) -> str:
        """Uncapped listing for ``filters`` serialized to CSV text"""
        rows = self.projection.list_rows(filters, capped=False)
        logger.info(f"Exporting {len(rows)} sales rows")
        return self.to_csv(rows)

    def export_response(self, filters: Optional[FilterSpec] = None) -> Response:
        content = self.export_filtered(filters)
        return Response(
            content=content.encode("utf-8"),
            media_type=EXPORT_MEDIA_TYPE,
            headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
        )

    @staticmethod
    def to_csv(rows: Iterable[SaleRow]) -> str:
        """
        Serialize rows with a fixed header, one line per row in input order.

        Output depends only on the rows, so equal input gives equal bytes.
        """
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(EXPORT_COLUMNS)
        for row in rows:
            writer.writerow(ExportService._format_csv_row(row))
        return output.getvalue()

    @staticmethod
    def _format_csv_row(row: SaleRow) -> List[str]:
        return [
            _format_value(row.id),
            _format_value(row.created_at),
            _format_value(row.username),
            _format_value(row.product_name),
            _format_value(row.quantity),
            _format_value(row.amount),
            _format_value(row.notes),
            _format_value(row.photo_path),
        ]


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)
