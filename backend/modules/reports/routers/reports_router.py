# backend/modules/reports/routers/reports_router.py

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session
from typing import List
import logging

from core.database import get_db
from core.auth import get_current_user, require_admin, User
from modules.settings.services.settings_service import SettingsService

from ..constants import EXPORT_FILENAME
from ..services.aggregation_service import AggregationService
from ..services.export_service import ExportService
from ..services.notification_service import NotificationService
from ..schemas.report_schemas import AggregateResult, FilterSpec, Notification
from .helpers import get_report_filters

router = APIRouter(prefix="/api", tags=["Reports"])
logger = logging.getLogger(__name__)


@router.get("/reports/summary", response_model=AggregateResult)
async def get_sales_summary(
    filters: FilterSpec = Depends(get_report_filters),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Grand total with per-user and per-product rankings.

    A filter matching nothing returns a zero total and empty rankings;
    a store failure returns 503 rather than a partial summary.
    """
    return AggregationService(db).summarize(filters)


@router.get(
    "/reports/export",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}, "description": EXPORT_FILENAME}},
)
async def export_sales(
    filters: FilterSpec = Depends(get_report_filters),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Download every matching sale as CSV (not subject to the listing cap)."""
    logger.info(f"User {current_user.username} requested sales export")
    return ExportService(db).export_response(filters)


@router.get("/notifications", response_model=List[Notification])
async def get_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Target notifications; empty when no ``target_total`` is configured."""
    service = NotificationService(
        AggregationService(db),
        target_provider=SettingsService(db).target_provider(),
    )
    return service.check()
