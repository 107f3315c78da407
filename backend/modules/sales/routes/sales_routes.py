# backend/modules/sales/routes/sales_routes.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from core.database import get_db
from core.auth import get_current_user, require_admin, User
from modules.reports.routers.helpers import get_report_filters
from modules.reports.schemas.report_schemas import FilterSpec, SaleRow
from modules.reports.services.projection_service import ProjectionService

from ..services.sales_service import SalesService
from ..schemas.sales_schemas import (
    SaleCreate, SaleCreatedResponse, ProductCreate, ProductResponse, UserResponse
)

router = APIRouter(prefix="/api", tags=["Sales"])


@router.post("/sales", response_model=SaleCreatedResponse)
async def record_sale(
    sale_data: SaleCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Record a sale with optional product, photo reference and GPS position."""
    sale = SalesService(db).record_sale(sale_data, current_user)
    return SaleCreatedResponse(id=sale.id)


@router.get("/sales", response_model=List[SaleRow])
async def list_sales(
    filters: FilterSpec = Depends(get_report_filters),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Matching sales, newest first, capped at the configured listing limit."""
    return ProjectionService(db).list_rows(filters)


@router.get("/products", response_model=List[ProductResponse])
async def list_products(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return SalesService(db).list_products()


@router.post("/products", response_model=ProductResponse)
async def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return SalesService(db).create_product(product_data)


@router.get("/users", response_model=List[UserResponse])
async def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return SalesService(db).list_users()
