# backend/modules/sales/schemas/sales_schemas.py

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.sales_models import MAX_INTEGER


class SaleCreate(BaseModel):
    """Request schema for recording a sale"""

    user_id: Optional[int] = Field(
        None, gt=0, le=MAX_INTEGER, description="Owner; defaults to the caller"
    )
    product_id: Optional[int] = Field(
        None, gt=0, le=MAX_INTEGER, description="Product sold, if any"
    )
    quantity: int = Field(1, ge=0, le=MAX_INTEGER, description="Units sold")
    amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Sale amount")
    notes: str = Field("", max_length=2000)
    photo_path: Optional[str] = Field(
        None, max_length=500, description="Reference returned by photo storage"
    )
    gps_lat: Optional[float] = Field(None, ge=-90, le=90)
    gps_lng: Optional[float] = Field(None, ge=-180, le=180)


class SaleCreatedResponse(BaseModel):
    id: int


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    sku: Optional[str] = Field(None, max_length=100)
    price: Decimal = Field(Decimal("0"), ge=0, max_digits=12, decimal_places=2)


class ProductResponse(BaseModel):
    id: int
    name: str
    sku: Optional[str] = None
    price: Decimal

    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    id: int
    username: str
    role: str
    full_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
