# backend/modules/reports/schemas/report_schemas.py

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.sales.models.sales_models import MAX_INTEGER

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


class FilterSpec(BaseModel):
    """
    Normalized report filter.

    Every present field narrows the matched set (logical AND); a filter with
    every field absent matches all transactions. Dates are inclusive and
    compared against the calendar date of the transaction timestamp.
    """

    date_from: Optional[date] = Field(None, alias="from", description="Inclusive start date")
    date_to: Optional[date] = Field(None, alias="to", description="Inclusive end date")
    user_id: Optional[int] = Field(None, gt=0, le=MAX_INTEGER, description="Owning user")
    product_id: Optional[int] = Field(None, gt=0, le=MAX_INTEGER, description="Product sold")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def require_calendar_date(cls, v):
        """Accept only YYYY-MM-DD text, not timestamps or other lax forms."""
        if v is None or isinstance(v, date):
            return v
        if not isinstance(v, str) or not ISO_DATE_PATTERN.fullmatch(v):
            raise ValueError("expected YYYY-MM-DD")
        return v

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.date_from, self.date_to, self.user_id, self.product_id)
        )


class SaleRow(BaseModel):
    """Flattened transaction joined with its user and product labels"""

    id: int
    created_at: datetime
    user_id: Optional[int] = None
    username: Optional[str] = None
    product_id: Optional[int] = None
    product_name: Optional[str] = None
    quantity: int
    amount: Decimal
    notes: Optional[str] = None
    photo_path: Optional[str] = None
    gps_lat: Optional[float] = None
    gps_lng: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)


class UserTotal(BaseModel):
    id: int
    username: Optional[str] = None
    full_name: Optional[str] = None
    total: Decimal


class ProductTotal(BaseModel):
    id: int
    name: Optional[str] = None
    total: Decimal


class AggregateResult(BaseModel):
    """Grand total plus per-user and per-product rankings over one matched set"""

    total: Decimal = Field(Decimal("0"), description="Sum of matched amounts")
    by_user: List[UserTotal] = Field(default_factory=list, alias="byUser")
    by_product: List[ProductTotal] = Field(default_factory=list, alias="byProduct")

    model_config = ConfigDict(populate_by_name=True)


class NotificationLevel(str, Enum):
    INFO = "info"


class Notification(BaseModel):
    level: NotificationLevel = NotificationLevel.INFO
    message: str
