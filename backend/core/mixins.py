from sqlalchemy import Column, DateTime
from sqlalchemy.sql import func


class TimestampMixin:
    created_at = Column(DateTime, default=func.now(), nullable=False, index=True)


class UpdatedTimestampMixin(TimestampMixin):
    updated_at = Column(DateTime, default=func.now(),
                        onupdate=func.now(), nullable=False)
