# backend/modules/settings/schemas/settings_schemas.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SettingUpdate(BaseModel):
    """Request body for writing a setting"""

    value: Optional[str] = Field(None, max_length=1000, description="Raw setting value")


class SettingResponse(BaseModel):
    key: str
    value: Optional[str] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
