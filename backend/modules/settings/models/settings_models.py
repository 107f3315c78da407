# backend/modules/settings/models/settings_models.py

"""
Key/value settings storage.
"""

from sqlalchemy import Column, Integer, String, Text

from core.database import Base
from core.mixins import UpdatedTimestampMixin


class SettingKey:
    """Well-known setting keys"""

    TARGET_TOTAL = "target_total"


class Setting(Base, UpdatedTimestampMixin):
    """A single configuration value addressed by key"""

    __tablename__ = "settings"

    id = Column(Integer, primary_key=True)
    key = Column(String(100), nullable=False, unique=True, index=True)
    value = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Setting(key='{self.key}', value='{self.value}')>"
