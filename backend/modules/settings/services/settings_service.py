# backend/modules/settings/services/settings_service.py

"""
Service for the key/value settings store.
"""

from decimal import Decimal, InvalidOperation
from typing import Callable, Optional
import logging
import re

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.error_handling import APIValidationError, NotFoundError, StoreUnavailable
from ..models.settings_models import Setting, SettingKey

logger = logging.getLogger(__name__)

KEY_PATTERN = re.compile(r"^[a-z][a-z0-9_.]{0,99}$")


class SettingsService:
    """Read and write settings by key"""

    def __init__(self, db: Session):
        self.db = db

    def get_value(self, key: str) -> Optional[str]:
        """Return the raw value stored under ``key``, or None when absent."""
        try:
            setting = self.db.query(Setting).filter(Setting.key == key).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to read setting '{key}': {e}")
            raise StoreUnavailable("settings lookup", str(e))
        return setting.value if setting else None

    def get_setting(self, key: str) -> Setting:
        self._validate_key(key)
        setting = self.db.query(Setting).filter(Setting.key == key).first()
        if not setting:
            raise NotFoundError("Setting", key)
        return setting

    def set_value(self, key: str, value: Optional[str]) -> Setting:
        self._validate_key(key)
        if key == SettingKey.TARGET_TOTAL and value not in (None, ""):
            if parse_decimal(value) is None:
                raise APIValidationError(
                    f"{SettingKey.TARGET_TOTAL} must be a number",
                    {"value": value},
                )

        try:
            setting = self.db.query(Setting).filter(Setting.key == key).first()
            if setting is None:
                setting = Setting(key=key, value=value)
                self.db.add(setting)
            else:
                setting.value = value
            self.db.commit()
            self.db.refresh(setting)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to write setting '{key}': {e}")
            raise StoreUnavailable("settings update", str(e))

        logger.info(f"Setting '{key}' updated")
        return setting

    def target_total(self) -> Optional[Decimal]:
        """
        Notification target from the ``target_total`` key.

        Missing, blank, non-numeric and zero values all mean "no target".
        """
        raw = self.get_value(SettingKey.TARGET_TOTAL)
        if raw is None or not raw.strip():
            return None

        target = parse_decimal(raw)
        if target is None:
            logger.warning(f"Ignoring non-numeric {SettingKey.TARGET_TOTAL}: {raw!r}")
            return None
        if target == 0:
            return None
        return target

    def target_provider(self) -> Callable[[], Optional[Decimal]]:
        return self.target_total

    @staticmethod
    def _validate_key(key: str) -> None:
        if not KEY_PATTERN.match(key):
            raise APIValidationError(
                "Setting keys are lowercase letters, digits, '_' or '.'",
                {"key": key},
            )


def parse_decimal(raw: str) -> Optional[Decimal]:
    try:
        value = Decimal(raw.strip())
    except (InvalidOperation, AttributeError):
        return None
    if not value.is_finite():
        return None
    return value
