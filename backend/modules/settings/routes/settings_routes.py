# backend/modules/settings/routes/settings_routes.py

"""
Routes for the key/value settings store.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.auth import User, require_admin

from ..services.settings_service import SettingsService
from ..schemas.settings_schemas import SettingUpdate, SettingResponse

router = APIRouter(prefix="/api/settings", tags=["Settings"])


@router.get("/{key}", response_model=SettingResponse)
async def get_setting(
    key: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """
    Read a setting by key.

    Raises:
        404: Setting not found
    """
    return SettingsService(db).get_setting(key)


@router.put("/{key}", response_model=SettingResponse)
async def put_setting(
    key: str,
    payload: SettingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """
    Create or replace a setting.

    ``target_total`` must be numeric; an empty value disables target
    notifications.
    """
    return SettingsService(db).set_value(key, payload.value)
