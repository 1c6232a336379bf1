"""
Admin settings routes.

GET returns the saved settings (or the configured defaults); POST takes the
settings form as JSON:

    {"email-name": "...", "email-address": "...", "timezone": "America/Chicago"}
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from travel_assistant.admin.settings_process import SettingsProcessor, TIME_ZONES, current_settings
from travel_assistant.api.dependencies import get_db, get_settings_dep, require_admin
from travel_assistant.api.schemas.common import MessageResponse
from travel_assistant.api.schemas.settings import SettingsResponse
from travel_assistant.core.config import Settings

router = APIRouter()


@router.get("", response_model=SettingsResponse)
def get_plugin_settings(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings_dep),
    _admin: bool = Depends(require_admin),
):
    """
    Get the plugin settings.
    """
    row = current_settings(db)
    if row is None:
        return SettingsResponse(
            email_name=settings.email_from_name,
            email_address=settings.email_from_address,
            time_zone=settings.default_time_zone,
            time_zones=list(TIME_ZONES),
            saved=False,
        )

    return SettingsResponse(
        email_name=row.email_name,
        email_address=row.email_address,
        time_zone=row.time_zone,
        time_zones=list(TIME_ZONES),
        saved=True,
    )


@router.post("", responses={303: {"description": "Settings updated"}, 400: {"description": "Invalid settings"}})
def update_plugin_settings(
    form: Optional[Dict[str, Any]] = Body(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings_dep),
    _admin: bool = Depends(require_admin),
):
    """
    Validate and save the plugin settings, then redirect back to the panel.
    """
    redirect_to = SettingsProcessor(db).process(form)
    if redirect_to is None:
        return MessageResponse(message="No settings were submitted", success=False)

    return RedirectResponse(
        url=f"{settings.site_url.rstrip('/')}/{redirect_to}",
        status_code=303,
    )
