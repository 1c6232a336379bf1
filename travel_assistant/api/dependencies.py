"""
FastAPI dependencies.

Provides dependency injection for:
- Database sessions
- The state directory
- Authentication/authorization
- Configuration
"""

from fastapi import Depends, HTTPException, Header, status
from sqlalchemy.orm import Session

from travel_assistant.core.config import get_settings, Settings
from travel_assistant.core.database import get_db
from travel_assistant.directory import LinkBuilder, SqlRegionStore, StateDirectory

__all__ = ["get_db", "get_settings_dep", "get_state_directory", "require_admin"]


def get_settings_dep() -> Settings:
    """Settings dependency."""
    return get_settings()


def get_state_directory(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings_dep),
) -> StateDirectory:
    """
    State directory backed by the request's database session.

    Usage:
        @router.get("/codes")
        def codes(directory: StateDirectory = Depends(get_state_directory)):
            return list(directory.list_codes())
    """
    return StateDirectory(SqlRegionStore(db), LinkBuilder(settings.site_url))


async def require_admin(
    x_api_key: str = Header(None, alias="X-API-Key"),
    authorization: str = Header(None),
    settings: Settings = Depends(get_settings_dep),
) -> bool:
    """
    Admin authentication dependency.

    Checks for valid admin API key in:
    - X-API-Key header
    - Authorization: Bearer <key> header
    """
    api_key = x_api_key

    if not api_key and authorization:
        if authorization.startswith("Bearer "):
            api_key = authorization[7:]

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if api_key != settings.admin_api_key:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid API key",
        )

    return True
