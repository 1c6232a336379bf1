"""
Health check endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import func, select, text

from travel_assistant import __version__
from travel_assistant.api.dependencies import get_db
from travel_assistant.core.config import get_settings
from travel_assistant.core.models.state import State

router = APIRouter()


@router.get("/health")
def health_check():
    """Basic health check."""
    return {"status": "healthy"}


@router.get("/health/detailed")
def detailed_health_check(db: Session = Depends(get_db)):
    """
    Detailed health check including database and configuration.
    """
    settings = get_settings()

    db_status = "healthy"
    state_count = None
    try:
        db.execute(text("SELECT 1"))
        state_count = db.scalar(select(func.count()).select_from(State))
    except Exception as e:
        db_status = f"unhealthy: {e}"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "database": db_status,
        "email_provider": settings.email_provider,
        "site_url": settings.site_url,
        "state_count": state_count,
    }


@router.get("/")
def root():
    """API root - redirects to docs."""
    return {
        "name": "Travel Assistant API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
