"""
API module - FastAPI application.

Provides REST API for:
- Public endpoints: state listing, state codes, state pages
- Admin endpoints: plugin settings
"""

from travel_assistant.api.main import create_app, app

__all__ = ["create_app", "app"]
