"""
Admin API routes.
"""

from travel_assistant.api.routes.admin import settings

__all__ = ["settings"]
