"""
API routes.
"""

from travel_assistant.api.routes import health, states

__all__ = ["health", "states"]
