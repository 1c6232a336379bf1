"""
Common schemas used across multiple endpoints.
"""

from typing import Optional
from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Simple message response."""
    message: str
    success: bool = True


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str
    error_code: Optional[str] = None
