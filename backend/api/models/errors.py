"""
Error response models.

Standardized fault responses for the API. Domain outcomes (e.g. a taken
username) are not errors and use the module result models instead.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard fault response format."""

    status: str = "error"
    error: str
    message: str
