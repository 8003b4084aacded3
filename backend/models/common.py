"""
Common response models.

Generic success payload shared by routers.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Plain success acknowledgement."""

    success: bool = True
    message: str | None = None

