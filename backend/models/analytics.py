"""
Theme analytics schemas.

Dependencies: pydantic
System role: Theme click counter API contracts
"""

from pydantic import BaseModel, Field

THEMES = ("minimal", "modern", "elegant", "retro")


class ThemeAnalyticsRequest(BaseModel):
    """Theme selection event."""

    theme: str | None = Field(default=None, description="Theme name selected by a visitor")
