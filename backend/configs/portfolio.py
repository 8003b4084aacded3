"""
Portfolio storage configuration settings.

Locates the portfolio document and the theme analytics file on disk.

Dependencies: pydantic_settings
System role: Document store configuration
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PortfolioSettings(BaseSettings):
    """Settings for the JSON document store."""

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(default=Path("data"), description="Directory holding the JSON files")
    portfolio_file: str = Field(default="portfolio.json", description="Portfolio document filename")
    analytics_file: str = Field(
        default="theme-analytics.json",
        description="Theme click counters filename",
    )

    @property
    def portfolio_path(self) -> Path:
        return self.data_dir / self.portfolio_file

    @property
    def analytics_path(self) -> Path:
        return self.data_dir / self.analytics_file
