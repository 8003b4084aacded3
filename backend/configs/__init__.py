"""
Configuration management module.

Typed configuration for provider selection, document storage, admin
credentials and retrieval, loaded from the environment with Pydantic Settings.
"""

from backend.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
