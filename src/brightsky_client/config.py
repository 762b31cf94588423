"""
Library settings, read from ``BRIGHTSKY_*`` environment variables or ``.env``.

Example::

    BRIGHTSKY_API_HOST=http://localhost:5000 python my_script.py
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from brightsky_client import __version__

BRIGHT_SKY_API = "https://api.brightsky.dev"


class Settings(BaseSettings):
    """Connection settings shared by the HTTP session and the client."""

    model_config = SettingsConfigDict(env_prefix="BRIGHTSKY_", env_file=".env", extra="ignore")

    api_host: str = BRIGHT_SKY_API
    timeout: float = Field(default=30, gt=0, description="Per-request timeout in seconds")
    max_retries: int = Field(default=4, ge=0)
    user_agent: str = f"brightsky-client/{__version__}"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
