"""
Configuration for nordum.

Settings are read from NORDUM_* environment variables, e.g. NORDUM_PORT=9000.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    dictionary: Path = Path("data/dictionary.json")
    api_url: str = "http://localhost:8000"
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_prefix="NORDUM_",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Fresh settings, so environment changes apply to the next reload."""
    return Settings()
