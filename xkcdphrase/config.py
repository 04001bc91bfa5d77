"""
Configuration loaded from environment variables
Defaults for the command line wrapper, optionally from a .env file
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Generation defaults from environment"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    XKCD_WORDLIST: Optional[str] = None  # provider name or file path
    XKCD_WORDS: int = 4
    XKCD_DIGITS: int = 0
    XKCD_COUNT: int = 1
    LOG_LEVEL: str = "WARNING"


def validate_settings(active_settings: Settings) -> None:
    """Validate settings, reporting every problem at once"""
    errors = []

    if active_settings.XKCD_WORDS < 1:
        errors.append("XKCD_WORDS must be >= 1")

    if active_settings.XKCD_DIGITS < 0:
        errors.append("XKCD_DIGITS must be >= 0")

    if active_settings.XKCD_COUNT < 1:
        errors.append("XKCD_COUNT must be >= 1")

    if active_settings.LOG_LEVEL.upper() not in ALLOWED_LOG_LEVELS:
        allowed = ", ".join(ALLOWED_LOG_LEVELS)
        errors.append(f"LOG_LEVEL must be one of: {allowed}")

    if errors:
        raise ValueError("Invalid configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()
