"""
Gibberish Service Configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ===== Service =====
    SERVICE_NAME: str = Field(default="gibberish-service")
    SERVICE_VERSION: str = Field(default="1.0.0")
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)
    LOG_LEVEL: str = Field(default="info")
    DEBUG: bool = Field(default=False)

    # ===== Generation Defaults =====
    DEFAULT_THRESHOLD: float = Field(default=0.75)
    DEFAULT_WORD_COUNT: int = Field(default=100, ge=0)
    DEFAULT_SEED_TOKEN: str = Field(default="A")
    DEFAULT_MODE: Literal["word", "char"] = Field(default="word")
    DEFAULT_STUBBORNNESS: int = Field(default=0, ge=0)

    # ===== HTTP model cache =====
    MAX_CACHED_MODELS: int = Field(default=16, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
