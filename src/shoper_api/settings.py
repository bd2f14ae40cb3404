"""Application-wide configuration management using Pydantic settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration for the Shoper API client."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    shop_url: str = Field(..., alias="SHOPER_SHOP_URL")
    client_id: str = Field(..., alias="SHOPER_CLIENT_ID")
    client_secret: str = Field(..., alias="SHOPER_CLIENT_SECRET")
    timeout: float = Field(30.0, alias="SHOPER_TIMEOUT", gt=0)

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return str(value).strip().upper() or "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance loaded from environment variables."""

    return Settings()
