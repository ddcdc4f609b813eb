# src/product_api/core/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Product Catalog API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Shared secret for all write operations (X-API-Key header)
    api_key: str = Field(default="secret-api-key")

    # CORS
    cors_origins: list[str] = Field(default=["*"])

    # Catalog
    seed_sample_data: bool = True
    default_page_size: int = Field(default=10, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
