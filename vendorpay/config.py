"""Application configuration via pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "vendorpay"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 3030

    # Solana RPC
    solana_rpc_url: str = "https://api.devnet.solana.com"
    solana_commitment: Literal["processed", "confirmed", "finalized"] = "confirmed"
    rpc_timeout: float = Field(default=30.0, gt=0)

    # Confirmation polling
    confirmation_timeout: float = Field(default=60.0, gt=0)
    confirmation_poll_interval: float = Field(default=0.5, ge=0)
    confirmation_max_attempts: Optional[int] = Field(default=None, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
