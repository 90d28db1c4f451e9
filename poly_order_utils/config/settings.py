"""Pydantic BaseSettings — chain, signing and logging configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from env / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ── Application ─────────────────────────────────────────────
    APP_ENV: Literal["dev", "prod"] = "dev"
    APP_NAME: str = "poly-order-utils"
    LOG_LEVEL: str = "INFO"

    # ── Chain / Contracts ───────────────────────────────────────
    CHAIN_ID: int = Field(default=137, gt=0)
    # Empty means the bundled config/contracts.yaml
    CONTRACTS_FILE: str = ""

    # ── Signing ─────────────────────────────────────────────────
    SIGNING_TIMEOUT_SECONDS: int = Field(default=10, gt=0)
    SIGNING_MAX_WORKERS: int = Field(default=2, gt=0)

    # ── Credentials (never commit real values) ──────────────────
    POLYMARKET_PRIVATE_KEY: str = ""


settings = Settings()
