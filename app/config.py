# app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Lot ───────────────────────────────────────────────────────────────
    LOT_CAPACITY: int = 20

    # ── Fee policy ────────────────────────────────────────────────────────
    BASE_WINDOW_MINUTES: int = 120   # Flat base rate up to and including this
    BLOCK_MINUTES: int = 15          # Overage billed per started block
    DISCOUNT_PERCENT: int = 15       # Applied when a discount card is presented

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "127.0.0.1"
    BACKEND_PORT: int = 8080

    # ── Security ──────────────────────────────────────────────────────────
    API_KEY: Optional[str] = None   # Set in .env to enable auth on API endpoints

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    @property
    def BACKEND_URL(self) -> str:
        return f"http://{self.BACKEND_IP}:{self.BACKEND_PORT}/api/v1"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
