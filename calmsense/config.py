"""
calmsense Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    API_VERSION: str = "1"

    # --- Input limits ---
    MAX_MESSAGE_CHARS: int = int(os.getenv("CALMSENSE_MAX_MESSAGE_CHARS", "10000"))
    BATCH_LIMIT: int = int(os.getenv("CALMSENSE_BATCH_LIMIT", "100"))

    # --- Server ---
    HOST: str = os.getenv("CALMSENSE_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("CALMSENSE_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("CALMSENSE_CORS_ORIGINS", "*")


settings = Settings()
