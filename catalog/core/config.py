# catalog/core/config.py

import os
from typing import List, Optional

from dotenv import load_dotenv

# Project root (where main.py and .env live)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
ENV_PATH = os.path.join(BASE_DIR, ".env")

if os.path.exists(ENV_PATH):
    load_dotenv(ENV_PATH)


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


class Settings:
    def __init__(self) -> None:
        # SQLite by default when no .env is present
        self.DATABASE_URL: str = os.getenv(
            "DATABASE_URL",
            "sqlite:///./catalog.db",
        )
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.PORT: int = int(os.getenv("PORT", "8000"))

        self.CORS_ORIGINS: List[str] = _split_csv(
            os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://127.0.0.1:3000",
            )
        )

        # Existing clients expect validation failures as 404
        self.VALIDATION_ERROR_STATUS: int = int(os.getenv("VALIDATION_ERROR_STATUS", "404"))

        self.SEED_SUPPLIERS: int = int(os.getenv("SEED_SUPPLIERS", "10"))
        self.SEED_PRODUCTS: int = int(os.getenv("SEED_PRODUCTS", "100"))
        self.SEED_RANDOM_SEED: Optional[int] = _optional_int(os.getenv("SEED_RANDOM_SEED"))


settings = Settings()
