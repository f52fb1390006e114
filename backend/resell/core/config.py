# resell/core/config.py
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings. Reads `.env` when present."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ------------------------
    # MongoDB
    # ------------------------
    MONGO_URL: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_HOST: str = "cluster0.z1t2q.mongodb.net"
    DB_NAME: str = "Resell-Bd"
    MONGO_STARTUP_TIMEOUT: float = 5.0
    MONGO_FAIL_FAST: bool = False
    ENSURE_INDEXES: bool = True

    # ------------------------
    # Stripe
    # ------------------------
    STRIPE_SECRET_KEY: Optional[str] = None
    PAYMENT_CURRENCY: str = "bdt"
    PAYMENT_METHOD_TYPES: List[str] = ["card"]

    # ------------------------
    # HTTP
    # ------------------------
    CORS_ORIGINS: List[str] = ["*"]
    PORT: int = 7000
    LOG_LEVEL: str = "INFO"

    @property
    def mongo_uri(self) -> str:
        """MONGO_URL wins; otherwise build an Atlas SRV URI from the credentials."""
        if self.MONGO_URL:
            return self.MONGO_URL
        if self.DB_USER and self.DB_PASSWORD:
            return (
                f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASSWORD)}"
                f"@{self.DB_HOST}/?retryWrites=true&w=majority&appName=Cluster0"
            )
        return "mongodb://localhost:27017"


settings = Settings()
