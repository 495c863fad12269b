from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings loaded from environment variables (.env)."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "relaydesk"
    ENV: str = "dev"

    # CORS
    CORS_ALLOW_ORIGINS: str = "*"  # "*" or "https://a.com,https://b.com"
    CORS_ALLOW_CREDENTIALS: bool = False

    # DATABASE / CACHE
    MYSQL_DSN: str
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    REDIS_URL: str = "redis://127.0.0.1:6379/0"
    REDIS_SOCKET_TIMEOUT_SECONDS: float = 0.5
    REDIS_RETRY_SECONDS: int = 30

    # PRICING (1 INR = 10 credits unless configured)
    DEFAULT_PRICING_RUPEES: float = 1
    DEFAULT_PRICING_CREDITS: float = 10
    PRICING_CACHE_TTL_SECONDS: int = 30
    AUTO_SEED_PRICING: bool = True

    def cors_origins(self) -> list[str]:
        s = (self.CORS_ALLOW_ORIGINS or "").strip()
        if not s or s == "*":
            return ["*"]
        return [x.strip() for x in s.split(",") if x.strip()]


settings = Settings()
