"""Event Planner Backend — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database (required, no default)
    DATABASE_URL: str

    # Security (required, no default)
    SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int = 60 * 24
    ADMIN_ROLE: str = "Admin"

    # Timezone
    TIMEZONE: str = "UTC"

    # HTTP
    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 8081
    CORS_ORIGINS: list[str] = [
        "http://localhost:5500",
        "http://127.0.0.1:5500",
        "http://localhost:2001",
        "http://127.0.0.1:2001",
    ]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
