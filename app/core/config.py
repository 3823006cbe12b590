# /app/core/config.py

"""
Central application settings.

Values are read from the process environment (or a local `.env` file) once,
at import time. `SECRET_KEY` has no default: the session tokens are signed
with it, so the application refuses to start without one.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- App ---
    APP_NAME: str = "School Administration API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # --- Database ---
    DATABASE_URL: str = "sqlite:///./school.db"
    DB_ECHO: bool = False

    # --- Sessions ---
    SECRET_KEY: str = Field(..., min_length=1)
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    SESSION_COOKIE_NAME: str = "token"
    COOKIE_SECURE: bool = False

    # --- Credentials ---
    PASSWORD_HASH_ITERATIONS: int = Field(default=600000, gt=0)

    # --- Web ---
    # Comma separated list of allowed origins.
    CORS_ORIGINS: str = "http://localhost:3000"

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()
