"""
Configuration management for Agency Backend

Values come from the environment (or a .env file next to the process).
Every setting has a development default; prod refuses the unsafe ones.
"""
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_ENVIRONMENTS = ("local", "staging", "prod")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MIN_PROD_SECRET_LENGTH = 32


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Storage
    DATABASE_URL: str = Field(
        default="sqlite:///./agency.db",
        description="SQLAlchemy URL; SQLite tables are created on startup, Postgres uses Alembic"
    )

    # Tokens issued by /auth/login and /auth/signup
    JWT_SECRET_KEY: str = Field(default="dev-secret-key-change-me", description="HMAC key for signing tokens")
    JWT_ALGORITHM: str = Field(default="HS256")
    JWT_EXPIRE_MINUTES: int = Field(default=60, description="Session validity window")

    # Runtime
    APP_ENV: str = Field(default="local", description="local, staging or prod")
    LOG_LEVEL: str = Field(default="INFO")
    VERSION: Optional[str] = Field(default=None, description="Git SHA or semver reported by /version")
    ALLOWED_ORIGINS: str = Field(
        default="*",
        description="Comma-separated CORS origins for the marketing site and admin panel"
    )

    # Privileged role verification; unset means the in-process verify-admin function
    VERIFY_ADMIN_URL: Optional[str] = Field(default=None, description="URL of a deployed verify-admin function")
    VERIFY_ADMIN_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)

    # Created on startup when no account holds the admin role
    INITIAL_ADMIN_EMAIL: str = Field(default="admin@example.com")
    INITIAL_ADMIN_PASSWORD: str = Field(default="Admin@12345")

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        if v not in APP_ENVIRONMENTS:
            raise ValueError(f"APP_ENV must be one of {list(APP_ENVIRONMENTS)}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(LOG_LEVELS)}")
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def validate_production(self) -> None:
        """
        Refuse development defaults in prod

        Raises:
            ValueError: JWT secret too short, or CORS left open
        """
        if self.APP_ENV != "prod":
            return
        if len(self.JWT_SECRET_KEY) < MIN_PROD_SECRET_LENGTH:
            raise ValueError(
                f"JWT_SECRET_KEY must be at least {MIN_PROD_SECRET_LENGTH} characters in production environment"
            )
        if self.ALLOWED_ORIGINS == "*" or not self.ALLOWED_ORIGINS:
            raise ValueError("ALLOWED_ORIGINS must be explicitly set (not '*') in production environment")

    def get_allowed_origins_list(self) -> List[str]:
        """Parsed CORS origins (['*'] when open)"""
        if self.ALLOWED_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()

if settings.APP_ENV == "prod":
    settings.validate_production()
