# core/settings.py
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BACKEND_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BACKEND_DIR.parent / ".env",
        case_sensitive=True,
        extra="allow",
    )

    # App
    ENVIRONMENT: Literal["development", "production", "test"] = "development"
    APP_URL: str = "http://localhost:8000"
    FRONTEND_ORIGIN: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # Database
    DATA_FOLDER: str = "data"
    DATABASE_URL: str = "sqlite:///./data/storefront.db"
    SEED_SAMPLE_DATA: bool = False
    REDIS_URL: Optional[str] = None

    # Authentication
    AUTH_SECRET: Optional[str] = Field(default=None, min_length=32)

    # Stripe
    STRIPE_SECRET_KEY: Optional[str] = None
    STRIPE_WEBHOOK_SECRET: Optional[str] = None
    STRIPE_PUBLISHABLE_KEY: Optional[str] = None

    # Email
    EMAIL_SERVER_HOST: Optional[str] = None
    EMAIL_SERVER_PORT: int = 587
    EMAIL_SERVER_USER: Optional[str] = None
    EMAIL_SERVER_PASSWORD: Optional[str] = None
    EMAIL_FROM: Optional[str] = None

    # Site
    GOOGLE_SITE_VERIFICATION: Optional[str] = None
    GA_ID: Optional[str] = None

    @field_validator('DATABASE_URL', 'APP_URL', 'REDIS_URL')
    @classmethod
    def validate_url(cls, v):
        if v is not None and "://" not in v:
            raise ValueError("must be a URL")
        return v

    @field_validator('STRIPE_SECRET_KEY')
    @classmethod
    def validate_stripe_secret(cls, v):
        if v is not None and not v.startswith("sk_"):
            raise ValueError("Stripe secret key must start with 'sk_'")
        return v

    @field_validator('STRIPE_WEBHOOK_SECRET')
    @classmethod
    def validate_stripe_webhook(cls, v):
        if v is not None and not v.startswith("whsec_"):
            raise ValueError("Stripe webhook secret must start with 'whsec_'")
        return v

    @field_validator('STRIPE_PUBLISHABLE_KEY')
    @classmethod
    def validate_stripe_publishable(cls, v):
        if v is not None and not v.startswith("pk_"):
            raise ValueError("Stripe publishable key must start with 'pk_'")
        return v

    @field_validator('EMAIL_SERVER_USER', 'EMAIL_FROM')
    @classmethod
    def validate_email(cls, v):
        if v is not None and "@" not in v:
            raise ValueError("must be an email address")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build the process-wide settings once; callers receive it by reference."""
    return Settings()


settings = get_settings()
