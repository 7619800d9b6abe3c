from pydantic_settings import BaseSettings
from pydantic import field_validator, ValidationInfo
from typing import Optional


class Settings(BaseSettings):
    # App
    APP_NAME: str = "MBA Aspirant Portal"
    ENVIRONMENT: str = "development" # development, production, test
    PORT: int = 3000
    ALLOWED_ORIGINS: str = "*"

    # Sessions
    SESSION_SECRET_KEY: str = "change-this-to-a-secure-random-string"
    SESSION_COOKIE: str = "mba_portal_session"
    SESSION_MAX_AGE_HOURS: int = 24

    # Database
    DATABASE_URL: str

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> str:
        if isinstance(v, str):
            if v.startswith("postgres://"):
                return v.replace("postgres://", "postgresql://", 1)
        return v

    # Email (SMTP)
    SMTP_SERVER: Optional[str] = None
    SMTP_PORT: int = 587
    SMTP_USERNAME: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_FROM_EMAIL: Optional[str] = None
    SMTP_USE_TLS: bool = False
    SMTP_USE_STARTTLS: bool = True
    SMTP_TIMEOUT: int = 30

    # OTP policy
    OTP_EXPIRY_MINUTES: int = 10
    OTP_MAX_REQUESTS: int = 3
    OTP_WINDOW_MINUTES: int = 15
    OTP_SINGLE_ACTIVE_CODE: bool = False

    # IP throttle on the auth API (slowapi syntax)
    AUTH_RATE_LIMIT: str = "30/minute"

    # College matcher (normalized Levenshtein distance, lower is closer)
    MATCH_THRESHOLD: float = 0.2

    # Maintenance worker, 0 disables it
    SWEEP_INTERVAL_SECONDS: int = 3600

    # Monitoring (Sentry)
    SENTRY_DSN: Optional[str] = None

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        extra = "ignore" # Prevent crash on extra env vars

settings = Settings()

if not settings.SMTP_SERVER:
    import logging
    logging.getLogger(__name__).warning("SMTP_SERVER is not set. OTP emails will not be delivered.")
