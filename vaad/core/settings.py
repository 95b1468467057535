from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Required:
      - JWT_SECRET_KEY: signing key for admin session tokens
      - ADMIN_PASSWORD_HASH: bcrypt hash of the shared admin password

    Optional:
      - DATABASE_URL: SQLAlchemy URL (defaults to a local SQLite file)
      - APP_ENV: "production" turns on Secure cookies
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite:///./vaad.db"

    app_env: str = Field(
        default="development",
        validation_alias="APP_ENV",
    )

    # Admin authentication settings
    jwt_secret_key: Optional[str] = Field(
        default=None,
        validation_alias="JWT_SECRET_KEY",
        description="Secret key for session token signing. No default: the "
        "service refuses to start without it.",
    )
    admin_password_hash: Optional[str] = Field(
        default=None,
        validation_alias="ADMIN_PASSWORD_HASH",
        description="bcrypt hash of the admin password (see `hash-password` CLI)",
    )
    session_ttl_hours: int = Field(
        default=24,
        validation_alias="SESSION_TTL_HOURS",
        description="Session token lifetime in hours",
    )
    cookie_secure: Optional[bool] = Field(
        default=None,
        validation_alias="COOKIE_SECURE",
        description="Force the Secure cookie flag on/off (default: on in production)",
    )

    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    log_level: str = "INFO"

    # API prefix (kept constant for reverse-proxy routing)
    api_prefix: str = "/api"

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


settings = Settings()
