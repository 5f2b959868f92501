"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 7,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    environment: str = Field(
        default="production",
        description="Deployment environment name; 'development' enables test endpoints",
    )
    default_language: str = Field(
        default="en",
        description="Language used for users that have not chosen one",
        min_length=2,
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending transactional emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of transactional messages",
        min_length=3,
    )
    firebase_service_account_path: str | None = Field(
        default=None,
        description="Path to the Firebase service account JSON used for push delivery",
    )
    firebase_service_account_json: str | None = Field(
        default=None,
        description="Inline Firebase service account JSON used for push delivery",
    )
    push_timeout_seconds: float = Field(
        default=15.0,
        description="Timeout applied to every push gateway request",
        ge=1,
        le=60,
    )
    cron_api_key: str | None = Field(
        default=None,
        description="Shared secret expected in the X-Cron-Key header of cron endpoints",
    )
    notification_retention_days: int = Field(
        default=30,
        description="Number of days a notification is kept before it expires",
        gt=0,
    )
    pending_notification_limit: int = Field(
        default=5,
        description="Maximum unread notifications re-sent when a device token is registered",
        gt=0,
    )

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self

    @model_validator(mode="after")
    def _validate_firebase_credentials(self) -> "Settings":
        if self.firebase_service_account_path and self.firebase_service_account_json:
            raise ValueError(
                "Set only one of FIREBASE_SERVICE_ACCOUNT_PATH and FIREBASE_SERVICE_ACCOUNT_JSON"
            )
        return self

    @property
    def is_development(self) -> bool:
        """Return ``True`` when running in the development environment."""

        return self.environment.strip().lower() == "development"

    @property
    def push_configured(self) -> bool:
        """Return ``True`` when Firebase credentials are available."""

        return bool(
            self.firebase_service_account_path or self.firebase_service_account_json
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
