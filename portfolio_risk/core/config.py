import warnings

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    APP_ENV: str = "development"
    APP_DEBUG: bool = True
    APP_VERSION: str | None = None  # e.g. "1.2.3" or git SHA, used as Sentry release tag
    FRONTEND_URL: str = "http://localhost:3000"

    # Sentry error monitoring: set SENTRY_DSN to enable, no-op when unset
    SENTRY_DSN: str | None = None
    SENTRY_ENVIRONMENT: str = "development"

    # Deal screening
    RECOMMENDATION_LIMIT: int = 3
    CUSTOMIZATION_SUGGESTION_LIMIT: int = 4
    TEMPLATE_WEIGHT_TOLERANCE: float = 0.01

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "Settings":
        if self.APP_ENV == "production":
            if self.APP_DEBUG:
                warnings.warn(
                    "APP_DEBUG is enabled in production",
                    stacklevel=2,
                )
            if not self.SENTRY_DSN:
                warnings.warn(
                    "SENTRY_DSN not set in production, errors will be invisible",
                    stacklevel=2,
                )
        if self.RECOMMENDATION_LIMIT < 1:
            raise ValueError("RECOMMENDATION_LIMIT must be at least 1")
        return self


settings = Settings()
