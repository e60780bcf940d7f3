"""Application configuration management using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Required settings will raise validation errors if not provided.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="profile-image-service", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/staging/production)")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins",
    )

    # Supabase
    supabase_url: str = Field(..., description="Supabase project URL")
    supabase_secret_key: str = Field(..., description="Supabase secret key for backend operations")

    # Media storage
    media_bucket: str = Field(default="media", description="Public storage bucket holding uploaded media")
    profile_image_folder: str = Field(default="profile-images", description="Folder for profile images inside the bucket")

    # Requests
    max_request_body_size: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum accepted request body size in bytes",
    )

    # OTP expiry
    otp_sweep_enabled: bool = Field(default=True, description="Run the expired OTP sweeper")
    otp_sweep_interval_seconds: int = Field(default=60, gt=0, description="Seconds between OTP sweeps")

    @field_validator("supabase_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize the project URL so public media URLs are built consistently."""
        return value.rstrip("/")

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def media_public_base_url(self) -> str:
        """Base URL under which objects of the media bucket are publicly served."""
        return f"{self.supabase_url}/storage/v1/object/public/{self.media_bucket}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings: Application settings instance.

    Note:
        Settings are cached using lru_cache for performance.
        Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
