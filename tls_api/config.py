"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tls_api.infrastructure.storage import ImageUploadSettings

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

INITIATIVE_IMAGES_SUBDIR = "initiatives"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./tls.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        default="change-me", description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    upload_root: Path = Field(
        default=Path("uploads"),
        description="Directory holding every uploaded file, served statically",
    )
    upload_url_prefix: str = Field(
        default="/uploads",
        description="Public URL path under which ``upload_root`` is mounted",
    )
    max_image_size_bytes: int = Field(
        default=5 * 1024 * 1024,
        description="Largest accepted image upload, in bytes",
        gt=0,
    )
    max_images_per_upload: int = Field(
        default=10,
        description="Maximum number of files accepted by a single image upload",
        gt=0,
    )
    allowed_image_content_type_prefix: str = Field(
        default="image/",
        description="MIME type prefix an uploaded image must carry",
        min_length=1,
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @model_validator(mode="after")
    def _validate_upload_url_prefix(self) -> "Settings":
        if not self.upload_url_prefix.startswith("/"):
            raise ValueError("UPLOAD_URL_PREFIX must start with '/'")
        self.upload_url_prefix = self.upload_url_prefix.rstrip("/") or "/"
        return self

    def initiative_image_settings(self) -> ImageUploadSettings:
        """Return the upload configuration used for initiative images."""

        return ImageUploadSettings(
            directory=self.upload_root / INITIATIVE_IMAGES_SUBDIR,
            url_prefix=f"{self.upload_url_prefix.rstrip('/')}/{INITIATIVE_IMAGES_SUBDIR}",
            max_file_size=self.max_image_size_bytes,
            max_files=self.max_images_per_upload,
            allowed_content_type_prefix=self.allowed_image_content_type_prefix,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
