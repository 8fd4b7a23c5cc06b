"""
Configuration settings for the Health Navigator analytics backend.
Uses pydantic-settings for type-safe environment variable management.
"""
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App Info
    app_name: str = "Health Navigator Analytics API"
    app_version: str = "1.0.0"
    git_commit: Optional[str] = None  # Git commit hash from environment
    build_date: Optional[str] = None  # Build timestamp from environment
    debug: bool = False
    log_level: str = "INFO"

    # CORS - comma-separated list in environment variable
    # Example: CORS_ORIGINS="http://localhost:9002,http://localhost:3000"
    cors_origins_str: str = Field(
        default="http://localhost:9002,http://localhost:3000",
        validation_alias="CORS_ORIGINS"
    )

    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    # Vaccines checked by the preventive-health summary
    # Example: RECOMMENDED_VACCINES="Influenza,COVID-19,Tetanus,Hepatitis B"
    recommended_vaccines_str: str = Field(
        default="Influenza,COVID-19,Tetanus,Hepatitis B",
        validation_alias="RECOMMENDED_VACCINES"
    )

    @property
    def recommended_vaccines(self) -> list[str]:
        """Parse recommended vaccine names from comma-separated string."""
        return [v.strip() for v in self.recommended_vaccines_str.split(",") if v.strip()]

    # Pydantic v2 settings config
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars so unexpected keys don't crash
    )


# Global settings instance
settings = Settings()
