from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal

from levgroup.models.schemas import DistanceUnit, GroupingOptions


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LEVGROUP_",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # CORS
    cors_origins: str = "http://localhost:5173"

    # Grouping defaults for the log pipeline and the analyze endpoint
    default_unit: DistanceUnit = DistanceUnit.ABSOLUTE
    default_tolerance: int = 2
    strip_digits: bool = True
    strip_identifiers: bool = True
    top_k: int = 20

    # Uploads
    max_upload_bytes: int = 10 * 1024 * 1024

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def default_options(self) -> GroupingOptions:
        """Grouping options built from the configured defaults."""
        return GroupingOptions(
            unit=self.default_unit,
            tolerance=self.default_tolerance,
            strip_digits=self.strip_digits,
            strip_identifiers=self.strip_identifiers,
        )


settings = Settings()
