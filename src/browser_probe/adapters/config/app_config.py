"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REDIRECT_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8080, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Root log level name")

    # Collection page configuration
    page_title: str = Field(
        default="Loading... | Educational Demo",
        description="Title of the collection page",
    )
    redirect_url: str = Field(
        default=DEFAULT_REDIRECT_URL,
        description="Where /next sends the browser once data has been collected",
    )
    redirect_delay_ms: int = Field(
        default=3000,
        ge=0,
        description="Milliseconds the page waits after collecting before navigating to /next",
    )

    # Request metadata
    forwarded_header: str = Field(
        default="X-Forwarded-For",
        description="Header whose value, when present, is recorded as the client origin",
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=0,
        ge=0,
        description="Requests allowed per client per minute; 0 (the default) disables limiting",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("forwarded_header")
    @classmethod
    def validate_forwarded_header(cls, v: str) -> str:
        """Validate the forwarded header name is not blank."""
        if not v.strip():
            raise ValueError("forwarded_header must not be empty")
        return v.strip()
