"""
Application settings and configuration management.

Uses pydantic-settings for environment variable loading.
"""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "InterviewDesk"
    app_version: str = "0.1.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # LLM provider (any OpenAI-compatible chat completions API)
    llm_base_url: str = "https://api.openai.com/v1"
    llm_api_key: str = ""
    llm_endpoint: str = "/chat/completions"
    llm_model: str = "gpt-4"
    llm_timeout_seconds: float = 120.0

    # Completion acceptance policy
    completion_retry_times: int = 3
    completion_min_words: int = 10
    completion_debug: bool = False

    # Realtime Database (empty URL keeps documents in process memory)
    database_url: str = ""
    database_auth_token: str = ""
    database_timeout_seconds: float = 30.0

    # Outbound mail
    mail_host: str = "smtp.gmail.com"
    mail_port: int = 587
    mail_use_tls: bool = True
    mail_address: str = ""
    mail_app_password: str = ""
    mail_timeout_seconds: float = 20.0

    # Reports
    report_escape_html: bool = True

    # CORS - stored as comma-separated string in env
    # Uses validation_alias to read from CORS_ORIGINS env var
    cors_origins_str: str = Field(
        default="*",
        validation_alias="cors_origins"
    )

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
