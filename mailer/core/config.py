from functools import lru_cache
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_TIMEOUT_SECONDS = 10.0


class MailerSettings(BaseSettings):
    # Mailer backend
    base_url: Optional[str] = Field(default=None, description="Base URL of the Mailer API, e.g. https://mailer.example.com")
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="Connect/request timeout in seconds")

    # Logging
    log_level: str = Field(default="INFO", description="Log level for the mailer logger")
    log_json: bool = Field(default=True, description="Emit structured JSON log lines")

    model_config = SettingsConfigDict(
        env_prefix="MAILER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level


@lru_cache()
def get_settings() -> MailerSettings:
    return MailerSettings()
