"""Configuration management for cats3."""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"
    chunk_size: int = 1024 * 1024
    otel_enabled: bool = False
    otel_service_name: str = "cats3"

    model_config = {
        "env_prefix": "CATS3_",
        "case_sensitive": False,
    }


settings = Settings()
