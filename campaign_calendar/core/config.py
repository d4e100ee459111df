"""
Configuration management for the campaign calendar service.

This module centralizes environment-driven configuration using Pydantic's
`BaseSettings`. All services consume the shared `settings` instance to ensure
consistent configuration across the stack.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Dict, List, Optional

from pydantic import AnyUrl, Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    """Application configuration sourced from environment variables."""

    # General application settings
    API_TITLE: str = "Campaign Calendar API"
    API_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = Field("development", pattern=r"^(development|staging|production)$")
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])

    # Address based access (first-run defaults for the directory)
    DESIGNER_ADDRESS: str = "192.168.1.10"
    DEPARTMENT_ADDRESSES: Annotated[Dict[str, str], NoDecode] = Field(
        default_factory=lambda: {
            "192.168.1.20": "d1",
            "192.168.1.21": "d2",
            "192.168.1.22": "d3",
            "192.168.1.23": "d4",
            "192.168.1.24": "d5",
        }
    )
    CALLER_ADDRESS_HEADER: str = "X-Simulated-Address"
    ALLOW_ADDRESS_SIMULATION: bool = True

    # Delivery channel (EmailJS REST API)
    EMAILJS_API_URL: AnyUrl = Field("https://api.emailjs.com/api/v1.0/email/send")
    EMAILJS_SERVICE_ID: Optional[str] = None
    EMAILJS_TEMPLATE_ID: Optional[str] = None
    EMAILJS_PUBLIC_KEY: Optional[str] = None
    EMAILJS_PRIVATE_KEY: Optional[str] = None
    EMAIL_TIMEOUT_SECONDS: float = 10.0

    # Assignment pipeline pacing
    FALLBACK_DELAY_SECONDS: float = Field(1.0, ge=0)
    TOAST_TTL_SECONDS: float = Field(4.0, gt=0)
    REFERENCE_CODE_LENGTH: PositiveInt = 6

    SEED_ON_STARTUP: bool = False

    # Monitoring / tracing
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[AnyUrl] = None
    OTEL_EXPORTER_OTLP_HEADERS: Optional[str] = None
    OTEL_CONSOLE_EXPORT: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @field_validator("ALLOWED_ORIGINS", mode="before")
    def _split_origins(cls, value: str | List[str]) -> List[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("DEPARTMENT_ADDRESSES", mode="before")
    def _parse_department_addresses(cls, value: str | Dict[str, str]) -> Dict[str, str]:
        if not isinstance(value, str):
            return value or {}
        value = value.strip()
        if value.startswith("{"):
            return json.loads(value)
        pairs: Dict[str, str] = {}
        for item in value.split(","):
            if "=" not in item:
                continue
            address, department_id = item.split("=", 1)
            address = address.strip()
            if address in pairs:
                raise ValueError(f"DEPARTMENT_ADDRESSES maps '{address}' more than once")
            pairs[address] = department_id.strip()
        return pairs

    @property
    def emailjs_configured(self) -> bool:
        return bool(self.EMAILJS_SERVICE_ID and self.EMAILJS_TEMPLATE_ID and self.EMAILJS_PUBLIC_KEY)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()


# Singleton-style settings instance for modules that prefer direct access.
settings = get_settings()
