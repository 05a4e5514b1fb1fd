"""Configuration management for the key-value store."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


Diagnostic = Literal["console", "log", "metrics"]


class StoreConfig(BaseModel):
    """Store outcome reporting configuration."""

    diagnostics: list[Diagnostic] = Field(
        default_factory=lambda: ["console"],
        description="Where operation outcomes are reported",
    )
    log_values: bool = Field(
        default=False, description="Include stored values in log events"
    )

    @field_validator("diagnostics")
    @classmethod
    def _dedupe(cls, value: list[Diagnostic]) -> list[Diagnostic]:
        return list(dict.fromkeys(value))


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="console", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="kv_store", description="Service name for tracing")
    metrics_enabled: bool = Field(default=False, description="Serve Prometheus metrics")
    metrics_port: int = Field(default=8001, ge=1, le=65535, description="Prometheus metrics port")


class Config(BaseSettings):
    """Main configuration for the key-value store."""

    model_config = SettingsConfigDict(
        env_prefix="KV_STORE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    store: StoreConfig = Field(default_factory=StoreConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
