"""
Shared configuration management for the Permission Rules Service.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="PERMISSIONS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")
    json_logs: bool = Field(default=True)


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""
    
    service_name: str
    
    # Reject checks for actions a permission kind does not offer
    strict_actions: bool = Field(default=True)
    
    # Observability
    metrics_enabled: bool = Field(default=True)
    
    def __init__(self, service_name: str, **kwargs):
        super().__init__(service_name=service_name, **kwargs)


def get_config(service_name: str, **overrides) -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, **overrides)
