"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log file format")
    file: str | None = Field(default=None, description="Log file path (no file sink when unset)")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./shopfront.db",
        description="Database connection URL",
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    echo: bool = Field(default=False, description="Echo SQL statements")

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        """Whether the configured backend is SQLite."""
        return self.url.startswith("sqlite")


class SecurityConfig(BaseModel):
    """Password storage configuration."""

    bcrypt_rounds: int = Field(
        default=10, ge=4, le=31, description="bcrypt cost factor (log2 rounds)"
    )


class DocsTag(BaseModel):
    name: str
    description: str


class DocsConfig(BaseModel):
    """OpenAPI documentation metadata."""

    enabled: bool = Field(default=True, description="Serve Swagger UI and ReDoc")
    title: str = Field(default="Test swagger")
    description: str = Field(default="Testing the Fastify swagger API")
    version: str = Field(default="0.1.0")
    external_docs_url: str = Field(default="https://swagger.io")
    external_docs_description: str = Field(default="Find more info here")
    api_key_header: str = Field(
        default="apiKey", description="Header of the declared (unenforced) apiKey scheme"
    )
    tags: list[DocsTag] = Field(
        default_factory=lambda: [
            DocsTag(name="user", description="User related end-points"),
            DocsTag(name="code", description="Code related end-points"),
        ]
    )


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="0.0.0.0", description="Application host")
    port: int = Field(default=8080, description="Application port")


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    security: SecurityConfig = Field(
        default_factory=SecurityConfig, description="Security configuration"
    )
    docs: DocsConfig = Field(
        default_factory=DocsConfig, description="API documentation metadata"
    )
