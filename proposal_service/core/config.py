"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name, "1" if default else "0").strip().lower()
    return raw in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AuthConfig:
    """Internal API-key gate configuration."""

    enabled: bool
    internal_api_key: str


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logging configuration."""

    level: str


@dataclass(frozen=True)
class SecurityConfig:
    """API perimeter security settings."""

    cors_allowed_origins: list[str]
    request_max_bytes: int


@dataclass(frozen=True)
class ServerConfig:
    """Bind address for the standalone uvicorn runner."""

    host: str
    port: int


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    auth: AuthConfig
    logging: LoggingConfig
    security: SecurityConfig
    server: ServerConfig

    @staticmethod
    def from_env() -> "AppConfig":
        """Build app config from process environment."""
        auth_enabled = _env_flag("AUTH_ENABLED", True)
        internal_api_key = os.getenv("INTERNAL_API_KEY", "").strip()
        log_level = os.getenv("LOG_LEVEL", "INFO").strip() or "INFO"
        cors_allowed_origins = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
            if origin.strip()
        ]
        request_max_bytes = int(os.getenv("REQUEST_MAX_BYTES", str(1024 * 1024)))
        host = os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0"
        port = int(os.getenv("PORT", "").strip() or "8080")

        return AppConfig(
            auth=AuthConfig(
                enabled=auth_enabled,
                internal_api_key=internal_api_key,
            ),
            logging=LoggingConfig(level=log_level),
            security=SecurityConfig(
                cors_allowed_origins=cors_allowed_origins,
                request_max_bytes=request_max_bytes,
            ),
            server=ServerConfig(host=host, port=port),
        )
