from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - TASKS_HOST: interface the server listens on. Default '127.0.0.1'
    - TASKS_PORT: TCP port the server listens on. Default 8080
    - LOG_LEVEL: logging level name. Default 'INFO'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    """

    host: str
    port: int
    log_level: str
    cors_allow_origins: List[str]


DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_port(value: str, default: int = DEFAULT_PORT) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return default
    if not (0 < port < 65536):
        return default
    return port


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    host = _get_env("TASKS_HOST", DEFAULT_HOST).strip()
    port = _parse_port(_get_env("TASKS_PORT", str(DEFAULT_PORT)))
    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    origins = _parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*"))

    return Settings(
        host=host,
        port=port,
        log_level=log_level,
        cors_allow_origins=origins,
    )
