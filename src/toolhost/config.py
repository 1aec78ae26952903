"""Server configuration — bind address, port and log level."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from toolhost.errors import ConfigError

DEFAULT_PORT = 8080


class ServerConfig(BaseModel):
    """Settings for the HTTP transport.

    Only ``PORT`` is read from the environment by convention (the variable
    most hosting platforms inject); ``TOOLHOST_LOG_LEVEL`` is optional.
    """

    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            msg = f"unknown log level {value!r}"
            raise ValueError(msg)
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Build a config from *environ* (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        if env.get("PORT"):
            values["port"] = env["PORT"]
        if env.get("TOOLHOST_LOG_LEVEL"):
            values["log_level"] = env["TOOLHOST_LOG_LEVEL"]
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid server configuration: {exc}") from exc
