"""Shared configuration management using pydantic-settings."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class SharedConfig(BaseSettings):
    """Base configuration shared by every component."""
    log_level: str = Field(default="info", validation_alias="LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


class HostConfig(SharedConfig):
    """Configuration for the in-process extension host."""
    host_version: str = Field(default="6.4", validation_alias="HOST_VERSION")
    extensions_dir: str = Field(
        default="./extensions", validation_alias="EXTENSIONS_DIR"
    )
