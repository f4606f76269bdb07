"""
Application configuration.

Settings are read once from environment variables and cached.
"""

import os
from functools import lru_cache
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from core.constants import SnapshotConstants, SystemConstants


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


class SnapshotSettings(BaseModel):
    """Snapshot discovery and output naming"""

    directory: Optional[str] = None
    prefix: Optional[str] = None
    output_suffix: str = SnapshotConstants.OUTPUT_SUFFIX

    @field_validator("output_suffix")
    @classmethod
    def suffix_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("output_suffix must not be empty")
        return v


class PrintSettings(BaseModel):
    """Printer dispatch"""

    enabled: bool = True


class APISettings(BaseModel):
    """HTTP server"""

    host: str = SystemConstants.DEFAULT_HOST
    port: int = Field(default=SystemConstants.DEFAULT_PORT, ge=1, le=65535)
    cors_enabled: bool = False
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


class SystemSettings(BaseModel):
    """Logging and debug"""

    log_level: str = SystemConstants.LOG_LEVEL_DEFAULT
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def valid_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return v


class Settings(BaseModel):
    """Top-level application settings"""

    environment: str = "development"
    snapshot: SnapshotSettings = Field(default_factory=SnapshotSettings)
    printing: PrintSettings = Field(default_factory=PrintSettings)
    api: APISettings = Field(default_factory=APISettings)
    system: SystemSettings = Field(default_factory=SystemSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        return cls(
            environment=os.getenv("ENVIRONMENT", "development"),
            snapshot=SnapshotSettings(
                directory=os.getenv("SNAPSHOT_DIR") or None,
                prefix=os.getenv("SNAPSHOT_PREFIX") or None,
                output_suffix=os.getenv("SNAPSHOT_OUTPUT_SUFFIX", SnapshotConstants.OUTPUT_SUFFIX),
            ),
            printing=PrintSettings(enabled=_env_bool("PRINT_ENABLED", True)),
            api=APISettings(
                host=os.getenv("API_HOST", SystemConstants.DEFAULT_HOST),
                port=int(os.getenv("API_PORT", SystemConstants.DEFAULT_PORT)),
                cors_enabled=_env_bool("API_CORS_ENABLED", False),
                cors_origins=_env_list("API_CORS_ORIGINS", ["*"]),
            ),
            system=SystemSettings(
                log_level=os.getenv("LOG_LEVEL", SystemConstants.LOG_LEVEL_DEFAULT),
                debug=_env_bool("DEBUG", False),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings.from_env()
