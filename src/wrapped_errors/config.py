from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide knobs read by every wrap operation."""

    keep_entry_point_prefix: bool = Field(default=False)
    default_exit_code: int = Field(default=1)

    @field_validator("keep_entry_point_prefix", mode="before")
    @classmethod
    def _parse_keep_prefix(cls, v: bool | str) -> bool | str:
        if v == "":
            return False
        return v

    model_config = SettingsConfigDict(
        env_prefix="WRAPPED_ERRORS_", validate_assignment=True
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(**changes: Any) -> Settings:
    """Update the shared settings in place.

    Intended to be called once at startup, before errors are wrapped
    concurrently.
    """
    settings = get_settings()
    for name, value in changes.items():
        if name not in Settings.model_fields:
            raise AttributeError(f"Unknown setting {name!r}")
        setattr(settings, name, value)
    return settings


def reset_settings() -> None:
    """Drop the shared settings so the next read consults the environment."""
    global _settings
    _settings = None
