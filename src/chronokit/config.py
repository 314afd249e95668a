from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chronokit.domain.constants import BN_CALENDAR_VARIANTS
from chronokit.domain.offsets import is_valid_utc_offset

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class Settings(BaseModel):
    """Runtime configuration, read from ``CHRONOKIT_*`` environment variables."""

    model_config = ConfigDict(frozen=True)

    local_offset: Optional[str] = Field(default=None)
    bangla_variant: str = Field(default="revised-2019")
    log_level: str = Field(default="INFO")

    @field_validator("local_offset")
    @classmethod
    def _check_offset(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_valid_utc_offset(value):
            raise ValueError(f"local_offset must look like UTC+06:00, got {value!r}")
        return value

    @field_validator("bangla_variant")
    @classmethod
    def _check_variant(cls, value: str) -> str:
        if value not in BN_CALENDAR_VARIANTS:
            raise ValueError(f"bangla_variant must be one of {', '.join(BN_CALENDAR_VARIANTS)}")
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        values = {}
        local_offset = os.environ.get("CHRONOKIT_LOCAL_OFFSET")
        if local_offset:
            values["local_offset"] = local_offset
        variant = os.environ.get("CHRONOKIT_BANGLA_VARIANT")
        if variant:
            values["bangla_variant"] = variant
        level = os.environ.get("CHRONOKIT_LOG_LEVEL")
        if level:
            values["log_level"] = level.upper()
        return cls(**values)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def override_settings(**values) -> Settings:
    """Replaces the active settings with the current ones updated by ``values``."""
    global _settings
    current = get_settings().model_dump()
    current.update(values)
    _settings = Settings(**current)
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=level or get_settings().log_level, format=LOG_FORMAT)
