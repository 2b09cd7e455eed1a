"""Configuration for the bomstrip command."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import LEVELS


class BomStripSettings(BaseSettings):
    """Environment-driven settings, read once at startup."""

    model_config = SettingsConfigDict(env_prefix="BOMSTRIP_", extra="ignore", frozen=True)

    log_level: str = Field(default="INFO")
    correlation_id: str = Field(
        default_factory=lambda: uuid.uuid4().hex,
        validation_alias=AliasChoices("BOMSTRIP_CORRELATION_ID", "CORRELATION_ID"),
        min_length=1,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        cleaned = value.strip().upper()
        if cleaned not in LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return cleaned

    @property
    def level_number(self) -> int:
        return LEVELS[self.log_level]


@dataclass(slots=True, frozen=True)
class CLIConfig:
    files: tuple[Path, ...]
    keep_backup: bool
    machine_output: bool
    settings: BomStripSettings


__all__ = ["BomStripSettings", "CLIConfig"]
