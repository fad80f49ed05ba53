"""Configuration models and helpers for Panchanga settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 1

# -------------------- Settings Schema --------------------


class EphemerisCfg(BaseModel):
    """Swiss Ephemeris location, sidereal mode and refraction inputs."""

    path: Optional[str] = None
    ayanamsa: Literal["lahiri"] = "lahiri"
    pressure_hpa: float = 1013.25
    temperature_c: float = 15.0

    @field_validator("ayanamsa", mode="before")
    @classmethod
    def _normalise_ayanamsa(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower().replace("-", "_").replace(" ", "_")
        return value

    @field_validator("pressure_hpa", mode="before")
    @classmethod
    def _cap_pressure(cls, value: float) -> float:
        return max(0.0, min(1100.0, float(value)))


class SolverCfg(BaseModel):
    """Step/bisection parameters for the tithi boundary solver."""

    step_minutes: float = Field(default=30.0, gt=0.0, le=360.0)
    tolerance_minutes: float = Field(default=1.0, gt=0.0, le=60.0)
    max_iterations: int = Field(default=40, ge=1, le=200)
    max_span_days: float = Field(default=2.0, gt=0.0, le=5.0)


class SearchCfg(BaseModel):
    """Matching-date search windows and concurrency."""

    month_padding: int = Field(default=2, ge=0, le=6)
    default_range_years: int = Field(default=1, ge=0, le=50)
    max_workers: int = 1

    @field_validator("max_workers", mode="before")
    @classmethod
    def _cap_workers(cls, value: int) -> int:
        return max(1, min(32, int(value)))


class Settings(BaseModel):
    """Top-level settings document."""

    schema_version: int = CURRENT_SETTINGS_SCHEMA_VERSION
    ephemeris: EphemerisCfg = Field(default_factory=EphemerisCfg)
    solver: SolverCfg = Field(default_factory=SolverCfg)
    search: SearchCfg = Field(default_factory=SearchCfg)


# -------------------- I/O Helpers --------------------

CONFIG_FILENAME = "config.yaml"


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    if os.name == "nt":
        base = Path(os.environ.get("LOCALAPPDATA", str(Path.home() / "AppData" / "Local")))
        return base / "Panchanga"
    return Path(os.environ.get("PANCHANGA_HOME", str(Path.home() / ".panchanga")))


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist ``settings`` to disk as YAML and return the written path."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(settings.model_dump(), handle, sort_keys=False, allow_unicode=True)
    return target_path


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        LOG.info("Wrote default settings to %s", source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        LOG.warning("Ignoring malformed settings document at %s", source_path)
        raw = {}
    raw.setdefault("schema_version", CURRENT_SETTINGS_SCHEMA_VERSION)
    return Settings(**raw)


__all__ = [
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "CONFIG_FILENAME",
    "EphemerisCfg",
    "SearchCfg",
    "Settings",
    "SolverCfg",
    "config_path",
    "default_settings",
    "get_config_home",
    "load_settings",
    "save_settings",
]
