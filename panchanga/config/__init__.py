"""Configuration models and persistence helpers."""

from .settings import (
    CURRENT_SETTINGS_SCHEMA_VERSION,
    EphemerisCfg,
    SearchCfg,
    Settings,
    SolverCfg,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "CURRENT_SETTINGS_SCHEMA_VERSION",
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
