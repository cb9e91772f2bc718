"""
ⒸAngelaMos | 2026
config.py
"""
from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import BaseModel, Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logiclens.models import Theme


DEFAULT_CONFIG_DIR = Path(__file__).parent.parent.parent / "config"


def _expand(v: Any) -> Any:
    if isinstance(v, str):
        return Path(os.path.expanduser(os.path.expandvars(v)))
    return v


class ScanSettings(BaseModel):
    """
    Settings for project scans
    """
    include_patterns: list[str] = Field(
        default_factory=lambda: [
            "**/*.js",
            "**/*.jsx",
            "**/*.ts",
            "**/*.tsx",
            "**/*.c",
            "**/*.h",
            "**/*.cc",
            "**/*.cpp",
            "**/*.hpp",
            "**/*.java",
        ]
    )
    exclude_patterns: list[str] = Field(
        default_factory=lambda: [
            "**/node_modules/**",
            "**/dist/**",
            "**/build/**",
            "**/out/**",
            "**/vendor/**",
            "**/.git/**",
            "**/*.min.js",
        ]
    )
    max_files: Annotated[int, Field(ge=1)] = 100
    max_file_size: Annotated[int, Field(ge=1)] = 1024 * 1024
    respect_gitignore: bool = True


class ReportSettings(BaseModel):
    """
    Default options for rendered reports
    Without a title, reports are named after the analyzed file or directory
    """
    title: str | None = None
    width: PositiveInt = 800
    height: PositiveInt = 600
    theme: Theme = Theme.LIGHT
    top_n: PositiveInt = 10


class HistorySettings(BaseModel):
    """
    Settings for the export history log
    """
    enabled: bool = True
    max_entries: Annotated[int, Field(ge=1, le=1000)] = 10


class LogicLensSettings(BaseSettings):
    """
    Main application settings
    Loads from YAML config files with env var overrides
    """
    model_config = SettingsConfigDict(
        env_prefix="LOGICLENS_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False
    json_logs: bool | None = None
    data_dir: Path = Path("data")
    config_dir: Path = DEFAULT_CONFIG_DIR
    scan: ScanSettings = Field(default_factory=ScanSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)
    history: HistorySettings = Field(default_factory=HistorySettings)

    @field_validator("data_dir", "config_dir", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path:
        """
        Expand ~ and environment variables in path
        """
        return _expand(v)

    @property
    def db_path(self) -> Path:
        """
        Path to the export history database
        """
        return self.data_dir / "logiclens.db"


def load_yaml_file(path: Path) -> dict:
    """
    Load a YAML file and return its contents
    Returns empty dict if file does not exist
    """
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def merge_configs(base: dict, override: dict) -> dict:
    """
    Deep merge two config dictionaries
    Override takes precedence
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config_from_yaml(config_dir: Path | None = None) -> dict:
    """
    Load configuration from config.yaml in the config directory
    """
    if config_dir is None:
        config_dir = DEFAULT_CONFIG_DIR
    return load_yaml_file(_expand(str(config_dir)) / "config.yaml")


_settings: LogicLensSettings | None = None


def get_settings() -> LogicLensSettings:
    """
    Get the current settings instance
    Raises RuntimeError if settings not initialized
    """
    if _settings is None:
        raise RuntimeError("Settings not initialized. Call load_settings() first.")
    return _settings


def load_settings(config_dir: Path | str | None = None, **overrides: Any) -> LogicLensSettings:
    """
    Load settings from YAML and optional overrides

    Priority (highest to lowest):
    1. Explicit overrides passed to this function
    2. Environment variables (LOGICLENS_ prefix)
    3. config.yaml
    4. Default values
    """
    global _settings

    if config_dir is not None:
        config_dir = _expand(str(config_dir))

    yaml_config = load_config_from_yaml(config_dir)
    init_values = merge_configs(_drop_env_overridden(yaml_config), overrides)

    if config_dir is not None:
        init_values["config_dir"] = config_dir

    _settings = LogicLensSettings(**init_values)
    return _settings


def _drop_env_overridden(config: dict) -> dict:
    """
    Remove YAML keys that an environment variable also sets
    Init values would otherwise outrank the environment
    """
    prefix = LogicLensSettings.model_config["env_prefix"]
    delimiter = LogicLensSettings.model_config["env_nested_delimiter"]
    result = copy.deepcopy(config)

    for key in os.environ:
        if not key.upper().startswith(prefix):
            continue
        *parents, leaf = key[len(prefix):].lower().split(delimiter)
        section = result
        for part in parents:
            section = section.get(part)
            if not isinstance(section, dict):
                break
        else:
            section.pop(leaf, None)

    return result
