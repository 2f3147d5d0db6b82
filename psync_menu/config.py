"""Settings resolution: explicit values, then environment, then config.toml."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, StrictStr, validator


ENV_PREFIX = "PSYNC_MENU_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    data_source: StrictStr = "demo"
    namespace: StrictStr = "psync"
    log_level: StrictStr = "WARNING"

    class Config:
        extra = "ignore"

    @validator("log_level")
    def _known_level(cls, level: str) -> str:
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @validator("namespace")
    def _plain_namespace(cls, namespace: str) -> str:
        if not namespace or ":" in namespace:
            raise ValueError("namespace must be non-empty and contain no ':'")
        return namespace


def _load_config_table(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        return {}

    try:
        import tomllib

        config = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except Exception:
        return {}

    table = config.get("menu", {})
    return table if isinstance(table, dict) else {}


def load_settings(config_path: Optional[Path] = None, **overrides: Optional[str]) -> Settings:
    values: Dict[str, Any] = dict(_load_config_table(config_path or Path("config.toml")))
    fields = Settings.model_fields if hasattr(Settings, "model_fields") else Settings.__fields__
    for name in fields:
        env_value = os.environ.get(ENV_PREFIX + name.upper())
        if env_value:
            values[name] = env_value
    values.update({name: value for name, value in overrides.items() if value is not None})
    return Settings(**values)
