from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    report_config_path: Optional[Path] = None
    charts_enabled: bool = True
    log_level: str = "INFO"
    api_title: str = "Requirements Wizard API"
    api_description: str = "FastAPI backend storing project requirements and exporting PDF reports."
    api_version: str = "0.1.0"


@lru_cache()
def get_settings() -> Settings:
    config_path = os.getenv("REQ_REPORT_CONFIG")
    return Settings(
        report_config_path=Path(config_path) if config_path else None,
        charts_enabled=_env_flag("REQ_CHARTS_ENABLED", True),
        log_level=os.getenv("REQ_LOG_LEVEL", "INFO").upper(),
    )
