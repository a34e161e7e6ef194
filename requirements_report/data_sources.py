from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from .models import Project, ReportSettings

DEFAULTS_CONFIG_PATH = Path(__file__).resolve().parent / "config" / "report.defaults.yml"


def load_yaml_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load a single report YAML config. Returns empty dict if the file is missing.
    """
    cfg_path = path or DEFAULTS_CONFIG_PATH
    if not cfg_path.exists():
        return {}
    with open(cfg_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def merge_overrides(target: dict, override: dict):
    """
    Shallow merge of override dict into target; modifies target in place.
    """
    if not override:
        return
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(target.get(k), dict):
            target[k].update(v)
        else:
            target[k] = v


def load_report_settings(path: Path | None = None) -> ReportSettings:
    """
    Load defaults + overrides into a ReportSettings.
    - Defaults live in report.defaults.yml
    - User overrides live in `path`; a missing file is an error
    """
    merged_cfg: Dict[str, Any] = {}
    merge_overrides(merged_cfg, load_yaml_config(DEFAULTS_CONFIG_PATH))
    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"Report config not found: {path}")
        merge_overrides(merged_cfg, load_yaml_config(path))
    return ReportSettings.from_dict(merged_cfg)


# ---------------- Project files ----------------

def load_project(path: Path) -> Project:
    """
    Read a project record from JSON or YAML (chosen by file extension).
    """
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in (".yml", ".yaml"):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a project object")
    try:
        return Project.from_dict(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"{path} is not a valid project record: {exc}") from exc


__all__ = [
    "load_yaml_config",
    "merge_overrides",
    "load_report_settings",
    "load_project",
    "DEFAULTS_CONFIG_PATH",
]
