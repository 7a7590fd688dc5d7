"""Application configuration: settings schema and layered loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


ENV_PREFIX = "DOCSTORE_"
CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:    str = "docstore"
    log_level:   str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="Minimum level for the stderr log sink")
    data_file:   str = Field(default="documents.yaml", description="Default YAML/JSON file the CLI loads documents from")
    json_indent: int = Field(default=2, ge=0, description="Indent for CLI JSON output; 0 = compact")


def _config_path() -> Path:
    """config.yaml in the working directory unless DOCSTORE_CONFIG points elsewhere."""
    return Path(os.getenv(f"{ENV_PREFIX}CONFIG") or CONFIG_FILE)


def _file_values(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        values = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(values, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of settings")
    return values


def _env_values() -> dict[str, str]:
    """Non-empty DOCSTORE_<FIELD> variables, keyed by field name."""
    found = {name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in Settings.model_fields}
    return {name: val for name, val in found.items() if val}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Merge config file, then env vars, then non-None CLI overrides; later layers win."""
    data = _file_values(_config_path())
    data.update(_env_values())
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**data)
