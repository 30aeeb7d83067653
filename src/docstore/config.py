"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCSTORE_"


class Settings(BaseModel):
    id_prefix: str = Field(default="doc_", min_length=1, description="Prefix for generated document ids")
    log_level: str = Field(
        default="WARNING",
        pattern="^(TRACE|DEBUG|INFO|SUCCESS|WARNING|ERROR|CRITICAL)$",
        description="Minimum level written to stderr",
    )


def _file_values(path: Path) -> dict[str, Any]:
    """Mapping from the YAML config file, or {} when it is absent or empty."""
    if not path.exists():
        return {}
    try:
        return yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e


def _env_values() -> dict[str, str]:
    """Non-empty DOCSTORE_<FIELD> environment variables keyed by field name."""
    found = {name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in Settings.model_fields}
    return {name: val for name, val in found.items() if val}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build Settings from config.yaml < DOCSTORE_* env vars < non-None overrides.

    Raises ValueError for unparsable YAML or values outside the schema.
    """
    layers = [_file_values(Path(CONFIG_FILE)), _env_values()]
    if overrides:
        layers.append({k: v for k, v in overrides.items() if v is not None})

    data: dict[str, Any] = {}
    for layer in layers:
        data.update(layer)
    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
