from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import ColumnLabels, ReportConfig

"""Config loader for config/report.yml.

Responsibilities:
- Load YAML (an empty file means "all defaults")
- Validate against the bundled config_schema.json (unknown keys rejected)
- Map onto the ReportConfig / ColumnLabels dataclasses
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "config_from_dict",
    "load_config",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/report.yml")


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If any of the following occurs:
            - The schema file does not exist or is not valid JSON.
            - The config data fails schema validation (wrong types, unknown
              keys, unsupported locale ...).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def config_from_dict(data: dict[str, Any]) -> ReportConfig:
    """Build a ReportConfig from validated config data (missing keys -> defaults)."""
    defaults = ReportConfig()
    columns = ColumnLabels(**data.get("columns", {}))
    priority = data.get("priority_items")
    return ReportConfig(
        display_limit=data.get("display_limit", defaults.display_limit),
        delivery_char_limit=data.get("delivery_char_limit", defaults.delivery_char_limit),
        history_path=data.get("history_path", defaults.history_path),
        locale=data.get("locale", defaults.locale),
        priority_items=tuple(priority) if priority is not None else None,
        columns=columns,
    )


def load_config(path: Path) -> ReportConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config validation failed: top level must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)
    return config_from_dict(data)
