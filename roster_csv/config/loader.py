from __future__ import annotations

import json
import os
from dataclasses import replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import RosterConfig

"""Config loader.

Responsibilities:
- Load YAML config (default ``config/roster.yml``)
- Validate against the packaged JSON schema (unknown keys rejected)
- Apply defaults for missing keys
- Apply ``ROSTER_CSV_*`` environment overrides (env wins over the file)
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "apply_env_overrides",
    "load_config",
    "load_config_or_default",
]

DEFAULT_CONFIG_PATH = Path("config/roster.yml")
SCHEMA_PATH = Path(__file__).parent / "config_schema.json"

ENV_DEFAULT_PATH = "ROSTER_CSV_DEFAULT_PATH"
ENV_ENCODING = "ROSTER_CSV_ENCODING"
ENV_ERROR_LOG_DIR = "ROSTER_CSV_ERROR_LOG_DIR"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: the schema file is missing or invalid, or the data
            fails validation (unknown keys, wrong types)
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


def apply_env_overrides(cfg: RosterConfig) -> RosterConfig:
    """Return ``cfg`` with any ``ROSTER_CSV_*`` environment values applied."""
    overrides: dict[str, Any] = {}
    if os.getenv(ENV_DEFAULT_PATH):
        overrides["default_path"] = os.environ[ENV_DEFAULT_PATH]
    if os.getenv(ENV_ENCODING):
        overrides["encoding"] = os.environ[ENV_ENCODING]
    if os.getenv(ENV_ERROR_LOG_DIR):
        overrides["error_log_dir"] = os.environ[ENV_ERROR_LOG_DIR]
    return replace(cfg, **overrides) if overrides else cfg


def load_config(path: Path) -> RosterConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    defaults = RosterConfig()
    cfg = RosterConfig(
        default_path=data.get("default_path", defaults.default_path),
        encoding=data.get("encoding", defaults.encoding),
        open_after_export=data.get("open_after_export", defaults.open_after_export),
        show_progress=data.get("show_progress", defaults.show_progress),
        error_log_dir=data.get("error_log_dir", defaults.error_log_dir),
    )
    return apply_env_overrides(cfg)


def load_config_or_default(path: Path | None = None) -> RosterConfig:
    """Load ``path`` if given; otherwise the default config file when present.

    An explicitly given path must exist. Without one, a missing default file
    means built-in defaults (plus env overrides).
    """
    if path is not None:
        return load_config(path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return apply_env_overrides(RosterConfig())
