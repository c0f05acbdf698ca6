from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.field_schema import CLIENT_SCHEMA, INTERNAL_SCHEMA

"""Config loader.

Responsibilities:
- Load an optional YAML file (config/linesheet.yml by default)
- Validate it against config_schema.json (unknown keys rejected)
- Apply defaults for anything the file leaves out
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/linesheet.yml")

DEFAULT_ERROR_MESSAGE = "Error parsing CSV file. Please check the file format."


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class VariantSettings:
    page_size: int
    # Reset to page 1 when search / category / status changes
    reset_page_on_filter: bool = True


@dataclass(frozen=True)
class Settings:
    all_sentinel: str = "All"
    emphasized_status: str = "In Production"
    error_message: str = DEFAULT_ERROR_MESSAGE
    keep_batch_on_error: bool = False  # failed re-upload clears the previous batch
    variants: dict[str, VariantSettings] = field(
        default_factory=lambda: {
            CLIENT_SCHEMA.name: VariantSettings(page_size=CLIENT_SCHEMA.page_size),
            INTERNAL_SCHEMA.name: VariantSettings(page_size=INTERNAL_SCHEMA.page_size),
        }
    )

    def for_variant(self, name: str) -> VariantSettings:
        try:
            return self.variants[name]
        except KeyError:
            raise ConfigError(f"no settings for variant: {name}") from None


def default_settings() -> Settings:
    return Settings()


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: schema file unreadable or data fails validation
    """
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    try:
        jsonschema.validate(data, schema)
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def settings_from_dict(data: dict[str, Any]) -> Settings:
    _validate_config_schema(data)
    base = Settings()
    variants = dict(base.variants)
    for name, raw in (data.get("variants") or {}).items():
        current = variants[name]
        variants[name] = VariantSettings(
            page_size=raw.get("page_size", current.page_size),
            reset_page_on_filter=raw.get("reset_page_on_filter", current.reset_page_on_filter),
        )
    return Settings(
        all_sentinel=data.get("all_sentinel", base.all_sentinel),
        emphasized_status=data.get("emphasized_status", base.emphasized_status),
        error_message=data.get("error_message", base.error_message),
        keep_batch_on_error=data.get("keep_batch_on_error", base.keep_batch_on_error),
        variants=variants,
    )


def load_config(path: Path | None = None) -> Settings:
    """Load settings from YAML.

    With no explicit path, a missing default file yields built-in defaults.
    An explicit path that does not exist is an error.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return default_settings()
        path = DEFAULT_CONFIG_PATH
    elif not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")
    return settings_from_dict(data)
